from abc import ABC, abstractmethod
from .models import ErrorRecord

class IErrorSink(ABC):
    """
    Destination for error records (log stream, database, ...).
    """

    @abstractmethod
    def record(self, error: ErrorRecord) -> None:
        pass

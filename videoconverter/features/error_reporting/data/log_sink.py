import logging
from ..domain.interfaces import IErrorSink
from ..domain.models import ErrorRecord

logger = logging.getLogger(__name__)

class LoggingErrorSink(IErrorSink):
    """Writes each record as one JSON line at ERROR level."""

    def record(self, error: ErrorRecord) -> None:
        logger.error(f"Processing error: {error.to_json()}")

import logging
from typing import List, Optional, Sequence
from videoconverter.core.config.settings import settings
from videoconverter.core.enums import ErrorKind, TaskStage
from ..domain.interfaces import IErrorSink
from ..domain.models import ErrorRecord
from ..data.log_sink import LoggingErrorSink

logger = logging.getLogger(__name__)

class ErrorReporter:
    """
    Fans error records out to every configured sink.
    Reporting never raises: a broken sink is logged and skipped.
    """

    def __init__(self, sinks: Sequence[IErrorSink]):
        self.sinks: List[IErrorSink] = list(sinks)

    @classmethod
    def default(cls) -> "ErrorReporter":
        sinks: List[IErrorSink] = [LoggingErrorSink()]
        if settings.PERSIST_ERRORS:
            # Lazy import: the database engine is only built when persistence is on
            from ..data.repository import SqlErrorRepository
            sinks.append(SqlErrorRepository())
        return cls(sinks)

    def report(
        self,
        video_id: Optional[int],
        stage: TaskStage,
        kind: ErrorKind,
        message: str,
        cause: BaseException,
        encoder_output: Optional[str] = None
    ) -> ErrorRecord:
        record = ErrorRecord(
            video_id=video_id,
            stage=stage,
            kind=kind,
            message=message,
            details=str(cause),
            encoder_output=encoder_output
        )

        for sink in self.sinks:
            try:
                sink.record(record)
            except Exception as e:
                logger.exception(f"Error sink {type(sink).__name__} failed: {e}")

        return record

from datetime import datetime, timezone
from typing import List
from videoconverter.core.database.connection import SessionLocal
from .sql_models import ErrorRecordModel
from ..domain.interfaces import IErrorSink
from ..domain.models import ErrorRecord

def _as_utc(value: datetime) -> datetime:
    # SQLite stores DateTime(timezone=True) without the offset
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value.astimezone(timezone.utc)

class SqlErrorRepository(IErrorSink):
    """
    Persists error records through SQLAlchemy.
    """

    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    def record(self, error: ErrorRecord) -> None:
        with self.session_factory() as db:
            try:
                db.add(ErrorRecordModel(
                    video_id=error.video_id,
                    stage=error.stage,
                    kind=error.kind,
                    message=error.message,
                    details=error.details,
                    encoder_output=error.encoder_output,
                    occurred_at=_as_utc(error.occurred_at)
                ))
                db.commit()
            except Exception as e:
                db.rollback()
                raise e

    def list_for_video(self, video_id: int) -> List[ErrorRecord]:
        with self.session_factory() as db:
            rows = (
                db.query(ErrorRecordModel)
                .filter(ErrorRecordModel.video_id == video_id)
                .order_by(ErrorRecordModel.occurred_at)
                .all()
            )
            return [
                ErrorRecord(
                    video_id=row.video_id,
                    stage=row.stage,
                    kind=row.kind,
                    message=row.message,
                    details=row.details,
                    encoder_output=row.encoder_output,
                    occurred_at=_as_utc(row.occurred_at)
                )
                for row in rows
            ]

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, DateTime, Text, Uuid, Enum as SQLEnum
from videoconverter.core.database.base import Base
from videoconverter.core.enums import ErrorKind, TaskStage

def utc_now():
    return datetime.now(timezone.utc)

class ErrorRecordModel(Base):
    """
    Durable copy of every reported pipeline failure.
    """
    __tablename__ = "conversion_errors"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Nullable: payloads that fail to parse have no video id
    video_id = Column(Integer, nullable=True, index=True)

    stage = Column(SQLEnum(TaskStage), nullable=False)
    kind = Column(SQLEnum(ErrorKind), nullable=False)
    message = Column(String, nullable=False)
    details = Column(Text, nullable=False)
    encoder_output = Column(Text, nullable=True)

    occurred_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

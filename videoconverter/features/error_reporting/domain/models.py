import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from videoconverter.core.enums import ErrorKind, TaskStage

def utc_now():
    return datetime.now(timezone.utc)

@dataclass(frozen=True)
class ErrorRecord:
    """
    One failed stage of one task.
    video_id is None when the payload never parsed far enough to carry one.
    """
    video_id: Optional[int]
    stage: TaskStage
    kind: ErrorKind
    message: str
    details: str
    encoder_output: Optional[str] = None
    occurred_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "video_id": self.video_id,
            "stage": self.stage.value,
            "kind": self.kind.value,
            "error": self.message,
            "details": self.details,
            "time": self.occurred_at.isoformat(),
        }
        if self.encoder_output is not None:
            data["encoder_output"] = self.encoder_output
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

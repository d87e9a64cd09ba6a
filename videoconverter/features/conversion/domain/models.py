import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union
from videoconverter.core.config.settings import settings
from videoconverter.core.enums import ConversionStatus, ErrorKind, TaskStage


class TaskParseError(ValueError):
    """The inbound payload is not a valid task."""


@dataclass(frozen=True)
class VideoTask:
    """
    The unit of work: which uploaded video to convert and where its chunks live.
    """
    video_id: int
    path: Path

    @classmethod
    def from_payload(cls, raw: Union[bytes, str]) -> "VideoTask":
        """
        Parses {"video_id": <int>, "path": <str>}. Any other keys are ignored.

        Raises:
            TaskParseError: On invalid JSON or a missing / mistyped field.
        """
        try:
            data = json.loads(raw)
        except (TypeError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise TaskParseError(f"Payload is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise TaskParseError(f"Payload must be a JSON object, got {type(data).__name__}")

        video_id = data.get("video_id")
        # bool is an int subclass; true/false are not ids
        if not isinstance(video_id, int) or isinstance(video_id, bool):
            raise TaskParseError(f"'video_id' must be an integer, got {video_id!r}")

        path = data.get("path")
        if not isinstance(path, str) or not path.strip():
            raise TaskParseError(f"'path' must be a non-empty string, got {path!r}")

        return cls(video_id=video_id, path=Path(path))


@dataclass(frozen=True)
class ConverterConfig:
    """
    Layout and encoder settings for one pipeline.
    File and directory names are relative to the task directory.
    """
    chunk_extension: str = ".chunk"
    merged_filename: str = "merged.mp4"
    output_dir_name: str = "mpeg-dash"
    manifest_name: str = "output.mpd"
    encoder_binary: str = "ffmpeg"
    encoder_args: Tuple[str, ...] = ()
    encoder_timeout_seconds: Optional[float] = None

    def __post_init__(self):
        if not self.chunk_extension.startswith("."):
            raise ValueError(f"Chunk extension must start with a dot: {self.chunk_extension!r}")

    @classmethod
    def from_settings(cls) -> "ConverterConfig":
        return cls(
            chunk_extension=settings.CHUNK_EXTENSION,
            merged_filename=settings.MERGED_FILENAME,
            output_dir_name=settings.OUTPUT_DIR_NAME,
            manifest_name=settings.MANIFEST_NAME,
            encoder_binary=settings.FFMPEG_BINARY,
            encoder_timeout_seconds=settings.encoder_timeout
        )

    def merged_path(self, task: VideoTask) -> Path:
        return task.path / self.merged_filename

    def output_dir(self, task: VideoTask) -> Path:
        return task.path / self.output_dir_name


@dataclass(frozen=True)
class ConversionResult:
    """
    Terminal outcome of one task, handed back to whoever delivered it
    (e.g. to ack or requeue a message).
    """
    video_id: Optional[int]
    status: ConversionStatus
    stage: Optional[TaskStage] = None
    kind: Optional[ErrorKind] = None
    reason: Optional[str] = None
    manifest_path: Optional[Path] = None

    @property
    def succeeded(self) -> bool:
        return self.status == ConversionStatus.COMPLETED

    @classmethod
    def completed(cls, video_id: int, manifest_path: Path) -> "ConversionResult":
        return cls(video_id=video_id, status=ConversionStatus.COMPLETED, manifest_path=manifest_path)

    @classmethod
    def failed(cls, video_id: Optional[int], stage: TaskStage, kind: ErrorKind, reason: str) -> "ConversionResult":
        return cls(video_id=video_id, status=ConversionStatus.FAILED, stage=stage, kind=kind, reason=reason)

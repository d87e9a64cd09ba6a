from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class EncoderError(RuntimeError):
    """
    The external encoder could not be launched or exited non-zero.

    Attributes:
        output: Combined stdout/stderr captured from the encoder (may be empty).
        returncode: Exit status, or None if the process never ran to completion.
    """

    def __init__(self, message: str, output: str = "", returncode: Optional[int] = None):
        super().__init__(message)
        self.output = output
        self.returncode = returncode


class EncoderTimeoutError(EncoderError):
    """The encoder exceeded its time budget and was killed."""


@dataclass(frozen=True)
class DashRequest:
    """
    Intent to package one video file as MPEG-DASH.
    """
    input_video: Path
    output_dir: Path
    manifest_name: str = "output.mpd"

    @property
    def manifest_path(self) -> Path:
        return self.output_dir / self.manifest_name

@dataclass
class EncodeResult:
    manifest_path: Path
    output: str = ""

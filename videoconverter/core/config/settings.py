# File: videoconverter/core/config/settings.py

import os
import shutil
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    # --- Upload Layout ---
    # Everything below is relative to the task directory (task.path)
    CHUNK_EXTENSION: str = os.getenv("CONVERTER_CHUNK_EXTENSION", ".chunk")
    MERGED_FILENAME: str = os.getenv("CONVERTER_MERGED_FILENAME", "merged.mp4")
    OUTPUT_DIR_NAME: str = os.getenv("CONVERTER_OUTPUT_DIR", "mpeg-dash")
    MANIFEST_NAME: str = os.getenv("CONVERTER_MANIFEST_NAME", "output.mpd")

    # --- External Tools ---
    # Auto-detect ffmpeg or use env var
    FFMPEG_BINARY: str = os.getenv("FFMPEG_BINARY_PATH", shutil.which("ffmpeg") or "ffmpeg")

    # A stalled encoder must not hang the worker forever. 0 disables the limit.
    ENCODER_TIMEOUT_SECONDS: float = float(os.getenv("CONVERTER_ENCODER_TIMEOUT", "3600"))

    # --- Database ---
    DATABASE_URL: str = os.getenv("CONVERTER_DATABASE_URL", "sqlite:///./videoconverter.db")
    PERSIST_ERRORS: bool = _env_flag("CONVERTER_PERSIST_ERRORS", "true")

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("CONVERTER_LOG_LEVEL", "INFO").upper()

    @property
    def encoder_timeout(self) -> Optional[float]:
        return self.ENCODER_TIMEOUT_SECONDS if self.ENCODER_TIMEOUT_SECONDS > 0 else None


settings = Settings()

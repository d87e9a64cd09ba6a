from dataclasses import dataclass, field
from enum import Enum, unique
from pathlib import Path
from typing import List

@unique
class MergeFailure(str, Enum):
    ENUMERATION = "enumeration"
    NO_CHUNKS = "no_chunks"
    OUTPUT_CREATE = "output_create"
    CHUNK_OPEN = "chunk_open"
    CHUNK_WRITE = "chunk_write"


class MergeError(Exception):
    """
    Raised when chunk reassembly aborts.
    Carries the failing path so the report points at the exact file.
    """

    def __init__(self, reason: MergeFailure, path: Path, message: str):
        super().__init__(f"{message}: {path}")
        self.reason = reason
        self.path = path


@dataclass(frozen=True)
class MergeRequest:
    """
    Intent to reassemble every chunk of one upload directory.
    """
    source_dir: Path
    output_path: Path
    extension: str = ".chunk"

    def __post_init__(self):
        if not self.extension.startswith("."):
            raise ValueError(f"Chunk extension must start with a dot: {self.extension!r}")

@dataclass
class MergeResult:
    """
    The result of a successful merge.
    `chunks` lists the inputs in the order they were written.
    """
    output_path: Path
    chunks: List[Path] = field(default_factory=list)
    bytes_written: int = 0

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)

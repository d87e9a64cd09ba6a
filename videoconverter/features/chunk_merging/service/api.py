from pathlib import Path
from videoconverter.core.config.settings import settings
from ..domain.models import MergeRequest, MergeResult
from ..data.local_merger import LocalChunkMerger

def merge_chunks(source_dir: str, output_path: str, extension: str = settings.CHUNK_EXTENSION) -> MergeResult:
    """
    Public Service API: Reassemble a chunked upload into one file.
    Does NOT touch the database or the encoder.

    Args:
        source_dir: Directory holding the numbered chunk files.
        output_path: File to create (truncated if it exists).
        extension: Suffix that identifies chunk files.
    """
    request = MergeRequest(
        source_dir=Path(source_dir),
        output_path=Path(output_path),
        extension=extension
    )

    return LocalChunkMerger().merge(request)

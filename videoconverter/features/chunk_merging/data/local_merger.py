import logging
import shutil
from pathlib import Path
from typing import List
from ..domain.interfaces import IChunkMerger
from ..domain.models import MergeError, MergeFailure, MergeRequest, MergeResult
from .chunk_ordering import order_chunks

logger = logging.getLogger(__name__)

# Stream in 64kb blocks so multi-GB uploads never sit in RAM
COPY_BUFFER_SIZE = 65536


class LocalChunkMerger(IChunkMerger):
    """
    Concrete implementation of IChunkMerger on the local filesystem.
    Plain byte concatenation; chunks are raw fragments of one container file.
    """

    def merge(self, request: MergeRequest) -> MergeResult:
        # 1. Discover and order the chunks
        chunks = order_chunks(self._list_chunks(request.source_dir, request.extension))
        if not chunks:
            raise MergeError(MergeFailure.NO_CHUNKS, request.source_dir, f"No *{request.extension} files found")

        logger.info(f"Merging {len(chunks)} chunks from {request.source_dir} into {request.output_path}")

        # 2. Create / truncate the output
        try:
            output = open(request.output_path, "wb")
        except OSError as e:
            raise MergeError(MergeFailure.OUTPUT_CREATE, request.output_path, f"Failed to create output file ({e})") from e

        # 3. Append every chunk. Handles are released on every exit path;
        # a partially written output is intentionally left behind.
        result = MergeResult(output_path=request.output_path)
        with output:
            for chunk in chunks:
                result.bytes_written += self._append_chunk(chunk, output)
                result.chunks.append(chunk)

            try:
                output.flush()
            except OSError as e:
                raise MergeError(MergeFailure.CHUNK_WRITE, request.output_path, f"Failed to flush merged file ({e})") from e

        logger.info(f"Merge completed: {result.output_path} ({result.bytes_written} bytes)")
        return result

    @staticmethod
    def _list_chunks(source_dir: Path, extension: str) -> List[Path]:
        """Non-recursive listing of regular files ending with the extension."""
        try:
            return [
                item for item in source_dir.iterdir()
                if item.is_file() and item.name.endswith(extension)
            ]
        except OSError as e:
            raise MergeError(MergeFailure.ENUMERATION, source_dir, f"Failed to find chunks ({e})") from e

    @staticmethod
    def _append_chunk(chunk: Path, output) -> int:
        try:
            source = open(chunk, "rb")
        except OSError as e:
            raise MergeError(MergeFailure.CHUNK_OPEN, chunk, f"Failed to open chunk file ({e})") from e

        with source:
            try:
                start = output.tell()
                shutil.copyfileobj(source, output, COPY_BUFFER_SIZE)
                return output.tell() - start
            except OSError as e:
                raise MergeError(MergeFailure.CHUNK_WRITE, chunk, f"Failed to write chunk to merged file ({e})") from e

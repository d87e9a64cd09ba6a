from abc import ABC, abstractmethod
from .models import MergeRequest, MergeResult

class IChunkMerger(ABC):
    """
    Contract for reassembling an uploaded video from its numbered chunks.
    """

    @abstractmethod
    def merge(self, request: MergeRequest) -> MergeResult:
        """
        Concatenates every chunk of request.source_dir into request.output_path,
        in ascending sequence-number order.

        Args:
            request: Source directory, output file and chunk extension.

        Returns:
            MergeResult listing the chunks in the order they were written.

        Raises:
            MergeError: If enumeration, output creation, or any chunk copy fails.
                Partially written output is left on disk.
        """
        pass

from abc import ABC, abstractmethod
from .models import DashRequest, EncodeResult

class IStreamEncoder(ABC):
    """
    Contract for the adaptive-bitrate packaging engine.
    Abstracts away the underlying tool (FFmpeg) from the pipeline.
    """

    @abstractmethod
    def encode(self, request: DashRequest) -> EncodeResult:
        """
        Produces the streaming package (manifest + segments) for request.input_video.

        Args:
            request: The DashRequest with input file and prepared output directory.

        Returns:
            EncodeResult with the manifest location and the encoder's output.

        Raises:
            EncoderTimeoutError: If the encoder ran past its time limit.
            EncoderError: If the encoder could not start or exited non-zero.
        """
        pass

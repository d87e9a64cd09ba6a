import subprocess
import logging
from typing import List, Optional, Sequence
from videoconverter.core.config.settings import settings
from ..domain.interfaces import IStreamEncoder
from ..domain.models import DashRequest, EncodeResult, EncoderError, EncoderTimeoutError

logger = logging.getLogger(__name__)


def _decode(output) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode(errors="replace")
    return output


class FFmpegDashAdapter(IStreamEncoder):
    """
    Concrete implementation of IStreamEncoder using FFmpeg's dash muxer.
    """

    def __init__(
        self,
        binary: Optional[str] = None,
        timeout: Optional[float] = None,
        extra_args: Sequence[str] = ()
    ):
        self.binary = binary or settings.FFMPEG_BINARY
        self.timeout = timeout
        self.extra_args = tuple(extra_args)

    def build_command(self, request: DashRequest) -> List[str]:
        # -i: Input file (the merged upload)
        # -f dash: Emit an MPD manifest plus segments next to it
        return [
            self.binary,
            "-i", str(request.input_video),
            "-f", "dash",
            *self.extra_args,
            str(request.manifest_path)
        ]

    def encode(self, request: DashRequest) -> EncodeResult:
        cmd = self.build_command(request)
        logger.info(f"Executing FFmpeg DASH: {' '.join(cmd)}")

        try:
            # stderr is folded into stdout so the report shows one interleaved log
            completed = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=self.timeout,
                text=True,
                errors="replace"
            )
        except subprocess.TimeoutExpired as e:
            output = _decode(e.output)
            logger.error(f"FFmpeg timed out after {self.timeout}s")
            raise EncoderTimeoutError(f"Encoder timed out after {self.timeout}s", output=output) from e
        except OSError as e:
            logger.error(f"FFmpeg could not be started: {e}")
            raise EncoderError(f"Failed to launch encoder {self.binary!r}: {e}") from e

        if completed.returncode != 0:
            logger.error(f"FFmpeg DASH failed (exit {completed.returncode}). OUTPUT: {completed.stdout}")
            raise EncoderError(
                f"Encoder exited with status {completed.returncode}",
                output=completed.stdout,
                returncode=completed.returncode
            )

        return EncodeResult(manifest_path=request.manifest_path, output=completed.stdout)

from pathlib import Path
from videoconverter.core.config.settings import settings
from ..domain.models import DashRequest, EncodeResult
from ..data.ffmpeg_adapter import FFmpegDashAdapter

def convert_to_dash(video_path: str, output_dir: str, manifest_name: str = settings.MANIFEST_NAME) -> EncodeResult:
    """
    Standalone API: Package a video file as MPEG-DASH.
    The output directory must already exist.
    """
    request = DashRequest(
        input_video=Path(video_path),
        output_dir=Path(output_dir),
        manifest_name=manifest_name
    )

    return FFmpegDashAdapter(timeout=settings.encoder_timeout).encode(request)

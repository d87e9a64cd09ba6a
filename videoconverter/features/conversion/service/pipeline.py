import logging
from typing import Optional

from videoconverter.core.enums import ErrorKind, TaskStage
from videoconverter.features.chunk_merging.data.local_merger import LocalChunkMerger
from videoconverter.features.chunk_merging.domain.interfaces import IChunkMerger
from videoconverter.features.chunk_merging.domain.models import MergeError, MergeRequest
from videoconverter.features.transcoding.data.ffmpeg_adapter import FFmpegDashAdapter
from videoconverter.features.transcoding.domain.interfaces import IStreamEncoder
from videoconverter.features.transcoding.domain.models import DashRequest, EncoderError, EncoderTimeoutError
from videoconverter.features.error_reporting.service.reporter import ErrorReporter

from ..domain.models import ConversionResult, ConverterConfig, VideoTask

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """
    Runs one task through merge -> prepare output -> transcode -> cleanup.

    Every stage failure is reported and ends the task; process() never raises.
    The merged file is only removed once the streaming package exists, so a
    failed transcode leaves it behind for diagnosis.
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        merger: Optional[IChunkMerger] = None,
        encoder: Optional[IStreamEncoder] = None,
        reporter: Optional[ErrorReporter] = None
    ):
        self.config = config or ConverterConfig.from_settings()
        self.merger = merger or LocalChunkMerger()
        self.encoder = encoder or FFmpegDashAdapter(
            binary=self.config.encoder_binary,
            timeout=self.config.encoder_timeout_seconds,
            extra_args=self.config.encoder_args
        )
        self.reporter = reporter or ErrorReporter.default()

    def process(self, task: VideoTask) -> ConversionResult:
        merged_file = self.config.merged_path(task)
        dash_dir = self.config.output_dir(task)

        # 1. Merge chunks
        logger.info(f"Merging chunks for video {task.video_id} in {task.path}")
        try:
            self.merger.merge(MergeRequest(
                source_dir=task.path,
                output_path=merged_file,
                extension=self.config.chunk_extension
            ))
        except (MergeError, ValueError) as e:
            return self._fail(task, TaskStage.MERGING, ErrorKind.FILESYSTEM, "failed to merge chunks", e)

        # 2. Prepare the package directory
        logger.info(f"Creating output directory: {dash_dir}")
        try:
            dash_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return self._fail(task, TaskStage.PREPARING_OUTPUT, ErrorKind.FILESYSTEM, "failed to create output directory", e)

        # 3. Transcode
        logger.info(f"Converting video {task.video_id} to MPEG-DASH")
        request = DashRequest(
            input_video=merged_file,
            output_dir=dash_dir,
            manifest_name=self.config.manifest_name
        )
        try:
            result = self.encoder.encode(request)
        except EncoderError as e:
            kind = ErrorKind.TIMEOUT if isinstance(e, EncoderTimeoutError) else ErrorKind.PROCESS
            return self._fail(task, TaskStage.TRANSCODING, kind, "failed to convert", e, encoder_output=e.output)

        logger.info(f"Video {task.video_id} converted: {result.manifest_path}")

        # 4. Cleanup
        logger.info(f"Removing merged file: {merged_file}")
        try:
            merged_file.unlink()
        except OSError as e:
            return self._fail(task, TaskStage.CLEANUP, ErrorKind.FILESYSTEM, "failed to remove merged file", e)

        return ConversionResult.completed(task.video_id, result.manifest_path)

    def _fail(
        self,
        task: VideoTask,
        stage: TaskStage,
        kind: ErrorKind,
        message: str,
        cause: Exception,
        encoder_output: Optional[str] = None
    ) -> ConversionResult:
        self.reporter.report(task.video_id, stage, kind, message, cause, encoder_output=encoder_output)
        return ConversionResult.failed(task.video_id, stage, kind, f"{message}: {cause}")

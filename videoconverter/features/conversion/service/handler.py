import logging
from typing import Optional, Union

from videoconverter.core.enums import ErrorKind, TaskStage
from videoconverter.features.error_reporting.service.reporter import ErrorReporter

from ..domain.models import ConversionResult, TaskParseError, VideoTask
from .pipeline import ConversionPipeline

logger = logging.getLogger(__name__)


class VideoConversionHandler:
    """
    Entry point for raw task messages.
    Parses the payload and hands the task to the pipeline.
    """

    def __init__(self, pipeline: Optional[ConversionPipeline] = None):
        self.pipeline = pipeline or ConversionPipeline()

    @property
    def reporter(self) -> ErrorReporter:
        return self.pipeline.reporter

    def handle(self, message: Union[bytes, str]) -> ConversionResult:
        try:
            task = VideoTask.from_payload(message)
        except TaskParseError as e:
            # No task, nothing to process
            self.reporter.report(None, TaskStage.PARSING, ErrorKind.PARSE, "failed to parse task", e)
            return ConversionResult.failed(None, TaskStage.PARSING, ErrorKind.PARSE, f"failed to parse task: {e}")

        logger.info(f"Received task for video {task.video_id}: {task.path}")
        result = self.pipeline.process(task)

        if result.succeeded:
            logger.info(f"Video {task.video_id} done: {result.manifest_path}")
        else:
            logger.warning(f"Video {task.video_id} stopped at {result.stage.value}: {result.reason}")
        return result

# File: videoconverter/core/enums.py

from enum import Enum, unique

@unique
class TaskStage(str, Enum):
    PARSING = "parsing"
    MERGING = "merging"
    PREPARING_OUTPUT = "preparing_output"
    TRANSCODING = "transcoding"
    CLEANUP = "cleanup"

@unique
class ErrorKind(str, Enum):
    PARSE = "parse"
    FILESYSTEM = "filesystem"
    PROCESS = "process"
    TIMEOUT = "timeout"

@unique
class ConversionStatus(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"

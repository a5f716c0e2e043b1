from .log_level_map import LogLevelMap as LogLevelMap
from .logging_config import (
    LoggingConfig as LoggingConfig,
    LoggingSettings as LoggingSettings,
    LogOutput as LogOutput,
)
from .stream_type import StreamType as StreamType

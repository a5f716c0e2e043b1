import contextvars
from typing import Iterable, Literal

import msgspec
from msgspec import structs

from vivaldi.logging.models import LogLevel, LogLevelName
from .log_level_map import LogLevelMap
from .stream_type import StreamType


LogOutput = Literal['stdout', 'stderr']


class LoggingSettings(msgspec.Struct, frozen=True):
    level: LogLevel = LogLevel.INFO
    output: StreamType = StreamType.STDOUT
    disabled_loggers: frozenset[str] = frozenset()


_settings: contextvars.ContextVar[LoggingSettings] = contextvars.ContextVar(
    "vivaldi_logging_settings",
    default=LoggingSettings(),
)


class LoggingConfig:
    """
    Process wide logging settings, held in a context variable so every
    LoggerStream sees the latest update.
    """

    def __init__(self) -> None:
        self._level_map = LogLevelMap()

    def update(
        self,
        log_level: LogLevelName | None = None,
        log_output: LogOutput | None = None,
        disabled_loggers: Iterable[str] | None = None,
    ):
        changes = {}

        if log_level:
            level = LogLevel.to_level(log_level)
            if level is None:
                raise ValueError(f"Unknown log level - {log_level}")

            changes["level"] = level

        if log_output:
            changes["output"] = StreamType(log_output)

        if disabled_loggers is not None:
            changes["disabled_loggers"] = frozenset(disabled_loggers)

        _settings.set(structs.replace(_settings.get(), **changes))

    def enabled(self, logger_name: str, log_level: LogLevel) -> bool:
        settings = _settings.get()
        if logger_name in settings.disabled_loggers:
            return False

        return self._level_map[log_level] >= self._level_map[settings.level]

    @property
    def level(self) -> LogLevel:
        return _settings.get().level

    @property
    def output(self) -> StreamType:
        return _settings.get().output

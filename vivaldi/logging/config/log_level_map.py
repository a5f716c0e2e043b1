from typing import Dict

from vivaldi.logging.models import LogLevel


class LogLevelMap:
    """Severity rank of each LogLevel, in declaration order (TRACE lowest)."""

    def __init__(self) -> None:
        self._levels: Dict[LogLevel, int] = {
            level: rank for rank, level in enumerate(LogLevel)
        }

    def __getitem__(self, level: LogLevel) -> int:
        return self._levels[level]

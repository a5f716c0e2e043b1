from .models import Entry, LogLevel


class ModelTrace(Entry, kw_only=True):
    rtt: float
    estimated_rtt: float
    error: float
    height: float
    level: LogLevel = LogLevel.TRACE

class ModelDebug(Entry, kw_only=True):
    dimensions: int
    error: float
    height: float
    level: LogLevel = LogLevel.DEBUG

class ObserveError(Entry, kw_only=True):
    rtt: float
    error: float
    level: LogLevel = LogLevel.ERROR

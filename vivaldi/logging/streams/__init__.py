from .logger_stream import LoggerStream as LoggerStream

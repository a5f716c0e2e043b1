import io
import os
import pathlib
import sys
import threading
from typing import (
    Callable,
    TextIO,
    TypeVar,
)

import msgspec

from vivaldi.logging.config.logging_config import LoggingConfig
from vivaldi.logging.config.stream_type import StreamType
from vivaldi.logging.models import Entry, Log

T = TypeVar('T', bound=Entry)


DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"


class LoggerStream:
    """
    Synchronous structured logger.

    Entries are rendered through ``template`` to stdout or stderr (as chosen
    by LoggingConfig) or, when the stream was given a path, appended to that
    file as one JSON encoded Log per line.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._default_template = template or DEFAULT_TEMPLATE

        self._logfile_path: str | None = None
        if path:
            logfile_path = pathlib.Path(path)
            if len(logfile_path.suffix) == 0:
                logfile_path = logfile_path / "logs.json"

            self._logfile_path = str(logfile_path.absolute())

        self._config = LoggingConfig()
        self._file: io.BufferedWriter | None = None
        self._file_lock = threading.Lock()
        self._encoder = msgspec.json.Encoder()
        self._closed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def logfile_path(self) -> str | None:
        return self._logfile_path

    def log(
        self,
        entry: T,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if self._closed:
            return

        if self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        log = Log.from_frame(entry, sys._getframe(1))

        if self._logfile_path:
            self._write_to_file(log)

        else:
            stream = self._get_stream()
            stream.write(log.render(template or self._default_template) + "\n")
            stream.flush()

    def close(self):
        self._closed = True

        with self._file_lock:
            if self._file and self._file.closed is False:
                self._file.close()

            self._file = None

    def _write_to_file(self, log: Log[T]):
        with self._file_lock:
            if self._file is None or self._file.closed:
                os.makedirs(os.path.dirname(self._logfile_path), exist_ok=True)
                self._file = open(self._logfile_path, "ab")

            self._file.write(self._encoder.encode(log) + b"\n")
            self._file.flush()

    def _get_stream(self) -> TextIO:
        if self._config.output == StreamType.STDERR:
            return sys.stderr

        return sys.stdout

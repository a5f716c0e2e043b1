"""
Tests for the synchronous LoggerStream and the model's log entries.
"""

import sys

import msgspec
import pytest

from vivaldi.coordinates import Model
from vivaldi.errors import InvalidRTTError
from vivaldi.logging import (
    Entry,
    Log,
    LoggerStream,
    LoggingConfig,
    LogLevel,
    StreamType,
)
from vivaldi.vector import Dimension3


class TestLoggerStreamConsole:
    """Template rendering to stdout and stderr."""

    def test_logs_enabled_entry_to_stdout(self, capsys) -> None:
        stream = LoggerStream(name="console")

        stream.log(Entry(message="hello", level=LogLevel.INFO))

        output = capsys.readouterr().out
        assert " - INFO - " in output
        assert output.rstrip().endswith("- hello")
        assert "test_logs_enabled_entry_to_stdout" in output

    def test_drops_entries_below_level(self, capsys) -> None:
        stream = LoggerStream(name="console")

        stream.log(Entry(message="hidden", level=LogLevel.DEBUG))

        assert capsys.readouterr().out == ""

    def test_stderr_output(self, capsys) -> None:
        LoggingConfig().update(log_output="stderr")
        stream = LoggerStream(name="console")

        stream.log(Entry(message="to stderr", level=LogLevel.WARN))

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "to stderr" in captured.err

    def test_custom_template(self, capsys) -> None:
        stream = LoggerStream(name="console", template="{level}:{message}")

        stream.log(Entry(message="short", level=LogLevel.ERROR))

        assert capsys.readouterr().out == "ERROR:short\n"

    def test_disabled_logger(self, capsys) -> None:
        LoggingConfig().update(disabled_loggers=["quiet"])
        stream = LoggerStream(name="quiet")

        stream.log(Entry(message="silenced", level=LogLevel.FATAL))

        assert capsys.readouterr().out == ""

    def test_filter(self, capsys) -> None:
        stream = LoggerStream(name="console")

        stream.log(
            Entry(message="filtered", level=LogLevel.INFO),
            filter=lambda entry: "keep" in entry.tags,
        )

        assert capsys.readouterr().out == ""

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            LoggingConfig().update(log_level="verbose")


class TestLoggerStreamFile:
    """JSON lines written to a log file."""

    def test_writes_json_lines(self, temp_log_directory) -> None:
        LoggingConfig().update(log_level="trace")
        stream = LoggerStream(name="file", path=f"{temp_log_directory}/model.json")

        model = Model(Dimension3, logger=stream)
        model.observe(Model(Dimension3).get_coordinate(), 1.0)
        stream.close()

        with open(stream.logfile_path, "rb") as logfile:
            logs = [msgspec.json.decode(line) for line in logfile]

        levels = [log["entry"]["level"] for log in logs]
        assert levels == ["DEBUG", "TRACE"]
        assert logs[1]["entry"]["rtt"] == 1.0
        assert logs[1]["entry"]["estimated_rtt"] == pytest.approx(0.2)
        assert logs[1]["function_name"] == "observe"

    def test_directory_path_uses_default_filename(self, temp_log_directory) -> None:
        stream = LoggerStream(name="file", path=temp_log_directory)

        assert stream.logfile_path.endswith("logs.json")

    def test_rejected_rtt_logged(self, temp_log_directory) -> None:
        stream = LoggerStream(name="file", path=f"{temp_log_directory}/errors.json")
        model = Model(Dimension3, logger=stream)

        with pytest.raises(InvalidRTTError):
            model.observe(Model(Dimension3).get_coordinate(), 0.0)

        stream.close()

        with open(stream.logfile_path, "rb") as logfile:
            logs = [msgspec.json.decode(line) for line in logfile]

        assert len(logs) == 1
        assert logs[0]["entry"]["level"] == "ERROR"
        assert logs[0]["entry"]["rtt"] == 0.0

    def test_closed_stream_drops_entries(self, temp_log_directory) -> None:
        stream = LoggerStream(name="file", path=f"{temp_log_directory}/closed.json")
        stream.close()

        stream.log(Entry(message="late", level=LogLevel.FATAL))

        assert stream.logfile_path is not None
        with pytest.raises(FileNotFoundError):
            open(stream.logfile_path, "rb")


class TestLogRendering:
    """Entries and call sites rendered through a template."""

    def test_entry_fields_available_to_template(self) -> None:
        entry = Entry(message="moved", level=LogLevel.INFO, tags=frozenset(["model"]))

        assert entry.render("{level}|{message}|{tags}") == "INFO|moved|['model']"

    def test_context_overrides_entry_fields(self) -> None:
        entry = Entry(message="moved", level=LogLevel.INFO)

        assert entry.render("{message}", message="replaced") == "replaced"

    def test_log_stamped_with_call_site(self) -> None:
        log = Log.from_frame(
            Entry(message="here", level=LogLevel.WARN),
            sys._getframe(0),
        )

        assert log.function_name == "test_log_stamped_with_call_site"
        assert log.filename.endswith("test_logger_stream.py")
        assert log.render("{function_name}:{message}") == (
            "test_log_stamped_with_call_site:here"
        )


class TestLoggingConfigUpdate:
    """Partial updates leave other settings in place."""

    def test_level_update_keeps_output(self) -> None:
        config = LoggingConfig()
        config.update(log_output="stderr")
        config.update(log_level="error")

        assert config.level == LogLevel.ERROR
        assert config.output == StreamType.STDERR

    def test_disabled_loggers_stored_as_frozenset(self) -> None:
        config = LoggingConfig()
        config.update(disabled_loggers=["a", "a", "b"])

        assert config.enabled("a", LogLevel.FATAL) is False
        assert config.enabled("c", LogLevel.FATAL) is True

"""
Pytest configuration for vivaldi unit tests.
"""

import random
from typing import Generator, Iterable

import pytest

from vivaldi.logging import LoggingConfig


class SequenceRandomSource:
    """Random source replaying a fixed sequence of draws."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        self.draws = 0

    def random(self) -> float:
        value = self._values[self.draws % len(self._values)]
        self.draws += 1
        return value


@pytest.fixture(autouse=True)
def configure_log_level() -> Generator[None, None, None]:
    config = LoggingConfig()
    yield
    config.update(log_level="info", log_output="stdout", disabled_loggers=[])


@pytest.fixture
def seeded_random() -> random.Random:
    return random.Random(1024)


@pytest.fixture
def sequence_random_factory():
    def create_source(*values: float) -> SequenceRandomSource:
        return SequenceRandomSource(values)

    return create_source


@pytest.fixture
def temp_log_directory(tmp_path) -> str:
    return str(tmp_path)

from __future__ import annotations

from typing import Callable, Dict, Literal, Union

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr

from vivaldi.errors import VectorDimensionError
from vivaldi.logging import LoggerStream, LoggingConfig
from vivaldi.models import VivaldiConfig
from vivaldi.vector import BaseVector, Dimension2, Dimension3

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    VIVALDI_ERROR_LIMIT: StrictFloat = 0.25
    VIVALDI_INITIAL_ERROR: StrictFloat = 2.0
    VIVALDI_INITIAL_HEIGHT: StrictFloat = 0.1
    VIVALDI_DIMENSIONS: StrictInt = 3
    VIVALDI_LOG_LEVEL: Literal[
        "trace", "debug", "info", "warn", "error", "critical", "fatal"
    ] = "info"
    VIVALDI_LOG_OUTPUT: Literal["stdout", "stderr"] = "stdout"
    VIVALDI_LOGS_PATH: StrictStr | None = None

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "VIVALDI_ERROR_LIMIT": float,
            "VIVALDI_INITIAL_ERROR": float,
            "VIVALDI_INITIAL_HEIGHT": float,
            "VIVALDI_DIMENSIONS": int,
            "VIVALDI_LOG_LEVEL": str,
            "VIVALDI_LOG_OUTPUT": str,
            "VIVALDI_LOGS_PATH": str,
        }

    def get_vivaldi_config(self) -> VivaldiConfig:
        return VivaldiConfig(
            error_limit=self.VIVALDI_ERROR_LIMIT,
            initial_error=self.VIVALDI_INITIAL_ERROR,
            initial_height=self.VIVALDI_INITIAL_HEIGHT,
        )

    def get_vector_type(self) -> type[BaseVector]:
        vector_types: Dict[int, type[BaseVector]] = {
            Dimension2.dimensions: Dimension2,
            Dimension3.dimensions: Dimension3,
        }

        vector_type = vector_types.get(self.VIVALDI_DIMENSIONS)
        if vector_type is None:
            raise VectorDimensionError(
                Dimension3.dimensions,
                self.VIVALDI_DIMENSIONS,
            )

        return vector_type

    def configure_logging(self, name: str = "vivaldi") -> LoggerStream:
        """
        Apply the log level and output settings to LoggingConfig and return
        a stream writing to VIVALDI_LOGS_PATH, or to the configured console
        stream when no path is set.
        """
        LoggingConfig().update(
            log_level=self.VIVALDI_LOG_LEVEL,
            log_output=self.VIVALDI_LOG_OUTPUT,
        )

        return LoggerStream(name=name, path=self.VIVALDI_LOGS_PATH)

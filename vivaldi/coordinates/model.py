import datetime
import math
import random
from typing import Generic, TypeVar

from vivaldi.errors import InvalidRTTError
from vivaldi.logging import LoggerStream
from vivaldi.logging.vivaldi_logging_models import (
    ModelDebug,
    ModelTrace,
    ObserveError,
)
from vivaldi.models import Coordinate, VivaldiConfig
from vivaldi.vector import (
    FLOAT_ZERO,
    BaseVector,
    Dimension3,
    RandomSource,
    new_random_unit_vector,
    unit_vector_for,
)

from .estimate import estimate_rtt

V = TypeVar("V", bound=BaseVector)


class Model(Generic[V]):
    """
    A Vivaldi latency model over N dimensional vectors.

    A single Model should be instantiated for each distinct network of
    nodes the caller participates in. Messages exchanged between nodes
    should carry the current coordinate, and the receiver updates its model
    with the measured round-trip time via observe():

        model = Model(Dimension3)
        model.observe(coordinate_from_remote, rtt_seconds)

    The model is not thread safe. Callers sharing one across threads or
    tasks must serialize calls to observe().
    """

    def __init__(
        self,
        vector_type: type[V] = Dimension3,
        random_source: RandomSource | None = None,
        config: VivaldiConfig | None = None,
        logger: LoggerStream | None = None,
    ) -> None:
        self._vector_type = vector_type
        self._random_source = random_source or random.Random()
        self._config = config or VivaldiConfig()
        self._logger = logger or LoggerStream(name="vivaldi")
        self._coordinate: Coordinate[V] = Coordinate(
            vector=vector_type.origin(),
            error=self._config.initial_error,
            raw_height=self._config.initial_height,
        )

    def get_coordinate(self) -> Coordinate[V]:
        """Current coordinate of the local node."""
        return self._coordinate

    def get_config(self) -> VivaldiConfig:
        return self._config

    def observe(
        self,
        coordinate: Coordinate[V],
        rtt: float | datetime.timedelta,
    ) -> None:
        """
        Update the local coordinate from one RTT sample to a remote node.

        Args:
            coordinate: Coordinate advertised by the remote node
            rtt: Measured round-trip time in seconds

        Raises:
            InvalidRTTError: ``rtt`` is zero, negative or not finite
        """
        if isinstance(rtt, datetime.timedelta):
            rtt = rtt.total_seconds()

        local = self._coordinate

        if not math.isfinite(rtt) or rtt <= 0.0:
            self._logger.log(
                ObserveError(
                    message="Rejected RTT sample",
                    rtt=rtt,
                    error=local.error,
                )
            )

            raise InvalidRTTError(rtt)

        error_limit = self._config.error_limit

        # Sample weight balances local and remote error
        #
        #       w = ei / (ei + ej)
        #
        weight = local.error / (local.error + coordinate.error)

        # Relative error of this sample
        #
        #       es = | ||xi - xj|| - rtt | / rtt
        #
        diff_magnitude = (local.vector - coordinate.vector).magnitude()
        dist = estimate_rtt(local, coordinate)
        relative_error = abs(dist - rtt) / rtt

        # Weighted moving average of local error
        #
        #       ei = es * ce * w + ei * (1 - ce * w)
        #
        error = relative_error * error_limit * weight + local.error * (
            1.0 - error_limit * weight
        )

        # Adaptive timestep and weighted force
        #
        #       δ = ce * w
        #       F = δ * (rtt - ||xi - xj||)
        #
        timestep = error_limit * weight
        weighted_force = timestep * (rtt - dist)

        # u(xi - xj)
        unit_vector = unit_vector_for(local.vector, coordinate.vector)
        if unit_vector is None:
            unit_vector = new_random_unit_vector(
                self._vector_type,
                self._random_source,
            )

            self._logger.log(
                ModelDebug(
                    message="Coordinates coincide - using a random direction",
                    dimensions=self._vector_type.dimensions,
                    error=local.error,
                    height=local.height,
                )
            )

        height = local.raw_height
        if diff_magnitude > FLOAT_ZERO:
            height = (
                local.height + coordinate.height
            ) * weighted_force / diff_magnitude + local.height

        #       xi = xi + δ * (rtt - ||xi - xj||) * u(xi - xj)
        #
        self._coordinate = Coordinate(
            vector=local.vector + unit_vector.vector * weighted_force,
            error=error,
            raw_height=height,
        )

        self._logger.log(
            ModelTrace(
                message="Observed RTT sample",
                rtt=rtt,
                estimated_rtt=dist,
                error=error,
                height=self._coordinate.height,
            )
        )

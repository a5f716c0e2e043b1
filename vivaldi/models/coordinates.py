from dataclasses import dataclass
from typing import Generic, TypeVar

import msgspec

from vivaldi.vector import BaseVector

V = TypeVar("V", bound=BaseVector)


# The paper states:
#
#   Each node has a positive height element in its coordinates, so that
#   its height can always be scaled up or down.
#
# so any positive value can act as the base.
MIN_HEIGHT = 1.0e-5


@dataclass(slots=True)
class VivaldiConfig:
    """
    Tuning parameters for the Vivaldi update rule.

    The defaults are the values the algorithm was published with. The
    paper's median relative error of ~11% assumes them.
    """

    error_limit: float = 0.25  # Ce, bounds the adaptive timestep
    initial_error: float = 2.0  # Error of a freshly created model
    initial_height: float = 0.1  # Height of a freshly created model


class CoordinatePayload(msgspec.Struct, frozen=True):
    """Wire form of a Coordinate - plain vector components, error and stored height."""

    vector: list[float]
    error: float
    height: float


class Coordinate(msgspec.Struct, Generic[V], frozen=True):
    """
    A point in the Vivaldi model (position, error estimate and height).

    The stored height may be anything, including zero or negative values
    decoded from a peer, so it is only ever read through ``height``, which
    floors it at MIN_HEIGHT.
    """

    vector: V
    error: float
    raw_height: float = msgspec.field(name="height")

    @property
    def height(self) -> float:
        """Height of the coordinate above the Euclidean plane."""
        if self.raw_height < MIN_HEIGHT:
            return MIN_HEIGHT

        return self.raw_height

    def to_payload(self) -> CoordinatePayload:
        return CoordinatePayload(
            vector=list(self.vector.components),
            error=self.error,
            height=self.raw_height,
        )

    @classmethod
    def from_payload(
        cls,
        payload: CoordinatePayload,
        vector_type: type[V],
    ) -> "Coordinate[V]":
        return cls(
            vector=vector_type(tuple(payload.vector)),
            error=payload.error,
            raw_height=payload.height,
        )

    def to_dict(self) -> dict[str, float | list[float]]:
        """
        Serialize coordinate to dictionary for message embedding.

        Returns:
            Dict with vector components, error and stored height, the same
            shape encode_coordinate writes
        """
        return msgspec.to_builtins(self.to_payload())

    @classmethod
    def from_dict(
        cls,
        data: dict,
        vector_type: type[V],
    ) -> "Coordinate[V]":
        """
        Deserialize coordinate from dictionary.

        Args:
            data: Dictionary from message with coordinate fields
            vector_type: Concrete vector class the components belong to

        Returns:
            Coordinate instance

        Raises:
            KeyError: A field is missing
            VectorDimensionError: The component count does not match
                ``vector_type``
        """
        return cls(
            vector=vector_type(tuple(float(value) for value in data["vector"])),
            error=float(data["error"]),
            raw_height=float(data["height"]),
        )

from typing import Generic, TypeVar

from .base_vector import BaseVector
from .vector import RandomSource

V = TypeVar("V", bound=BaseVector)


# Magnitudes below this are treated as zero.
FLOAT_ZERO = 1.0e-8


class UnitVector(Generic[V]):
    """A vector with a magnitude of 1."""

    __slots__ = ("vector",)

    def __init__(self, vector: V) -> None:
        assert abs(1.0 - vector.magnitude()) < FLOAT_ZERO
        self.vector = vector

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitVector):
            return NotImplemented

        return self.vector == other.vector

    def __repr__(self) -> str:
        return f"UnitVector({self.vector!r})"


def unit_vector_for(from_vector: V, to_vector: V) -> UnitVector[V] | None:
    """
    Returns the unit vector pointing from ``to_vector`` towards
    ``from_vector``, or None when the two are close enough that the
    direction cannot be computed accurately.
    """
    diff = from_vector - to_vector

    magnitude = diff.magnitude()
    if magnitude < FLOAT_ZERO:
        return None

    return UnitVector(diff / magnitude)


def new_random_unit_vector(
    vector_type: type[V],
    source: RandomSource,
) -> UnitVector[V]:
    while True:
        vector = vector_type.random(source)
        magnitude = vector.magnitude()
        if magnitude > FLOAT_ZERO:
            return UnitVector(vector / magnitude)

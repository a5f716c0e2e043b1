from __future__ import annotations

from typing import Protocol, Self


class RandomSource(Protocol):
    """
    Source of uniform draws in [0, 1).

    random.Random satisfies this protocol. The model only draws from it when
    two coordinates sit on top of each other and a direction has to be
    invented.
    """

    def random(self) -> float: ...


class Vector(Protocol):
    """
    Capability set the Vivaldi model needs from a point in N dimensional
    Euclidean space.
    """

    def __add__(self, other: Self | float) -> Self: ...

    def __sub__(self, other: Self) -> Self: ...

    def __mul__(self, scalar: float) -> Self: ...

    def __truediv__(self, scalar: float) -> Self: ...

    def magnitude(self) -> float:
        """Euclidean norm of the vector."""
        ...

    @classmethod
    def random(cls, source: RandomSource) -> Self:
        """Vector with every component drawn uniformly from [0, 1)."""
        ...

    @classmethod
    def origin(cls) -> Self:
        """The zero vector."""
        ...

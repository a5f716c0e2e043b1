import math
from typing import ClassVar, Iterator, Self

import msgspec

from vivaldi.errors import VectorDimensionError

from .vector import RandomSource


class BaseVector(msgspec.Struct, frozen=True):
    """
    Fixed size Euclidean vector shared by every concrete dimension.

    Subclasses declare a ``components`` tuple field and set ``dimensions``.
    All arithmetic is componentwise and only defined between vectors of the
    same concrete type, so a Dimension2 can never be added to a Dimension3.
    """

    dimensions: ClassVar[int] = 0

    components: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if len(self.components) != self.dimensions:
            raise VectorDimensionError(self.dimensions, len(self.components))

    @classmethod
    def origin(cls) -> Self:
        return cls(tuple(0.0 for _ in range(cls.dimensions)))

    @classmethod
    def random(cls, source: RandomSource) -> Self:
        return cls(tuple(source.random() for _ in range(cls.dimensions)))

    def magnitude(self) -> float:
        return math.sqrt(sum(component * component for component in self.components))

    def __len__(self) -> int:
        return self.dimensions

    def __iter__(self) -> Iterator[float]:
        return iter(self.components)

    def __getitem__(self, index: int) -> float:
        return self.components[index]

    def __add__(self, other: Self | float) -> Self:
        if isinstance(other, (int, float)):
            return type(self)(
                tuple(component + other for component in self.components)
            )

        if type(other) is not type(self):
            return NotImplemented

        return type(self)(
            tuple(
                left + right
                for left, right in zip(self.components, other.components)
            )
        )

    def __sub__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented

        return type(self)(
            tuple(
                left - right
                for left, right in zip(self.components, other.components)
            )
        )

    def __mul__(self, scalar: float) -> Self:
        if not isinstance(scalar, (int, float)):
            return NotImplemented

        return type(self)(
            tuple(component * scalar for component in self.components)
        )

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Self:
        if not isinstance(scalar, (int, float)):
            return NotImplemented

        return type(self)(
            tuple(component / scalar for component in self.components)
        )

    def __neg__(self) -> Self:
        return self * -1.0

from typing import ClassVar

from .base_vector import BaseVector


class Dimension2(BaseVector, frozen=True):
    """A 2 dimensional Euclidean vector."""

    dimensions: ClassVar[int] = 2

    components: tuple[float, float] = (0.0, 0.0)

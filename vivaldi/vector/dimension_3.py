from typing import ClassVar

from .base_vector import BaseVector


class Dimension3(BaseVector, frozen=True):
    """A 3 dimensional Euclidean vector."""

    dimensions: ClassVar[int] = 3

    components: tuple[float, float, float] = (0.0, 0.0, 0.0)

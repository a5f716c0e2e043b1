from .base_vector import BaseVector as BaseVector
from .dimension_2 import Dimension2 as Dimension2
from .dimension_3 import Dimension3 as Dimension3
from .unit_vector import (
    FLOAT_ZERO as FLOAT_ZERO,
    UnitVector as UnitVector,
    new_random_unit_vector as new_random_unit_vector,
    unit_vector_for as unit_vector_for,
)
from .vector import RandomSource as RandomSource, Vector as Vector

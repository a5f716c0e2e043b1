from .model import InvalidRTTError as InvalidRTTError
from .model import VectorDimensionError as VectorDimensionError

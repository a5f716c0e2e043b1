from .coordinates import (
    Model as Model,
    estimate_rtt as estimate_rtt,
    estimate_rtt_ms as estimate_rtt_ms,
)
from .errors import (
    InvalidRTTError as InvalidRTTError,
    VectorDimensionError as VectorDimensionError,
)
from .models import (
    MIN_HEIGHT as MIN_HEIGHT,
    Coordinate as Coordinate,
    VivaldiConfig as VivaldiConfig,
    decode_coordinate as decode_coordinate,
    encode_coordinate as encode_coordinate,
)
from .vector import Dimension2 as Dimension2, Dimension3 as Dimension3

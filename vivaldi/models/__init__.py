from .coordinate_codec import (
    decode_coordinate as decode_coordinate,
    encode_coordinate as encode_coordinate,
)
from .coordinates import (
    MIN_HEIGHT as MIN_HEIGHT,
    Coordinate as Coordinate,
    CoordinatePayload as CoordinatePayload,
    VivaldiConfig as VivaldiConfig,
)

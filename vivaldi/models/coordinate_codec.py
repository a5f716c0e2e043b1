from typing import TypeVar

import msgspec

from vivaldi.vector import BaseVector, Dimension3

from .coordinates import Coordinate, CoordinatePayload

V = TypeVar("V", bound=BaseVector)


_encoder = msgspec.json.Encoder()
_decoder = msgspec.json.Decoder(CoordinatePayload)


def encode_coordinate(coordinate: Coordinate[V]) -> bytes:
    return _encoder.encode(coordinate.to_payload())


def decode_coordinate(
    data: bytes | str,
    vector_type: type[V] = Dimension3,
) -> Coordinate[V]:
    """
    Decode a JSON encoded coordinate.

    The payload has the same shape as Coordinate.to_dict(). Raises
    msgspec.ValidationError when a field is missing or mistyped,
    msgspec.DecodeError when the data is not valid JSON and
    VectorDimensionError when the component count does not match
    ``vector_type``.
    """
    return Coordinate.from_payload(_decoder.decode(data), vector_type)

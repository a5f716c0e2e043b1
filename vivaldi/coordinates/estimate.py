from typing import TypeVar

from vivaldi.models import Coordinate
from vivaldi.vector import BaseVector

V = TypeVar("V", bound=BaseVector)


def estimate_rtt(a: Coordinate[V], b: Coordinate[V]) -> float:
    """
    Returns an estimated round-trip time, in seconds, between two
    coordinates.

    If ``a`` and ``b`` have communicated recently the estimate is accurate.
    If they never have, it is still fairly accurate given a sufficiently
    mature, dense model.
    """
    diff = a.vector - b.vector

    # Apply the fixed cost height
    return diff.magnitude() + a.height + b.height


def estimate_rtt_ms(a: Coordinate[V], b: Coordinate[V]) -> float:
    return estimate_rtt(a, b) * 1000.0

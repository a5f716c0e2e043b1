"""
Exceptions raised by the Vivaldi coordinate model.

The model has a single caller-facing precondition (a usable RTT sample) and
a single structural one (vectors of the expected dimension). Both are
ValueError subclasses so callers can treat them as bad input.
"""


class InvalidRTTError(ValueError):
    """
    Raised when observe() receives an RTT that is zero, negative or not
    finite.

    The relative error of a sample divides by the measured RTT, so a bad
    sample would otherwise write NaN or infinity into the coordinate and
    permanently corrupt the model.
    """

    def __init__(self, rtt: float) -> None:
        self.rtt = rtt
        super().__init__(
            f"RTT must be a positive, finite number of seconds - got {rtt!r}"
        )


class VectorDimensionError(ValueError):
    """Raised when a vector is built with the wrong number of components."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected {expected} vector components - got {actual}"
        )

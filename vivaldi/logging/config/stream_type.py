from enum import Enum


class StreamType(Enum):
    STDOUT = "stdout"
    STDERR = "stderr"

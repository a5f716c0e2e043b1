from .estimate import estimate_rtt as estimate_rtt, estimate_rtt_ms as estimate_rtt_ms
from .model import Model as Model

"""Analysis layer - Low-level signal analysis.

This layer turns raw samples into a per-frame pitch track:
- Framing with a Hann window
- Autocorrelation pitch estimation
"""

from .framing import Framer, frame, hann_window
from .pitch import PitchEstimator, estimate_frequency

__all__ = [
    "Framer",
    "frame",
    "hann_window",
    "PitchEstimator",
    "estimate_frequency",
]

"""Autocorrelation pitch estimation."""

import logging
import numpy as np
from typing import Iterable, List, Optional

from ..core import InvalidParameters, lag_bounds
from ..core.constants import DEFAULT_MAX_FREQ, DEFAULT_MIN_FREQ, DEFAULT_SR

logger = logging.getLogger(__name__)


class PitchEstimator:
    """Per-frame fundamental frequency estimation by autocorrelation.

    The default score for a lag is the plain, unnormalized sum
    ``sum(frame[i] * frame[i + lag])``. It favours loud frames and can lock
    onto a subharmonic when energy is low; both are accepted limitations.
    ``normalized=True`` switches to normalized cross-correlation, dividing
    each lag by the energy of the two overlapping slices.

    Frames are scored independently, so estimates may be computed in any
    order as long as results are put back in frame order.
    """

    def __init__(
        self,
        sample_rate: int = DEFAULT_SR,
        min_freq_hz: float = DEFAULT_MIN_FREQ,
        max_freq_hz: float = DEFAULT_MAX_FREQ,
        normalized: bool = False,
    ):
        """
        Initialize PitchEstimator.

        Args:
            sample_rate: Sample rate of the frames in Hz
            min_freq_hz: Lowest fundamental to search for
            max_freq_hz: Highest fundamental to search for
            normalized: Score lags by normalized cross-correlation

        Raises:
            InvalidParameters: If the frequency range is empty or cannot be
                represented at this sample rate
        """
        if sample_rate <= 0:
            raise InvalidParameters(f"sample_rate must be positive, got {sample_rate}")
        if min_freq_hz <= 0 or max_freq_hz <= min_freq_hz:
            raise InvalidParameters(
                f"Invalid frequency range: [{min_freq_hz}, {max_freq_hz}] Hz"
            )
        self.sample_rate = sample_rate
        self.min_freq_hz = min_freq_hz
        self.max_freq_hz = max_freq_hz
        self.normalized = normalized
        self.min_lag, self.max_lag = lag_bounds(sample_rate, min_freq_hz, max_freq_hz)
        if self.min_lag < 1:
            raise InvalidParameters(
                f"max_freq_hz ({max_freq_hz}) is above the sample rate ({sample_rate} Hz)"
            )

    def correlation(self, frame: np.ndarray) -> np.ndarray:
        """
        Score every lag from 0 up to ``max_lag`` (clipped to the frame).

        Returns:
            Array where index ``lag`` holds that lag's correlation score
        """
        frame = np.asarray(frame, dtype=np.float64)
        n = len(frame)
        size = min(self.max_lag + 1, n)
        # Exact per-lag sums: lags with no overlapping energy score exactly 0
        corr = np.array([np.dot(frame[:n - lag], frame[lag:]) for lag in range(size)])

        if self.normalized:
            energy = np.concatenate([[0.0], np.cumsum(frame ** 2)])
            lags = np.arange(size)
            head = energy[n - lags]  # frame[:n - lag]
            tail = energy[n] - energy[lags]  # frame[lag:]
            denom = np.sqrt(head * tail)
            with np.errstate(divide="ignore", invalid="ignore"):
                corr = np.where(denom > 0, corr / denom, 0.0)

        return corr

    def estimate(self, frame: np.ndarray) -> Optional[float]:
        """
        Estimate the fundamental frequency of one frame.

        Args:
            frame: Windowed frame samples

        Returns:
            Frequency in Hz, or None when no lag correlates positively
        """
        if self.max_lag > len(frame):
            return None

        corr = self.correlation(frame)
        candidates = corr[self.min_lag:self.max_lag + 1]
        if len(candidates) == 0:
            return None

        # argmax returns the first maximum, so ties go to the shortest lag
        best = int(np.argmax(candidates))
        if candidates[best] <= 0:
            return None

        return self.sample_rate / (self.min_lag + best)

    def estimate_all(self, frames: Iterable[np.ndarray]) -> List[Optional[float]]:
        """Estimate every frame, keeping frame order."""
        estimates = [self.estimate(frame) for frame in frames]
        logger.debug(
            "Estimated %d frames, %d pitched",
            len(estimates),
            sum(f is not None for f in estimates),
        )
        return estimates


def estimate_frequency(
    frame: np.ndarray,
    sample_rate: int,
    min_freq_hz: float = DEFAULT_MIN_FREQ,
    max_freq_hz: float = DEFAULT_MAX_FREQ,
) -> Optional[float]:
    """Estimate one frame's frequency with the plain autocorrelation score."""
    return PitchEstimator(sample_rate, min_freq_hz, max_freq_hz).estimate(frame)

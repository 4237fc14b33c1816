"""Analysis configuration and parameter validation."""

from dataclasses import dataclass
from typing import Tuple

from .constants import (
    DEFAULT_FRAME_SIZE,
    DEFAULT_GRID,
    DEFAULT_HOP,
    DEFAULT_MAX_FREQ,
    DEFAULT_MIN_FREQ,
    DEFAULT_MIN_NOTE_SECONDS,
    TEMPO_MAX,
    TEMPO_MIN,
    TIME_SIGNATURE_DENOMINATORS,
)
from .errors import InvalidParameters


def beats_per_second(bpm: float) -> float:
    """Convert a tempo in BPM to beats per second."""
    return bpm / 60.0


def clamp_tempo(bpm: float) -> float:
    """Clamp a user-supplied tempo to the supported BPM range."""
    return max(TEMPO_MIN, min(TEMPO_MAX, bpm))


def parse_time_signature(text: str) -> Tuple[int, int]:
    """
    Parse a time signature such as "3/4" into (numerator, denominator).

    Raises:
        InvalidParameters: If the text is malformed, the numerator is not
            positive or the denominator is not a power of two up to 32
    """
    try:
        numerator, denominator = (int(part) for part in text.strip().split("/"))
    except ValueError:
        raise InvalidParameters(f"Invalid time signature '{text}', expected e.g. 3/4") from None
    if numerator <= 0:
        raise InvalidParameters(f"Time signature numerator must be positive, got {numerator}")
    if denominator not in TIME_SIGNATURE_DENOMINATORS:
        raise InvalidParameters(
            f"Time signature denominator must be one of "
            f"{TIME_SIGNATURE_DENOMINATORS}, got {denominator}"
        )
    return numerator, denominator


def lag_bounds(sample_rate: int, min_freq_hz: float, max_freq_hz: float) -> Tuple[int, int]:
    """Autocorrelation lag range (in samples) covering [min_freq_hz, max_freq_hz]."""
    return int(sample_rate // max_freq_hz), int(sample_rate // min_freq_hz)


@dataclass
class AnalysisConfig:
    """Configuration for the audio-to-notes pipeline.

    Attributes:
        frame_size: Samples per analysis frame (default: 2048)
        hop: Samples between consecutive frame starts (default: 256)
        min_freq_hz: Lowest detectable fundamental (default: 80)
        max_freq_hz: Highest detectable fundamental (default: 1000)
        min_note_seconds: Shorter pitch runs are dropped as noise (default: 0.12)
        grid: Quantization step in beats (default: 0.5, eighth notes)
        normalized: Use normalized cross-correlation instead of the plain
            autocorrelation sum (default: False)
    """

    frame_size: int = DEFAULT_FRAME_SIZE
    hop: int = DEFAULT_HOP
    min_freq_hz: float = DEFAULT_MIN_FREQ
    max_freq_hz: float = DEFAULT_MAX_FREQ
    min_note_seconds: float = DEFAULT_MIN_NOTE_SECONDS
    grid: float = DEFAULT_GRID
    normalized: bool = False

    def hop_seconds(self, sample_rate: int) -> float:
        return self.hop / sample_rate

    def validate(self, sample_rate: int) -> None:
        """
        Check parameters against each other and the sample rate.

        Args:
            sample_rate: Sample rate of the audio to be analyzed

        Raises:
            InvalidParameters: On the first inconsistent parameter found
        """
        if sample_rate <= 0:
            raise InvalidParameters(f"sample_rate must be positive, got {sample_rate}")
        if self.frame_size <= 0:
            raise InvalidParameters(f"frame_size must be positive, got {self.frame_size}")
        if self.hop <= 0:
            raise InvalidParameters(f"hop must be positive, got {self.hop}")
        if self.min_freq_hz <= 0:
            raise InvalidParameters(f"min_freq_hz must be positive, got {self.min_freq_hz}")
        if self.max_freq_hz <= self.min_freq_hz:
            raise InvalidParameters(
                f"max_freq_hz ({self.max_freq_hz}) must exceed "
                f"min_freq_hz ({self.min_freq_hz})"
            )
        if self.min_note_seconds < 0:
            raise InvalidParameters(
                f"min_note_seconds must not be negative, got {self.min_note_seconds}"
            )
        if self.grid <= 0:
            raise InvalidParameters(f"grid must be positive, got {self.grid}")

        min_lag, _ = lag_bounds(sample_rate, self.min_freq_hz, self.max_freq_hz)
        if min_lag < 1:
            raise InvalidParameters(
                f"max_freq_hz ({self.max_freq_hz}) is above the sample rate "
                f"({sample_rate} Hz); no lag can represent it"
            )

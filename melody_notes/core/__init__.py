"""Core types and constants for Melody Notes."""

from .note import (
    SampleBuffer,
    RawNoteSegment,
    QuantizedNote,
    freq_to_midi,
    midi_to_freq,
    midi_to_name,
)
from .constants import (
    PITCH_NAMES,
    DEFAULT_SR,
    DEFAULT_HOP,
    DEFAULT_FRAME_SIZE,
    DEFAULT_GRID,
    DEFAULT_TEMPO,
    MERGE_TOLERANCE,
)
from .config import (
    AnalysisConfig,
    beats_per_second,
    clamp_tempo,
    lag_bounds,
    parse_time_signature,
)
from .errors import MelodyNotesError, InvalidParameters

__all__ = [
    "SampleBuffer",
    "RawNoteSegment",
    "QuantizedNote",
    "freq_to_midi",
    "midi_to_freq",
    "midi_to_name",
    "PITCH_NAMES",
    "DEFAULT_SR",
    "DEFAULT_HOP",
    "DEFAULT_FRAME_SIZE",
    "DEFAULT_GRID",
    "DEFAULT_TEMPO",
    "MERGE_TOLERANCE",
    "AnalysisConfig",
    "beats_per_second",
    "clamp_tempo",
    "lag_bounds",
    "parse_time_signature",
    "MelodyNotesError",
    "InvalidParameters",
]

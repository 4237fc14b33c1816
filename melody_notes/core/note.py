"""Note data classes - the units flowing through the transcription pipeline."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Sequence, Union
import numpy as np

from .constants import A4_FREQ, A4_MIDI, PITCH_NAMES


def freq_to_midi(freq: Optional[float]) -> Optional[int]:
    """Convert frequency (Hz) to the nearest MIDI pitch, or None if unpitched."""
    if freq is None or not np.isfinite(freq) or freq <= 0:
        return None
    return int(round(A4_MIDI + 12 * np.log2(freq / A4_FREQ)))


def midi_to_freq(midi: int) -> float:
    """Convert MIDI pitch to frequency (Hz)."""
    return A4_FREQ * (2 ** ((midi - A4_MIDI) / 12.0))


def midi_to_name(midi: int) -> str:
    """Get note name (e.g., 'C4', 'A#3')."""
    octave = (midi // 12) - 1
    return f"{PITCH_NAMES[midi % 12]}{octave}"


@dataclass(frozen=True, eq=False)
class SampleBuffer:
    """Mono audio samples plus their sample rate.

    The samples array is a private read-only copy, so the pipeline can
    never modify caller data.
    """

    samples: np.ndarray
    sample_rate: int

    @classmethod
    def from_array(
        cls,
        samples: Union[np.ndarray, Sequence[float]],
        sample_rate: int,
    ) -> "SampleBuffer":
        """Build a buffer from any 1-D float-like sequence."""
        data = np.array(samples, dtype=np.float64).reshape(-1)
        data.setflags(write=False)
        return cls(samples=data, sample_rate=int(sample_rate))

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def duration(self) -> float:
        """Buffer duration in seconds."""
        if self.sample_rate <= 0:
            return 0.0
        return len(self.samples) / self.sample_rate


@dataclass(frozen=True)
class RawNoteSegment:
    """A pitch-constant stretch of audio, timed in seconds."""

    pitch: int  # MIDI pitch (0-127)
    start_seconds: float
    duration_seconds: float

    @property
    def end_seconds(self) -> float:
        return self.start_seconds + self.duration_seconds

    @property
    def pitch_name(self) -> str:
        return midi_to_name(self.pitch)


@dataclass
class QuantizedNote:
    """A note snapped to the beat grid - the final pipeline output."""

    pitch: int  # MIDI pitch (0-127)
    start_beat: float
    duration_beats: float

    @property
    def end_beat(self) -> float:
        """Beat position where the note stops sounding."""
        return self.start_beat + self.duration_beats

    @property
    def pitch_name(self) -> str:
        return midi_to_name(self.pitch)

    @property
    def frequency(self) -> float:
        return midi_to_freq(self.pitch)

    def to_seconds(self, beats_per_second: float) -> RawNoteSegment:
        """Express this note in seconds for a given tempo."""
        return RawNoteSegment(
            pitch=self.pitch,
            start_seconds=self.start_beat / beats_per_second,
            duration_seconds=self.duration_beats / beats_per_second,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuantizedNote":
        return cls(
            pitch=int(data["pitch"]),
            start_beat=float(data["start_beat"]),
            duration_beats=float(data["duration_beats"]),
        )

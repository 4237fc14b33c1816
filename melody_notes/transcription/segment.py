"""Turning a per-frame pitch track into note segments."""

import logging
from typing import List, Optional, Sequence

from ..core import RawNoteSegment, freq_to_midi
from ..core.constants import DEFAULT_MIN_NOTE_SECONDS

logger = logging.getLogger(__name__)


class Segmenter:
    """Split a frequency track into runs of constant MIDI pitch.

    A run ends whenever the rounded pitch changes, including changes to or
    from "no pitch". Unpitched runs are rests and runs shorter than
    ``min_note_seconds`` are noise; neither is emitted.
    """

    def __init__(self, hop_seconds: float, min_note_seconds: float = DEFAULT_MIN_NOTE_SECONDS):
        """
        Initialize Segmenter.

        Args:
            hop_seconds: Time between consecutive frames
            min_note_seconds: Minimum duration for a run to become a note
        """
        self.hop_seconds = hop_seconds
        self.min_note_seconds = min_note_seconds

    def segment(
        self,
        frequencies: Sequence[Optional[float]],
        total_seconds: Optional[float] = None,
    ) -> List[RawNoteSegment]:
        """
        Segment a frequency track.

        Args:
            frequencies: One estimate per frame (Hz or None), in frame order
            total_seconds: Audio duration, used as the end of the last run.
                Defaults to ``len(frequencies) * hop_seconds``.

        Returns:
            Segments in increasing start order
        """
        if total_seconds is None:
            total_seconds = len(frequencies) * self.hop_seconds

        segments: List[RawNoteSegment] = []
        current: Optional[int] = None
        start = 0.0

        for i, freq in enumerate(frequencies):
            pitch = freq_to_midi(freq)
            if pitch != current:
                now = i * self.hop_seconds
                self._close(segments, current, start, now)
                current = pitch
                start = now

        self._close(segments, current, start, total_seconds)

        logger.debug(
            "Segmented %d frames into %d notes", len(frequencies), len(segments)
        )
        return segments

    def _close(
        self,
        segments: List[RawNoteSegment],
        pitch: Optional[int],
        start: float,
        end: float,
    ) -> None:
        """Emit the run [start, end) if it is a pitched note long enough to keep."""
        if pitch is None:
            return
        duration = end - start
        if duration >= self.min_note_seconds and duration > 0:
            segments.append(
                RawNoteSegment(pitch=pitch, start_seconds=start, duration_seconds=duration)
            )


def segment(
    frequencies: Sequence[Optional[float]],
    hop_seconds: float,
    min_note_seconds: float = DEFAULT_MIN_NOTE_SECONDS,
    total_seconds: Optional[float] = None,
) -> List[RawNoteSegment]:
    """Functional shorthand for ``Segmenter(...).segment(...)``."""
    return Segmenter(hop_seconds, min_note_seconds).segment(frequencies, total_seconds)

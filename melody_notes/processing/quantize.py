"""Note quantization - Snap segments to a beat grid."""

import logging
import math
from typing import Iterable, List

from ..core import InvalidParameters, QuantizedNote, RawNoteSegment
from ..core.constants import DEFAULT_GRID, MERGE_TOLERANCE

logger = logging.getLogger(__name__)


class Quantizer:
    """Quantize note timings to a rhythmic grid measured in beats."""

    def __init__(
        self,
        beats_per_second: float = 2.0,
        grid: float = DEFAULT_GRID,
        merge_tolerance: float = MERGE_TOLERANCE,
    ):
        """
        Initialize Quantizer.

        Args:
            beats_per_second: Tempo as beats per second (BPM / 60)
            grid: Grid step in beats (e.g., 0.5 for eighth notes)
            merge_tolerance: Max gap in beats for same-pitch notes to merge

        Raises:
            InvalidParameters: If tempo or grid is not positive
        """
        if beats_per_second <= 0:
            raise InvalidParameters(
                f"beats_per_second must be positive, got {beats_per_second}"
            )
        if grid <= 0:
            raise InvalidParameters(f"grid must be positive, got {grid}")
        self.beats_per_second = beats_per_second
        self.grid = grid
        self.merge_tolerance = merge_tolerance

    @property
    def grid_duration(self) -> float:
        """Duration of one grid unit in seconds."""
        return self.grid / self.beats_per_second

    def quantize(self, segments: Iterable[RawNoteSegment]) -> List[QuantizedNote]:
        """
        Snap segments to the grid, sort them and merge touching repeats.

        Args:
            segments: Note segments timed in seconds

        Returns:
            Notes sorted by (start_beat, pitch)
        """
        snapped = [self.snap(segment) for segment in segments]
        snapped.sort(key=lambda note: (note.start_beat, note.pitch))
        merged = self.merge(snapped)
        logger.debug("Quantized %d segments into %d notes", len(snapped), len(merged))
        return merged

    def snap(self, segment: RawNoteSegment) -> QuantizedNote:
        """Snap one segment; durations never drop below one grid step."""
        start_beat = self._snap_to_grid(segment.start_seconds * self.beats_per_second)
        duration_beats = max(
            self.grid,
            self._snap_to_grid(segment.duration_seconds * self.beats_per_second),
        )
        return QuantizedNote(
            pitch=segment.pitch,
            start_beat=start_beat,
            duration_beats=duration_beats,
        )

    def merge(self, notes: List[QuantizedNote]) -> List[QuantizedNote]:
        """
        Merge each note into the previous output note when they touch.

        Single left-to-right pass over already sorted notes: the previous
        output entry absorbs the next one if both have the same pitch and
        the gap between them is under ``merge_tolerance``. Earlier output is
        never revisited.
        """
        merged: List[QuantizedNote] = []
        for note in notes:
            last = merged[-1] if merged else None
            if (
                last is not None
                and last.pitch == note.pitch
                and abs(last.end_beat - note.start_beat) < self.merge_tolerance
            ):
                last.duration_beats += note.duration_beats
            else:
                merged.append(
                    QuantizedNote(
                        pitch=note.pitch,
                        start_beat=note.start_beat,
                        duration_beats=note.duration_beats,
                    )
                )
        return merged

    def _snap_to_grid(self, beats: float) -> float:
        """Snap a beat position to the nearest grid position, halves rounding up."""
        return math.floor(beats / self.grid + 0.5) * self.grid


def quantize(
    segments: Iterable[RawNoteSegment],
    beats_per_second: float,
    grid: float = DEFAULT_GRID,
) -> List[QuantizedNote]:
    """Functional shorthand for ``Quantizer(beats_per_second, grid).quantize(...)``."""
    return Quantizer(beats_per_second=beats_per_second, grid=grid).quantize(segments)

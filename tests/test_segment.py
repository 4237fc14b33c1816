"""Tests for segmentation of frequency tracks into note runs."""

import pytest

from melody_notes.core import RawNoteSegment
from melody_notes.transcription import Segmenter, segment

# Binary-exact timing so duration comparisons are exact
HOP = 0.25
MIN_NOTE = 0.5


class TestSegmenter:
    """Tests for Segmenter."""

    @pytest.fixture
    def segmenter(self):
        return Segmenter(hop_seconds=HOP, min_note_seconds=MIN_NOTE)

    def test_two_notes(self, segmenter):
        freqs = [440.0, 440.0, 440.0, 494.0, 494.0, 494.0]
        assert segmenter.segment(freqs) == [
            RawNoteSegment(pitch=69, start_seconds=0.0, duration_seconds=0.75),
            RawNoteSegment(pitch=71, start_seconds=0.75, duration_seconds=0.75),
        ]

    def test_duration_equal_to_minimum_is_kept(self, segmenter):
        result = segmenter.segment([440.0, 440.0, None, None])
        assert result == [RawNoteSegment(pitch=69, start_seconds=0.0, duration_seconds=0.5)]

    def test_one_frame_shorter_than_minimum_is_dropped(self, segmenter):
        assert segmenter.segment([440.0, None, None, None]) == []

    def test_rests_are_not_emitted(self, segmenter):
        result = segmenter.segment([None, None, 440.0, 440.0, None, None])
        assert result == [RawNoteSegment(pitch=69, start_seconds=0.5, duration_seconds=0.5)]

    def test_unpitched_values_are_rests(self, segmenter):
        assert segmenter.segment([0.0, 0.0, -1.0, float("nan")]) == []

    def test_same_pitch_never_splits(self, segmenter):
        # 436-452 Hz all round to A4
        result = segmenter.segment([436.0, 440.0, 445.0, 452.0])
        assert result == [RawNoteSegment(pitch=69, start_seconds=0.0, duration_seconds=1.0)]

    def test_last_run_ends_at_total_duration(self, segmenter):
        result = segmenter.segment([440.0, 440.0], total_seconds=1.5)
        assert result == [RawNoteSegment(pitch=69, start_seconds=0.0, duration_seconds=1.5)]

    def test_short_blip_splits_and_is_dropped(self, segmenter):
        freqs = [440.0, 440.0, 880.0, 440.0, 440.0]
        result = segmenter.segment(freqs)
        assert result == [
            RawNoteSegment(pitch=69, start_seconds=0.0, duration_seconds=0.5),
            RawNoteSegment(pitch=69, start_seconds=0.75, duration_seconds=0.5),
        ]

    def test_empty_track(self, segmenter):
        assert segmenter.segment([]) == []
        assert segmenter.segment([], total_seconds=3.0) == []

    def test_all_silent(self, segmenter):
        assert segmenter.segment([None] * 20) == []

    def test_starts_strictly_increase(self, segmenter):
        freqs = [220.0] * 3 + [None] * 2 + [330.0] * 4 + [440.0] * 2 + [550.0] * 3
        result = segmenter.segment(freqs)
        starts = [s.start_seconds for s in result]
        assert starts == sorted(set(starts))
        for prev, cur in zip(result, result[1:]):
            assert prev.end_seconds <= cur.start_seconds

    def test_functional_form(self):
        result = segment([440.0] * 4, hop_seconds=HOP, min_note_seconds=MIN_NOTE)
        assert result == [RawNoteSegment(pitch=69, start_seconds=0.0, duration_seconds=1.0)]

    def test_default_minimum(self):
        # 11 frames at a 10 ms hop fall short of 0.12 s
        seg = Segmenter(hop_seconds=0.01)
        assert seg.min_note_seconds == 0.12
        assert seg.segment([440.0] * 11 + [None]) == []

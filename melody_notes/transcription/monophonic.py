"""Monophonic transcription using framed autocorrelation."""

import logging
from typing import List, Optional

from .base import Transcriber
from .segment import Segmenter
from ..analysis import Framer, PitchEstimator
from ..core import AnalysisConfig, QuantizedNote, RawNoteSegment, SampleBuffer
from ..processing import Quantizer

logger = logging.getLogger(__name__)


class MonophonicTranscriber(Transcriber):
    """Transcribes a single melody line into beat-quantized notes.

    Samples flow strictly forward: frames -> frequency track -> raw
    segments -> quantized notes. Nothing is kept between calls, so one
    instance can serve any number of buffers, concurrently or not.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """
        Initialize MonophonicTranscriber.

        Args:
            config: Analysis parameters (defaults to AnalysisConfig())
        """
        self.config = config or AnalysisConfig()

    def transcribe(self, buffer: SampleBuffer, beats_per_second: float) -> List[QuantizedNote]:
        """
        Transcribe monophonic audio to notes.

        Args:
            buffer: Mono audio samples and sample rate
            beats_per_second: Tempo as beats per second

        Returns:
            Notes sorted by (start_beat, pitch)

        Raises:
            InvalidParameters: Before any analysis, if a parameter is invalid
        """
        # Build the quantizer first so a bad tempo fails before analysis
        quantizer = Quantizer(beats_per_second=beats_per_second, grid=self.config.grid)
        segments = self.detect_segments(buffer)
        notes = quantizer.quantize(segments)
        logger.debug("Transcribed %.2fs of audio into %d notes", buffer.duration, len(notes))
        return notes

    def detect_segments(self, buffer: SampleBuffer) -> List[RawNoteSegment]:
        """Run the pipeline up to segmentation, timing notes in seconds."""
        frequencies = self.frequency_track(buffer)
        segmenter = Segmenter(
            hop_seconds=self.config.hop_seconds(buffer.sample_rate),
            min_note_seconds=self.config.min_note_seconds,
        )
        return segmenter.segment(frequencies, total_seconds=buffer.duration)

    def frequency_track(self, buffer: SampleBuffer) -> List[Optional[float]]:
        """Estimate one frequency (or None) per frame, in frame order."""
        self.config.validate(buffer.sample_rate)
        estimator = PitchEstimator(
            sample_rate=buffer.sample_rate,
            min_freq_hz=self.config.min_freq_hz,
            max_freq_hz=self.config.max_freq_hz,
            normalized=self.config.normalized,
        )
        framer = Framer(buffer, self.config.frame_size, self.config.hop)
        logger.debug(
            "Analyzing %d frames of %d samples (hop %d)",
            framer.frame_count,
            self.config.frame_size,
            self.config.hop,
        )
        return estimator.estimate_all(framer)


def transcribe(
    buffer: SampleBuffer,
    beats_per_second: float,
    config: Optional[AnalysisConfig] = None,
) -> List[QuantizedNote]:
    """Functional shorthand for ``MonophonicTranscriber(config).transcribe(...)``."""
    return MonophonicTranscriber(config).transcribe(buffer, beats_per_second)

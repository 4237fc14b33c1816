"""Base classes for transcription."""

from abc import ABC, abstractmethod
from typing import List

from ..core import QuantizedNote, SampleBuffer


class Transcriber(ABC):
    """Abstract base class for audio transcription."""

    @abstractmethod
    def transcribe(self, buffer: SampleBuffer, beats_per_second: float) -> List[QuantizedNote]:
        """
        Transcribe audio to notes.

        Args:
            buffer: Mono audio samples and sample rate
            beats_per_second: Tempo used to express timing in beats

        Returns:
            Notes sorted by (start_beat, pitch)
        """
        pass

"""Transcription layer - Note-level detection from audio.

This layer converts a pitch track into discrete note events:
- Segmentation into pitch-constant runs
- Monophonic end-to-end transcription
"""

from .base import Transcriber
from .segment import Segmenter, segment
from .monophonic import MonophonicTranscriber, transcribe

__all__ = [
    "Transcriber",
    "Segmenter",
    "segment",
    "MonophonicTranscriber",
    "transcribe",
]

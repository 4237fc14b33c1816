"""Melody Notes - Monophonic audio to quantized note events.

Architecture Layers:
    1. input/         - Audio loading into sample buffers
    2. analysis/      - Framing and autocorrelation pitch estimation
    3. transcription/ - Segmentation and the end-to-end pipeline
    4. processing/    - Beat-grid quantization and merging
    5. output/        - Export (MIDI, JSON event lists)
"""

__version__ = "0.1.0"

# Core types
from .core import (
    SampleBuffer,
    RawNoteSegment,
    QuantizedNote,
    AnalysisConfig,
    InvalidParameters,
    beats_per_second,
)

# Input layer
from .input import AudioLoader

# Analysis layer
from .analysis import Framer, PitchEstimator

# Transcription layer
from .transcription import MonophonicTranscriber, Segmenter, transcribe

# Processing layer
from .processing import Quantizer

# Output layer
from .output import MIDIExporter, notes_to_json, notes_from_json

__all__ = [
    # Core
    "SampleBuffer",
    "RawNoteSegment",
    "QuantizedNote",
    "AnalysisConfig",
    "InvalidParameters",
    "beats_per_second",
    # Input
    "AudioLoader",
    # Analysis
    "Framer",
    "PitchEstimator",
    # Transcription
    "MonophonicTranscriber",
    "Segmenter",
    "transcribe",
    # Processing
    "Quantizer",
    # Output
    "MIDIExporter",
    "notes_to_json",
    "notes_from_json",
]

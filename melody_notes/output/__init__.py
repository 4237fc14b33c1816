"""Output layer - Export to various formats.

This layer hands quantized notes to downstream consumers:
- MIDI files
- JSON note-event lists
"""

from .midi import MIDIExporter
from .events import demo_scale, notes_from_json, notes_to_json

__all__ = [
    "MIDIExporter",
    "demo_scale",
    "notes_from_json",
    "notes_to_json",
]

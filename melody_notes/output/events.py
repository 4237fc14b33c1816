"""Plain note-event lists for non-MIDI consumers."""

import json
from typing import List, Sequence

from ..core import QuantizedNote

MAJOR_SCALE_STEPS = (0, 2, 4, 5, 7, 9, 11, 12)


def notes_to_json(notes: Sequence[QuantizedNote], indent: int = 2) -> str:
    """Serialize notes as a JSON list of {pitch, start_beat, duration_beats}."""
    return json.dumps([note.to_dict() for note in notes], indent=indent)


def notes_from_json(text: str) -> List[QuantizedNote]:
    """Parse a JSON list written by notes_to_json."""
    return [QuantizedNote.from_dict(item) for item in json.loads(text)]


def demo_scale(base: int = 60) -> List[QuantizedNote]:
    """One-octave major scale from ``base``, one beat per note.

    Handy for checking exporters and renderers without any audio.
    """
    return [
        QuantizedNote(pitch=base + step, start_beat=float(i), duration_beats=1.0)
        for i, step in enumerate(MAJOR_SCALE_STEPS)
    ]

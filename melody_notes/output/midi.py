"""MIDI export functionality."""

import pretty_midi
from typing import List, Tuple
from pathlib import Path

from ..core import QuantizedNote
from ..core.constants import DEFAULT_TEMPO, DEFAULT_TIME_SIGNATURE


class MIDIExporter:
    """Export beat-quantized notes to MIDI format."""

    def __init__(
        self,
        tempo: float = DEFAULT_TEMPO,
        time_signature: Tuple[int, int] = DEFAULT_TIME_SIGNATURE,
        instrument_name: str = "Melody",
        instrument_program: int = 0,
        velocity: int = 100,
    ):
        """
        Initialize MIDIExporter.

        Args:
            tempo: Tempo in BPM, used to place beats in time
            time_signature: Time signature as (numerator, denominator)
            instrument_name: MIDI instrument name
            instrument_program: MIDI program number (0-127)
            velocity: Velocity given to every note (0-127)
        """
        self.tempo = tempo
        self.time_signature = time_signature
        self.instrument_name = instrument_name
        self.instrument_program = instrument_program
        self.velocity = velocity

    @property
    def seconds_per_beat(self) -> float:
        return 60.0 / self.tempo

    def export(self, notes: List[QuantizedNote], output_path: str) -> None:
        """
        Export notes to MIDI file.

        Args:
            notes: Quantized notes
            output_path: Path to output MIDI file
        """
        midi = self.notes_to_pretty_midi(notes)

        # Ensure output directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        midi.write(str(output_path))

    def notes_to_pretty_midi(self, notes: List[QuantizedNote]) -> pretty_midi.PrettyMIDI:
        """Convert notes to PrettyMIDI object without saving."""
        midi = pretty_midi.PrettyMIDI(initial_tempo=self.tempo)
        numerator, denominator = self.time_signature
        midi.time_signature_changes.append(
            pretty_midi.TimeSignature(numerator, denominator, 0.0)
        )

        instrument = pretty_midi.Instrument(
            program=self.instrument_program,
            name=self.instrument_name,
        )

        for note in notes:
            instrument.notes.append(
                pretty_midi.Note(
                    velocity=self.velocity,
                    pitch=note.pitch,
                    start=note.start_beat * self.seconds_per_beat,
                    end=note.end_beat * self.seconds_per_beat,
                )
            )

        midi.instruments.append(instrument)
        return midi

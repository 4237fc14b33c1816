"""Command-line interface for Melody Notes.

Provides commands for:
- transcribe: Convert a monophonic recording to MIDI / note events
- info: Show audio file information
- scale: Export a reference scale without any audio
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, List

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import AnalysisConfig, beats_per_second, clamp_tempo, parse_time_signature
from .core.constants import (
    DEFAULT_FRAME_SIZE,
    DEFAULT_GRID,
    DEFAULT_HOP,
    DEFAULT_MAX_FREQ,
    DEFAULT_MIN_FREQ,
    DEFAULT_MIN_NOTE_SECONDS,
    DEFAULT_TEMPO,
    MIDI_MAX,
    MIDI_MIN,
)

app = typer.Typer(
    name="melody-notes",
    help="Monophonic audio to quantized note events",
    rich_markup_mode="markdown",
)
console = Console()


@dataclass
class StageTimings:
    """Track timing of processing stages."""

    stages: Dict[str, float] = field(default_factory=dict)
    _current_stage: Optional[str] = field(default=None, repr=False)
    _start_time: float = field(default=0.0, repr=False)

    def start(self, stage: str) -> None:
        """Start timing a stage."""
        self._current_stage = stage
        self._start_time = time.perf_counter()

    def stop(self) -> float:
        """Stop timing the current stage, return duration."""
        if self._current_stage is None:
            return 0.0
        duration = time.perf_counter() - self._start_time
        self.stages[self._current_stage] = duration
        self._current_stage = None
        return duration

    @property
    def total_time(self) -> float:
        return sum(self.stages.values())

    def to_dict(self) -> Dict[str, Any]:
        return {"stages": self.stages, "total_time": self.total_time}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_tempo(tempo: float) -> float:
    clamped = clamp_tempo(tempo)
    if clamped != tempo:
        console.print(f"[yellow]Tempo {tempo:g} BPM out of range; using {clamped:g} BPM[/yellow]")
    return clamped


@app.command()
def transcribe(
    input_file: Path = typer.Argument(..., help="Input audio file (WAV, FLAC, MP3, ...)"),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Output MIDI file path"
    ),
    events: Optional[Path] = typer.Option(
        None, "--events", help="Also write the note events as JSON"
    ),
    tempo: float = typer.Option(
        DEFAULT_TEMPO, "-t", "--tempo", help="Tempo in BPM (30-240)"
    ),
    time_signature: str = typer.Option(
        "4/4", "-s", "--time-signature", help="Time signature written to the MIDI file"
    ),
    grid: float = typer.Option(
        DEFAULT_GRID, "-g", "--grid", help="Quantization grid in beats (0.5 = eighth notes)"
    ),
    frame_size: int = typer.Option(
        DEFAULT_FRAME_SIZE, "--frame-size", help="Analysis frame size in samples"
    ),
    hop: int = typer.Option(
        DEFAULT_HOP, "--hop", help="Samples between analysis frames"
    ),
    min_freq: float = typer.Option(
        DEFAULT_MIN_FREQ, "--min-freq", help="Lowest detectable pitch in Hz"
    ),
    max_freq: float = typer.Option(
        DEFAULT_MAX_FREQ, "--max-freq", help="Highest detectable pitch in Hz"
    ),
    min_note: float = typer.Option(
        DEFAULT_MIN_NOTE_SECONDS, "--min-note", help="Minimum note duration in seconds"
    ),
    normalized: bool = typer.Option(
        False, "--normalized", help="Use normalized cross-correlation for pitch"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Transcribe a monophonic recording to MIDI.

    **Examples:**

        melody-notes transcribe humming.wav

        melody-notes transcribe take1.flac -t 96 -o take1.mid --events take1.json
    """
    from .input import AudioLoader
    from .transcription import MonophonicTranscriber
    from .output import MIDIExporter, notes_to_json

    _setup_logging(verbose)

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    if output is None:
        output = input_file.with_suffix(".mid")

    config = AnalysisConfig(
        frame_size=frame_size,
        hop=hop,
        min_freq_hz=min_freq,
        max_freq_hz=max_freq,
        min_note_seconds=min_note,
        grid=grid,
        normalized=normalized,
    )
    timings = StageTimings()

    try:
        meter = parse_time_signature(time_signature)
        tempo = _resolve_tempo(tempo)

        if not json_output:
            console.print(f"[blue]Loading audio:[/blue] {input_file}")
        timings.start("load")
        buffer = AudioLoader().load(input_file)
        timings.stop()

        if not json_output:
            console.print("[blue]Transcribing...[/blue]")
        timings.start("transcribe")
        notes = MonophonicTranscriber(config).transcribe(buffer, beats_per_second(tempo))
        timings.stop()

        timings.start("export")
        MIDIExporter(tempo=tempo, time_signature=meter).export(notes, str(output))
        if events is not None:
            events.parent.mkdir(parents=True, exist_ok=True)
            events.write_text(notes_to_json(notes))
        timings.stop()

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if json_output:
        result = {
            "input": str(input_file),
            "output": str(output),
            "tempo": tempo,
            "duration": buffer.duration,
            "sample_rate": buffer.sample_rate,
            "notes": [note.to_dict() for note in notes],
            "timings": timings.to_dict(),
        }
        console.print_json(data=result)
        return

    console.print(f"  Detected {len(notes)} notes")
    if notes:
        _show_notes_table(notes)
    console.print(f"[green]Wrote MIDI:[/green] {output}")
    if events is not None:
        console.print(f"[green]Wrote events:[/green] {events}")
    if verbose:
        for stage, duration in timings.stages.items():
            console.print(f"  {stage}: {duration:.2f}s")


@app.command()
def info(
    input_file: Path = typer.Argument(..., help="Input audio file"),
    frame_size: int = typer.Option(DEFAULT_FRAME_SIZE, "--frame-size"),
    hop: int = typer.Option(DEFAULT_HOP, "--hop"),
):
    """Show information about an audio file."""
    from .input import AudioLoader
    from .analysis import Framer

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    try:
        buffer = AudioLoader().load(input_file)
        AnalysisConfig(frame_size=frame_size, hop=hop).validate(buffer.sample_rate)
        framer = Framer(buffer, frame_size, hop)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]Audio Info:[/bold] {input_file.name}")
    console.print(f"  Duration: {buffer.duration:.2f} seconds")
    console.print(f"  Sample rate: {buffer.sample_rate} Hz")
    console.print(f"  Samples: {len(buffer):,}")
    console.print(f"  Analysis frames: {framer.frame_count:,}")


@app.command()
def scale(
    output: Path = typer.Option(Path("scale.mid"), "-o", "--output", help="Output MIDI file path"),
    tempo: float = typer.Option(DEFAULT_TEMPO, "-t", "--tempo", help="Tempo in BPM (30-240)"),
    base: int = typer.Option(60, "--base", help="MIDI pitch of the tonic (60 = C4)"),
    time_signature: str = typer.Option(
        "4/4", "-s", "--time-signature", help="Time signature written to the MIDI file"
    ),
):
    """Export a one-octave major scale, for checking playback and notation."""
    from .output import MIDIExporter, demo_scale

    if not MIDI_MIN <= base <= MIDI_MAX - 12:
        console.print(
            f"[red]Error: base pitch must be between {MIDI_MIN} and {MIDI_MAX - 12}, got {base}[/red]"
        )
        raise typer.Exit(1)

    notes = demo_scale(base)
    try:
        meter = parse_time_signature(time_signature)
        MIDIExporter(tempo=_resolve_tempo(tempo), time_signature=meter).export(notes, str(output))
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    _show_notes_table(notes)
    console.print(f"[green]Wrote MIDI:[/green] {output}")


def _show_notes_table(notes: List) -> None:
    """Display notes in a table."""
    table = Table(title="Detected Notes")
    table.add_column("Pitch", style="cyan")
    table.add_column("MIDI", style="cyan")
    table.add_column("Start (beats)", style="green")
    table.add_column("Duration (beats)", style="yellow")

    for note in notes:
        table.add_row(
            note.pitch_name,
            str(note.pitch),
            f"{note.start_beat:g}",
            f"{note.duration_beats:g}",
        )

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()

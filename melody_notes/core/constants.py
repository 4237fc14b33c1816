"""Global constants for Melody Notes."""

# Pitch names
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Reference tuning
A4_MIDI = 69
A4_FREQ = 440.0

# Analysis defaults
DEFAULT_SR = 44100
DEFAULT_FRAME_SIZE = 2048
DEFAULT_HOP = 256
DEFAULT_MIN_FREQ = 80.0
DEFAULT_MAX_FREQ = 1000.0
DEFAULT_MIN_NOTE_SECONDS = 0.12

# Musical defaults
DEFAULT_TEMPO = 120.0
DEFAULT_TIME_SIGNATURE = (4, 4)
TIME_SIGNATURE_DENOMINATORS = (1, 2, 4, 8, 16, 32)
DEFAULT_GRID = 0.5  # eighth notes, in beats
TEMPO_MIN = 30.0
TEMPO_MAX = 240.0

# Notes closer than this (in beats) count as contiguous when merging
MERGE_TOLERANCE = 1e-3

# MIDI ranges
MIDI_MIN = 0
MIDI_MAX = 127

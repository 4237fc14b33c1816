"""Exception types raised by the analysis pipeline."""


class MelodyNotesError(Exception):
    """Base class for all Melody Notes errors."""


class InvalidParameters(MelodyNotesError, ValueError):
    """Analysis parameters are inconsistent or out of range.

    Raised once, before any processing starts. Missing pitch and empty
    input are valid results, never errors.
    """

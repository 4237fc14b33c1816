"""Input layer - Audio loading into sample buffers."""

from .loader import AudioLoader

__all__ = ["AudioLoader"]

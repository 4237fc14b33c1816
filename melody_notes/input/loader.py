"""Audio loading and preprocessing utilities."""

import logging
import numpy as np
import librosa
from pathlib import Path
from typing import Optional, Union

from ..core import SampleBuffer

logger = logging.getLogger(__name__)


class AudioLoader:
    """Loads audio files into mono sample buffers."""

    SUPPORTED_FORMATS = {".wav", ".mp3", ".flac", ".ogg", ".m4a", ".mp4", ".webm"}

    def __init__(
        self,
        target_sr: Optional[int] = None,
        normalize: bool = False,
    ):
        """
        Initialize AudioLoader.

        Args:
            target_sr: Target sample rate for resampling (None keeps the file's rate)
            normalize: Peak-normalize audio amplitude if True
        """
        self.target_sr = target_sr
        self.normalize = normalize

    def load(self, path: Union[str, Path]) -> SampleBuffer:
        """
        Load audio file as a mono sample buffer.

        Args:
            path: Path to audio file

        Returns:
            SampleBuffer with samples nominally in [-1, 1]

        Raises:
            ValueError: If file format not supported
            FileNotFoundError: If file doesn't exist
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Audio file not found: {path}")

        if path.suffix.lower() not in self.SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported format: {path.suffix}. "
                f"Supported: {sorted(self.SUPPORTED_FORMATS)}"
            )

        # librosa mixes down to mono and resamples when target_sr is set
        audio, sr = librosa.load(str(path), sr=self.target_sr, mono=True)

        if self.normalize:
            audio = self._normalize(audio)

        logger.debug("Loaded %s: %d samples at %d Hz", path.name, len(audio), sr)
        return SampleBuffer.from_array(audio, int(sr))

    def _normalize(self, audio: np.ndarray) -> np.ndarray:
        """Normalize audio to [-1, 1] range using peak normalization."""
        peak = np.abs(audio).max() if len(audio) else 0.0
        if peak > 0:
            audio = audio / peak
        return audio

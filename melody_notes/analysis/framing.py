"""Slicing sample buffers into overlapping windowed frames."""

from typing import Iterator, Union
import numpy as np

from ..core import InvalidParameters, SampleBuffer


def hann_window(size: int) -> np.ndarray:
    """Symmetric Hann window: 0.5 - 0.5*cos(2*pi*i/(size-1))."""
    return np.hanning(size)


class Framer:
    """Restartable iterator of Hann-windowed frames over a sample buffer.

    Frames start at offsets 0, hop, 2*hop, ... and only whole frames are
    produced; a trailing partial frame is dropped, never padded. Every
    iteration re-reads the same inputs, so a Framer can be walked any
    number of times.
    """

    def __init__(
        self,
        buffer: Union[SampleBuffer, np.ndarray],
        frame_size: int,
        hop: int,
    ):
        if frame_size <= 0 or hop <= 0:
            raise InvalidParameters(
                f"frame_size and hop must be positive, got {frame_size} and {hop}"
            )
        samples = buffer.samples if isinstance(buffer, SampleBuffer) else buffer
        self.samples = np.asarray(samples, dtype=np.float64)
        self.frame_size = frame_size
        self.hop = hop
        self._window = hann_window(frame_size)

    @property
    def frame_count(self) -> int:
        """Number of whole frames that fit in the buffer."""
        n = len(self.samples)
        if n < self.frame_size:
            return 0
        return (n - self.frame_size) // self.hop + 1

    def offset(self, index: int) -> int:
        """Sample offset of frame ``index``."""
        return index * self.hop

    def __len__(self) -> int:
        return self.frame_count

    def __iter__(self) -> Iterator[np.ndarray]:
        for index in range(self.frame_count):
            start = self.offset(index)
            # Multiplying allocates a new array, leaving the buffer untouched
            yield self.samples[start:start + self.frame_size] * self._window


def frame(
    buffer: Union[SampleBuffer, np.ndarray],
    frame_size: int,
    hop: int,
) -> Framer:
    """Functional shorthand for ``Framer(buffer, frame_size, hop)``."""
    return Framer(buffer, frame_size, hop)

"""Processing layer - Note-level post-processing.

This layer refines detected segments:
- Quantization to a beat grid
- Merging of touching same-pitch notes
"""

from .quantize import Quantizer, quantize

__all__ = [
    "Quantizer",
    "quantize",
]

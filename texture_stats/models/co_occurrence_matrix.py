from __future__ import annotations
from dataclasses import dataclass
import numpy as np

GRAY_LEVELS = 256


@dataclass
class CoOccurrenceMatrix:
    """
    Normalized gray-level co-occurrence matrix for a single offset.

    `values` is a dense (256, 256) float64 array indexed [reference, neighbour].
    Entries sum to 1.0, or are all zero when the offset left no valid pair.
    """
    values: np.ndarray
    distance: int = 1
    angle: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.values.any()

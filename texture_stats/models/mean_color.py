from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class MeanColor:
    """Per-channel mean of an RGB image (0-255 scale)."""
    red: float
    green: float
    blue: float

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class TextureReport:
    """
    Texture descriptors derived from one co-occurrence matrix.
    Recomputed fresh for every run, no identity of its own.
    """
    contrast: float     # Σ (i-j)² P[i,j]
    correlation: float  # 0.0 when the gray-level std is zero
    energy: float       # Σ P[i,j]²

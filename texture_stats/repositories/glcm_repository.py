# repositories/glcm_repository.py
import logging
from typing import Tuple
import numpy as np
from ..models.co_occurrence_matrix import GRAY_LEVELS

logger = logging.getLogger(__name__)

HORIZONTAL = 0
VERTICAL = 90


class GLCMRepository:
    """
    Raw co-occurrence counting on a (H, W) uint8 gray array.

    • Resolves (distance, angle) into a pixel offset.
    • Counts in-bounds pairs, then normalizes to a joint distribution.
    """

    # ---------- private helpers ----------
    @staticmethod
    def _overlap(size: int, shift: int) -> Tuple[int, int]:
        """Range [lo, hi) of source indices whose shifted partner stays inside [0, size)."""
        return max(0, -shift), min(size, size - shift)

    # ---------- public API ----------
    @staticmethod
    def resolve_offset(distance: int, angle: int) -> Tuple[int, int]:
        """
        Returns (dx, dy). 0° looks right, 90° looks up.
        Any other angle degenerates to (0, 0), i.e. every pixel paired with itself.
        """
        if angle == HORIZONTAL:
            return distance, 0
        if angle == VERTICAL:
            return 0, -distance
        logger.warning(f"Unsupported GLCM angle {angle}; using zero offset (self pairs)")
        return 0, 0

    def count_pairs(self, gray: np.ndarray, dx: int, dy: int) -> np.ndarray:
        """
        Returns a (256, 256) float64 histogram where cell [a, b] counts pixels of
        level a whose neighbour at (x+dx, y+dy) has level b.
        Pairs whose neighbour falls outside the image are skipped.
        """
        height, width = gray.shape
        y_lo, y_hi = self._overlap(height, dy)
        x_lo, x_hi = self._overlap(width, dx)

        counts = np.zeros((GRAY_LEVELS, GRAY_LEVELS), dtype=np.float64)
        if y_hi <= y_lo or x_hi <= x_lo:
            logger.debug(f"No in-bounds pairs for offset ({dx}, {dy}) on {width}x{height}")
            return counts

        ref = gray[y_lo:y_hi, x_lo:x_hi].astype(np.intp).ravel()
        nbr = gray[y_lo + dy:y_hi + dy, x_lo + dx:x_hi + dx].astype(np.intp).ravel()
        flat = np.bincount(ref * GRAY_LEVELS + nbr, minlength=GRAY_LEVELS * GRAY_LEVELS)
        counts += flat.reshape(GRAY_LEVELS, GRAY_LEVELS)

        logger.debug(f"Counted {ref.size} pairs for offset ({dx}, {dy}) on {width}x{height}")
        return counts

    @staticmethod
    def normalize(counts: np.ndarray) -> np.ndarray:
        """Divide by the total. An all-zero histogram is returned unchanged."""
        total = counts.sum()
        if total == 0.0:
            return counts
        return counts / total

from __future__ import annotations
import logging
import numpy as np
from ..models.image import Image
from ..models.co_occurrence_matrix import CoOccurrenceMatrix, GRAY_LEVELS
from ..models.texture_report import TextureReport
from ..repositories.glcm_repository import GLCMRepository
from .image_service import ImageService

logger = logging.getLogger(__name__)

# Row (i) and column (j) gray-level grids, broadcast against a (256, 256) matrix
_LEVELS_I = np.arange(GRAY_LEVELS, dtype=np.float64)[:, None]
_LEVELS_J = np.arange(GRAY_LEVELS, dtype=np.float64)[None, :]


class TextureService:
    """
    GLCM construction and texture descriptors on top of GLCMRepository.
    *   Works on gray arrays or Image objects (converted with ImageService).
    *   Stateless: every call builds a fresh matrix and report.
    """
    def __init__(self, image_service: ImageService | None = None):
        self.glcm_repository = GLCMRepository()
        self.image_service = image_service or ImageService()

    def build_glcm(self, gray: np.ndarray | Image, distance: int = 1, angle: int = 0) -> CoOccurrenceMatrix:
        """
        Build the normalized co-occurrence matrix of *gray* for one offset.

        Args:
            gray: (H, W) uint8 gray levels, or an RGB Image to convert first.
            distance: pixel distance between the compared pixels.
            angle: 0 (horizontal, dx=+distance) or 90 (vertical, dy=-distance).
                   Other values pair each pixel with itself.

        Returns:
            CoOccurrenceMatrix summing to 1.0, or all-zero if no pair was in bounds.
        """
        if isinstance(gray, Image):
            gray = self.image_service.to_grayscale(gray)

        dx, dy = self.glcm_repository.resolve_offset(distance, angle)
        counts = self.glcm_repository.count_pairs(gray, dx, dy)
        values = self.glcm_repository.normalize(counts)
        return CoOccurrenceMatrix(values=values, distance=distance, angle=angle)

    @staticmethod
    def _row_statistics(p: np.ndarray):
        mean = float((_LEVELS_I * p).sum())
        std = float(np.sqrt((p * (_LEVELS_I - mean) ** 2).sum()))
        return mean, std

    @staticmethod
    def _column_statistics(p: np.ndarray):
        mean = float((_LEVELS_J * p).sum())
        std = float(np.sqrt((p * (_LEVELS_J - mean) ** 2).sum()))
        return mean, std

    def compute_features(self, glcm: CoOccurrenceMatrix, symmetric: bool = False) -> TextureReport:
        """
        Reduce a normalized GLCM to contrast, correlation and energy.

        By default the mean and standard deviation come from the first (row)
        index only and are used for both i and j in the correlation term.
        With symmetric=True the column marginal supplies the j statistics.
        Correlation is 0.0 whenever a standard deviation is zero.
        """
        p = glcm.values
        mean_i, std_i = self._row_statistics(p)
        if symmetric:
            mean_j, std_j = self._column_statistics(p)
        else:
            mean_j, std_j = mean_i, std_i

        contrast = float(((_LEVELS_I - _LEVELS_J) ** 2 * p).sum())
        energy = float((p * p).sum())

        if std_i == 0 or std_j == 0:
            correlation = 0.0
        else:
            correlation = float(((_LEVELS_I - mean_i) * (_LEVELS_J - mean_j) * p).sum() / (std_i * std_j))

        logger.debug(f"GLCM mean={mean_i:.4f} std={std_i:.4f} (symmetric={symmetric})")
        return TextureReport(contrast=contrast, correlation=correlation, energy=energy)

    def extract(self, img: Image, distance: int = 1, angle: int = 0, symmetric: bool = False) -> TextureReport:
        """Grayscale -> GLCM -> descriptors for a single image."""
        glcm = self.build_glcm(img, distance=distance, angle=angle)
        return self.compute_features(glcm, symmetric=symmetric)

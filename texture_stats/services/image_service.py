from pathlib import Path
from typing import Union
import numpy as np
from ..models.image import Image
from ..models.mean_color import MeanColor
from ..repositories.image_repository import ImageRepository

# Luma weights, applied to raw (non-linearized) channel values
RED_WEIGHT = 0.3
GREEN_WEIGHT = 0.59
BLUE_WEIGHT = 0.11


class ImageService:
    """I/O helpers plus per-pixel colour arithmetic.  No texture logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def get_image_dimensions(self, img: Image):
        return self.image_repository.retrieve_image_dimensions(img)

    @staticmethod
    def to_grayscale(img: Image) -> np.ndarray:
        """
        Args:
            img (Image): An RGB image object.

        Returns:
            (np.ndarray): (H, W) uint8 array, trunc(0.3 R + 0.59 G + 0.11 B) per pixel.
        """
        rgb = img.pixels.astype(np.float64)
        luma = RED_WEIGHT * rgb[..., 0] + GREEN_WEIGHT * rgb[..., 1] + BLUE_WEIGHT * rgb[..., 2]
        return luma.astype(np.uint8)

    def mean_color(self, img: Image) -> MeanColor:
        """
        Average each channel over every pixel.

        Raises:
            ValueError: if the image holds no pixels.
        """
        height, width = self.get_image_dimensions(img)
        num_pixels = height * width
        if num_pixels == 0:
            raise ValueError("Cannot compute the mean colour of an empty image")

        totals = img.pixels.reshape(-1, 3).sum(axis=0, dtype=np.int64)
        red, green, blue = (float(t) / num_pixels for t in totals)
        return MeanColor(red=red, green=green, blue=blue)

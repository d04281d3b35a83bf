# pipeline/mean_color.py
import logging
from pathlib import Path
from typing import Union

from ..models.mean_color import MeanColor
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)


def compute_mean_color(
    path: Union[str, Path],
    *,
    image_service: ImageService = ImageService(),
) -> MeanColor:
    """
    Load the image at *path* and average each RGB channel.
    Decoder errors (FileNotFoundError, ImageDecodeError) propagate to the caller.
    """
    img = image_service.load(path)
    height, width = image_service.get_image_dimensions(img)
    logger.info(f"Loaded {Path(path).name} ({width}x{height})")
    return image_service.mean_color(img)


def format_mean_color(mean: MeanColor) -> str:
    return f"Mean colors - Red: {mean.red:.2f}, Green: {mean.green:.2f}, Blue: {mean.blue:.2f}"

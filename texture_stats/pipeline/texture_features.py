# pipeline/texture_features.py
import logging
import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

from ..models.texture_report import TextureReport
from ..services.image_service import ImageService
from ..services.texture_service import TextureService

logger = logging.getLogger(__name__)

# env‑vars
load_dotenv()
GLCM_DISTANCE = int(os.getenv("GLCM_DISTANCE", "1"))
GLCM_ANGLE = int(os.getenv("GLCM_ANGLE", "0"))


def extract_texture_features(
    path: Union[str, Path],
    *,
    distance: int = GLCM_DISTANCE,
    angle: int = GLCM_ANGLE,
    symmetric: bool = False,
    image_service: ImageService = ImageService(),
    texture_service: TextureService = TextureService(),
) -> TextureReport:
    """
    For the image at *path*:
        • decode it
        • convert to 8-bit gray levels (0.3 R + 0.59 G + 0.11 B)
        • build the normalized GLCM for (distance, angle)
        • reduce it to contrast / correlation / energy
    The pixel and gray buffers are dropped as soon as the next stage has them.
    """
    img = image_service.load(path)
    height, width = image_service.get_image_dimensions(img)
    logger.info(f"Loaded {Path(path).name} ({width}x{height})")

    gray = image_service.to_grayscale(img)
    del img

    glcm = texture_service.build_glcm(gray, distance=distance, angle=angle)
    del gray
    if glcm.is_empty:
        logger.warning(f"No pixel pairs within bounds for distance={distance}, angle={angle}")

    return texture_service.compute_features(glcm, symmetric=symmetric)


def format_texture_report(report: TextureReport) -> str:
    return (
        "Texture Features:\n"
        f"Contrast: {report.contrast:f}\n"
        f"Correlation: {report.correlation:f}\n"
        f"Energy: {report.energy:f}"
    )

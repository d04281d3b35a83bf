from pathlib import Path
from typing import Union, Tuple
import logging
import os
import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv
from ..models.image import Image

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

PPM_MAGIC = b"P6"
PPM_MAXVAL = 255
PPM_CHANNELS = 3


class ImageDecodeError(ValueError):
    """Raised when an image file exists but its contents cannot be decoded."""


class ImageRepository:
    """
    Handles file I/O for Image entities.
    Binary PPM (P6) is parsed here; anything else goes through OpenCV.
    """
    def __init__(self):
        self.VALID_EXTS = {
            ext.strip().lower()
            for ext in os.getenv("VALID_IMAGE_EXTENSIONS", ".ppm,.png,.jpg,.jpeg,.bmp").split(",")
        }

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    def retrieve_image_dimensions(self, img: Image) -> Tuple[int, int]:
        return img.pixels.shape[:2]

    def load(self, path: Union[str, Path]) -> Image:
        path = Path(path)
        if path.suffix.lower() not in self.VALID_EXTS:
            logger.warning(f"Unexpected image extension '{path.suffix}': {path}")

        if path.suffix.lower() == ".ppm":
            return self.load_ppm(path)

        arr_bgr = cv2.imread(str(path))
        if arr_bgr is None:
            raise FileNotFoundError(f"Unable to open file '{path}'")
        return Image(pixels=np.ascontiguousarray(arr_bgr[:, :, ::-1]), path=path)

    @classmethod
    def load_ppm(cls, path: Union[str, Path]) -> Image:
        """
        Decode a binary PPM (P6, maxval 255) into an Image.

        Raises:
            FileNotFoundError: the file cannot be opened.
            ImageDecodeError: bad magic, size, max value or truncated pixel data.
        """
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as err:
            raise FileNotFoundError(f"Unable to open file '{path}'") from err

        pixels = cls.decode_ppm(data, source=str(path))
        logger.debug(f"Decoded {path.name}: {pixels.shape[1]}x{pixels.shape[0]}")
        return Image(pixels=pixels, path=path)

    @classmethod
    def decode_ppm(cls, data: bytes, source: str = "<bytes>") -> np.ndarray:
        """
        Parse P6 bytes into a (H, W, 3) uint8 array.
        Header tokens may be separated by any whitespace and `#` comments.
        """
        try:
            magic, pos = cls._next_token(data, 0)
        except ValueError:
            magic = b""
        if magic != PPM_MAGIC:
            raise ImageDecodeError("Invalid image format (must be 'P6')")

        try:
            width_tok, pos = cls._next_token(data, pos)
            height_tok, pos = cls._next_token(data, pos)
            width, height = int(width_tok), int(height_tok)
        except ValueError as err:
            raise ImageDecodeError(f"Invalid image size (error loading '{source}')") from err
        if width <= 0 or height <= 0:
            raise ImageDecodeError(f"Invalid image size (error loading '{source}')")

        try:
            maxval_tok, pos = cls._next_token(data, pos)
            maxval = int(maxval_tok)
        except ValueError as err:
            raise ImageDecodeError("Invalid max value") from err
        if maxval != PPM_MAXVAL:
            raise ImageDecodeError("Invalid max value")

        pos += 1  # single whitespace byte after maxval
        n_bytes = width * height * PPM_CHANNELS
        raster = data[pos:pos + n_bytes]
        if len(raster) != n_bytes:
            raise ImageDecodeError("Error loading image pixels")

        return np.frombuffer(raster, dtype=np.uint8).reshape(height, width, PPM_CHANNELS).copy()

    @staticmethod
    def _next_token(data: bytes, pos: int) -> Tuple[bytes, int]:
        """
        Return the next whitespace-delimited header token and the offset just past it.
        Raises ValueError when the header ends before a token is found.
        """
        n = len(data)
        while pos < n:
            if data[pos:pos + 1].isspace():
                pos += 1
            elif data[pos:pos + 1] == b"#":
                eol = data.find(b"\n", pos)
                pos = n if eol == -1 else eol + 1
            else:
                break
        start = pos
        while pos < n and not data[pos:pos + 1].isspace() and data[pos:pos + 1] != b"#":
            pos += 1
        if start == pos:
            raise ValueError("unexpected end of header")
        return data[start:pos], pos

    @staticmethod
    def save(image: Image) -> None:
        PILImage.fromarray(image.pixels).save(image.path)

import numpy as np
import pytest


def ppm_bytes(pixels, header=None) -> bytes:
    """Serialize a (H, W, 3) uint8 array as binary PPM."""
    pixels = np.asarray(pixels, dtype=np.uint8)
    height, width = pixels.shape[:2]
    if header is None:
        header = f"P6\n{width} {height}\n255\n".encode()
    return header + pixels.tobytes()


@pytest.fixture
def write_ppm(tmp_path):
    def _write(pixels, name="image.ppm", header=None):
        path = tmp_path / name
        path.write_bytes(ppm_bytes(pixels, header))
        return path
    return _write


@pytest.fixture
def checkerboard_pixels():
    """2x2 image: black/white on the first row, white/black on the second."""
    return np.array(
        [[[0, 0, 0], [255, 255, 255]],
         [[255, 255, 255], [0, 0, 0]]],
        dtype=np.uint8,
    )

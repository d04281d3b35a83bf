import numpy as np
import pytest

from texture_stats.models.co_occurrence_matrix import CoOccurrenceMatrix
from texture_stats.models.image import Image
from texture_stats.services.texture_service import TextureService


@pytest.fixture
def service():
    return TextureService()


def _single_cell(i, j):
    values = np.zeros((256, 256))
    values[i, j] = 1.0
    return CoOccurrenceMatrix(values=values)


def test_glcm_is_a_distribution(service):
    rng = np.random.default_rng(7)
    gray = rng.integers(0, 256, size=(20, 30), dtype=np.uint8)

    for angle in (0, 90):
        glcm = service.build_glcm(gray, distance=2, angle=angle)
        assert glcm.values.shape == (256, 256)
        assert (glcm.values >= 0).all()
        assert glcm.values.sum() == pytest.approx(1.0)
        assert (glcm.distance, glcm.angle) == (2, angle)


def test_uniform_image_has_single_cell(service):
    gray = np.full((5, 4), 77, dtype=np.uint8)

    glcm = service.build_glcm(gray, distance=1, angle=0)

    assert glcm.values[77, 77] == 1.0
    assert np.count_nonzero(glcm.values) == 1


def test_width_one_horizontal_offset_is_empty(service):
    gray = np.arange(6, dtype=np.uint8).reshape(6, 1)

    glcm = service.build_glcm(gray, distance=1, angle=0)

    assert glcm.is_empty
    report = service.compute_features(glcm)
    assert (report.contrast, report.correlation, report.energy) == (0.0, 0.0, 0.0)


def test_unsupported_angle_pairs_pixels_with_themselves(service):
    gray = np.array([[10, 20], [20, 20]], dtype=np.uint8)

    glcm = service.build_glcm(gray, distance=1, angle=45)

    assert glcm.values[10, 10] == 0.25
    assert glcm.values[20, 20] == 0.75


def test_single_cell_features(service):
    report = service.compute_features(_single_cell(42, 42))

    assert report.energy == 1.0
    assert report.contrast == 0.0
    assert report.correlation == 0.0


def test_checkerboard_end_to_end(service, checkerboard_pixels):
    img = Image(checkerboard_pixels)

    glcm = service.build_glcm(img, distance=1, angle=0)

    assert glcm.values[0, 255] == 0.5
    assert glcm.values[255, 0] == 0.5
    assert np.count_nonzero(glcm.values) == 2

    report = service.compute_features(glcm)
    assert report.contrast == pytest.approx(65025.0)
    assert report.energy == pytest.approx(0.5)
    assert report.correlation == pytest.approx(-1.0)


def test_correlation_uses_row_statistics_by_default(service):
    # All mass in row 10: row std is zero so correlation is skipped,
    # even though the column marginal varies.
    values = np.zeros((256, 256))
    values[10, 0] = 0.5
    values[10, 200] = 0.5

    report = service.compute_features(CoOccurrenceMatrix(values=values))

    assert report.correlation == 0.0
    assert report.contrast == pytest.approx(0.5 * 100 + 0.5 * 190 ** 2)


def test_symmetric_statistics(service):
    values = np.zeros((256, 256))
    values[0, 0] = 0.5
    values[4, 8] = 0.5

    asymmetric = service.compute_features(CoOccurrenceMatrix(values=values))
    symmetric = service.compute_features(CoOccurrenceMatrix(values=values), symmetric=True)

    # Rows: mean 2, std 2. Columns: mean 4, std 4.
    assert symmetric.correlation == pytest.approx(1.0)
    # Row-only: sum((i-2)(j-2)p) / 4 = (0.5*4 + 0.5*12) / 4
    assert asymmetric.correlation == pytest.approx(2.0)
    assert symmetric.contrast == asymmetric.contrast
    assert symmetric.energy == asymmetric.energy


def test_extract_chains_all_stages(service, checkerboard_pixels):
    report = service.extract(Image(checkerboard_pixels), distance=1, angle=90)

    # vertical pairs: (255 above 0) and (0 above 255)
    assert report.contrast == pytest.approx(65025.0)
    assert report.energy == pytest.approx(0.5)

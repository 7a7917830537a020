import math

import numpy as np
import pytest

from rangeseg.angle_diff import AngleDiff, AngleDiffPrecomputed
from rangeseg.pixel_coords import PixelCoord

SIZE = 4
ONE_DEG = math.radians(1)
EPS = 0.01


class _Params:
    """Evenly spaced beams starting at zero, one degree apart."""

    def __init__(self, size):
        self.rows = size
        self.cols = size
        self.h_span = math.radians(size)
        self._step = math.radians(size) / size

    def angle_from_row(self, row):
        return row * self._step

    def angle_from_col(self, col):
        return col * self._step


@pytest.fixture
def depth_image():
    return np.ones((SIZE, SIZE), dtype=np.float32)


@pytest.fixture
def params():
    return _Params(SIZE)


@pytest.fixture
def precomputed(depth_image, params):
    return AngleDiffPrecomputed(depth_image, params)


def test_alphas_rows(precomputed):
    alphas = precomputed.row_alphas
    assert len(alphas) == 4
    assert alphas[0] == pytest.approx(ONE_DEG, abs=0.001)
    assert alphas[1] == pytest.approx(ONE_DEG, abs=0.001)
    assert alphas[2] == pytest.approx(ONE_DEG, abs=0.001)
    assert alphas[3] == pytest.approx(0, abs=0.001)


def test_alphas_cols(precomputed):
    alphas = precomputed.col_alphas
    assert len(alphas) == 4
    for alpha in alphas:
        assert alpha == pytest.approx(ONE_DEG, abs=0.001)


def test_beta_cols(precomputed):
    beta_cols = precomputed.beta_cols
    assert beta_cols.shape == (4, 4)
    for value in beta_cols.ravel():
        assert value == pytest.approx(math.pi / 2, abs=EPS)


def test_beta_rows(precomputed):
    beta_rows = precomputed.beta_rows
    assert beta_rows.shape == (4, 4)
    for value in beta_rows[:-1].ravel():
        assert value == pytest.approx(math.pi / 2, abs=EPS)
    for c in range(4):
        assert beta_rows[3, c] == pytest.approx(0.0, abs=EPS)


def test_start(precomputed):
    assert precomputed.diff_at(PixelCoord(0, 0), PixelCoord(1, 0)) == pytest.approx(
        math.pi / 2, abs=EPS
    )
    assert precomputed.diff_at(PixelCoord(1, 0), PixelCoord(0, 0)) == pytest.approx(
        math.pi / 2, abs=EPS
    )
    assert precomputed.diff_at(PixelCoord(0, 1), PixelCoord(0, 0)) == pytest.approx(
        math.pi / 2, abs=EPS
    )
    assert precomputed.diff_at(PixelCoord(0, 0), PixelCoord(0, 1)) == pytest.approx(
        math.pi / 2, abs=EPS
    )


@pytest.mark.parametrize("r", range(1, SIZE - 1))
@pytest.mark.parametrize("c", range(1, SIZE - 1))
def test_middle(precomputed, r, c):
    curr = PixelCoord(r, c)
    next_r = PixelCoord(r + 1, c)
    next_c = PixelCoord(r, c + 1)
    for a, b in [(curr, next_r), (next_r, curr), (curr, next_c), (next_c, curr)]:
        assert precomputed.diff_at(a, b) == pytest.approx(math.pi / 2, abs=EPS)


def test_over_border(precomputed):
    assert precomputed.diff_at(PixelCoord(3, 3), PixelCoord(3, 0)) == pytest.approx(
        math.pi / 2, abs=EPS
    )
    assert precomputed.diff_at(PixelCoord(3, 0), PixelCoord(3, 3)) == pytest.approx(
        math.pi / 2, abs=EPS
    )
    assert precomputed.diff_at(PixelCoord(3, 3), PixelCoord(0, 3)) == pytest.approx(
        0, abs=EPS
    )
    assert precomputed.diff_at(PixelCoord(0, 3), PixelCoord(3, 3)) == pytest.approx(
        0, abs=EPS
    )


def test_color_visualization(precomputed):
    colors = precomputed.visualize()
    assert colors.shape == (4, 4, 3)
    assert colors.dtype == np.uint8
    assert colors[3, 3, 0] == 255
    assert colors[3, 3, 1] == 2
    assert colors[3, 3, 2] == 0
    assert colors[0, 0, 0] == 2
    assert colors[0, 0, 1] == 2
    assert colors[0, 0, 2] == 0


def test_same_pixel_raises(precomputed):
    with pytest.raises(ValueError, match="Asking for difference of same pixels."):
        precomputed.diff_at(PixelCoord(1, 1), PixelCoord(1, 1))


def test_precomputed_threshold_is_strictly_above(precomputed):
    assert precomputed.satisfies_threshold(0.5, 0.3) is True
    assert precomputed.satisfies_threshold(0.3, 0.3) is False


def test_zero_depth_pixels_have_zero_betas(params):
    image = np.ones((SIZE, SIZE), dtype=np.float32)
    image[1, 2] = 0.0
    helper = AngleDiffPrecomputed(image, params)
    assert helper.beta_rows[1, 2] == 0.0
    assert helper.beta_cols[1, 2] == 0.0
    assert helper.visualize()[1, 2].tolist() == [0, 0, 0]


def test_angle_diff_middle_matches_precomputed(depth_image, params, precomputed):
    helper = AngleDiff(depth_image, params)
    pairs = [
        (PixelCoord(1, 1), PixelCoord(2, 1)),
        (PixelCoord(2, 1), PixelCoord(1, 1)),
        (PixelCoord(1, 2), PixelCoord(1, 1)),
        (PixelCoord(1, 1), PixelCoord(1, 2)),
    ]
    for a, b in pairs:
        assert helper.diff_at(a, b) == pytest.approx(math.pi / 2, abs=EPS)
        assert helper.diff_at(a, b) == pytest.approx(
            precomputed.diff_at(a, b), abs=1e-4
        )


def test_angle_diff_wrap_around(depth_image, params):
    helper = AngleDiff(depth_image, params)
    assert helper.diff_at(PixelCoord(0, 3), PixelCoord(0, 0)) == pytest.approx(
        math.pi / 2, abs=EPS
    )
    assert helper.diff_at(PixelCoord(0, 0), PixelCoord(0, 3)) == pytest.approx(
        math.pi / 2, abs=EPS
    )


def test_angle_diff_wrap_alpha_is_not_made_absolute(depth_image, params):
    helper = AngleDiff(depth_image, params)
    assert helper.col_alphas[-1] == pytest.approx(-ONE_DEG, abs=0.001)
    assert helper.row_alphas[-1] == pytest.approx(0, abs=0.001)


def test_angle_diff_threshold_and_empty_visualization(depth_image, params):
    helper = AngleDiff(depth_image, params)
    assert helper.satisfies_threshold(0.5, 0.3) is True
    assert helper.satisfies_threshold(0.1, 0.3) is False
    assert helper.visualize().size == 0
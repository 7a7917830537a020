"""Angle-based difference between neighbouring range-image pixels.

The projection parameters passed to these helpers must provide ``rows`` and
``cols`` (ints), ``h_span`` (horizontal span in radians) and the methods
``angle_from_row(row)`` and ``angle_from_col(col)`` returning radians.
"""

from __future__ import annotations

import math

import numpy as np

from rangeseg.abstract_diff import AbstractDiff
from rangeseg.pixel_coords import PixelCoord

_MAX_ANGLE_DEG = 90.0


def _alpha_vectors(params, abs_wrap: bool) -> tuple[np.ndarray, np.ndarray]:
    """Angles between consecutive rows and consecutive (wrapping) columns."""
    row_angles = np.array(
        [params.angle_from_row(r) for r in range(params.rows)], dtype=np.float64
    )
    row_alphas = np.append(np.abs(np.diff(row_angles)), 0.0)

    col_angles = np.array(
        [params.angle_from_col(c) for c in range(params.cols)], dtype=np.float64
    )
    last_alpha = abs(col_angles[0] - col_angles[-1]) - params.h_span
    if abs_wrap:
        last_alpha = abs(last_alpha)
    col_alphas = np.append(np.abs(np.diff(col_angles)), last_alpha)
    return row_alphas.astype(np.float32), col_alphas.astype(np.float32)


def _beta(alpha, current_depth, neighbor_depth):
    """Incline angle of the line through the endpoints of two beams."""
    d1 = np.maximum(current_depth, neighbor_depth)
    d2 = np.minimum(current_depth, neighbor_depth)
    return np.abs(np.arctan2(d2 * np.sin(alpha), d1 - d2 * np.cos(alpha)))


def _lookup_index(
    from_coord: PixelCoord, to_coord: PixelCoord, rows: int, cols: int
) -> tuple[int, int]:
    """Cell in the precomputed tables describing the pair of pixels."""
    last_row = rows - 1
    if {from_coord.row, to_coord.row} == {0, last_row} and last_row != 0:
        row = last_row
    else:
        row = min(from_coord.row, to_coord.row)
    last_col = cols - 1
    if {from_coord.col, to_coord.col} == {0, last_col} and last_col != 0:
        col = last_col
    else:
        col = min(from_coord.col, to_coord.col)
    return row, col


def _colors_from_values(values_rows, values_cols, mask, scale) -> np.ndarray:
    """Colour image with channels 255 - scaled row and col values."""
    colors = np.zeros((*values_rows.shape, 3), dtype=np.uint8)
    row_color = np.trunc(255.0 * (values_rows / scale)).astype(np.int64) % 256
    col_color = np.trunc(255.0 * (values_cols / scale)).astype(np.int64) % 256
    colors[..., 0] = np.where(mask, (255 - row_color) & 0xFF, 0)
    colors[..., 1] = np.where(mask, (255 - col_color) & 0xFF, 0)
    return colors


class AngleDiff(AbstractDiff):
    """Angle difference computed on demand from precomputed beam angles."""

    def __init__(self, source_image, params) -> None:
        super().__init__(source_image)
        self._params = params
        self._row_alphas, self._col_alphas = _alpha_vectors(params, abs_wrap=False)

    @property
    def row_alphas(self) -> np.ndarray:
        return self._row_alphas

    @property
    def col_alphas(self) -> np.ndarray:
        return self._col_alphas

    def diff_at(self, from_coord: PixelCoord, to_coord: PixelCoord) -> float:
        image = self._source_image
        current_depth = float(image[from_coord.row, from_coord.col])
        neighbor_depth = float(image[to_coord.row, to_coord.col])
        alpha = self._compute_alpha(from_coord, to_coord)
        span = float(self._params.h_span)
        if alpha > span - 0.05:
            # the pair lies across the horizontal border
            alpha = alpha - span if alpha > span else span - alpha
        return float(_beta(alpha, current_depth, neighbor_depth))

    def satisfies_threshold(self, value: float, threshold: float) -> bool:
        return value > threshold

    def _compute_alpha(self, current: PixelCoord, neighbor: PixelCoord) -> float:
        last_col = self._params.cols - 1
        if (current.col == 0 and neighbor.col == last_col) or (
            neighbor.col == 0 and current.col == last_col
        ):
            return float(self._col_alphas[-1])
        if current.row < neighbor.row:
            return float(self._row_alphas[current.row])
        if current.row > neighbor.row:
            return float(self._row_alphas[neighbor.row])
        if current.col < neighbor.col:
            return float(self._col_alphas[current.col])
        if current.col > neighbor.col:
            return float(self._col_alphas[neighbor.col])
        return 0.0


class AngleDiffPrecomputed(AbstractDiff):
    """Angle difference with all beta angles computed up front.

    ``beta_rows[r, c]`` holds the angle between pixels (r, c) and (r + 1, c);
    ``beta_cols[r, c]`` holds it between (r, c) and (r, c + 1), wrapping the
    last column onto the first.
    """

    def __init__(self, source_image, params) -> None:
        super().__init__(source_image)
        self._params = params
        self._row_alphas, self._col_alphas = _alpha_vectors(params, abs_wrap=True)
        self._beta_rows, self._beta_cols = self._precompute_betas()

    @property
    def row_alphas(self) -> np.ndarray:
        return self._row_alphas

    @property
    def col_alphas(self) -> np.ndarray:
        return self._col_alphas

    @property
    def beta_rows(self) -> np.ndarray:
        return self._beta_rows

    @property
    def beta_cols(self) -> np.ndarray:
        return self._beta_cols

    def _precompute_betas(self) -> tuple[np.ndarray, np.ndarray]:
        rows, cols = self._params.rows, self._params.cols
        image = self._source_image[:rows, :cols]
        valid = image >= 0.001

        next_col = np.roll(image, -1, axis=1)
        beta_cols = np.where(
            valid, _beta(self._col_alphas[np.newaxis, :], image, next_col), 0.0
        ).astype(np.float32)

        beta_rows = np.zeros((rows, cols), dtype=np.float32)
        if rows > 1:
            beta_rows[:-1] = np.where(
                valid[:-1],
                _beta(self._row_alphas[:-1, np.newaxis], image[:-1], image[1:]),
                0.0,
            )
        return beta_rows, beta_cols

    def diff_at(self, from_coord: PixelCoord, to_coord: PixelCoord) -> float:
        row, col = _lookup_index(
            from_coord, to_coord, self._params.rows, self._params.cols
        )
        if from_coord.row != to_coord.row:
            return float(self._beta_rows[row, col])
        if from_coord.col != to_coord.col:
            return float(self._beta_cols[row, col])
        raise ValueError("Asking for difference of same pixels.")

    def satisfies_threshold(self, value: float, threshold: float) -> bool:
        return value > threshold

    def visualize(self) -> np.ndarray:
        """Colour image: channel 0 from row betas, channel 1 from col betas."""
        rows, cols = self._beta_rows.shape
        mask = self._source_image[:rows, :cols] >= 0.01
        return _colors_from_values(
            np.degrees(self._beta_rows.astype(np.float64)),
            np.degrees(self._beta_cols.astype(np.float64)),
            mask,
            _MAX_ANGLE_DEG,
        )


__all__ = ["AngleDiff", "AngleDiffPrecomputed", "math"] if False else [
    "AngleDiff",
    "AngleDiffPrecomputed",
]
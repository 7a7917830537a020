"""Line-distance difference between neighbouring range-image pixels.

It works like the angle difference, except that once the incline angle
``beta`` of the line through two beam endpoints is known, the value used is
``d1 * sin(beta)``: the distance from the farther endpoint to that line.
The projection parameters follow the same interface as in
:mod:`rangeseg.angle_diff`.
"""

from __future__ import annotations

import math

import numpy as np

from rangeseg.abstract_diff import AbstractDiff
from rangeseg.angle_diff import (
    AngleDiff,
    _alpha_vectors,
    _beta,
    _colors_from_values,
    _lookup_index,
)
from rangeseg.pixel_coords import PixelCoord

_MAX_DIST = 20.0


def _line_dist(alpha, current_depth, neighbor_depth):
    """Distance from the farther beam endpoint to the line through both."""
    d1 = np.maximum(current_depth, neighbor_depth)
    return d1 * np.sin(_beta(alpha, current_depth, neighbor_depth))


class LineDistDiff(AngleDiff):
    """Line distance computed on demand from precomputed beam angles."""

    def __init__(self, source_image, params) -> None:
        super().__init__(source_image, params)

    def diff_at(self, from_coord: PixelCoord, to_coord: PixelCoord) -> float:
        image = self._source_image
        d1 = max(
            float(image[from_coord.row, from_coord.col]),
            float(image[to_coord.row, to_coord.col]),
        )
        beta = super().diff_at(from_coord, to_coord)
        return d1 * math.sin(beta)

    def satisfies_threshold(self, value: float, threshold: float) -> bool:
        return value > threshold


class LineDistDiffPrecomputed(AbstractDiff):
    """Line distance with all values computed up front.

    ``dists_row[r, c]`` holds the distance between pixels (r, c) and
    (r + 1, c); ``dists_col[r, c]`` between (r, c) and (r, c + 1), wrapping
    the last column onto the first.
    """

    def __init__(self, source_image, params) -> None:
        super().__init__(source_image)
        self._params = params
        self._row_alphas, self._col_alphas = _alpha_vectors(params, abs_wrap=True)
        self._dists_row, self._dists_col = self._precompute_line_dists()

    @property
    def row_alphas(self) -> np.ndarray:
        return self._row_alphas

    @property
    def col_alphas(self) -> np.ndarray:
        return self._col_alphas

    @property
    def dists_row(self) -> np.ndarray:
        return self._dists_row

    @property
    def dists_col(self) -> np.ndarray:
        return self._dists_col

    def _precompute_line_dists(self) -> tuple[np.ndarray, np.ndarray]:
        rows, cols = self._params.rows, self._params.cols
        image = self._source_image[:rows, :cols]
        valid = image >= 0.001

        next_col = np.roll(image, -1, axis=1)
        dists_col = np.where(
            valid, _line_dist(self._col_alphas[np.newaxis, :], image, next_col), 0.0
        ).astype(np.float32)

        dists_row = np.zeros((rows, cols), dtype=np.float32)
        if rows > 1:
            # the last row has no lower neighbour and stays zero
            dists_row[:-1] = np.where(
                valid[:-1],
                _line_dist(self._row_alphas[:-1, np.newaxis], image[:-1], image[1:]),
                0.0,
            )
        return dists_row, dists_col

    def diff_at(self, from_coord: PixelCoord, to_coord: PixelCoord) -> float:
        row, col = _lookup_index(
            from_coord, to_coord, self._params.rows, self._params.cols
        )
        if from_coord.row != to_coord.row:
            return float(self._dists_row[row, col])
        if from_coord.col != to_coord.col:
            return float(self._dists_col[row, col])
        raise ValueError("Asking for difference of same pixels.")

    def satisfies_threshold(self, value: float, threshold: float) -> bool:
        return value > threshold

    def visualize(self) -> np.ndarray:
        """Colour image: channel 0 from row distances, channel 1 from col ones."""
        rows, cols = self._dists_row.shape
        mask = self._source_image[:rows, :cols] >= 0.01
        return _colors_from_values(
            self._dists_row.astype(np.float64),
            self._dists_col.astype(np.float64),
            mask,
            _MAX_DIST,
        )


__all__ = ["LineDistDiff", "LineDistDiffPrecomputed"]
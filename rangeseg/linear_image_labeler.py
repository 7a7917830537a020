"""Breadth-first labelling of connected components in a depth image."""

from __future__ import annotations

from collections import deque

import numpy as np

from rangeseg.abstract_diff import AbstractDiff
from rangeseg.abstract_image_labeler import AbstractImageLabeler
from rangeseg.diff_factory import DiffType, build_diff
from rangeseg.pixel_coords import PixelCoord

_MIN_DEPTH = 0.001


class LinearImageLabeler(AbstractImageLabeler):
    """Labels components pixel by pixel, growing each one with a BFS.

    The neighbourhood reaches ``step_row`` pixels up and down and
    ``step_col`` pixels left and right; columns wrap around the image.
    """

    def __init__(
        self,
        depth_image,
        params,
        angle_threshold: float,
        step_row: int = 1,
        step_col: int = 1,
    ) -> None:
        super().__init__(depth_image, params, angle_threshold)
        neighborhood: list[PixelCoord] = []
        for r in range(step_row, 0, -1):
            neighborhood += [PixelCoord(-r, 0), PixelCoord(r, 0)]
        for c in range(step_col, 0, -1):
            neighborhood += [PixelCoord(0, -c), PixelCoord(0, c)]
        self.neighborhood: tuple[PixelCoord, ...] = tuple(neighborhood)

    def label_one_component(
        self, label: int, start: PixelCoord, diff_helper: AbstractDiff
    ) -> None:
        """Give ``label`` to every pixel reachable from ``start``."""
        labels = self._label_image
        depth = self._depth_image
        rows = labels.shape[0]
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if labels[current.row, current.col] > 0:
                continue
            labels[current.row, current.col] = label
            if depth[current.row, current.col] < _MIN_DEPTH:
                # invalid depth: labelled but not grown from
                continue
            for step in self.neighborhood:
                neighbor = current + step
                if not 0 <= neighbor.row < rows:
                    continue
                neighbor = PixelCoord(neighbor.row, self.wrap_cols(neighbor.col))
                if labels[neighbor.row, neighbor.col] > 0:
                    continue
                diff = diff_helper.diff_at(current, neighbor)
                if diff_helper.satisfies_threshold(diff, self._radians_threshold):
                    queue.append(neighbor)

    def wrap_cols(self, col: int) -> int:
        """Fold a column index that left the image back around it."""
        cols = self._label_image.shape[1]
        if col < 0:
            return col + cols
        if col >= cols:
            return col - cols
        return col

    def compute_labels(self, diff_type: DiffType) -> None:
        """Label the whole image; components get labels 1, 2, ... in scan order."""
        self._label_image = np.zeros(self._depth_image.shape[:2], dtype=np.uint16)
        diff_helper = build_diff(diff_type, self._depth_image, self._params)
        label = 1
        rows, cols = self._label_image.shape
        for row in range(rows):
            for col in range(cols):
                if self._label_image[row, col] > 0:
                    continue
                if self._depth_image[row, col] < _MIN_DEPTH:
                    continue
                self.label_one_component(label, PixelCoord(row, col), diff_helper)
                label = (label + 1) & 0xFFFF


__all__ = ["LinearImageLabeler"]
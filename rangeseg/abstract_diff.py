"""Base class for pixel difference helpers and the simple depth difference."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from rangeseg.pixel_coords import PixelCoord


class AbstractDiff(ABC):
    """Computes a difference between neighbouring pixels of a depth image."""

    def __init__(self, source_image) -> None:
        self._source_image = np.asarray(source_image, dtype=np.float32)

    @abstractmethod
    def diff_at(self, from_coord: PixelCoord, to_coord: PixelCoord) -> float:
        """Return the difference between two pixels."""

    @abstractmethod
    def satisfies_threshold(self, value: float, threshold: float) -> bool:
        """Return whether a difference value passes the threshold."""

    def visualize(self) -> np.ndarray:
        """Return a colour image of the differences; empty by default."""
        return np.empty((0, 0, 3), dtype=np.uint8)


class SimpleDiff(AbstractDiff):
    """Absolute difference of the two depth values."""

    def diff_at(self, from_coord: PixelCoord, to_coord: PixelCoord) -> float:
        image = self._source_image
        return float(
            abs(
                image[from_coord.row, from_coord.col]
                - image[to_coord.row, to_coord.col]
            )
        )

    def satisfies_threshold(self, value: float, threshold: float) -> bool:
        return value < threshold
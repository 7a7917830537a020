"""Pixel coordinates in a range image."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PixelCoord:
    """A (row, col) position in an image."""

    row: int = 0
    col: int = 0

    def __add__(self, other: PixelCoord) -> PixelCoord:
        if not isinstance(other, PixelCoord):
            return NotImplemented
        return PixelCoord(self.row + other.row, self.col + other.col)
"""Choice of pixel difference helper by type."""

from __future__ import annotations

import enum

from rangeseg.abstract_diff import AbstractDiff, SimpleDiff
from rangeseg.angle_diff import AngleDiff, AngleDiffPrecomputed
from rangeseg.line_dist_diff import LineDistDiff, LineDistDiffPrecomputed


class DiffType(enum.Enum):
    """Kinds of difference between neighbouring pixels."""

    SIMPLE = enum.auto()
    ANGLES = enum.auto()
    ANGLES_PRECOMPUTED = enum.auto()
    LINE_DIST = enum.auto()
    LINE_DIST_PRECOMPUTED = enum.auto()
    NONE = enum.auto()


_WITH_PARAMS = {
    DiffType.ANGLES: AngleDiff,
    DiffType.ANGLES_PRECOMPUTED: AngleDiffPrecomputed,
    DiffType.LINE_DIST: LineDistDiff,
    DiffType.LINE_DIST_PRECOMPUTED: LineDistDiffPrecomputed,
}


def build_diff(diff_type: DiffType, source_image, params=None) -> AbstractDiff:
    """Create the difference helper of the given type for an image."""
    if diff_type is DiffType.SIMPLE:
        return SimpleDiff(source_image)
    if diff_type is DiffType.NONE:
        raise ValueError("DiffType is NONE. Please set it.")
    try:
        cls = _WITH_PARAMS[diff_type]
    except KeyError:
        raise ValueError(f"unknown diff type: {diff_type!r}") from None
    if params is None:
        raise ValueError(f"{diff_type.name} difference needs projection parameters")
    return cls(source_image, params)


__all__ = ["DiffType", "build_diff"]
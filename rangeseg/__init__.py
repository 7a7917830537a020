"""Segmentation of depth images into connected clusters with pixel difference helpers."""

__version__ = "0.1.0"
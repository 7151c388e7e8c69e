"""Raster primitives used by the image reshaper."""

from imagemode.raster.pillow import PillowBackend, crop_or_expand_with_transparency, resize
from imagemode.raster.protocols import MockRasterBackend, RasterBackend, RasterImage

__all__ = [
    "MockRasterBackend",
    "PillowBackend",
    "RasterBackend",
    "RasterImage",
    "crop_or_expand_with_transparency",
    "resize",
]

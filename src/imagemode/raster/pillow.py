"""Pillow implementation of the raster primitives."""

from __future__ import annotations

import logging
from typing import Final, Literal

from PIL import Image

from imagemode.errors import InvalidTargetSizeError, RasterizationError
from imagemode.geometry import Rect, Size

logger: Final = logging.getLogger(__name__)

ResampleName = Literal["nearest", "bilinear", "bicubic", "lanczos"]

RESAMPLE_FILTERS: Final[dict[str, Image.Resampling]] = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


def _pixel_size(size: Size) -> tuple[int, int]:
    width, height = size.as_int_tuple()
    if width < 1 or height < 1:
        raise InvalidTargetSizeError("Target size must be at least 1x1 pixel", size)
    return (width, height)


class PillowBackend:
    """Raster primitives backed by Pillow.

    Every call returns a new image; the source image is never modified.
    """

    def __init__(self, resample: ResampleName = "lanczos") -> None:
        """Initialize the backend.

        Args:
            resample: Resampling filter used by ``resize``
        """
        if resample not in RESAMPLE_FILTERS:
            raise ValueError(f"Unknown resample filter: {resample}")
        self.resample: ResampleName = resample

    def resize(self, image: Image.Image, size: Size) -> Image.Image:
        """Stretch ``image`` to exactly ``size``.

        Raises:
            InvalidTargetSizeError: If ``size`` rounds below 1x1
            RasterizationError: If Pillow fails to build the image
        """
        target = _pixel_size(size)
        logger.debug("Resizing %dx%d -> %dx%d", image.width, image.height, *target)
        try:
            return image.resize(target, RESAMPLE_FILTERS[self.resample])
        except (ValueError, MemoryError, OSError) as exc:
            raise RasterizationError("Unable to resize image", size, exc) from exc

    def crop_or_expand_with_transparency(self, image: Image.Image, rect: Rect) -> Image.Image:
        """Extract ``rect`` from ``image``, padding with transparent pixels.

        When the box extends past the source bounds the image is converted to
        RGBA first, so the area Pillow fills outside the source is
        ``(0, 0, 0, 0)``. A box fully inside the source keeps the source mode.

        Raises:
            InvalidTargetSizeError: If ``rect.size`` rounds below 1x1
            RasterizationError: If Pillow fails to build the image
        """
        _pixel_size(rect.size)
        box = rect.as_box()
        logger.debug("Cropping %dx%d with box %s", image.width, image.height, box)
        left, top, right, bottom = box
        pads = left < 0 or top < 0 or right > image.width or bottom > image.height
        try:
            source = image.convert("RGBA") if pads and image.mode != "RGBA" else image
            return source.crop(box)
        except (ValueError, MemoryError, OSError) as exc:
            raise RasterizationError("Unable to crop image", rect.size, exc) from exc


_default_backend: Final = PillowBackend()


def resize(image: Image.Image, size: Size) -> Image.Image:
    """Resize with the default Pillow backend."""
    return _default_backend.resize(image, size)


def crop_or_expand_with_transparency(image: Image.Image, rect: Rect) -> Image.Image:
    """Crop or expand with the default Pillow backend."""
    return _default_backend.crop_or_expand_with_transparency(image, rect)

"""Reshape content images to a canvas aspect ratio."""

from __future__ import annotations

import logging
import math
from typing import Final, Optional, TypeVar

from typing_extensions import assert_never

from imagemode.common.enums import ContentMode
from imagemode.geometry import DEFAULT_RATIO_TOLERANCE, Point, Rect, Size
from imagemode.raster.pillow import PillowBackend
from imagemode.raster.protocols import RasterBackend, RasterImage

logger: Final = logging.getLogger(__name__)

ImageT = TypeVar("ImageT", bound=RasterImage)


def ratio_matches(image_size: Size, canvas_ratio: Size, rel_tol: float = DEFAULT_RATIO_TOLERANCE) -> bool:
    """Return True if both sizes have the same aspect ratio within ``rel_tol``."""
    return math.isclose(image_size.aspect_ratio, canvas_ratio.aspect_ratio, rel_tol=rel_tol)


def target_size(image_size: Size, canvas_ratio: Size, mode: ContentMode) -> Size:
    """Size with the canvas aspect ratio that the image is reshaped to.

    Args:
        image_size: Current image size
        canvas_ratio: Desired aspect ratio, as a size
        mode: Content mode deciding which dimension is kept

    Returns:
        SCALE_TO_FILL keeps the limiting dimension and shrinks the other,
        SCALE_ASPECT_FIT grows a dimension so the whole image fits, and
        SCALE_ASPECT_FILL shrinks a dimension so the image covers it.
    """
    width, height = image_size.width, image_size.height
    width_ratio = width / canvas_ratio.width
    height_ratio = height / canvas_ratio.height

    keep_height = Size(height / canvas_ratio.height * canvas_ratio.width, height)
    keep_width = Size(width, width / canvas_ratio.width * canvas_ratio.height)

    if mode is ContentMode.SCALE_TO_FILL:
        return keep_height if width_ratio > height_ratio else keep_width
    elif mode is ContentMode.SCALE_ASPECT_FIT:
        return keep_width if width_ratio > height_ratio else keep_height
    elif mode is ContentMode.SCALE_ASPECT_FILL:
        return keep_width if width_ratio < height_ratio else keep_height
    else:
        assert_never(mode)


def centered_source_rect(image_size: Size, new_size: Size) -> Rect:
    """Rect of ``new_size`` centered on the image, in source coordinates.

    The origin is negative on an axis where ``new_size`` is larger than the
    image (padding) and positive where it is smaller (cropping).
    """
    origin = Point(
        (image_size.width - new_size.width) / 2,
        (image_size.height - new_size.height) / 2,
    )
    return Rect(origin, new_size)


def image_for_content(
    image: ImageT,
    canvas_ratio: Size,
    mode: ContentMode,
    *,
    backend: Optional[RasterBackend] = None,
    rel_tol: float = DEFAULT_RATIO_TOLERANCE,
) -> ImageT:
    """Return an image whose aspect ratio matches ``canvas_ratio``.

    If the ratios already match the input image is returned unchanged.
    Otherwise SCALE_TO_FILL stretches the image, SCALE_ASPECT_FIT pads it
    with transparent margins, and SCALE_ASPECT_FILL crops it, all centered.

    Args:
        image: Decoded source image
        canvas_ratio: Aspect ratio to match, expressed as a size
        mode: Content mode to apply
        backend: Raster primitives to use (Pillow by default)
        rel_tol: Relative tolerance for the aspect ratio comparison

    Returns:
        A new image, or ``image`` itself when no reshape is needed

    Raises:
        TransformError: If the underlying resize or crop fails
    """
    image_size = Size(image.width, image.height)
    if ratio_matches(image_size, canvas_ratio, rel_tol):
        logger.debug("Image %s already matches ratio %s", image_size, canvas_ratio)
        return image

    ops: RasterBackend = backend if backend is not None else PillowBackend()
    new_size = target_size(image_size, canvas_ratio, mode)
    logger.debug("Reshaping %s to %s using %s", image_size, new_size, mode.name)

    if mode is ContentMode.SCALE_TO_FILL:
        return ops.resize(image, new_size)
    return ops.crop_or_expand_with_transparency(image, centered_source_rect(image_size, new_size))

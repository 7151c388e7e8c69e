"""Placement of content inside a canvas.

``rect_for_content`` is closed-form arithmetic: it never validates and never
raises for positive sizes. Zero-area sizes are not supported; the division
raises ``ZeroDivisionError`` rather than a dedicated error.
"""

from __future__ import annotations

from typing_extensions import assert_never

from imagemode.common.enums import ContentMode
from imagemode.geometry import Point, Rect, Size


def _centered(canvas_size: Size, final_size: Size) -> Point:
    return Point(
        (canvas_size.width - final_size.width) / 2.0,
        (canvas_size.height - final_size.height) / 2.0,
    )


def rect_for_content(image_size: Size, canvas_size: Size, mode: ContentMode) -> Rect:
    """Calculate the area of the canvas where the image is drawn.

    Args:
        image_size: Intrinsic size of the content image
        canvas_size: Size of the canvas to place the image in
        mode: Content mode deciding how the image is scaled

    Returns:
        Rect in canvas coordinates. For SCALE_ASPECT_FILL the rect overflows
        the canvas on one axis and has a negative origin there.
    """
    if mode is ContentMode.SCALE_TO_FILL:
        return Rect(Point.zero(), canvas_size)
    elif mode is ContentMode.SCALE_ASPECT_FIT:
        scale = max(
            image_size.width / canvas_size.width,
            image_size.height / canvas_size.height,
        )
        final_size = Size(image_size.width / scale, image_size.height / scale)
        return Rect(_centered(canvas_size, final_size), final_size)
    elif mode is ContentMode.SCALE_ASPECT_FILL:
        scale = max(
            canvas_size.width / image_size.width,
            canvas_size.height / image_size.height,
        )
        final_size = image_size.scaled(scale)
        return Rect(_centered(canvas_size, final_size), final_size)
    else:
        assert_never(mode)

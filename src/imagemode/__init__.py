"""Placement and reshaping of content images inside a canvas.

This package provides:
- rect_for_content: where an image lands in a canvas for a content mode
- image_for_content: reshape an image to a canvas aspect ratio
"""

from imagemode.common.enums import ContentMode
from imagemode.errors import InvalidTargetSizeError, RasterizationError, TransformError
from imagemode.geometry import Point, Rect, Size
from imagemode.layout import rect_for_content
from imagemode.reshape import image_for_content

__all__ = [
    "ContentMode",
    "InvalidTargetSizeError",
    "Point",
    "RasterizationError",
    "Rect",
    "Size",
    "TransformError",
    "image_for_content",
    "rect_for_content",
]

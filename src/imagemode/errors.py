"""Exception classes for raster transforms.

Only the raster primitives raise these. Placement math never fails for
positive sizes, and the reshaper lets primitive failures propagate as-is.
"""

from __future__ import annotations

from typing import Optional

from imagemode.geometry import Size


class TransformError(Exception):
    """A resize or crop/expand primitive could not produce the target image.

    Raised when the requested size is unusable after rounding to whole
    pixels, or when the imaging library fails to allocate or rasterize the
    result. Includes the requested size and the underlying exception when
    available.
    """

    def __init__(
        self,
        message: str,
        size: Optional[Size] = None,
        original_error: Optional[BaseException] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            size: Target size that was requested, if known
            original_error: The original exception that was caught
        """
        super().__init__(f"{message} (target {size})" if size is not None else message)
        self.message: str = message
        self.size: Optional[Size] = size
        self.original_error: Optional[BaseException] = original_error


class InvalidTargetSizeError(TransformError):
    """Raised when a target size rounds to a zero or negative dimension."""

    pass


class RasterizationError(TransformError):
    """Raised when the imaging library fails to build the target image."""

    pass

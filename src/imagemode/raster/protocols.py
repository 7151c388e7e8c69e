# src/imagemode/raster/protocols.py
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from imagemode.errors import InvalidTargetSizeError
from imagemode.geometry import Rect, Size


@runtime_checkable
class RasterImage(Protocol):
    """A decoded bitmap. Only its dimensions are read by the reshaper.

    ``PIL.Image.Image`` satisfies this protocol.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


@runtime_checkable
class RasterBackend(Protocol):
    """Protocol defining the raster primitives the reshaper depends on.

    Implementations produce new, independently owned images and raise
    ``TransformError`` (or a subclass) when the target cannot be produced.
    """

    def resize(self, image: Any, size: Size) -> Any:
        """Scale pixel content to exactly ``size``.

        Args:
            image: Source image
            size: Target size (rounded to whole pixels)
        """
        ...

    def crop_or_expand_with_transparency(self, image: Any, rect: Rect) -> Any:
        """Return the part of ``image`` covered by ``rect``.

        ``rect`` is expressed in the source coordinate space. Its origin may be
        negative and it may extend past the source bounds; any area outside
        the source is fully transparent.

        Args:
            image: Source image
            rect: Region to extract, in source coordinates
        """
        ...


class SizedImage:
    """Minimal stand-in image that only carries dimensions.

    Useful for exercising the reshaper's size math without pixel data.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return f"SizedImage({self.width}x{self.height})"


class MockRasterBackend:
    """Mock implementation of RasterBackend for testing.

    Records each call and returns a ``SizedImage`` of the requested size.
    """

    def __init__(self) -> None:
        self.resize_calls: list[dict[str, object]] = []
        self.crop_calls: list[dict[str, object]] = []

    def resize(self, image: Any, size: Size) -> SizedImage:
        """Record the resize call and return an image of the target size."""
        self.resize_calls.append({"image": image, "size": size})
        return self._sized(size)

    def crop_or_expand_with_transparency(self, image: Any, rect: Rect) -> SizedImage:
        """Record the crop call and return an image of the rect size."""
        self.crop_calls.append({"image": image, "rect": rect})
        return self._sized(rect.size)

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.resize_calls = []
        self.crop_calls = []

    @staticmethod
    def _sized(size: Size) -> SizedImage:
        width, height = size.as_int_tuple()
        if width < 1 or height < 1:
            raise InvalidTargetSizeError("Target size must be at least 1x1 pixel", size)
        return SizedImage(width, height)


class FailingRasterBackend(MockRasterBackend):
    """Backend mock that raises a preset error from every primitive."""

    def __init__(self, error: Exception) -> None:
        super().__init__()
        self.error = error

    def resize(self, image: Any, size: Size) -> SizedImage:
        super().resize(image, size)
        raise self.error

    def crop_or_expand_with_transparency(self, image: Any, rect: Rect) -> SizedImage:
        super().crop_or_expand_with_transparency(image, rect)
        raise self.error

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING

from imagemode.geometry import DEFAULT_RATIO_TOLERANCE

if TYPE_CHECKING:
    from imagemode.geometry import Rect, Size
    from imagemode.raster.protocols import RasterBackend, RasterImage


class ContentMode(Enum):
    """Options that decide how content (e.g. a watermark) is sized in a canvas.

    The three policies mirror the familiar content modes of UI toolkits.
    Iterating the enum yields every supported mode.
    """

    # Stretch to the canvas size, changing the content aspect ratio if needed
    SCALE_TO_FILL = "Scale the content to fill the canvas, changing its aspect ratio if necessary."
    # Keep aspect ratio, leave letterbox margin on the shorter axis
    SCALE_ASPECT_FIT = (
        "Scale the content to fit inside the canvas while keeping its aspect ratio. "
        "Remaining canvas area is left uncovered."
    )
    # Keep aspect ratio, overflow (clip) on one axis
    SCALE_ASPECT_FILL = (
        "Scale the content to cover the whole canvas while keeping its aspect ratio. "
        "Part of the content may be clipped."
    )

    @property
    def description(self) -> str:
        return self.value

    @property
    def cli_name(self) -> str:
        """Name as accepted on the command line, e.g. ``scale-aspect-fit``."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def parse(cls, text: str | ContentMode) -> ContentMode:
        """Parse a mode name leniently.

        Accepts ``SCALE_ASPECT_FIT``, ``scale-aspect-fit`` and
        ``scaleAspectFit`` spellings.

        Args:
            text: Mode name or an existing ContentMode

        Returns:
            The matching ContentMode

        Raises:
            ValueError: If no mode matches
        """
        if isinstance(text, ContentMode):
            return text
        snake = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", text.strip())
        key = snake.replace("-", "_").upper()
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(mode.cli_name for mode in cls)
            raise ValueError(f"Unknown content mode {text!r} (expected one of: {valid})") from None

    def rect_for_content(self, image_size: Size, canvas_size: Size) -> Rect:
        """Area of the canvas the content occupies in this mode."""
        from imagemode.layout import rect_for_content

        return rect_for_content(image_size, canvas_size, self)

    def image_for_content(
        self,
        image: RasterImage,
        canvas_ratio: Size,
        backend: RasterBackend | None = None,
        rel_tol: float = DEFAULT_RATIO_TOLERANCE,
    ) -> RasterImage:
        """Reshape ``image`` to the canvas aspect ratio in this mode."""
        from imagemode.reshape import image_for_content

        return image_for_content(image, canvas_ratio, self, backend=backend, rel_tol=rel_tol)

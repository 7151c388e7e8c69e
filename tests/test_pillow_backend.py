import pytest
from PIL import Image

from imagemode.errors import InvalidTargetSizeError, RasterizationError, TransformError
from imagemode.geometry import Rect, Size
from imagemode.raster import pillow
from imagemode.raster.pillow import PillowBackend
from imagemode.raster.protocols import MockRasterBackend, RasterBackend, RasterImage


class TestPillowBackend:
    def test_satisfies_protocols(self, wide_image: Image.Image) -> None:
        assert isinstance(PillowBackend(), RasterBackend)
        assert isinstance(MockRasterBackend(), RasterBackend)
        assert isinstance(wide_image, RasterImage)

    def test_rejects_unknown_resample(self) -> None:
        with pytest.raises(ValueError):
            PillowBackend("sharpest")  # type: ignore[arg-type]

    @pytest.mark.parametrize("resample", ["nearest", "bilinear", "bicubic", "lanczos"])
    def test_resize_to_exact_size(self, wide_image: Image.Image, resample: str) -> None:
        result = PillowBackend(resample).resize(wide_image, Size(149.6, 50.2))  # type: ignore[arg-type]
        assert result.size == (150, 50)
        assert wide_image.size == (300, 100)

    @pytest.mark.parametrize("size", [Size(0, 10), Size(10, 0.4), Size(-5, 10)])
    def test_resize_rejects_empty_target(self, wide_image: Image.Image, size: Size) -> None:
        with pytest.raises(InvalidTargetSizeError) as exc_info:
            PillowBackend().resize(wide_image, size)
        assert exc_info.value.size == size
        assert isinstance(exc_info.value, TransformError)

    def test_crop_fully_inside(self, wide_image: Image.Image) -> None:
        result = PillowBackend().crop_or_expand_with_transparency(
            wide_image, Rect.from_values(200, 0, 100, 100)
        )
        assert result.size == (100, 100)
        assert result.mode == "RGB"
        assert result.getcolors() == [(100 * 100, (0, 0, 255))]

    def test_expand_fills_transparent(self) -> None:
        img = Image.new("L", (2, 2), 200)
        result = PillowBackend().crop_or_expand_with_transparency(img, Rect.from_values(-1, -1, 4, 4))
        assert result.size == (4, 4)
        assert result.mode == "RGBA"
        assert result.getpixel((0, 0)) == (0, 0, 0, 0)
        assert result.getpixel((3, 3)) == (0, 0, 0, 0)
        assert result.getpixel((1, 1)) == (200, 200, 200, 255)

    def test_crop_keeps_existing_alpha(self) -> None:
        img = Image.new("RGBA", (4, 4), (10, 20, 30, 128))
        result = PillowBackend().crop_or_expand_with_transparency(img, Rect.from_values(1, 1, 2, 2))
        assert result.getpixel((0, 0)) == (10, 20, 30, 128)

    def test_crop_rejects_empty_rect(self, wide_image: Image.Image) -> None:
        with pytest.raises(InvalidTargetSizeError):
            PillowBackend().crop_or_expand_with_transparency(wide_image, Rect.from_values(0, 0, 0.2, 10))

    def test_pillow_failure_is_wrapped(self, monkeypatch: pytest.MonkeyPatch, wide_image: Image.Image) -> None:
        def explode(*args: object, **kwargs: object) -> Image.Image:
            raise MemoryError("no room")

        monkeypatch.setattr(Image.Image, "resize", explode)
        with pytest.raises(RasterizationError) as exc_info:
            PillowBackend().resize(wide_image, Size(10, 10))
        assert isinstance(exc_info.value.original_error, MemoryError)
        assert "target 10x10" in str(exc_info.value)


def test_module_level_primitives(wide_image: Image.Image) -> None:
    assert pillow.resize(wide_image, Size(30, 10)).size == (30, 10)
    assert pillow.crop_or_expand_with_transparency(wide_image, Rect.from_values(0, -10, 300, 120)).size == (
        300,
        120,
    )


def test_partial_overlap_pads_rgb_source(wide_image: Image.Image) -> None:
    result = PillowBackend().crop_or_expand_with_transparency(wide_image, Rect.from_values(250, 0, 100, 100))
    assert result.mode == "RGBA"
    assert result.getpixel((0, 50)) == (0, 0, 255, 255)
    assert result.getpixel((99, 50)) == (0, 0, 0, 0)

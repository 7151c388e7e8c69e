import pytest
from PIL import Image

from imagemode.raster.protocols import MockRasterBackend


@pytest.fixture
def mock_backend() -> MockRasterBackend:
    return MockRasterBackend()


@pytest.fixture
def wide_image() -> Image.Image:
    """300x100 image: red left third, green middle, blue right third."""
    img = Image.new("RGB", (300, 100), (0, 0, 0))
    img.paste((255, 0, 0), (0, 0, 100, 100))
    img.paste((0, 255, 0), (100, 0, 200, 100))
    img.paste((0, 0, 255), (200, 0, 300, 100))
    return img

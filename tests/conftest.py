import pytest
from PIL import Image

from asciirender.compositor import load_font


@pytest.fixture(scope="session")
def font():
    return load_font()


@pytest.fixture
def grey_image():
    """Uniform mid-grey 10x10, brighter than the dark threshold."""
    return Image.new("RGB", (10, 10), (128, 128, 128))


@pytest.fixture
def dark_image():
    """Uniform near-black 10x10, darker than the dark threshold."""
    return Image.new("RGB", (10, 10), (30, 30, 30))

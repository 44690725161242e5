import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import image_formats
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from image_formats.catalog import InMemoryRegistrar, InMemorySettings


# Common test fixtures
@pytest.fixture
def registrar():
    """Return an empty in-memory registrar."""
    return InMemoryRegistrar()


@pytest.fixture
def settings():
    """Return an empty in-memory settings store."""
    return InMemorySettings()


@pytest.fixture
def landscape_image():
    """Create an 800x600 test image, left half red, right half blue."""
    img = Image.new("RGB", (800, 600), color="red")
    img.paste(Image.new("RGB", (400, 600), color="blue"), (400, 0))
    return img

"""Test configuration and fixtures for cl_thumbnail.

Fixtures generate synthetic images with PIL into pytest's ``tmp_path`` so no
test media needs to be checked in.
"""

from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from cl_thumbnail import SourceImage, image_from_file

SAMPLE_WIDTH = 800
SAMPLE_HEIGHT = 600


def _draw_grid(img: Image.Image) -> None:
    draw = ImageDraw.Draw(img)
    for i in range(0, img.width, 50):
        draw.line([(i, 0), (i, img.height)], fill=(255, 255, 255), width=2)
    for i in range(0, img.height, 50):
        draw.line([(0, i), (img.width, i)], fill=(255, 255, 255), width=2)
    draw.ellipse([300, 200, 500, 400], fill=(200, 100, 100))


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def sample_image_path(tmp_path: Path) -> Path:
    """Generate an 800x600 JPEG test image."""
    output_path = tmp_path / "sample.jpg"

    img = Image.new("RGB", (SAMPLE_WIDTH, SAMPLE_HEIGHT), color=(73, 109, 137))
    _draw_grid(img)
    img.save(output_path, "JPEG", quality=85)

    return output_path


@pytest.fixture
def sample_rgba_path(tmp_path: Path) -> Path:
    """Generate a 400x200 PNG with an alpha channel."""
    output_path = tmp_path / "transparent.png"

    img = Image.new("RGBA", (400, 200), color=(10, 200, 30, 128))
    img.save(output_path, "PNG")

    return output_path


@pytest.fixture
def sample_image_bytes(sample_image_path: Path) -> bytes:
    return sample_image_path.read_bytes()


@pytest.fixture
def sample_image(sample_image_path: Path) -> SourceImage:
    """Loaded 800x600 source image."""
    return image_from_file(sample_image_path)

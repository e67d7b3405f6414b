from pathlib import Path

import numpy as np
import pytest
from PIL import Image as PILImage

from models.image import Image

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)


def make_image(rows, path=None) -> Image:
    """Build an Image from nested rows of RGBA tuples."""
    return Image(pixels=np.array(rows, dtype=np.uint8), path=path)


def pixel_rows(img: Image):
    """Row-major list of RGBA tuples."""
    return [tuple(int(c) for c in px) for px in img.pixels.reshape(-1, 4)]


@pytest.fixture
def quad_image() -> Image:
    """2x2 red/green over blue/white."""
    return make_image([[RED, GREEN], [BLUE, WHITE]])


@pytest.fixture
def random_image() -> Image:
    rng = np.random.default_rng(1234)
    return Image(pixels=rng.integers(0, 256, size=(7, 5, 4), dtype=np.uint8))


@pytest.fixture
def png_file(tmp_path, quad_image) -> Path:
    path = tmp_path / "quad.png"
    PILImage.fromarray(quad_image.pixels).save(path, format="PNG")
    return path

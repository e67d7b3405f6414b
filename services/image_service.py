from pathlib import Path
from typing import Union
import logging
import numpy as np
from models.image import Image
from repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)


class ImageService:
    """I/O helpers.  No pixel transforms here."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single PNG from disk into an Image object."""
        img = self.image_repository.load(path)
        logger.info(f"Loaded {img.path.name}: {img.width}x{img.height}")
        return img

    def save(self, image: Image) -> Path:
        """
        Business-level method to save the image to its path.
        """
        saved = self.image_repository.save(image)
        logger.info(f"Saved {saved}")
        return saved

    def with_path(self, image: Image, path: Union[str, Path]) -> Image:
        """
        Same pixels, new destination.  The pixel array is shared, not copied.
        """
        return self.create_image(image.pixels, path)

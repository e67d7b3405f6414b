from pathlib import Path
from typing import Union
import logging
import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError
from models.image import Image
from models.errors import ImageDecodeError, ImageEncodeError, InvalidImageError

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles PNG file I/O and pixel buffer creation for Image entities.
    """
    FORMAT = "PNG"
    MODE = "RGBA"

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        """
        Wrap an (H, W, 4) uint8 array in an Image.

        Raises:
            InvalidImageError: if the array is not an RGBA byte grid.
        """
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise InvalidImageError(f"Expected (H, W, 4) pixels, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise InvalidImageError(f"Expected uint8 pixels, got {pixels.dtype}")
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    def load(self, path: Union[str, Path]) -> Image:
        path = Path(path)
        try:
            with PILImage.open(path) as pil_img:
                if pil_img.format != self.FORMAT:
                    raise ImageDecodeError(
                        f"{path} is not a PNG file (detected {pil_img.format or 'unknown'} format)"
                    )
                arr = np.asarray(self._to_rgba(pil_img), dtype=np.uint8)
        except FileNotFoundError as err:
            raise ImageDecodeError(f"Image not found: {path}") from err
        except UnidentifiedImageError as err:
            raise ImageDecodeError(f"Image unreadable: {path}") from err
        except ImageDecodeError:
            raise
        except (OSError, SyntaxError, ValueError) as err:
            # Pillow reports truncated and corrupt chunks this way
            raise ImageDecodeError(f"Failed to decode {path}: {err}") from err

        logger.debug(f"Loaded {path} ({arr.shape[1]}x{arr.shape[0]})")
        return self.create_image(np.ascontiguousarray(arr), path)

    @staticmethod
    def _to_rgba(pil_img: PILImage.Image) -> PILImage.Image:
        """
        Normalise any PNG colour type to 8-bit RGBA.
        16-bit greyscale ("I;16"/"I") is scaled down rather than clipped.
        """
        if pil_img.mode in ("I", "I;16", "I;16B", "I;16L"):
            wide = np.asarray(pil_img, dtype=np.uint32)
            grey = PILImage.fromarray((wide >> 8).astype(np.uint8))
            return grey.convert(ImageRepository.MODE)
        return pil_img.convert(ImageRepository.MODE)

    def save(self, image: Image) -> Path:
        if image.path is None:
            raise ImageEncodeError("Cannot save an image without a destination path")

        pixels = image.pixels
        if not pixels.flags['C_CONTIGUOUS']:
            pixels = np.ascontiguousarray(pixels)

        try:
            PILImage.fromarray(pixels).save(image.path, format=self.FORMAT)
        except (OSError, ValueError) as err:
            raise ImageEncodeError(f"Failed to write {image.path}: {err}") from err

        logger.debug(f"Saved {image.path} ({image.width}x{image.height})")
        return Path(image.path)

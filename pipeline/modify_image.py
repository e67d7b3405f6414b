"""
Modify Image Pipeline
Applies the selected menu action to a decoded PNG and encodes the result.
"""

import os
import logging
from pathlib import Path
from typing import Union
from dotenv import load_dotenv

from models.image import Image
from models.menu_choice import MenuChoice
from models.errors import InvalidMenuChoiceError
from services.image_service import ImageService
from services.transform_service import TransformService

# Load environment variables
load_dotenv()

OUTPUT_PATH = os.getenv("OUTPUT_IMAGE_PATH", "modified.png")

logger = logging.getLogger(__name__)


def parse_menu_choice(raw: Union[str, int]) -> MenuChoice:
    """
    Turn the user's menu entry into a MenuChoice.

    Raises:
        InvalidMenuChoiceError: for anything other than an integer 1-4.
    """
    try:
        return MenuChoice(int(str(raw).strip()))
    except ValueError as err:
        raise InvalidMenuChoiceError(f"Invalid choice: {raw!r}") from err


def apply_transform(
    img: Image,
    choice: MenuChoice,
    angle: float | None = None,
    *,
    transform_service: TransformService = TransformService(),
) -> Image:
    """
    Run the transform behind a menu entry.

    Args:
        img: Decoded RGBA image
        choice: Selected menu entry
        angle: Rotation in degrees, required for MenuChoice.ROTATE
        transform_service: Service providing the pixel transforms

    Returns:
        Image: New image with the same dimensions as `img`
    """
    choice = MenuChoice(choice)
    logger.info(f"Applying {choice.label} to {img.width}x{img.height} image")

    if choice is MenuChoice.ROTATE:
        if angle is None:
            raise ValueError("Rotation requires an angle")
        return transform_service.rotate(img, angle)
    if choice is MenuChoice.FLIP_VERTICAL:
        return transform_service.flip_vertical(img)
    if choice is MenuChoice.FLIP_HORIZONTAL:
        return transform_service.flip_horizontal(img)
    return transform_service.grayscale(img)


def modify_image(
    img: Image,
    choice: MenuChoice,
    angle: float | None = None,
    *,
    output_path: Union[str, Path] = OUTPUT_PATH,
    image_service: ImageService = ImageService(),
    transform_service: TransformService = TransformService(),
) -> Path:
    """
    transform -> encode for an image decoded by ImageService.load.

    Raises:
        ImageEncodeError: if the result cannot be written

    Returns:
        Path: Where the modified image was written
    """
    modified = apply_transform(img, choice, angle, transform_service=transform_service)
    return image_service.save(image_service.with_path(modified, output_path))

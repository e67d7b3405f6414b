class ImageDecodeError(OSError):
    """The input file is missing, unreadable or not a valid PNG."""


class ImageEncodeError(OSError):
    """The output PNG could not be written."""


class InvalidMenuChoiceError(ValueError):
    """The menu selection is not one of the offered actions."""


class InvalidImageError(ValueError):
    """Pixel array does not have the (H, W, 4) uint8 RGBA layout."""

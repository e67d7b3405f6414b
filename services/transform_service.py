from __future__ import annotations

import logging
import math

import numpy as np

from models.image import Image
from repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)


class TransformService:
    """
    Pixel-level edits on RGBA Image objects.
    *   No I/O here. Every method reads one Image and returns a new one.
    *   The input pixels are never modified and never shared with the result.
    """

    def __init__(self):
        self.image_repository = ImageRepository()

    # ─── Public API ────────────────────────────────────────────────
    def rotate(self, img: Image, angle: float) -> Image:
        """
        Rotate about the image centre by `angle` degrees.

        Each destination pixel looks up its source pixel through the
        rotation (nearest neighbour, no interpolation). Destination pixels
        whose source falls outside the image stay transparent black.

        Args:
            img (Image): RGBA image.
            angle (float): Rotation in degrees, any real value.

        Returns:
            (Image): Rotated image with the same width and height.
        """
        pixels = img.pixels
        height, width = pixels.shape[:2]
        cx, cy = width // 2, height // 2

        # single precision throughout: angle, theta, cos/sin and the products
        with np.errstate(over="ignore"):
            theta = np.float32(float(np.float32(angle)) * np.pi / 180.0)
        cos_t, sin_t = self._cos_sin(theta)

        ys, xs = np.mgrid[0:height, 0:width]
        dx = (xs - cx).astype(np.float32)
        dy = (ys - cy).astype(np.float32)

        with np.errstate(invalid="ignore"):
            # widened only for rounding, so the +0.5 cannot itself round
            src_x = self._round_half_away((dx * cos_t - dy * sin_t).astype(np.float64)) + cx
            src_y = self._round_half_away((dx * sin_t + dy * cos_t).astype(np.float64)) + cy

            # nan never compares true, so non-finite angles select nothing
            inside = (src_x >= 0) & (src_x < width) & (src_y >= 0) & (src_y < height)

        rotated = np.zeros_like(pixels)
        rotated[inside] = pixels[src_y[inside].astype(np.intp), src_x[inside].astype(np.intp)]

        logger.debug(f"Rotated {width}x{height} image by {angle} degrees "
                     f"({int(inside.sum())}/{width * height} pixels sampled)")
        return self._derive(img, rotated)

    def flip_horizontal(self, img: Image) -> Image:
        """Mirror columns: pixel (x, y) takes pixel (width-1-x, y)."""
        flipped = np.ascontiguousarray(img.pixels[:, ::-1])
        return self._derive(img, flipped)

    def flip_vertical(self, img: Image) -> Image:
        """Mirror rows: row i takes row height-1-i."""
        flipped = np.ascontiguousarray(img.pixels[::-1])
        return self._derive(img, flipped)

    def grayscale(self, img: Image) -> Image:
        """
        Unweighted channel average: R = G = B = (R + G + B) // 3.
        Alpha is left untouched.
        """
        gray_pixels = img.pixels.copy()
        # uint16 holds the 0..765 channel sum without wrapping
        channel_sum = img.pixels[..., :3].astype(np.uint16).sum(axis=2)
        gray_pixels[..., :3] = (channel_sum // 3).astype(np.uint8)[..., np.newaxis]
        return self._derive(img, gray_pixels)

    # ─── Internal helpers ──────────────────────────────────────────
    @staticmethod
    def _cos_sin(theta: np.float32) -> tuple[np.float32, np.float32]:
        """
        Single-precision cos/sin of `theta`, evaluated in double and rounded
        once to float32 (what a correctly rounded cosf/sinf returns).
        Non-finite angles give nan.
        """
        if not np.isfinite(theta):
            return np.float32(np.nan), np.float32(np.nan)
        return np.float32(math.cos(theta)), np.float32(math.sin(theta))

    @staticmethod
    def _round_half_away(values: np.ndarray) -> np.ndarray:
        """Round to nearest, ties away from zero (np.round rounds ties to even)."""
        return np.sign(values) * np.floor(np.abs(values) + 0.5)

    def _derive(self, img: Image, new_pixels: np.ndarray) -> Image:
        return self.image_repository.create_image(new_pixels, img.path)

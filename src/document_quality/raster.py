"""Decoded raster images and the Pillow-backed image decoder."""

import io
import logging
from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageOps

logger = logging.getLogger(__name__)

__all__ = ['RasterImage', 'RasterError', 'PillowImageDecoder']

RGBA_CHANNELS = 4


class RasterError(ValueError):
    """Raised when pixel data cannot be decoded into a usable raster."""


@dataclass(frozen=True, eq=False)
class RasterImage:
    """Decoded bitmap: row-major RGBA pixels of shape (height, width, 4)."""

    pixels: np.ndarray

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != RGBA_CHANNELS:
            raise RasterError(
                f"Expected (height, width, {RGBA_CHANNELS}) pixel array, got shape {self.pixels.shape}"
            )
        if self.pixels.shape[0] == 0 or self.pixels.shape[1] == 0:
            raise RasterError(f"Raster has zero dimension: {self.pixels.shape[1]}x{self.pixels.shape[0]}")
        if self.pixels.dtype != np.uint8:
            raise RasterError(f"Expected uint8 pixels, got {self.pixels.dtype}")

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @classmethod
    def from_buffer(cls, width: int, height: int, buffer: bytes) -> "RasterImage":
        """
        Build a raster from a raw RGBA byte buffer.

        Args:
            width: Width in pixels
            height: Height in pixels
            buffer: Row-major RGBA bytes, 4 per pixel

        Returns:
            RasterImage viewing a read-only copy of the buffer

        Raises:
            RasterError: If the dimensions are not positive or the buffer
                length does not match them
        """
        if width <= 0 or height <= 0:
            raise RasterError(f"Raster dimensions must be positive, got {width}x{height}")

        expected = width * height * RGBA_CHANNELS
        if len(buffer) != expected:
            raise RasterError(
                f"Buffer holds {len(buffer)} bytes, expected {expected} for {width}x{height} RGBA"
            )

        pixels = np.frombuffer(bytes(buffer), dtype=np.uint8).reshape(height, width, RGBA_CHANNELS)
        return cls(pixels)

    @classmethod
    def from_pil(cls, img: Image.Image) -> "RasterImage":
        """Build a raster from a Pillow image in any mode."""
        if img.mode != "RGBA":
            img = img.convert("RGBA")
        pixels = np.array(img, dtype=np.uint8)
        pixels.setflags(write=False)
        return cls(pixels)


class PillowImageDecoder:
    """Decodes encoded image bytes (JPEG, PNG, ...) into RGBA rasters."""

    def decode(self, data: bytes) -> RasterImage:
        """
        Decode image bytes into a raster.

        Args:
            data: Encoded image file contents

        Returns:
            RasterImage with RGBA pixels

        Raises:
            RasterError: If the bytes are not a readable image
        """
        if not data:
            raise RasterError("Image data is empty")

        try:
            img = Image.open(io.BytesIO(data))
            # verify() leaves the image unusable, so reopen afterwards
            img.verify()
            img = Image.open(io.BytesIO(data))
            img.load()
            image_format = img.format
            # Pixels as displayed, after any EXIF rotation
            img = ImageOps.exif_transpose(img)
        except Exception as e:
            raise RasterError(f"Failed to load or verify image: {e}") from e

        try:
            raster = RasterImage.from_pil(img)
        except RasterError:
            raise
        except Exception as e:
            raise RasterError(f"Failed to convert image to RGBA pixels: {e}") from e

        logger.debug(f"Decoded {image_format} image {raster.width}x{raster.height} (mode {img.mode})")
        return raster

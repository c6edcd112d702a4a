"""Pixel-level quality estimators.

Every estimator works on the luminance plane of a raster, defined as the
unweighted mean of the red, green and blue channels (alpha is ignored).
All functions are pure and deterministic.
"""

import logging
import math

import numpy as np
from scipy import signal

from document_quality.raster import RasterImage
from document_quality.standards import constants

logger = logging.getLogger(__name__)

LAPLACIAN = np.array(constants.LAPLACIAN_KERNEL, dtype=np.float64).reshape(3, 3)


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round halves up (0.5 -> 1, 2.5 -> 3) instead of to even."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def compute_luminance(raster: RasterImage) -> np.ndarray:
    """
    Compute per-pixel luminance of a raster.

    Args:
        raster: Decoded RGBA raster

    Returns:
        Luminance array (H, W), float64 in [0, 255]
    """
    rgb = raster.pixels[:, :, :3].astype(np.float64)
    return rgb.sum(axis=2) / 3.0


def compute_sharpness(luminance: np.ndarray) -> float:
    """
    Laplacian energy of the image interior.

    The 3x3 Laplacian is applied to every pixel that has a full
    neighborhood (the 1-pixel border is skipped). Squared responses are
    summed and divided by the total pixel count, border included.

    Args:
        luminance: Luminance array (H, W)

    Returns:
        Sharpness score; higher is sharper, 0.0 for images without interior
    """
    h, w = luminance.shape
    if h < 3 or w < 3:
        return 0.0

    # Symmetric kernel, so convolution equals correlation
    response = signal.convolve2d(luminance, LAPLACIAN, mode="valid")
    return float(np.sum(response * response) / (w * h))


def compute_contrast(luminance: np.ndarray) -> float:
    """Dynamic range of luminance, normalized to [0, 1]."""
    return float((luminance.max() - luminance.min()) / constants.MAX_CHANNEL_VALUE)


def compute_noise(luminance: np.ndarray) -> float:
    """
    Population standard deviation of luminance, normalized to [0, 1].

    Textured content raises this value just like sensor or compression
    noise does; the two are not separated.
    """
    return float(np.std(luminance) / constants.MAX_CHANNEL_VALUE)

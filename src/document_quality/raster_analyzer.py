"""Raster Analyzer - quality verdict for a single decoded image."""

import logging
from typing import List

from pydantic import Field
from pydantic.dataclasses import dataclass

from document_quality.metrics import (
    compute_contrast,
    compute_luminance,
    compute_noise,
    compute_sharpness,
    round_half_up,
)
from document_quality.raster import RasterError, RasterImage
from document_quality.standards import constants
from document_quality.standards.thresholds import QualityThresholds
from document_quality.standards.types import ImageMetrics, QualityVerdict

logger = logging.getLogger(__name__)

__all__ = ['RasterAnalyzer']


@dataclass
class RasterAnalyzer:
    """
    Decides whether a raster is fit for OCR / AI extraction.

    Computes resolution, sharpness, contrast, noise and file size, checks
    them in that order against the thresholds and reports one problem per
    failed check.
    """

    thresholds: QualityThresholds = Field(default_factory=QualityThresholds)

    def analyze(self, raster: RasterImage, file_size_bytes: int) -> QualityVerdict:
        """
        Analyze a decoded raster.

        Args:
            raster: Decoded RGBA raster
            file_size_bytes: Size of the file the raster was decoded from

        Returns:
            QualityVerdict with ImageMetrics and ordered problems
        """
        logger.debug(f"Analyzing raster {raster.width}x{raster.height}, {file_size_bytes} bytes")

        luminance = compute_luminance(raster)
        sharpness = compute_sharpness(luminance)
        contrast = compute_contrast(luminance)
        noise = compute_noise(luminance)
        size_kb = file_size_bytes / constants.BYTES_PER_KB
        resolution = raster.width

        logger.debug(
            f"Metrics: resolution={resolution}, sharpness={sharpness:.2f}, "
            f"contrast={contrast:.4f}, noise={noise:.4f}, size_kb={size_kb:.1f}"
        )

        t = self.thresholds
        problems: List[str] = []

        if resolution < t.min_resolution:
            problems.append(
                constants.RESOLUTION_PROBLEM.format(width=resolution, minimum=t.min_resolution)
            )
        if sharpness < t.min_sharpness:
            problems.append(constants.SHARPNESS_PROBLEM.format(sharpness=int(round_half_up(sharpness))))
        if contrast < t.min_contrast:
            problems.append(constants.CONTRAST_PROBLEM)
        if noise > t.max_noise:
            problems.append(constants.NOISE_PROBLEM)
        if size_kb < t.min_file_size_kb:
            problems.append(constants.FILE_SIZE_PROBLEM.format(size_kb=int(round_half_up(size_kb))))

        metrics = ImageMetrics(
            resolution=resolution,
            sharpness=int(round_half_up(sharpness)),
            contrast=round_half_up(contrast, 2),
            noise=round_half_up(noise, 2),
            file_size_kb=int(round_half_up(size_kb)),
        )
        verdict = QualityVerdict.from_problems(metrics, tuple(problems))

        logger.info(
            f"Raster verdict: {verdict.level.value} "
            f"({len(problems)} problem{'s' if len(problems) != 1 else ''})"
        )
        return verdict

    def analyze_buffer(
        self, width: int, height: int, buffer: bytes, file_size_bytes: int
    ) -> QualityVerdict:
        """
        Analyze a raw RGBA buffer, rejecting buffers that are not a valid raster.

        Args:
            width: Width in pixels
            height: Height in pixels
            buffer: Row-major RGBA bytes
            file_size_bytes: Size of the originating file

        Returns:
            QualityVerdict; REJECTED with no metrics if the buffer is unusable
        """
        try:
            raster = RasterImage.from_buffer(width, height, buffer)
        except RasterError as e:
            logger.warning(f"Rejecting unreadable pixel buffer: {e}")
            return QualityVerdict.rejected(constants.IMAGE_ANALYSIS_ERROR)

        return self.analyze(raster, file_size_bytes)

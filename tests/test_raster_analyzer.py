"""Tests for the RasterAnalyzer."""

import numpy as np
import pytest

from document_quality.raster import RasterImage
from document_quality.raster_analyzer import RasterAnalyzer
from document_quality.standards import constants
from document_quality.standards.thresholds import QualityThresholds
from document_quality.standards.types import ImageMetrics, QualityLevel

LARGE_FILE = 500 * 1024


def _rgba(rgb: np.ndarray) -> RasterImage:
    h, w, _ = rgb.shape
    pixels = np.empty((h, w, 4), dtype=np.uint8)
    pixels[:, :, :3] = rgb
    pixels[:, :, 3] = 255
    return RasterImage(pixels)


def noise_raster(width: int, height: int, seed: int = 0) -> RasterImage:
    """Random color noise: sharp, high contrast, moderate luminance spread."""
    rng = np.random.default_rng(seed)
    return _rgba(rng.integers(0, 256, (height, width, 3), dtype=np.uint8))


def flat_raster(width: int, height: int, color=(128, 128, 128)) -> RasterImage:
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[:, :] = color
    return _rgba(rgb)


def checker_raster(width: int, height: int, dark: int = 40, light: int = 215) -> RasterImage:
    """2x2-block checkerboard that clears every pixel metric."""
    y, x = np.indices((height, width))
    gray = np.where(((y // 2) + (x // 2)) % 2 == 0, dark, light).astype(np.uint8)
    return _rgba(np.repeat(gray[:, :, None], 3, axis=2))


def test_analyzer_default_thresholds():
    """Test that the analyzer uses the standard thresholds by default."""
    analyzer = RasterAnalyzer()
    assert analyzer.thresholds == QualityThresholds()
    assert analyzer.thresholds.min_resolution == 1000


def test_acceptable_raster():
    """Test that a raster clearing every threshold is accepted."""
    verdict = RasterAnalyzer().analyze(noise_raster(1200, 800), LARGE_FILE)

    assert verdict.is_acceptable is True
    assert verdict.level == QualityLevel.OPTIMAL
    assert verdict.problems == ()
    assert isinstance(verdict.metrics, ImageMetrics)
    assert verdict.metrics.resolution == 1200
    assert verdict.metrics.sharpness > constants.MIN_SHARPNESS
    assert verdict.metrics.contrast >= constants.MIN_CONTRAST
    assert verdict.metrics.noise <= constants.MAX_NOISE
    assert verdict.metrics.file_size_kb == 500


@pytest.mark.parametrize("width", [1, 500, 999])
def test_low_resolution_rejected(width):
    """Test that narrow rasters are rejected on resolution first."""
    verdict = RasterAnalyzer().analyze(noise_raster(width, 1200), LARGE_FILE)

    assert verdict.is_acceptable is False
    assert verdict.level == QualityLevel.REJECTED
    assert verdict.problems[0] == f"Resolution too low ({width}px). Minimum: 1000px"


def test_resolution_ignores_height():
    """Test that a wide but short raster passes the resolution check."""
    verdict = RasterAnalyzer().analyze(noise_raster(1000, 10), LARGE_FILE)

    assert verdict.is_acceptable is True
    assert verdict.metrics.resolution == 1000


@pytest.mark.parametrize("color", [(0, 0, 0), (255, 255, 255), (12, 200, 99)])
def test_flat_raster_rejected(color):
    """Test that a uniform raster is rejected whatever its color or size."""
    verdict = RasterAnalyzer().analyze(flat_raster(1600, 1200, color), LARGE_FILE)

    assert verdict.is_acceptable is False
    assert verdict.metrics.sharpness == 0
    assert verdict.metrics.contrast == 0.0
    assert verdict.problems == (
        "Image is blurry (sharpness: 0). Take the photo without moving",
        constants.CONTRAST_PROBLEM,
    )


def test_size_only_failure():
    """Test that an over-compressed file is rejected even if its pixels pass."""
    verdict = RasterAnalyzer().analyze(checker_raster(1200, 1000), 50 * 1024)

    assert verdict.is_acceptable is False
    assert verdict.problems == ("File is over-compressed (50KB)",)
    assert verdict.metrics.file_size_kb == 50


def test_file_size_boundary():
    """Test that exactly the minimum size passes."""
    analyzer = RasterAnalyzer()

    assert analyzer.analyze(checker_raster(1200, 100), 80 * 1024).is_acceptable
    assert not analyzer.analyze(checker_raster(1200, 100), 80 * 1024 - 1).is_acceptable


def test_problem_order():
    """Test that problems follow resolution, sharpness, contrast, noise, size."""
    thresholds = QualityThresholds(max_noise=0.0, optimal_noise=0.0)
    pixels = np.full((10, 10, 3), 100, dtype=np.uint8)
    pixels[0, 0] = 110  # A trace of spread so the noise check fails too

    verdict = RasterAnalyzer(thresholds=thresholds).analyze(_rgba(pixels), 1024)

    assert verdict.problems[0].startswith("Resolution too low (10px)")
    assert verdict.problems[1].startswith("Image is blurry")
    assert verdict.problems[2] == constants.CONTRAST_PROBLEM
    assert verdict.problems[3] == constants.NOISE_PROBLEM
    assert verdict.problems[4] == "File is over-compressed (1KB)"
    assert len(verdict.problems) == 5


def test_noise_check_with_custom_threshold():
    """Test the noise check against a stricter noise limit."""
    thresholds = QualityThresholds(max_noise=0.3, optimal_noise=0.2)
    verdict = RasterAnalyzer(thresholds=thresholds).analyze(checker_raster(1200, 200), LARGE_FILE)

    # 2x2 checkerboard of 40/215: noise 87.5 / 255
    assert verdict.metrics.noise == pytest.approx(0.34)
    assert verdict.problems == (constants.NOISE_PROBLEM,)


def test_custom_thresholds_do_not_leak():
    """Test that alternate thresholds affect only their own analyzer."""
    lenient = RasterAnalyzer(thresholds=QualityThresholds(min_resolution=100, optimal_resolution=100))
    strict = RasterAnalyzer()
    raster = noise_raster(300, 300)

    assert lenient.analyze(raster, LARGE_FILE).is_acceptable is True
    assert strict.analyze(raster, LARGE_FILE).is_acceptable is False


def test_metrics_rounding():
    """Test that reported metrics are rounded for display."""
    verdict = RasterAnalyzer().analyze(checker_raster(1200, 100), 100 * 1024 + 700)

    metrics = verdict.metrics
    assert isinstance(metrics.sharpness, int)
    assert isinstance(metrics.file_size_kb, int)
    assert metrics.file_size_kb == 101
    assert metrics.contrast == pytest.approx(0.69)
    assert metrics.contrast == round(metrics.contrast, 2)


def test_analysis_is_deterministic():
    """Test that analyzing the same raster twice gives identical verdicts."""
    analyzer = RasterAnalyzer()
    raster = noise_raster(1100, 300, seed=3)

    assert analyzer.analyze(raster, LARGE_FILE) == analyzer.analyze(raster, LARGE_FILE)


def test_analyze_buffer():
    """Test analyzing a raw RGBA buffer."""
    raster = noise_raster(1000, 50)
    verdict = RasterAnalyzer().analyze_buffer(1000, 50, raster.pixels.tobytes(), LARGE_FILE)

    assert verdict.is_acceptable is True


@pytest.mark.parametrize(
    "width,height,buffer",
    [(0, 0, b""), (10, 10, bytes(399)), (-5, 2, bytes(40))],
)
def test_analyze_buffer_rejects_corrupt_input(width, height, buffer):
    """Test that unusable buffers yield a verdict instead of an exception."""
    verdict = RasterAnalyzer().analyze_buffer(width, height, buffer, LARGE_FILE)

    assert verdict.is_acceptable is False
    assert verdict.level == QualityLevel.REJECTED
    assert verdict.metrics is None
    assert verdict.problems == (constants.IMAGE_ANALYSIS_ERROR,)


def test_verdict_to_dict():
    """Test the external shape of an image verdict."""
    data = RasterAnalyzer().analyze(checker_raster(1200, 100), 50 * 1024).to_dict()

    assert data["isAcceptable"] is False
    assert data["level"] == "rejected"
    assert set(data["metrics"]) == {"resolution", "sharpness", "contrast", "noise", "fileSizeKB"}
    assert data["problems"] == ["File is over-compressed (50KB)"]

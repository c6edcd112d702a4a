"""Document Quality - quality gate for scanned documents before OCR"""

__version__ = "0.1.0"

from .dispatcher import InputKind, QualityDispatcher, validate_file_quality
from .page_aggregator import MultiPageAggregator
from .raster import PillowImageDecoder, RasterError, RasterImage
from .raster_analyzer import RasterAnalyzer
from .report import LegibilityReport, validate_image_quality
from .standards import QualityLevel, QualityThresholds, QualityVerdict

__all__ = [
    "validate_file_quality",
    "validate_image_quality",
    "QualityDispatcher",
    "InputKind",
    "RasterAnalyzer",
    "MultiPageAggregator",
    "RasterImage",
    "RasterError",
    "PillowImageDecoder",
    "LegibilityReport",
    "QualityThresholds",
    "QualityLevel",
    "QualityVerdict",
]

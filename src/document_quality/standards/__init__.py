"""Quality standards package.

Holds the fixed thresholds, diagnostic messages and verdict types shared by
the analyzer, the page aggregator and the dispatcher.
"""

from .thresholds import QualityThresholds
from .types import DocumentMetrics, ImageMetrics, PageVerdict, QualityLevel, QualityVerdict

__all__ = [
    'QualityThresholds',
    'QualityLevel',
    'QualityVerdict',
    'PageVerdict',
    'ImageMetrics',
    'DocumentMetrics',
]

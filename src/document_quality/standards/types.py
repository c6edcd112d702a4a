"""Shared types for document quality verdicts."""

from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union


class QualityLevel(str, Enum):
    """Verdict level reported to the host application."""

    OPTIMAL = "optimal"
    REJECTED = "rejected"


class ImageMetrics(NamedTuple):
    """Rounded metrics of a single analyzed raster."""

    resolution: int  # Width in pixels
    sharpness: int
    contrast: float  # 0.0-1.0, 2 decimals
    noise: float  # 0.0-1.0, 2 decimals
    file_size_kb: int

    def to_dict(self) -> dict:
        return {
            "resolution": self.resolution,
            "sharpness": self.sharpness,
            "contrast": self.contrast,
            "noise": self.noise,
            "fileSizeKB": self.file_size_kb,
        }


class DocumentMetrics(NamedTuple):
    """Page counts of an analyzed multi-page document."""

    total_pages: int
    valid_pages: int

    def to_dict(self) -> dict:
        return {"totalPages": self.total_pages, "validPages": self.valid_pages}


class QualityVerdict(NamedTuple):
    """Accept/reject result for one file or page."""

    is_acceptable: bool
    level: QualityLevel
    metrics: Optional[Union[ImageMetrics, DocumentMetrics]]
    problems: Tuple[str, ...]  # Ordered, empty when acceptable

    @classmethod
    def from_problems(
        cls,
        metrics: Union[ImageMetrics, DocumentMetrics],
        problems: Tuple[str, ...],
        is_acceptable: Optional[bool] = None,
    ) -> "QualityVerdict":
        """
        Build a verdict whose level follows its acceptability.

        Args:
            metrics: Metrics of the successful analysis
            problems: Ordered diagnostic messages
            is_acceptable: Explicit acceptability; defaults to "no problems"

        Returns:
            QualityVerdict with level OPTIMAL iff acceptable
        """
        if is_acceptable is None:
            is_acceptable = not problems
        level = QualityLevel.OPTIMAL if is_acceptable else QualityLevel.REJECTED
        return cls(is_acceptable, level, metrics, tuple(problems))

    @classmethod
    def rejected(cls, problem: str) -> "QualityVerdict":
        """Verdict for an input that could not be analyzed at all."""
        return cls(False, QualityLevel.REJECTED, None, (problem,))

    def to_dict(self) -> dict:
        """Render the verdict in the shape consumed by the intake form."""
        return {
            "isAcceptable": self.is_acceptable,
            "level": self.level.value,
            "metrics": self.metrics.to_dict() if self.metrics is not None else None,
            "problems": list(self.problems),
        }


class PageVerdict(NamedTuple):
    """Verdict of a single page, tagged with its 1-based page number."""

    page_number: int
    verdict: QualityVerdict

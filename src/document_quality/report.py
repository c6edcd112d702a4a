"""Legibility summary consumed by the intake form."""

from typing import NamedTuple, Optional

from document_quality.dispatcher import validate_file_quality
from document_quality.standards import constants
from document_quality.standards.types import QualityVerdict

LEGIBLE_QUALITY = 100
ILLEGIBLE_QUALITY = 30


class LegibilityReport(NamedTuple):
    """Condensed verdict: legible flag, coarse score and one message."""

    is_legible: bool
    quality: int
    message: str

    @classmethod
    def from_verdict(cls, verdict: QualityVerdict) -> "LegibilityReport":
        return cls(
            is_legible=verdict.is_acceptable,
            quality=LEGIBLE_QUALITY if verdict.is_acceptable else ILLEGIBLE_QUALITY,
            message=verdict.problems[0] if verdict.problems else constants.ACCEPTABLE_QUALITY,
        )

    def to_dict(self) -> dict:
        return {"isLegible": self.is_legible, "quality": self.quality, "message": self.message}


def validate_image_quality(
    data: bytes, content_type: Optional[str], file_size: Optional[int] = None
) -> LegibilityReport:
    """Validate one uploaded file and summarize the verdict for display."""
    return LegibilityReport.from_verdict(validate_file_quality(data, content_type, file_size))

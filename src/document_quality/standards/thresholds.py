"""Immutable quality thresholds."""

from pydantic import Field, model_validator
from pydantic.dataclasses import dataclass

from document_quality.standards import constants


@dataclass(frozen=True)
class QualityThresholds:
    """Minimum and optimal values every analyzed raster is measured against.

    Only the minimum (or, for noise, maximum) values reject an image. The
    optimal values are carried for consumers that want to grade accepted
    images further.
    """

    min_resolution: int = Field(default=constants.MIN_RESOLUTION, ge=1)
    optimal_resolution: int = Field(default=constants.OPTIMAL_RESOLUTION, ge=1)
    min_sharpness: float = Field(default=constants.MIN_SHARPNESS, ge=0.0)
    optimal_sharpness: float = Field(default=constants.OPTIMAL_SHARPNESS, ge=0.0)
    min_contrast: float = Field(default=constants.MIN_CONTRAST, ge=0.0, le=1.0)
    optimal_contrast: float = Field(default=constants.OPTIMAL_CONTRAST, ge=0.0, le=1.0)
    max_noise: float = Field(default=constants.MAX_NOISE, ge=0.0, le=1.0)
    optimal_noise: float = Field(default=constants.OPTIMAL_NOISE, ge=0.0, le=1.0)
    min_file_size_kb: float = Field(default=constants.MIN_FILE_SIZE_KB, ge=0.0)
    optimal_file_size_kb: float = Field(default=constants.OPTIMAL_FILE_SIZE_KB, ge=0.0)

    @model_validator(mode="after")
    def validate_optimal_values(self) -> "QualityThresholds":
        """Optimal values must be at least as strict as the rejection limits."""
        if self.optimal_resolution < self.min_resolution:
            raise ValueError("optimal_resolution must not be below min_resolution")
        if self.optimal_sharpness < self.min_sharpness:
            raise ValueError("optimal_sharpness must not be below min_sharpness")
        if self.optimal_contrast < self.min_contrast:
            raise ValueError("optimal_contrast must not be below min_contrast")
        if self.optimal_noise > self.max_noise:
            raise ValueError("optimal_noise must not exceed max_noise")
        if self.optimal_file_size_kb < self.min_file_size_kb:
            raise ValueError("optimal_file_size_kb must not be below min_file_size_kb")
        return self

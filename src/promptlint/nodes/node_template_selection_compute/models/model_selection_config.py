# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Template selection configuration.

Domain confidence decides the selection tier:
    >= high_confidence_threshold      -> high (scored, top high_tier_count)
    >= moderate_confidence_threshold  -> moderate (scored, top moderate_tier_count)
    otherwise                         -> low_confidence_fallback (rule table)
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ModelSelectionConfig(BaseModel):
    """Frozen thresholds for tiered, diversity-filtered template selection.

    Attributes:
        high_confidence_threshold: Domain confidence for the high tier.
        moderate_confidence_threshold: Domain confidence for the moderate tier.
        high_tier_count: Templates returned by the high tier.
        moderate_tier_count: Templates returned by the moderate tier.
        similarity_threshold: Pairs at or above this similarity are
            considered near-duplicates by the diversity filter.
        enable_diversity: Apply the diversity filter to scored tiers.
        max_templates: Upper bound on any selection.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    high_confidence_threshold: float = Field(
        default=90.0,
        ge=0.0,
        le=100.0,
        description="Domain confidence for the high tier",
    )
    moderate_confidence_threshold: float = Field(
        default=70.0,
        ge=0.0,
        le=100.0,
        description="Domain confidence for the moderate tier",
    )
    high_tier_count: int = Field(default=2, ge=1, le=3)
    moderate_tier_count: int = Field(default=3, ge=1, le=3)
    similarity_threshold: float = Field(
        default=0.8,
        gt=0.0,
        le=1.0,
        description="Similarity at which two template types count as duplicates",
    )
    enable_diversity: bool = Field(default=True)
    max_templates: int = Field(default=3, ge=1, le=3)

    @model_validator(mode="after")
    def _check_tier_order(self) -> ModelSelectionConfig:
        if self.moderate_confidence_threshold > self.high_confidence_threshold:
            raise ValueError(
                "moderate_confidence_threshold must not exceed high_confidence_threshold"
            )
        return self


DEFAULT_SELECTION_CONFIG: Final[ModelSelectionConfig] = ModelSelectionConfig()


__all__ = ["DEFAULT_SELECTION_CONFIG", "ModelSelectionConfig"]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Template scoring and selection models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from promptlint.enums import EnumSelectionStrategy, EnumTemplateType


class ModelTemplateScoreFactors(BaseModel):
    """Five independently clamped factors and their weighted composite.

    Weights: domain 0.25, intent 0.25, complexity 0.20, completeness 0.15,
    context 0.15.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    domain_alignment: int = Field(..., ge=0, le=100)
    intent_match: int = Field(..., ge=0, le=100)
    complexity_appropriate: int = Field(..., ge=0, le=100)
    completeness_support: int = Field(..., ge=0, le=100)
    contextual_relevance: int = Field(..., ge=0, le=100)
    overall_score: int = Field(..., ge=0, le=100)


class ModelTemplateScore(BaseModel):
    """Score of one template type for one prompt.

    Produced fresh for every scoring pass. `reasoning` records which
    thresholds fired and is not used in any further computation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    template_type: EnumTemplateType = Field(..., description="Scored template")
    factors: ModelTemplateScoreFactors = Field(..., description="Factor breakdown")
    reasoning: tuple[str, ...] = Field(
        default=(),
        description="Human-readable trace of fired thresholds",
    )
    confidence: int = Field(
        ...,
        ge=20,
        le=100,
        description="Selection confidence derived from the overall score",
    )


class ModelTemplateSelection(BaseModel):
    """Outcome of one selection pass.

    Attributes:
        strategy: Confidence tier that produced the selection.
        template_types: Selected types, best first, 1-3 entries, no duplicates.
        scores: Per-template scores (empty for the rule-table tier).
        processing_time_ms: Selection time in milliseconds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    strategy: EnumSelectionStrategy = Field(..., description="Tier used")
    template_types: tuple[EnumTemplateType, ...] = Field(
        ...,
        min_length=1,
        max_length=3,
        description="Selected template types, best first",
    )
    scores: tuple[ModelTemplateScore, ...] = Field(
        default=(),
        description="Scores computed for the scored tiers",
    )
    processing_time_ms: float = Field(default=0.0, ge=0.0)

    @field_validator("template_types")
    @classmethod
    def _check_unique(
        cls, value: tuple[EnumTemplateType, ...]
    ) -> tuple[EnumTemplateType, ...]:
        if len(set(value)) != len(value):
            raise ValueError("template_types must not contain duplicates")
        return value

    def score_for(self, template_type: EnumTemplateType) -> ModelTemplateScore | None:
        """Return the score computed for a template type, if any."""
        for score in self.scores:
            if score.template_type == template_type:
                return score
        return None


__all__ = [
    "ModelTemplateScore",
    "ModelTemplateScoreFactors",
    "ModelTemplateSelection",
]

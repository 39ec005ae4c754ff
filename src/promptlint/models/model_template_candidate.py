# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Template candidate model returned by the template engine."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from promptlint.enums import EnumSelectionStrategy, EnumTemplateType
from promptlint.models.model_faithfulness import ModelFaithfulnessResult
from promptlint.models.model_template_score import ModelTemplateScore
from promptlint.models.model_timed_result import ModelPerformanceMetrics


def generate_candidate_id() -> str:
    """Return a unique candidate identifier."""
    return f"candidate_{uuid4().hex[:16]}"


class ModelCandidateMetadata(BaseModel):
    """Audit data attached to a candidate."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    selection_strategy: EnumSelectionStrategy | None = Field(default=None)
    template_score: ModelTemplateScore | None = Field(default=None)
    quality_score: float | None = Field(default=None, ge=0.0, le=100.0)
    faithfulness: ModelFaithfulnessResult | None = Field(default=None)
    performance: ModelPerformanceMetrics | None = Field(default=None)
    warnings: tuple[str, ...] = Field(default=())
    is_fallback: bool = Field(default=False)


class ModelTemplateCandidate(BaseModel):
    """One generated, scored and validated restructuring of a prompt.

    A candidate is never marked `faithfulness_validated` while its stored
    faithfulness result holds a critical violation; the model refuses to
    be constructed in that state.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    id: str = Field(default_factory=generate_candidate_id)
    template_type: EnumTemplateType = Field(..., description="Template used")
    content: str = Field(..., description="Rendered prompt")
    score: float = Field(..., ge=0.0, le=100.0, description="Ranking score")
    faithfulness_validated: bool = Field(..., description="Passed validation")
    generation_time_ms: float = Field(default=0.0, ge=0.0)
    metadata: ModelCandidateMetadata = Field(default_factory=ModelCandidateMetadata)

    @model_validator(mode="after")
    def _check_critical_violations(self) -> ModelTemplateCandidate:
        faithfulness = self.metadata.faithfulness
        if (
            self.faithfulness_validated
            and faithfulness is not None
            and faithfulness.has_critical_violation
        ):
            raise ValueError(
                "candidate with a critical faithfulness violation cannot be validated"
            )
        return self


__all__ = [
    "ModelCandidateMetadata",
    "ModelTemplateCandidate",
    "generate_candidate_id",
]

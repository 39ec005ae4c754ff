# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Prompt semantics models produced by the semantic analyzer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from promptlint.enums import (
    EnumCompletenessLevel,
    EnumComplexityLevel,
    EnumIntentType,
    EnumSpecificityLevel,
)


class ModelContextMarkers(BaseModel):
    """Eight independent context flags detected in a prompt.

    Each flag is set when any keyword of its category appears in the
    lower-cased prompt. Flags do not influence each other.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    temporal: bool = Field(default=False, description="Time or scheduling words")
    conditional: bool = Field(default=False, description="If/unless/assuming logic")
    comparative: bool = Field(default=False, description="Comparison words")
    sequential: bool = Field(default=False, description="Ordering or step words")
    organizational: bool = Field(
        default=False, description="Structure, plan or hierarchy words"
    )
    technical: bool = Field(
        default=False, description="Implementation or system vocabulary"
    )
    creative: bool = Field(default=False, description="Design or style vocabulary")
    analytical: bool = Field(
        default=False, description="Analysis or evaluation vocabulary"
    )

    def active_markers(self) -> list[str]:
        """Return the names of all set markers in declaration order."""
        return [name for name, value in self.model_dump().items() if value]


class ModelPromptSemantics(BaseModel):
    """Immutable result of one semantic analysis call.

    Attributes:
        intent_type: Single primary intent (first matching pattern wins).
        complexity: Complexity tier.
        completeness: Completeness tier.
        specificity: Specificity tier.
        context: Context marker flags.
        confidence: Overall analysis confidence (20-100).
        indicators: Trace of the rules that fired.
        processing_time_ms: Wall-clock analysis time, rounded to 2 decimals.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    intent_type: EnumIntentType = Field(
        default=EnumIntentType.GENERATIVE,
        description="Primary intent of the prompt",
    )
    complexity: EnumComplexityLevel = Field(
        default=EnumComplexityLevel.SIMPLE,
        description="Complexity tier",
    )
    completeness: EnumCompletenessLevel = Field(
        default=EnumCompletenessLevel.MINIMAL,
        description="Completeness tier",
    )
    specificity: EnumSpecificityLevel = Field(
        default=EnumSpecificityLevel.VAGUE,
        description="Specificity tier",
    )
    context: ModelContextMarkers = Field(
        default_factory=ModelContextMarkers,
        description="Context marker flags",
    )
    confidence: int = Field(
        default=20,
        ge=0,
        le=100,
        description="Overall confidence of the analysis",
    )
    indicators: tuple[str, ...] = Field(
        default=(),
        description="Human-readable trace of fired rules",
    )
    processing_time_ms: float = Field(
        default=0.0,
        ge=0.0,
        description="Analysis time in milliseconds",
    )


__all__ = ["ModelContextMarkers", "ModelPromptSemantics"]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Faithfulness validation result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from promptlint.enums import EnumViolationSeverity, EnumViolationType


class ModelFaithfulnessViolation(BaseModel):
    """One piece of content a rendering introduced."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    type: EnumViolationType = Field(..., description="Violation category")
    description: str = Field(..., description="What was introduced")
    severity: EnumViolationSeverity = Field(..., description="Violation severity")


class ModelFaithfulnessResult(BaseModel):
    """Result of validating one (original, generated) pair.

    Attributes:
        is_valid: False when any violation is critical.
        score: 100 minus severity penalties, floored at 0.
        violations: All detected violations.
        report: Multi-line human-readable report.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    is_valid: bool = Field(..., description="Whether the rendering is faithful")
    score: int = Field(..., ge=0, le=100, description="Faithfulness score")
    violations: tuple[ModelFaithfulnessViolation, ...] = Field(default=())
    report: str = Field(default="", description="Human-readable report")

    @property
    def has_critical_violation(self) -> bool:
        """True if any stored violation is critical."""
        return any(
            v.severity == EnumViolationSeverity.CRITICAL for v in self.violations
        )


__all__ = ["ModelFaithfulnessResult", "ModelFaithfulnessViolation"]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Faithfulness validation configuration."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from promptlint.enums import SEVERITY_PENALTY, EnumViolationSeverity


class ModelFaithfulnessConfig(BaseModel):
    """Frozen scope ratios and per-severity score penalties.

    Attributes:
        max_expansion_ratio: Generated/original word ratio above which the
            rendering counts as a high-severity scope expansion.
        min_contraction_ratio: Ratio below which the rendering counts as a
            medium-severity scope reduction.
        critical_penalty: Points deducted per critical violation.
        high_penalty: Points deducted per high violation.
        medium_penalty: Points deducted per medium violation.
        low_penalty: Points deducted per low violation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    max_expansion_ratio: float = Field(default=2.0, gt=1.0)
    min_contraction_ratio: float = Field(default=0.5, gt=0.0, lt=1.0)
    critical_penalty: int = Field(
        default=SEVERITY_PENALTY[EnumViolationSeverity.CRITICAL], ge=0, le=100
    )
    high_penalty: int = Field(
        default=SEVERITY_PENALTY[EnumViolationSeverity.HIGH], ge=0, le=100
    )
    medium_penalty: int = Field(
        default=SEVERITY_PENALTY[EnumViolationSeverity.MEDIUM], ge=0, le=100
    )
    low_penalty: int = Field(
        default=SEVERITY_PENALTY[EnumViolationSeverity.LOW], ge=0, le=100
    )

    @model_validator(mode="after")
    def _check_penalty_order(self) -> ModelFaithfulnessConfig:
        if not (
            self.critical_penalty
            >= self.high_penalty
            >= self.medium_penalty
            >= self.low_penalty
        ):
            raise ValueError("penalties must not increase as severity decreases")
        return self

    def penalty_for(self, severity: EnumViolationSeverity) -> int:
        """Return the score penalty for one violation of `severity`."""
        if severity == EnumViolationSeverity.CRITICAL:
            return self.critical_penalty
        if severity == EnumViolationSeverity.HIGH:
            return self.high_penalty
        if severity == EnumViolationSeverity.MEDIUM:
            return self.medium_penalty
        return self.low_penalty


DEFAULT_FAITHFULNESS_CONFIG: Final[ModelFaithfulnessConfig] = ModelFaithfulnessConfig()


__all__ = ["DEFAULT_FAITHFULNESS_CONFIG", "ModelFaithfulnessConfig"]

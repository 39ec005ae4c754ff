# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Candidate generation configuration."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from promptlint.models import ModelTimerConfig
from promptlint.nodes.node_faithfulness_validation_compute.models import (
    ModelFaithfulnessConfig,
)
from promptlint.nodes.node_template_selection_compute.models import (
    ModelSelectionConfig,
)


class ModelGenerationConfig(BaseModel):
    """Frozen configuration for one generate_candidates() call.

    Attributes:
        max_candidates: Upper bound on returned candidates (1-3).
        enable_diversity: Apply the diversity filter during selection.
        faithfulness_threshold: Minimum faithfulness score (0-100) a valid
            rendering needs to count as passed. 0 means any rendering
            without a critical violation passes.
        total_budget_ms: Whole-call budget; overruns are logged.
        domain_timeout_ms: Deadline for the domain service call.
        render_timer: Warning threshold and deadline for each render.
        selection: Template selection thresholds.
        faithfulness: Faithfulness ratios and penalties.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    max_candidates: int = Field(default=3, ge=1, le=3)
    enable_diversity: bool = Field(default=True)
    faithfulness_threshold: float = Field(default=0.0, ge=0.0, le=100.0)
    total_budget_ms: float = Field(
        default=100.0,
        gt=0.0,
        description="Whole-call budget in milliseconds",
    )
    domain_timeout_ms: float = Field(
        default=50.0,
        gt=0.0,
        description="Domain service deadline in milliseconds",
    )
    render_timer: ModelTimerConfig = Field(default_factory=ModelTimerConfig)
    selection: ModelSelectionConfig = Field(default_factory=ModelSelectionConfig)
    faithfulness: ModelFaithfulnessConfig = Field(
        default_factory=ModelFaithfulnessConfig
    )

    def with_overrides(
        self,
        *,
        max_candidates: int | None = None,
        enable_diversity: bool | None = None,
        faithfulness_threshold: float | None = None,
    ) -> ModelGenerationConfig:
        """Return a validated copy with the given per-call overrides applied."""
        updates = {
            key: value
            for key, value in (
                ("max_candidates", max_candidates),
                ("enable_diversity", enable_diversity),
                ("faithfulness_threshold", faithfulness_threshold),
            )
            if value is not None
        }
        if not updates:
            return self
        return ModelGenerationConfig(**{**dict(self), **updates})

    def selection_config(self) -> ModelSelectionConfig:
        """Selection config with this config's diversity toggle applied."""
        if self.selection.enable_diversity == self.enable_diversity:
            return self.selection
        return ModelSelectionConfig(
            **{**dict(self.selection), "enable_diversity": self.enable_diversity}
        )


DEFAULT_GENERATION_CONFIG: Final[ModelGenerationConfig] = ModelGenerationConfig()


__all__ = ["DEFAULT_GENERATION_CONFIG", "ModelGenerationConfig"]

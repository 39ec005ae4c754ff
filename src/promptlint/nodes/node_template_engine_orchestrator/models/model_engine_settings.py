# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Environment-driven settings for the template engine."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from promptlint.models import ModelTimerConfig
from promptlint.nodes.node_template_engine_orchestrator.models.model_generation_config import (
    ModelGenerationConfig,
)
from promptlint.nodes.node_template_selection_compute.models import (
    ModelSelectionConfig,
)


class TemplateEngineSettings(BaseSettings):
    """Pydantic Settings for the template engine, loaded from environment.

    Environment variables:
        PROMPTLINT_MAX_CANDIDATES: int (default 3)
        PROMPTLINT_ENABLE_DIVERSITY: bool (default true)
        PROMPTLINT_FAITHFULNESS_THRESHOLD: float (default 0.0)
        PROMPTLINT_TOTAL_BUDGET_MS: float (default 100.0)
        PROMPTLINT_DOMAIN_TIMEOUT_MS: float (default 50.0)
        PROMPTLINT_RENDER_WARNING_THRESHOLD_MS: float (default 80.0)
        PROMPTLINT_RENDER_MAX_EXECUTION_TIME_MS: float (default 100.0)
        PROMPTLINT_HIGH_CONFIDENCE_THRESHOLD: float (default 90.0)
        PROMPTLINT_MODERATE_CONFIDENCE_THRESHOLD: float (default 70.0)
        PROMPTLINT_SIMILARITY_THRESHOLD: float (default 0.8)
    """

    model_config = SettingsConfigDict(
        env_prefix="PROMPTLINT_",
        extra="ignore",
    )

    max_candidates: int = Field(default=3, ge=1, le=3)
    enable_diversity: bool = Field(default=True)
    faithfulness_threshold: float = Field(default=0.0, ge=0.0, le=100.0)
    total_budget_ms: float = Field(default=100.0, gt=0.0)
    domain_timeout_ms: float = Field(default=50.0, gt=0.0)
    render_warning_threshold_ms: float = Field(default=80.0, gt=0.0)
    render_max_execution_time_ms: float = Field(default=100.0, gt=0.0)
    high_confidence_threshold: float = Field(default=90.0, ge=0.0, le=100.0)
    moderate_confidence_threshold: float = Field(default=70.0, ge=0.0, le=100.0)
    similarity_threshold: float = Field(default=0.8, gt=0.0, le=1.0)

    def to_generation_config(self) -> ModelGenerationConfig:
        """Convert settings to a frozen ModelGenerationConfig instance."""
        return ModelGenerationConfig(
            max_candidates=self.max_candidates,
            enable_diversity=self.enable_diversity,
            faithfulness_threshold=self.faithfulness_threshold,
            total_budget_ms=self.total_budget_ms,
            domain_timeout_ms=self.domain_timeout_ms,
            render_timer=ModelTimerConfig(
                warning_threshold_ms=self.render_warning_threshold_ms,
                max_execution_time_ms=self.render_max_execution_time_ms,
            ),
            selection=ModelSelectionConfig(
                high_confidence_threshold=self.high_confidence_threshold,
                moderate_confidence_threshold=self.moderate_confidence_threshold,
                similarity_threshold=self.similarity_threshold,
                enable_diversity=self.enable_diversity,
            ),
        )


__all__ = ["TemplateEngineSettings"]

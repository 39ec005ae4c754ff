# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Template engine health report model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelEngineHealth(BaseModel):
    """Result of validate_engine_health().

    Attributes:
        is_healthy: True when no issues were found.
        issues: One line per problem found.
        template_count: Number of usable renderers.
        performance_budget_ms: Whole-call budget the engine runs under.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    is_healthy: bool
    issues: tuple[str, ...] = Field(default=())
    template_count: int = Field(..., ge=0)
    performance_budget_ms: float = Field(..., gt=0.0)


__all__ = ["ModelEngineHealth"]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Performance timer models."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class ModelTimerConfig(BaseModel):
    """Frozen thresholds for the performance timer.

    Attributes:
        warning_threshold_ms: Execution time that appends a warning.
        max_execution_time_ms: Execution time that marks the timeout as
            exceeded. Async operations are cancelled at this deadline.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    warning_threshold_ms: float = Field(
        default=80.0,
        gt=0.0,
        description="Warning threshold in milliseconds",
    )
    max_execution_time_ms: float = Field(
        default=100.0,
        gt=0.0,
        description="Hard limit in milliseconds",
    )

    @model_validator(mode="after")
    def _check_threshold_order(self) -> ModelTimerConfig:
        if self.warning_threshold_ms > self.max_execution_time_ms:
            raise ValueError(
                "warning_threshold_ms must not exceed max_execution_time_ms"
            )
        return self


class ModelTimedResult(BaseModel, Generic[T]):
    """Result of a measured operation.

    `result` is None only when an async operation was cancelled at its
    deadline and no fallback was supplied.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    result: T | None = Field(default=None, description="Operation result")
    execution_time_ms: float = Field(..., ge=0.0)
    timeout_exceeded: bool = Field(default=False)
    fallback_used: bool = Field(default=False)
    warnings: tuple[str, ...] = Field(default=())


class ModelPerformanceMetrics(BaseModel):
    """Budget assessment for a single execution time."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    execution_time_ms: float = Field(..., ge=0.0)
    max_allowed_time_ms: float = Field(..., gt=0.0)
    warning_threshold_ms: float = Field(..., gt=0.0)
    is_acceptable: bool
    is_warning: bool
    performance_ratio: float = Field(
        ...,
        ge=0.0,
        description="execution_time_ms / max_allowed_time_ms",
    )


__all__ = ["ModelPerformanceMetrics", "ModelTimedResult", "ModelTimerConfig"]

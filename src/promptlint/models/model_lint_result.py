# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Lint result models consumed from the lint service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from promptlint.enums import EnumLintIssueType, EnumLintSeverity


class ModelLintIssue(BaseModel):
    """A single structural defect detected in a prompt."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    type: EnumLintIssueType = Field(..., description="Issue category")
    severity: EnumLintSeverity = Field(
        default=EnumLintSeverity.MEDIUM,
        description="Issue severity",
    )
    message: str = Field(default="", description="Human-readable description")


class ModelLintResult(BaseModel):
    """Composite lint analysis of a prompt.

    Attributes:
        score: Composite quality score (0-100).
        issues: Detected issues, in detection order.
        suggestions: Optional improvement hints.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    score: float = Field(
        default=100.0,
        ge=0.0,
        le=100.0,
        description="Composite quality score",
    )
    issues: tuple[ModelLintIssue, ...] = Field(
        default=(),
        description="Detected lint issues",
    )
    suggestions: tuple[str, ...] = Field(
        default=(),
        description="Improvement hints",
    )

    def has_issue(self, issue_type: EnumLintIssueType) -> bool:
        """Return True if any issue of the given type was reported."""
        return any(issue.type == issue_type for issue in self.issues)

    @property
    def issue_types(self) -> frozenset[EnumLintIssueType]:
        """Distinct issue types present in this result."""
        return frozenset(issue.type for issue in self.issues)


__all__ = ["ModelLintIssue", "ModelLintResult"]

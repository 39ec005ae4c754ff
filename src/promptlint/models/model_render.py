# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Renderer input and output models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from promptlint.models.model_domain_classification import ModelDomainClassification
from promptlint.models.model_lint_result import ModelLintResult
from promptlint.models.model_prompt_semantics import ModelPromptSemantics


class ModelRenderContext(BaseModel):
    """Everything a renderer may look at when restructuring a prompt."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    prompt: str = Field(..., description="Original, untouched prompt text")
    lint_result: ModelLintResult = Field(
        default_factory=ModelLintResult,
        description="Lint analysis of the prompt",
    )
    semantics: ModelPromptSemantics | None = Field(default=None)
    domain: ModelDomainClassification | None = Field(default=None)


class ModelRenderedTemplate(BaseModel):
    """Renderer output.

    Attributes:
        content: Restructured prompt text.
        quality_score: Renderer-reported quality on a 0-100 scale, if known.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    content: str = Field(..., description="Rendered content")
    quality_score: float | None = Field(default=None, ge=0.0, le=100.0)


class ModelTemplateMetadata(BaseModel):
    """Static description of a template type."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    name: str
    description: str
    priority: int = Field(..., ge=0, le=100)


__all__ = ["ModelRenderContext", "ModelRenderedTemplate", "ModelTemplateMetadata"]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Pytest configuration and fixtures for promptlint tests.

Shared fixtures for lint results, domain classifications, semantics and
collaborator fakes used across the node test suites.
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from promptlint.enums import EnumLintIssueType, EnumTemplateType
from promptlint.models import (
    ModelDomainClassification,
    ModelLintIssue,
    ModelLintResult,
    ModelRenderContext,
    ModelRenderedTemplate,
)

# =========================================================================
# Lint Fixtures
# =========================================================================


def make_lint_result(
    *issue_types: EnumLintIssueType, score: float = 100.0
) -> ModelLintResult:
    """Build a lint result with one issue per type given."""
    return ModelLintResult(
        score=score,
        issues=tuple(ModelLintIssue(type=t, message=t.value) for t in issue_types),
    )


@pytest.fixture
def empty_lint_result() -> ModelLintResult:
    """Lint result with no issues and a perfect score."""
    return ModelLintResult()


@pytest.fixture
def lint_result_factory() -> Callable[..., ModelLintResult]:
    """Factory building lint results from issue types."""
    return make_lint_result


@pytest.fixture
def vague_lint_result() -> ModelLintResult:
    """Lint result for a vague, under-specified prompt."""
    return make_lint_result(
        EnumLintIssueType.VAGUE_WORDING,
        EnumLintIssueType.UNCLEAR_SCOPE,
        EnumLintIssueType.MISSING_LANGUAGE,
        score=40.0,
    )


# =========================================================================
# Domain Fixtures
# =========================================================================


def make_domain(domain: str = "code", confidence: float = 95.0) -> ModelDomainClassification:
    return ModelDomainClassification(domain=domain, confidence=confidence)


@pytest.fixture
def domain_factory() -> Callable[..., ModelDomainClassification]:
    """Factory building domain classifications."""
    return make_domain


@pytest.fixture
def domain_service_factory() -> Callable[[ModelDomainClassification], AsyncMock]:
    """Factory building a domain service fake returning a fixed classification."""

    def _factory(result: ModelDomainClassification) -> AsyncMock:
        service = AsyncMock()
        service.classify = AsyncMock(return_value=result)
        return service

    return _factory


# =========================================================================
# Renderer Fakes
# =========================================================================


class StaticRenderer:
    """Renderer returning fixed content for one template type."""

    def __init__(
        self,
        template_type: EnumTemplateType,
        content: str,
        quality_score: float | None = 80.0,
        suitable: bool = True,
    ) -> None:
        self._template_type = template_type
        self._content = content
        self._quality_score = quality_score
        self._suitable = suitable
        self.render_calls = 0

    @property
    def template_type(self) -> EnumTemplateType:
        return self._template_type

    def is_suitable(self, context: ModelRenderContext) -> bool:
        return self._suitable

    def render(self, context: ModelRenderContext) -> ModelRenderedTemplate:
        self.render_calls += 1
        return ModelRenderedTemplate(
            content=self._content, quality_score=self._quality_score
        )


class FailingRenderer(StaticRenderer):
    """Renderer whose render() always raises."""

    def render(self, context: ModelRenderContext) -> ModelRenderedTemplate:
        self.render_calls += 1
        raise RuntimeError(f"{self.template_type.value} renderer exploded")


@pytest.fixture
def static_renderer_factory() -> Callable[..., StaticRenderer]:
    return StaticRenderer


@pytest.fixture
def failing_renderer_factory() -> Callable[..., FailingRenderer]:
    return FailingRenderer

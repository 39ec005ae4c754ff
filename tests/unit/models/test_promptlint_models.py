# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for shared promptlint models.

Validates:
    - Candidates refuse to be validated with a critical violation
    - Frozen, extra-forbidding model configuration
    - Helper methods on lint results, markers and selections
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from promptlint.enums import (
    EnumLintIssueType,
    EnumSelectionStrategy,
    EnumTemplateType,
    EnumViolationSeverity,
    EnumViolationType,
)
from promptlint.models import (
    ModelCandidateMetadata,
    ModelContextMarkers,
    ModelDomainClassification,
    ModelFaithfulnessResult,
    ModelFaithfulnessViolation,
    ModelLintIssue,
    ModelLintResult,
    ModelTemplateCandidate,
    ModelTemplateSelection,
    create_default_domain_classification,
)


def _faithfulness(severity: EnumViolationSeverity) -> ModelFaithfulnessResult:
    return ModelFaithfulnessResult(
        is_valid=severity != EnumViolationSeverity.CRITICAL,
        score=50,
        violations=(
            ModelFaithfulnessViolation(
                type=EnumViolationType.TECHNICAL_ADDITION,
                description="Added programming language 'python' not in original",
                severity=severity,
            ),
        ),
    )


@pytest.mark.unit
class TestTemplateCandidate:
    """Candidate invariants."""

    def test_critical_violation_cannot_be_validated(self) -> None:
        with pytest.raises(ValidationError, match="critical faithfulness violation"):
            ModelTemplateCandidate(
                template_type=EnumTemplateType.TASK_IO,
                content="Write it in Python",
                score=90.0,
                faithfulness_validated=True,
                metadata=ModelCandidateMetadata(
                    faithfulness=_faithfulness(EnumViolationSeverity.CRITICAL)
                ),
            )

    def test_critical_violation_allowed_when_not_validated(self) -> None:
        candidate = ModelTemplateCandidate(
            template_type=EnumTemplateType.TASK_IO,
            content="Write it in Python",
            score=66.0,
            faithfulness_validated=False,
            metadata=ModelCandidateMetadata(
                faithfulness=_faithfulness(EnumViolationSeverity.CRITICAL)
            ),
        )
        assert candidate.faithfulness_validated is False

    def test_high_violation_may_be_validated(self) -> None:
        candidate = ModelTemplateCandidate(
            template_type=EnumTemplateType.BULLET,
            content="x",
            score=80.0,
            faithfulness_validated=True,
            metadata=ModelCandidateMetadata(
                faithfulness=_faithfulness(EnumViolationSeverity.HIGH)
            ),
        )
        assert candidate.metadata.faithfulness.has_critical_violation is False

    def test_ids_are_unique(self) -> None:
        first, second = (
            ModelTemplateCandidate(
                template_type=EnumTemplateType.MINIMAL,
                content="x",
                score=1.0,
                faithfulness_validated=True,
            )
            for _ in range(2)
        )

        assert first.id.startswith("candidate_")
        assert first.id != second.id

    def test_score_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ModelTemplateCandidate(
                template_type=EnumTemplateType.MINIMAL,
                content="x",
                score=101.0,
                faithfulness_validated=True,
            )

    def test_frozen(self) -> None:
        candidate = ModelTemplateCandidate(
            template_type=EnumTemplateType.MINIMAL,
            content="x",
            score=1.0,
            faithfulness_validated=True,
        )
        with pytest.raises(ValidationError):
            candidate.content = "y"  # type: ignore[misc]


@pytest.mark.unit
class TestSupportingModels:
    """Lint results, markers, domains and selections."""

    def test_lint_result_helpers(self) -> None:
        lint_result = ModelLintResult(
            score=55.0,
            issues=(
                ModelLintIssue(type=EnumLintIssueType.VAGUE_WORDING),
                ModelLintIssue(type=EnumLintIssueType.VAGUE_WORDING),
                ModelLintIssue(type=EnumLintIssueType.MISSING_LANGUAGE),
            ),
        )

        assert lint_result.has_issue(EnumLintIssueType.VAGUE_WORDING) is True
        assert lint_result.has_issue(EnumLintIssueType.UNCLEAR_SCOPE) is False
        assert lint_result.issue_types == frozenset(
            {EnumLintIssueType.VAGUE_WORDING, EnumLintIssueType.MISSING_LANGUAGE}
        )

    def test_lint_result_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            ModelLintResult(grade="A")  # type: ignore[call-arg]

    def test_active_markers_in_declaration_order(self) -> None:
        markers = ModelContextMarkers(analytical=True, temporal=True, technical=True)
        assert markers.active_markers() == ["temporal", "technical", "analytical"]

    def test_default_domain(self) -> None:
        domain = create_default_domain_classification("service down")

        assert domain.domain == "general"
        assert domain.confidence == 0.0
        assert domain.indicators == ("service down",)

    def test_domain_confidence_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ModelDomainClassification(domain="code", confidence=120.0)

    def test_selection_rejects_duplicates(self) -> None:
        with pytest.raises(ValidationError):
            ModelTemplateSelection(
                strategy=EnumSelectionStrategy.HIGH,
                template_types=(EnumTemplateType.BULLET, EnumTemplateType.BULLET),
            )

    def test_selection_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ModelTemplateSelection(
                strategy=EnumSelectionStrategy.HIGH, template_types=()
            )

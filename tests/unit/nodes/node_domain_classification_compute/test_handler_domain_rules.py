# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for rule-based domain classification."""

from __future__ import annotations

import pytest

from promptlint.nodes.node_domain_classification_compute.handlers import (
    DOMAIN_RULES,
    RuleBasedDomainClassifier,
    calibrate_rule_score,
    classify_domain,
    score_domain,
)
from promptlint.protocols import ProtocolDomainService


def _rule(domain: str):
    return next(rule for rule in DOMAIN_RULES if rule.domain == domain)


@pytest.mark.unit
class TestCalibration:
    """Raw keyword scores are raised by supporting evidence."""

    def test_bonus_score_is_raised_to_095(self) -> None:
        assert calibrate_rule_score(0.9, 0, 0, 0) == 0.95

    def test_single_primary_match_unchanged(self) -> None:
        assert calibrate_rule_score(0.3, 1, 0, 0) == 0.3

    def test_two_matches_add_ten_points(self) -> None:
        assert calibrate_rule_score(0.5, 1, 1, 0) == pytest.approx(0.6)

    def test_three_matches_capped(self) -> None:
        assert calibrate_rule_score(0.8, 2, 1, 1) == 0.9


@pytest.mark.unit
class TestScoreDomain:
    """Per-domain scoring."""

    def test_exclusion_removes_domain(self) -> None:
        assert score_domain(_rule("code"), "research best practices for apis") is None

    def test_weak_evidence_is_dropped(self) -> None:
        # a lone secondary keyword scores 0.2
        assert score_domain(_rule("code"), "the variable") is None

    def test_single_primary_keyword_is_kept(self) -> None:
        score = score_domain(_rule("analysis"), "track it")

        assert score is not None
        assert score.score == pytest.approx(0.3)
        assert score.indicators == ("primary: track",)

    def test_indicators_record_evidence(self) -> None:
        score = score_domain(_rule("code"), "write a function in python")

        assert score is not None
        assert "bonus: in python" in score.indicators
        assert "secondary: function" in score.indicators


@pytest.mark.unit
class TestClassifyDomain:
    """Best domain wins; defaults cover missing evidence."""

    def test_code_prompt(self) -> None:
        result = classify_domain("write a function in python")

        assert result.domain == "code"
        assert result.confidence == 95.0

    def test_research_prompt(self) -> None:
        result = classify_domain("research best practices for testing")

        assert result.domain == "research"
        assert result.confidence == 95.0

    def test_analysis_prompt(self) -> None:
        result = classify_domain("evaluate performance of the new cache")

        assert result.domain == "analysis"
        assert result.confidence >= 90.0

    def test_empty_prompt_defaults_to_code(self) -> None:
        result = classify_domain("   ")

        assert result.domain == "code"
        assert result.confidence == 50.0
        assert result.indicators == ("empty prompt",)

    def test_no_evidence_defaults_to_low_confidence_code(self) -> None:
        result = classify_domain("hello there")

        assert result.domain == "code"
        assert result.confidence == 20.0
        assert result.indicators == ("extremely low confidence",)


@pytest.mark.unit
class TestRuleBasedDomainClassifier:
    """The classifier satisfies the domain service protocol."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(RuleBasedDomainClassifier(), ProtocolDomainService)

    @pytest.mark.asyncio
    async def test_classify_is_async(self) -> None:
        result = await RuleBasedDomainClassifier().classify("debug code in the parser")
        assert result.domain == "code"

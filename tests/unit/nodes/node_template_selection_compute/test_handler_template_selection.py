# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for tiered, diversity-aware template selection.

Validates:
    - Tier choice by domain confidence
    - Ranking with priority tie-break
    - Diversity filter invariant
    - Scenario prompts across the three tiers
"""

from __future__ import annotations

from itertools import combinations, permutations

import pytest

from promptlint.enums import EnumSelectionStrategy, EnumTemplateType
from promptlint.models import ModelDomainClassification
from promptlint.nodes.node_semantic_analysis_compute.handlers import (
    analyze_prompt_semantics,
)
from promptlint.nodes.node_template_selection_compute import (
    DEFAULT_SELECTION_CONFIG,
    ModelSelectionConfig,
)
from promptlint.nodes.node_template_selection_compute.handlers import (
    SIMILARITY_MATRIX,
    apply_diversity_filter,
    determine_selection_strategy,
    handle_template_selection,
    select_templates,
    template_similarity,
)

TASK_IO = EnumTemplateType.TASK_IO
BULLET = EnumTemplateType.BULLET
SEQUENTIAL = EnumTemplateType.SEQUENTIAL
MINIMAL = EnumTemplateType.MINIMAL

ANALYTICAL_PROMPT = "analyze user behavior and create report"


def _select(prompt: str, domain: str, confidence: float, **config: object):
    semantics = analyze_prompt_semantics(prompt)
    return handle_template_selection(
        prompt,
        semantics,
        ModelDomainClassification(domain=domain, confidence=confidence),
        (),
        ModelSelectionConfig(**config) if config else None,
    )


@pytest.mark.unit
class TestSimilarityMatrix:
    """The matrix is symmetric, bounded and covers every pair."""

    def test_every_pair_present(self) -> None:
        for first, second in combinations(EnumTemplateType, 2):
            assert frozenset((first, second)) in SIMILARITY_MATRIX

    def test_symmetric_with_unit_diagonal(self) -> None:
        for first in EnumTemplateType:
            assert template_similarity(first, first) == 1.0
            for second in EnumTemplateType:
                assert template_similarity(first, second) == template_similarity(
                    second, first
                )

    def test_values_within_unit_interval(self) -> None:
        assert all(0.0 <= value <= 1.0 for value in SIMILARITY_MATRIX.values())


@pytest.mark.unit
class TestStrategy:
    """Tier selection by domain confidence."""

    @pytest.mark.parametrize(
        ("confidence", "expected"),
        [
            (95.0, EnumSelectionStrategy.HIGH),
            (90.0, EnumSelectionStrategy.HIGH),
            (89.9, EnumSelectionStrategy.MODERATE),
            (70.0, EnumSelectionStrategy.MODERATE),
            (69.9, EnumSelectionStrategy.LOW_CONFIDENCE_FALLBACK),
            (0.0, EnumSelectionStrategy.LOW_CONFIDENCE_FALLBACK),
        ],
    )
    def test_tiers(self, confidence: float, expected: EnumSelectionStrategy) -> None:
        domain = ModelDomainClassification(domain="code", confidence=confidence)
        assert determine_selection_strategy(domain, DEFAULT_SELECTION_CONFIG) == expected


@pytest.mark.unit
class TestDiversityFilter:
    """Accepted templates are pairwise below the similarity threshold."""

    def test_rejects_near_duplicate_at_default_threshold(self) -> None:
        assert template_similarity(BULLET, SEQUENTIAL) >= (
            DEFAULT_SELECTION_CONFIG.similarity_threshold
        )
        assert apply_diversity_filter([BULLET, SEQUENTIAL, MINIMAL], 2) == [
            BULLET,
            MINIMAL,
        ]
        assert apply_diversity_filter([SEQUENTIAL, BULLET, TASK_IO], 3) == [
            SEQUENTIAL,
            TASK_IO,
        ]

    def test_rejects_similar_template_at_lower_threshold(self) -> None:
        assert apply_diversity_filter([TASK_IO, SEQUENTIAL, MINIMAL], 2, 0.5) == [
            TASK_IO,
            MINIMAL,
        ]

    def test_first_template_always_accepted(self) -> None:
        assert apply_diversity_filter([SEQUENTIAL], 3, 0.1) == [SEQUENTIAL]

    def test_respects_limit(self) -> None:
        assert apply_diversity_filter([BULLET, TASK_IO, MINIMAL], 2) == [BULLET, TASK_IO]

    def test_filters_every_ordering_that_ranks_both_list_layouts(self) -> None:
        for ordering in permutations(EnumTemplateType):
            accepted = apply_diversity_filter(list(ordering), 3)

            assert not {BULLET, SEQUENTIAL} <= set(accepted)
            assert len(accepted) == 3

    @pytest.mark.parametrize("threshold", [0.25, 0.35, 0.5, 0.65, 0.8, 1.0])
    def test_pairwise_invariant(self, threshold: float) -> None:
        accepted = apply_diversity_filter(list(EnumTemplateType), 3, threshold)

        assert accepted
        for first, second in combinations(accepted, 2):
            assert template_similarity(first, second) < threshold


@pytest.mark.unit
class TestSelectionScenarios:
    """End-to-end selection from real prompts."""

    def test_high_tier_analysis_prompt_ranks_bullet_first(self) -> None:
        selection = _select(ANALYTICAL_PROMPT, "analysis", 95.0)

        assert selection.strategy == EnumSelectionStrategy.HIGH
        assert selection.template_types == (BULLET, TASK_IO)
        assert len(selection.scores) == 4

    def test_tie_broken_by_priority(self) -> None:
        # task_io and sequential both score 66; task_io has higher priority
        selection = _select(ANALYTICAL_PROMPT, "analysis", 85.0)

        assert selection.strategy == EnumSelectionStrategy.MODERATE
        assert [s.template_type for s in selection.scores] == [
            BULLET,
            TASK_IO,
            SEQUENTIAL,
            MINIMAL,
        ]

    def test_default_diversity_drops_list_layout_near_duplicate(self) -> None:
        diverse = _select(ANALYTICAL_PROMPT, "analysis", 85.0)
        undiverse = _select(
            ANALYTICAL_PROMPT, "analysis", 85.0, enable_diversity=False
        )

        assert diverse.template_types == (BULLET, TASK_IO, MINIMAL)
        assert undiverse.template_types == (BULLET, TASK_IO, SEQUENTIAL)

    def test_lower_similarity_threshold_skips_near_duplicates(self) -> None:
        selection = _select(
            ANALYTICAL_PROMPT, "analysis", 85.0, similarity_threshold=0.65
        )
        assert selection.template_types == (BULLET, TASK_IO, MINIMAL)

    def test_diversity_disabled_keeps_ranked_order(self) -> None:
        selection = _select(
            ANALYTICAL_PROMPT,
            "analysis",
            85.0,
            similarity_threshold=0.1,
            enable_diversity=False,
        )
        assert selection.template_types == (BULLET, TASK_IO, SEQUENTIAL)

    def test_low_confidence_sequential_prompt(self) -> None:
        selection = _select("first do X, then Y", "general", 40.0)

        assert selection.strategy == EnumSelectionStrategy.LOW_CONFIDENCE_FALLBACK
        assert SEQUENTIAL in selection.template_types
        assert selection.scores == ()

    def test_score_for_returns_computed_score(self) -> None:
        selection = _select(ANALYTICAL_PROMPT, "analysis", 95.0)

        score = selection.score_for(BULLET)
        assert score is not None
        assert score.factors.overall_score == 74

    @pytest.mark.parametrize(
        "prompt",
        [
            "",
            "x",
            ANALYTICAL_PROMPT,
            "first install the package, then configure and deploy it",
            "compare react versus vue for a dashboard " * 20,
        ],
    )
    @pytest.mark.parametrize("confidence", [0.0, 75.0, 95.0])
    def test_result_is_unique_and_bounded(self, prompt: str, confidence: float) -> None:
        selected = select_templates(
            prompt,
            analyze_prompt_semantics(prompt),
            ModelDomainClassification(domain="code", confidence=confidence),
        )

        assert 1 <= len(selected) <= 3
        assert len(set(selected)) == len(selected)

    def test_invalid_tier_order_rejected(self) -> None:
        with pytest.raises(ValueError):
            ModelSelectionConfig(
                high_confidence_threshold=60.0, moderate_confidence_threshold=80.0
            )

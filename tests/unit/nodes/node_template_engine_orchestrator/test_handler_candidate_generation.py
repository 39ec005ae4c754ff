# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for template candidate generation.

Validates:
    - End-to-end ranking with the default renderers
    - Unfaithful renderings are kept but ranked lower and never validated
    - Domain service failures and timeouts fall back to the default domain
    - Renderer failures skip the template; total failure yields the fallback
    - generate_candidates() is total over any input and never raises
    - The diversity toggle decides whether list-layout near-duplicates survive
    - Engine health checks
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from promptlint.enums import (
    EnumLintIssueType,
    EnumSelectionStrategy,
    EnumTemplateType,
)
from promptlint.models import ModelDomainClassification, ModelLintResult
from promptlint.nodes.node_domain_classification_compute import (
    RuleBasedDomainClassifier,
)
from promptlint.nodes.node_template_engine_orchestrator import ModelGenerationConfig
from promptlint.nodes.node_template_engine_orchestrator.handlers import (
    FALLBACK_WARNING,
    ULTIMATE_FALLBACK_WARNING,
    calculate_candidate_score,
    classify_domain_with_deadline,
    generate_candidates,
    validate_engine_health,
)

TASK_IO = EnumTemplateType.TASK_IO
BULLET = EnumTemplateType.BULLET
SEQUENTIAL = EnumTemplateType.SEQUENTIAL
MINIMAL = EnumTemplateType.MINIMAL

SORTING_PROMPT = "write sorting code then test it"


class SlowDomainService:
    """Domain service that never answers within the deadline."""

    async def classify(self, prompt: str) -> ModelDomainClassification:
        await asyncio.sleep(1.0)
        return ModelDomainClassification(domain="code", confidence=99.0)


@pytest.fixture
def sorting_lint_result(
    lint_result_factory: Callable[..., ModelLintResult],
) -> ModelLintResult:
    return lint_result_factory(
        EnumLintIssueType.MISSING_LANGUAGE,
        EnumLintIssueType.MISSING_IO_SPECIFICATION,
    )


@pytest.fixture
def sorting_renderers(static_renderer_factory: Callable[..., object]) -> dict:
    """task_io adds a language the user never named; sequential is faithful."""
    return {
        TASK_IO: static_renderer_factory(TASK_IO, "Write sorting code in Python then test it"),
        SEQUENTIAL: static_renderer_factory(SEQUENTIAL, "Write sorting code then test it."),
    }


@pytest.mark.unit
class TestCandidateScore:
    """Candidate ranking score."""

    @pytest.mark.parametrize(
        ("passed", "quality", "expected"),
        [(True, 90.0, 98.0), (False, 80.0, 66.0), (True, None, 80.0), (False, 0.0, 50.0)],
    )
    def test_score(self, passed: bool, quality: float | None, expected: float) -> None:
        assert calculate_candidate_score(passed, quality) == expected


@pytest.mark.unit
class TestGenerateCandidatesDefaultRenderers:
    """Full pipeline with the default renderers."""

    @pytest.mark.asyncio
    async def test_analytical_prompt_high_confidence(
        self,
        lint_result_factory: Callable[..., ModelLintResult],
        domain_service_factory: Callable[..., AsyncMock],
    ) -> None:
        lint_result = lint_result_factory(
            EnumLintIssueType.VAGUE_WORDING,
            EnumLintIssueType.MISSING_IO_SPECIFICATION,
        )
        service = domain_service_factory(
            ModelDomainClassification(domain="analysis", confidence=95.0)
        )

        candidates = await generate_candidates(
            "analyze user behavior and create report",
            lint_result,
            domain_service=service,
        )

        assert [c.template_type for c in candidates] == [TASK_IO, BULLET]
        assert all(c.faithfulness_validated for c in candidates)
        assert candidates[0].score == 98.0
        assert candidates[0].content.startswith(
            "**Task:** Analyze user behavior and create report"
        )
        metadata = candidates[0].metadata
        assert metadata.selection_strategy == EnumSelectionStrategy.HIGH
        assert metadata.template_score is not None
        assert metadata.faithfulness is not None
        assert metadata.performance is not None
        service.classify.assert_awaited_once_with("analyze user behavior and create report")

    @pytest.mark.asyncio
    async def test_simple_prompt_without_issues_gets_minimal(self) -> None:
        candidates = await generate_candidates("write sorting code")

        assert len(candidates) == 1
        assert candidates[0].template_type == MINIMAL
        assert candidates[0].content == "Write sorting code."
        assert candidates[0].metadata.is_fallback is False

    @pytest.mark.asyncio
    async def test_rule_based_classifier_plugs_in(self) -> None:
        candidates = await generate_candidates(
            "first install the package, then run the tests",
            domain_service=RuleBasedDomainClassifier(),
        )
        assert 1 <= len(candidates) <= 3


@pytest.mark.unit
class TestFaithfulnessRanking:
    """Candidates that add content rank below faithful ones."""

    @pytest.mark.asyncio
    async def test_unfaithful_candidate_kept_but_ranked_lower(
        self, sorting_lint_result: ModelLintResult, sorting_renderers: dict
    ) -> None:
        candidates = await generate_candidates(
            SORTING_PROMPT, sorting_lint_result, renderers=sorting_renderers
        )

        assert [c.template_type for c in candidates] == [SEQUENTIAL, TASK_IO]
        faithful, unfaithful = candidates
        assert faithful.faithfulness_validated is True
        assert faithful.score == 96.0
        assert unfaithful.faithfulness_validated is False
        assert unfaithful.score == 66.0
        assert unfaithful.metadata.faithfulness.has_critical_violation is True

    @pytest.mark.asyncio
    async def test_candidates_sorted_by_score(
        self, sorting_lint_result: ModelLintResult, sorting_renderers: dict
    ) -> None:
        candidates = await generate_candidates(
            SORTING_PROMPT, sorting_lint_result, renderers=sorting_renderers
        )
        scores = [c.score for c in candidates]
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.asyncio
    async def test_faithfulness_threshold_override(
        self, static_renderer_factory: Callable[..., object]
    ) -> None:
        renderers = {
            MINIMAL: static_renderer_factory(MINIMAL, "write sorting code in docker")
        }

        lenient = await generate_candidates("write sorting code", renderers=renderers)
        strict = await generate_candidates(
            "write sorting code", renderers=renderers, faithfulness_threshold=90.0
        )

        assert lenient[0].faithfulness_validated is True
        assert lenient[0].score == 96.0
        assert strict[0].faithfulness_validated is False
        assert strict[0].score == 66.0


@pytest.mark.unit
class TestDomainFailures:
    """The domain service can raise or hang without breaking generation."""

    @pytest.mark.asyncio
    async def test_no_service_uses_default_domain(self) -> None:
        domain = await classify_domain_with_deadline("anything", None)

        assert domain.confidence == 0.0
        assert domain.indicators == ("no domain service configured",)

    @pytest.mark.asyncio
    async def test_raising_service_uses_default_domain(self) -> None:
        service = AsyncMock()
        service.classify = AsyncMock(side_effect=RuntimeError("service down"))

        domain = await classify_domain_with_deadline("anything", service)

        assert domain.confidence == 0.0
        assert domain.indicators == ("domain classification failed",)

    @pytest.mark.asyncio
    async def test_slow_service_is_cancelled(self) -> None:
        config = ModelGenerationConfig(domain_timeout_ms=10.0)

        domain = await classify_domain_with_deadline(
            "anything", SlowDomainService(), config
        )

        assert domain.indicators == ("domain classification timed out",)

    @pytest.mark.asyncio
    async def test_successful_service_result_is_returned(
        self, domain_service_factory: Callable[..., AsyncMock]
    ) -> None:
        expected = ModelDomainClassification(domain="writing", confidence=80.0)

        domain = await classify_domain_with_deadline(
            "anything", domain_service_factory(expected)
        )

        assert domain == expected

    @pytest.mark.asyncio
    async def test_generation_continues_on_low_confidence_tier(
        self, sorting_lint_result: ModelLintResult, sorting_renderers: dict
    ) -> None:
        service = AsyncMock()
        service.classify = AsyncMock(side_effect=RuntimeError("service down"))

        candidates = await generate_candidates(
            SORTING_PROMPT,
            sorting_lint_result,
            domain_service=service,
            renderers=sorting_renderers,
        )

        assert candidates[0].metadata.selection_strategy == (
            EnumSelectionStrategy.LOW_CONFIDENCE_FALLBACK
        )

    @pytest.mark.asyncio
    async def test_slow_service_does_not_block_generation(
        self, sorting_lint_result: ModelLintResult, sorting_renderers: dict
    ) -> None:
        candidates = await generate_candidates(
            SORTING_PROMPT,
            sorting_lint_result,
            domain_service=SlowDomainService(),
            renderers=sorting_renderers,
            config=ModelGenerationConfig(domain_timeout_ms=10.0),
        )

        assert [c.template_type for c in candidates] == [SEQUENTIAL, TASK_IO]


@pytest.mark.unit
class TestRendererFailures:
    """Renderer errors skip templates; nothing left yields the fallback."""

    @pytest.mark.asyncio
    async def test_failing_renderer_is_skipped(
        self,
        sorting_lint_result: ModelLintResult,
        static_renderer_factory: Callable[..., object],
        failing_renderer_factory: Callable[..., object],
    ) -> None:
        renderers = {
            TASK_IO: failing_renderer_factory(TASK_IO, ""),
            SEQUENTIAL: static_renderer_factory(SEQUENTIAL, "Write sorting code then test it."),
        }

        candidates = await generate_candidates(
            SORTING_PROMPT, sorting_lint_result, renderers=renderers
        )

        assert [c.template_type for c in candidates] == [SEQUENTIAL]

    @pytest.mark.asyncio
    async def test_all_unsuitable_returns_fallback(
        self,
        sorting_lint_result: ModelLintResult,
        static_renderer_factory: Callable[..., object],
    ) -> None:
        renderers = {
            t: static_renderer_factory(t, f"{t.value} content", suitable=False)
            for t in EnumTemplateType
        }

        candidates = await generate_candidates(
            SORTING_PROMPT, sorting_lint_result, renderers=renderers
        )

        assert len(candidates) == 1
        fallback = candidates[0]
        assert fallback.template_type == MINIMAL
        assert fallback.content == "minimal content"
        assert fallback.score == 0.5
        assert fallback.faithfulness_validated is True
        assert fallback.metadata.is_fallback is True
        assert fallback.metadata.warnings == (FALLBACK_WARNING,)

    @pytest.mark.asyncio
    async def test_all_failing_returns_original_prompt(
        self,
        sorting_lint_result: ModelLintResult,
        failing_renderer_factory: Callable[..., object],
    ) -> None:
        renderers = {t: failing_renderer_factory(t, "") for t in EnumTemplateType}

        candidates = await generate_candidates(
            SORTING_PROMPT, sorting_lint_result, renderers=renderers
        )

        assert len(candidates) == 1
        assert candidates[0].content == SORTING_PROMPT
        assert candidates[0].score == 0.1
        assert candidates[0].metadata.warnings == (ULTIMATE_FALLBACK_WARNING,)

    @pytest.mark.asyncio
    async def test_missing_renderer_is_skipped(
        self,
        sorting_lint_result: ModelLintResult,
        static_renderer_factory: Callable[..., object],
    ) -> None:
        renderers = {
            SEQUENTIAL: static_renderer_factory(SEQUENTIAL, "Write sorting code then test it.")
        }

        candidates = await generate_candidates(
            SORTING_PROMPT, sorting_lint_result, renderers=renderers
        )

        assert [c.template_type for c in candidates] == [SEQUENTIAL]


@pytest.mark.unit
class TestOverridesAndCollaborators:
    """Per-call overrides and the lint service."""

    @pytest.mark.asyncio
    async def test_max_candidates_override(
        self, sorting_lint_result: ModelLintResult, sorting_renderers: dict
    ) -> None:
        candidates = await generate_candidates(
            SORTING_PROMPT,
            sorting_lint_result,
            renderers=sorting_renderers,
            max_candidates=1,
        )

        assert [c.template_type for c in candidates] == [SEQUENTIAL]

    @pytest.mark.asyncio
    async def test_invalid_override_yields_fallback(self) -> None:
        candidates = await generate_candidates("write sorting code", max_candidates=5)

        assert len(candidates) == 1
        assert candidates[0].metadata.is_fallback is True

    @pytest.mark.asyncio
    async def test_diversity_toggle_controls_list_layout_duplicates(
        self,
        static_renderer_factory: Callable[..., object],
        domain_service_factory: Callable[..., AsyncMock],
    ) -> None:
        prompt = "analyze user behavior and create report"
        renderers = {
            template_type: static_renderer_factory(template_type, prompt)
            for template_type in EnumTemplateType
        }
        service = domain_service_factory(
            ModelDomainClassification(domain="analysis", confidence=85.0)
        )

        diverse = await generate_candidates(
            prompt, renderers=renderers, domain_service=service
        )
        undiverse = await generate_candidates(
            prompt,
            renderers=renderers,
            domain_service=service,
            enable_diversity=False,
        )

        assert [c.template_type for c in diverse] == [BULLET, TASK_IO, MINIMAL]
        assert [c.template_type for c in undiverse] == [BULLET, TASK_IO, SEQUENTIAL]

    @pytest.mark.asyncio
    async def test_lint_service_consulted_without_lint_result(
        self, sorting_lint_result: ModelLintResult, sorting_renderers: dict
    ) -> None:
        lint_service = MagicMock()
        lint_service.analyze.return_value = sorting_lint_result

        candidates = await generate_candidates(
            SORTING_PROMPT, lint_service=lint_service, renderers=sorting_renderers
        )

        lint_service.analyze.assert_called_once_with(SORTING_PROMPT)
        assert TASK_IO in [c.template_type for c in candidates]

    @pytest.mark.asyncio
    async def test_lint_service_skipped_when_result_given(
        self, sorting_lint_result: ModelLintResult, sorting_renderers: dict
    ) -> None:
        lint_service = MagicMock()

        await generate_candidates(
            SORTING_PROMPT,
            sorting_lint_result,
            lint_service=lint_service,
            renderers=sorting_renderers,
        )

        lint_service.analyze.assert_not_called()


@pytest.mark.unit
class TestTotality:
    """Any input produces one to three candidates."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "prompt",
        ["", "   ", "x", "word " * 1200, "first do X, then Y!!!", None, 42],
    )
    async def test_never_raises(self, prompt: object) -> None:
        candidates = await generate_candidates(prompt)  # type: ignore[arg-type]

        assert 1 <= len(candidates) <= 3
        assert len({c.id for c in candidates}) == len(candidates)

    @pytest.mark.asyncio
    async def test_empty_prompt_renders_empty_minimal(self) -> None:
        candidates = await generate_candidates("")

        assert [c.template_type for c in candidates] == [MINIMAL]
        assert candidates[0].content == ""

    @pytest.mark.asyncio
    async def test_deterministic_for_same_input(
        self, vague_lint_result: ModelLintResult
    ) -> None:
        prompt = "maybe improve the dashboard somehow"

        first = await generate_candidates(prompt, vague_lint_result)
        second = await generate_candidates(prompt, vague_lint_result)

        assert [(c.template_type, c.content, c.score) for c in first] == [
            (c.template_type, c.content, c.score) for c in second
        ]

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(
        self, vague_lint_result: ModelLintResult
    ) -> None:
        prompts = ["write sorting code", "outline the plan", "maybe improve it"]

        results = await asyncio.gather(
            *(generate_candidates(p, vague_lint_result) for p in prompts)
        )
        sequential = [await generate_candidates(p, vague_lint_result) for p in prompts]

        for concurrent_result, sequential_result in zip(results, sequential, strict=True):
            assert [c.content for c in concurrent_result] == [
                c.content for c in sequential_result
            ]


@pytest.mark.unit
class TestEngineHealth:
    """Renderer registry checks."""

    def test_default_renderers_are_healthy(self) -> None:
        health = validate_engine_health()

        assert health.is_healthy is True
        assert health.issues == ()
        assert health.template_count == 4
        assert health.performance_budget_ms == 100.0

    def test_missing_renderer_reported(
        self, static_renderer_factory: Callable[..., object]
    ) -> None:
        renderers = {
            t: static_renderer_factory(t, "x") for t in EnumTemplateType if t != MINIMAL
        }

        health = validate_engine_health(renderers)

        assert health.is_healthy is False
        assert health.issues == ("Template 'minimal' has no renderer",)
        assert health.template_count == 3

    def test_mismatched_and_invalid_renderers_reported(
        self, static_renderer_factory: Callable[..., object]
    ) -> None:
        renderers = {
            TASK_IO: static_renderer_factory(TASK_IO, "x"),
            BULLET: static_renderer_factory(TASK_IO, "x"),
            SEQUENTIAL: object(),
            MINIMAL: static_renderer_factory(MINIMAL, "x"),
        }

        health = validate_engine_health(renderers)  # type: ignore[arg-type]

        assert health.issues == (
            "Template 'bullet' is mapped to a 'task_io' renderer",
            "Template 'sequential' renderer does not implement ProtocolTemplateRenderer",
        )
        assert health.template_count == 2

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handler for template candidate generation.

This is the template engine's main entry point. It turns one prompt into
1-3 ranked, faithfulness-checked restructurings:

    1. domain classification (domain service, deadline-bounded)
    2. semantic analysis
    3. template selection (scored tiers or the low-confidence rule table)
    4. per template: suitability check, deadline-bounded render,
       faithfulness validation, scoring
    5. stable sort by score, truncate to max_candidates

Failure layers, innermost first:
    - domain service raised or timed out: default domain (TEMPLATE_002)
    - one template failed to render: template skipped (TEMPLATE_001)
    - no candidate survived, or anything else raised: minimal fallback
      candidate (TEMPLATE_003)
    - the fallback itself failed: the untouched prompt

generate_candidates() never raises. All state is local to one call.

Candidate score:
    clamp(50 + 30 * passed + 0.2 * quality_score, 0, 100)
    where passed means no critical violation and a faithfulness score at
    or above the configured threshold.

Usage:
    from promptlint.nodes.node_template_engine_orchestrator.handlers import (
        generate_candidates,
    )

    candidates = await generate_candidates(
        "analyze user behavior and create report",
        lint_result,
        domain_service=classifier,
    )
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from promptlint.enums import EnumTemplateType
from promptlint.models import (
    ModelCandidateMetadata,
    ModelDomainClassification,
    ModelLintResult,
    ModelRenderContext,
    ModelTemplateCandidate,
    ModelTemplateSelection,
    ModelTimerConfig,
    create_default_domain_classification,
)
from promptlint.nodes.node_faithfulness_validation_compute.handlers import (
    validate_faithfulness,
)
from promptlint.nodes.node_semantic_analysis_compute.handlers import (
    analyze_prompt_semantics,
)
from promptlint.nodes.node_template_engine_orchestrator.handlers.exceptions import (
    ERROR_CODE_DOMAIN_CLASSIFICATION_FAILED,
    ERROR_CODE_GENERATION_FAILED,
    ERROR_CODE_RENDER_FAILED,
    DomainClassificationError,
    TemplateGenerationError,
    TemplateRenderError,
)
from promptlint.nodes.node_template_engine_orchestrator.handlers.handler_template_rendering import (
    create_default_renderers,
    render_template,
)
from promptlint.nodes.node_template_engine_orchestrator.models import (
    DEFAULT_GENERATION_CONFIG,
    ModelEngineHealth,
    ModelGenerationConfig,
)
from promptlint.nodes.node_template_selection_compute.handlers import (
    handle_template_selection,
)
from promptlint.protocols import (
    ProtocolDomainService,
    ProtocolLintService,
    ProtocolTemplateRenderer,
)
from promptlint.renderers import MinimalTemplateRenderer
from promptlint.utils import elapsed_time_ms, get_performance_metrics, measure_async

logger = logging.getLogger(__name__)

FALLBACK_SCORE: Final[float] = 0.5
ULTIMATE_FALLBACK_SCORE: Final[float] = 0.1
FALLBACK_WARNING: Final[str] = "Fallback template used due to generation failure"
ULTIMATE_FALLBACK_WARNING: Final[str] = "Ultimate fallback - original prompt returned"


@dataclass(frozen=True, slots=True)
class CandidateGenerationResult:
    """Outcome of generating one template's candidate.

    Attributes:
        template_type: Template that was attempted.
        success: True when a candidate was produced.
        candidate: The candidate, when success is True.
        error_code: TEMPLATE_xxx code for failures; None for skips.
        error_message: Why no candidate was produced.
    """

    template_type: EnumTemplateType
    success: bool
    candidate: ModelTemplateCandidate | None = None
    error_code: str | None = None
    error_message: str | None = None


# =============================================================================
# Collaborator Resolution
# =============================================================================


def _coerce_prompt(prompt: object) -> str:
    if isinstance(prompt, str):
        return prompt
    logger.warning(
        "generate_candidates received %s instead of str; coercing",
        type(prompt).__name__,
    )
    return "" if prompt is None else str(prompt)


def resolve_lint_result(
    prompt: str,
    lint_result: ModelLintResult | None,
    lint_service: ProtocolLintService | None,
) -> ModelLintResult:
    """Use the given lint result, else ask the lint service, else assume none."""
    if lint_result is not None:
        return lint_result
    if lint_service is not None:
        return lint_service.analyze(prompt)
    return ModelLintResult()


async def classify_domain_with_deadline(
    prompt: str,
    domain_service: ProtocolDomainService | None,
    config: ModelGenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> ModelDomainClassification:
    """Classify the prompt, substituting the default domain on any failure.

    The service call is cancelled after `config.domain_timeout_ms`.
    Never raises.
    """
    if domain_service is None:
        return create_default_domain_classification("no domain service configured")

    timeout_ms = config.domain_timeout_ms
    timer_config = ModelTimerConfig(
        warning_threshold_ms=timeout_ms * 0.8,
        max_execution_time_ms=timeout_ms,
    )
    try:
        timed = await measure_async(
            lambda: domain_service.classify(prompt),
            config=timer_config,
            label="domain classification",
        )
        if timed.result is None:
            raise DomainClassificationError(
                f"Domain classification timed out after {timeout_ms:.0f}ms"
            )
        return ModelDomainClassification.model_validate(timed.result)
    except DomainClassificationError as e:
        logger.warning("[%s] %s; using default domain", e.code, e.message)
        return create_default_domain_classification("domain classification timed out")
    except Exception as e:
        logger.warning(
            "[%s] Domain classification failed: %s; using default domain",
            ERROR_CODE_DOMAIN_CLASSIFICATION_FAILED,
            e,
        )
        return create_default_domain_classification("domain classification failed")


# =============================================================================
# Per-Template Generation
# =============================================================================


def calculate_candidate_score(passed: bool, quality_score: float | None) -> float:
    """Rank a candidate from faithfulness outcome and renderer quality.

    Example:
        >>> calculate_candidate_score(True, 90.0)
        98.0
    """
    score = 50.0 + (30.0 if passed else 0.0) + 0.2 * (quality_score or 0.0)
    return min(100.0, max(0.0, score))


async def generate_candidate(
    template_type: EnumTemplateType,
    context: ModelRenderContext,
    selection: ModelTemplateSelection,
    renderer: ProtocolTemplateRenderer | None,
    config: ModelGenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> CandidateGenerationResult:
    """Render, validate and score one template. Never raises."""
    if renderer is None:
        logger.warning("No renderer registered for template type %s", template_type.value)
        return CandidateGenerationResult(
            template_type=template_type,
            success=False,
            error_message="no renderer registered",
        )

    start_time = time.perf_counter()
    try:
        if not renderer.is_suitable(context):
            logger.debug("Template %s not suitable; skipped", template_type.value)
            return CandidateGenerationResult(
                template_type=template_type,
                success=False,
                error_message="template not suitable for prompt",
            )

        timed = await render_template(renderer, context, config.render_timer)
        rendered = timed.result
        faithfulness = validate_faithfulness(
            context.prompt, rendered.content, config.faithfulness
        )
        passed = faithfulness.is_valid and faithfulness.score >= config.faithfulness_threshold

        candidate = ModelTemplateCandidate(
            template_type=template_type,
            content=rendered.content,
            score=calculate_candidate_score(passed, rendered.quality_score),
            faithfulness_validated=passed,
            generation_time_ms=elapsed_time_ms(start_time),
            metadata=ModelCandidateMetadata(
                selection_strategy=selection.strategy,
                template_score=selection.score_for(template_type),
                quality_score=rendered.quality_score,
                faithfulness=faithfulness,
                performance=get_performance_metrics(
                    timed.execution_time_ms, config.render_timer
                ),
                warnings=timed.warnings,
            ),
        )
    except TemplateRenderError as e:
        logger.warning("[%s] %s; template skipped", e.code, e.message)
        return CandidateGenerationResult(
            template_type=template_type,
            success=False,
            error_code=e.code,
            error_message=e.message,
        )
    except Exception as e:
        logger.warning(
            "[%s] Rendering %s failed: %s; template skipped",
            ERROR_CODE_RENDER_FAILED,
            template_type.value,
            e,
        )
        return CandidateGenerationResult(
            template_type=template_type,
            success=False,
            error_code=ERROR_CODE_RENDER_FAILED,
            error_message=str(e),
        )

    if not passed:
        logger.debug(
            "Template %s failed faithfulness (score=%d, valid=%s)",
            template_type.value,
            faithfulness.score,
            faithfulness.is_valid,
        )
    return CandidateGenerationResult(
        template_type=template_type, success=True, candidate=candidate
    )


# =============================================================================
# Fallback Chain
# =============================================================================


def create_ultimate_fallback_candidate(prompt: str) -> ModelTemplateCandidate:
    """Return the untouched prompt as the last-resort candidate."""
    return ModelTemplateCandidate(
        template_type=EnumTemplateType.MINIMAL,
        content=prompt,
        score=ULTIMATE_FALLBACK_SCORE,
        faithfulness_validated=True,
        metadata=ModelCandidateMetadata(
            warnings=(ULTIMATE_FALLBACK_WARNING,),
            is_fallback=True,
        ),
    )


async def create_fallback_candidate(
    prompt: str,
    lint_result: ModelLintResult,
    renderers: Mapping[EnumTemplateType, ProtocolTemplateRenderer] | None = None,
    config: ModelGenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> ModelTemplateCandidate:
    """Render the minimal template without selection or validation.

    Falls back to the untouched prompt if that fails too. Never raises.
    """
    renderer = None
    if renderers is not None:
        renderer = renderers.get(EnumTemplateType.MINIMAL)
    if renderer is None:
        renderer = MinimalTemplateRenderer()

    try:
        context = ModelRenderContext(prompt=prompt, lint_result=lint_result)
        timed = await render_template(renderer, context, config.render_timer)
        return ModelTemplateCandidate(
            template_type=EnumTemplateType.MINIMAL,
            content=timed.result.content,
            score=FALLBACK_SCORE,
            faithfulness_validated=True,
            generation_time_ms=timed.execution_time_ms,
            metadata=ModelCandidateMetadata(
                quality_score=timed.result.quality_score,
                performance=get_performance_metrics(
                    timed.execution_time_ms, config.render_timer
                ),
                warnings=(FALLBACK_WARNING,),
                is_fallback=True,
            ),
        )
    except Exception as e:
        logger.error("Fallback template failed: %s; returning original prompt", e)
        return create_ultimate_fallback_candidate(prompt)


# =============================================================================
# Handler Entry Point
# =============================================================================


async def _generate_ranked_candidates(
    prompt: str,
    lint_result: ModelLintResult,
    domain_service: ProtocolDomainService | None,
    renderers: Mapping[EnumTemplateType, ProtocolTemplateRenderer],
    config: ModelGenerationConfig,
) -> list[ModelTemplateCandidate]:
    domain = await classify_domain_with_deadline(prompt, domain_service, config)
    semantics = analyze_prompt_semantics(prompt)
    selection = handle_template_selection(
        prompt,
        semantics,
        domain,
        lint_result.issues,
        config.selection_config(),
    )

    context = ModelRenderContext(
        prompt=prompt,
        lint_result=lint_result,
        semantics=semantics,
        domain=domain,
    )

    candidates: list[ModelTemplateCandidate] = []
    for template_type in selection.template_types:
        result = await generate_candidate(
            template_type,
            context,
            selection,
            renderers.get(template_type),
            config,
        )
        if result.success and result.candidate is not None:
            candidates.append(result.candidate)

    if not candidates:
        raise TemplateGenerationError(
            "No candidate produced for selected templates: "
            + ", ".join(t.value for t in selection.template_types)
        )

    # sorted() is stable, so equal scores keep selection order
    ranked = sorted(candidates, key=lambda c: c.score, reverse=True)
    return ranked[: config.max_candidates]


async def generate_candidates(
    prompt: str,
    lint_result: ModelLintResult | None = None,
    *,
    max_candidates: int | None = None,
    enable_diversity: bool | None = None,
    faithfulness_threshold: float | None = None,
    domain_service: ProtocolDomainService | None = None,
    lint_service: ProtocolLintService | None = None,
    renderers: Mapping[EnumTemplateType, ProtocolTemplateRenderer] | None = None,
    config: ModelGenerationConfig | None = None,
) -> list[ModelTemplateCandidate]:
    """Generate 1-3 ranked template candidates for a prompt.

    Args:
        prompt: The user's prompt. Any string is accepted.
        lint_result: Lint analysis of the prompt. When None, `lint_service`
            is consulted; with neither, an issue-free result is assumed.
        max_candidates: Per-call override of config.max_candidates.
        enable_diversity: Per-call override of config.enable_diversity.
        faithfulness_threshold: Per-call override of
            config.faithfulness_threshold.
        domain_service: Domain classifier. None uses the default domain.
        lint_service: Lint service used when `lint_result` is None.
        renderers: Renderer per template type. None uses the defaults.
        config: Generation config. Defaults to DEFAULT_GENERATION_CONFIG.

    Returns:
        Non-empty list of candidates, best first. Never raises.
    """
    start_time = time.perf_counter()
    prompt = _coerce_prompt(prompt)
    if config is None:
        config = DEFAULT_GENERATION_CONFIG
    resolved_lint = ModelLintResult()

    try:
        effective_config = config.with_overrides(
            max_candidates=max_candidates,
            enable_diversity=enable_diversity,
            faithfulness_threshold=faithfulness_threshold,
        )
        resolved_lint = resolve_lint_result(prompt, lint_result, lint_service)
        renderer_map = renderers if renderers is not None else create_default_renderers()
        candidates = await _generate_ranked_candidates(
            prompt,
            resolved_lint,
            domain_service,
            renderer_map,
            effective_config,
        )
    except TemplateGenerationError as e:
        logger.warning("[%s] %s; using fallback candidate", e.code, e.message)
        candidates = [
            await create_fallback_candidate(prompt, resolved_lint, renderers, config)
        ]
    except Exception:
        logger.exception(
            "[%s] Candidate generation failed; using fallback candidate",
            ERROR_CODE_GENERATION_FAILED,
        )
        candidates = [
            await create_fallback_candidate(prompt, resolved_lint, renderers, config)
        ]

    total_time_ms = elapsed_time_ms(start_time)
    if total_time_ms > config.total_budget_ms:
        logger.warning(
            "Template generation took %.2fms, exceeding %.0fms budget",
            total_time_ms,
            config.total_budget_ms,
        )
    else:
        logger.debug(
            "Generated %d candidates in %.2fms", len(candidates), total_time_ms
        )
    return candidates


# =============================================================================
# Health
# =============================================================================


def validate_engine_health(
    renderers: Mapping[EnumTemplateType, ProtocolTemplateRenderer] | None = None,
    config: ModelGenerationConfig | None = None,
) -> ModelEngineHealth:
    """Check that every template type has a usable renderer.

    Example:
        >>> validate_engine_health().is_healthy
        True
    """
    if config is None:
        config = DEFAULT_GENERATION_CONFIG
    if renderers is None:
        renderers = create_default_renderers()

    issues: list[str] = []
    usable = 0
    for template_type in EnumTemplateType:
        renderer = renderers.get(template_type)
        if renderer is None:
            issues.append(f"Template '{template_type.value}' has no renderer")
        elif not isinstance(renderer, ProtocolTemplateRenderer):
            issues.append(
                f"Template '{template_type.value}' renderer does not implement "
                "ProtocolTemplateRenderer"
            )
        elif renderer.template_type != template_type:
            issues.append(
                f"Template '{template_type.value}' is mapped to a "
                f"'{renderer.template_type.value}' renderer"
            )
        else:
            usable += 1

    return ModelEngineHealth(
        is_healthy=not issues,
        issues=tuple(issues),
        template_count=usable,
        performance_budget_ms=config.total_budget_ms,
    )


__all__ = [
    "FALLBACK_SCORE",
    "FALLBACK_WARNING",
    "ULTIMATE_FALLBACK_SCORE",
    "ULTIMATE_FALLBACK_WARNING",
    "CandidateGenerationResult",
    "calculate_candidate_score",
    "classify_domain_with_deadline",
    "create_fallback_candidate",
    "create_ultimate_fallback_candidate",
    "generate_candidate",
    "generate_candidates",
    "resolve_lint_result",
    "validate_engine_health",
]

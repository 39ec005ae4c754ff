# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handler for multi-factor template scoring (pure computation).

Scores one template type against prompt semantics, a domain classification
and the lint issue list. Five factors start at 50, add bonuses from fixed
preference tables and are clamped to [0, 100] independently:

    Factor                  Weight
    domain_alignment         0.25
    intent_match             0.25
    complexity_appropriate   0.20
    completeness_support     0.15
    contextual_relevance     0.15

The weighted composite is rounded half-up to an integer. Weights are held
as integer percentages so the composite is computed exactly.

Adding a template type requires a column in every table below and a row
and column in the selection similarity matrix.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from promptlint.enums import (
    EnumCompletenessLevel,
    EnumComplexityLevel,
    EnumIntentType,
    EnumSpecificityLevel,
    EnumTemplateType,
)
from promptlint.models import (
    ModelDomainClassification,
    ModelLintIssue,
    ModelPromptSemantics,
    ModelTemplateScore,
    ModelTemplateScoreFactors,
)

logger = logging.getLogger(__name__)

_TASK_IO = EnumTemplateType.TASK_IO
_BULLET = EnumTemplateType.BULLET
_SEQUENTIAL = EnumTemplateType.SEQUENTIAL
_MINIMAL = EnumTemplateType.MINIMAL

_BASE_FACTOR_SCORE: Final[int] = 50

# =============================================================================
# Preference Tables
# =============================================================================

DOMAIN_TEMPLATE_BONUS: Final[dict[str, dict[EnumTemplateType, int]]] = {
    "code": {_TASK_IO: 30, _SEQUENTIAL: 20, _BULLET: 15, _MINIMAL: 5},
    "analysis": {_BULLET: 25, _TASK_IO: 20, _SEQUENTIAL: 15, _MINIMAL: 10},
    "writing": {_SEQUENTIAL: 25, _BULLET: 20, _MINIMAL: 15, _TASK_IO: 10},
    "research": {_BULLET: 30, _SEQUENTIAL: 20, _TASK_IO: 15, _MINIMAL: 10},
}

INTENT_TEMPLATE_BONUS: Final[dict[EnumIntentType, dict[EnumTemplateType, int]]] = {
    EnumIntentType.INSTRUCTIONAL: {_TASK_IO: 30, _SEQUENTIAL: 25, _BULLET: 15, _MINIMAL: 5},
    EnumIntentType.CREATIVE: {_SEQUENTIAL: 25, _BULLET: 20, _MINIMAL: 15, _TASK_IO: 10},
    EnumIntentType.ANALYTICAL: {_BULLET: 30, _TASK_IO: 20, _SEQUENTIAL: 15, _MINIMAL: 10},
    EnumIntentType.COMPARATIVE: {_BULLET: 35, _TASK_IO: 15, _SEQUENTIAL: 10, _MINIMAL: 5},
    EnumIntentType.PLANNING: {_BULLET: 30, _SEQUENTIAL: 25, _TASK_IO: 15, _MINIMAL: 10},
    EnumIntentType.DEBUGGING: {_SEQUENTIAL: 30, _TASK_IO: 25, _BULLET: 15, _MINIMAL: 5},
    EnumIntentType.EXPLANATORY: {_SEQUENTIAL: 25, _BULLET: 20, _MINIMAL: 15, _TASK_IO: 10},
    EnumIntentType.INVESTIGATIVE: {_BULLET: 30, _SEQUENTIAL: 20, _TASK_IO: 15, _MINIMAL: 10},
    EnumIntentType.GENERATIVE: {_MINIMAL: 20, _SEQUENTIAL: 15, _BULLET: 10, _TASK_IO: 5},
}

COMPLEXITY_TEMPLATE_BONUS: Final[
    dict[EnumComplexityLevel, dict[EnumTemplateType, int]]
] = {
    EnumComplexityLevel.SIMPLE: {_MINIMAL: 30, _BULLET: 20, _SEQUENTIAL: 10, _TASK_IO: 5},
    EnumComplexityLevel.MODERATE: {_BULLET: 25, _SEQUENTIAL: 20, _TASK_IO: 15, _MINIMAL: 10},
    EnumComplexityLevel.COMPLEX: {_TASK_IO: 30, _SEQUENTIAL: 25, _BULLET: 20, _MINIMAL: 5},
    EnumComplexityLevel.EXPERT: {_TASK_IO: 35, _SEQUENTIAL: 30, _BULLET: 25, _MINIMAL: 10},
}

COMPLETENESS_TEMPLATE_BONUS: Final[
    dict[EnumCompletenessLevel, dict[EnumTemplateType, int]]
] = {
    EnumCompletenessLevel.MINIMAL: {_MINIMAL: 30, _BULLET: 20, _SEQUENTIAL: 10, _TASK_IO: 5},
    EnumCompletenessLevel.PARTIAL: {_BULLET: 25, _SEQUENTIAL: 20, _TASK_IO: 15, _MINIMAL: 10},
    EnumCompletenessLevel.DETAILED: {_TASK_IO: 30, _SEQUENTIAL: 25, _BULLET: 20, _MINIMAL: 10},
    EnumCompletenessLevel.COMPREHENSIVE: {
        _TASK_IO: 35, _SEQUENTIAL: 30, _BULLET: 25, _MINIMAL: 15,
    },
}

# Keyed by ModelContextMarkers field name. Markers without an entry
# (temporal) do not affect contextual relevance.
CONTEXT_TEMPLATE_BONUS: Final[dict[str, dict[EnumTemplateType, int]]] = {
    "sequential": {_SEQUENTIAL: 25, _TASK_IO: 15, _BULLET: 10, _MINIMAL: 5},
    "organizational": {_BULLET: 25, _SEQUENTIAL: 20, _TASK_IO: 15, _MINIMAL: 10},
    "technical": {_TASK_IO: 25, _SEQUENTIAL: 20, _BULLET: 15, _MINIMAL: 5},
    "creative": {_SEQUENTIAL: 20, _BULLET: 15, _MINIMAL: 10, _TASK_IO: 5},
    "analytical": {_BULLET: 25, _TASK_IO: 20, _SEQUENTIAL: 15, _MINIMAL: 10},
    "conditional": {_TASK_IO: 20, _SEQUENTIAL: 15, _BULLET: 10, _MINIMAL: 5},
    "comparative": {_BULLET: 30, _TASK_IO: 15, _SEQUENTIAL: 10, _MINIMAL: 5},
}

# Integer percentages, sum to 100.
FACTOR_WEIGHTS: Final[dict[str, int]] = {
    "domain_alignment": 25,
    "intent_match": 25,
    "complexity_appropriate": 20,
    "completeness_support": 15,
    "contextual_relevance": 15,
}

_DOMAIN_CONFIDENCE_BONUSES: Final[tuple[tuple[float, int], ...]] = ((80.0, 10), (60.0, 5))
_CODE_TECHNICAL_BONUS: Final[int] = 15

_SEMANTIC_CONFIDENCE_BONUSES: Final[tuple[tuple[int, int], ...]] = ((80, 10), (60, 5))
_SPECIFICITY_CONFIDENCE_BONUS: Final[dict[EnumSpecificityLevel, int]] = {
    EnumSpecificityLevel.PRECISE: 10,
    EnumSpecificityLevel.SPECIFIC: 5,
}
_COMPREHENSIVE_CONFIDENCE_BONUS: Final[int] = 5
_MIN_SELECTION_CONFIDENCE: Final[int] = 20


def _clamp(value: int, lower: int = 0, upper: int = 100) -> int:
    return min(upper, max(lower, value))


# =============================================================================
# Factor Functions
# =============================================================================


def calculate_domain_alignment(
    template_type: EnumTemplateType,
    domain: ModelDomainClassification,
    semantics: ModelPromptSemantics,
) -> int:
    """Score how well a template fits the classified domain.

    Unknown domains (including the "general" default) get no table bonus.
    """
    score = _BASE_FACTOR_SCORE
    score += DOMAIN_TEMPLATE_BONUS.get(domain.domain, {}).get(template_type, 0)

    for threshold, bonus in _DOMAIN_CONFIDENCE_BONUSES:
        if domain.confidence >= threshold:
            score += bonus
            break

    if domain.domain == "code" and semantics.context.technical:
        score += _CODE_TECHNICAL_BONUS

    return _clamp(score)


def calculate_intent_match(
    template_type: EnumTemplateType, semantics: ModelPromptSemantics
) -> int:
    bonus = INTENT_TEMPLATE_BONUS[semantics.intent_type].get(template_type, 0)
    return _clamp(_BASE_FACTOR_SCORE + bonus)


def calculate_complexity_appropriate(
    template_type: EnumTemplateType, semantics: ModelPromptSemantics
) -> int:
    bonus = COMPLEXITY_TEMPLATE_BONUS[semantics.complexity].get(template_type, 0)
    return _clamp(_BASE_FACTOR_SCORE + bonus)


def calculate_completeness_support(
    template_type: EnumTemplateType, semantics: ModelPromptSemantics
) -> int:
    bonus = COMPLETENESS_TEMPLATE_BONUS[semantics.completeness].get(template_type, 0)
    return _clamp(_BASE_FACTOR_SCORE + bonus)


def calculate_contextual_relevance(
    template_type: EnumTemplateType, semantics: ModelPromptSemantics
) -> int:
    """Add the per-marker bonus of every active context marker."""
    score = _BASE_FACTOR_SCORE
    for marker in semantics.context.active_markers():
        score += CONTEXT_TEMPLATE_BONUS.get(marker, {}).get(template_type, 0)
    return _clamp(score)


def calculate_weighted_score(
    domain_alignment: int,
    intent_match: int,
    complexity_appropriate: int,
    completeness_support: int,
    contextual_relevance: int,
) -> int:
    """Weighted composite of the five factors, rounded half-up.

    Example:
        >>> calculate_weighted_score(85, 80, 75, 70, 50)
        74
    """
    weighted = (
        domain_alignment * FACTOR_WEIGHTS["domain_alignment"]
        + intent_match * FACTOR_WEIGHTS["intent_match"]
        + complexity_appropriate * FACTOR_WEIGHTS["complexity_appropriate"]
        + completeness_support * FACTOR_WEIGHTS["completeness_support"]
        + contextual_relevance * FACTOR_WEIGHTS["contextual_relevance"]
    )
    return (weighted + 50) // 100


def calculate_selection_factors(
    template_type: EnumTemplateType,
    semantics: ModelPromptSemantics,
    domain: ModelDomainClassification,
) -> ModelTemplateScoreFactors:
    domain_alignment = calculate_domain_alignment(template_type, domain, semantics)
    intent_match = calculate_intent_match(template_type, semantics)
    complexity_appropriate = calculate_complexity_appropriate(template_type, semantics)
    completeness_support = calculate_completeness_support(template_type, semantics)
    contextual_relevance = calculate_contextual_relevance(template_type, semantics)

    return ModelTemplateScoreFactors(
        domain_alignment=domain_alignment,
        intent_match=intent_match,
        complexity_appropriate=complexity_appropriate,
        completeness_support=completeness_support,
        contextual_relevance=contextual_relevance,
        overall_score=calculate_weighted_score(
            domain_alignment,
            intent_match,
            complexity_appropriate,
            completeness_support,
            contextual_relevance,
        ),
    )


# =============================================================================
# Reasoning and Confidence
# =============================================================================


def generate_reasoning(
    factors: ModelTemplateScoreFactors,
    semantics: ModelPromptSemantics,
    domain: ModelDomainClassification,
) -> list[str]:
    """Build the human-readable trace of which factor thresholds fired."""
    reasoning: list[str] = []

    if factors.domain_alignment >= 80:
        reasoning.append(
            f"Excellent domain alignment ({factors.domain_alignment}%) "
            f"for {domain.domain} domain"
        )
    elif factors.domain_alignment >= 60:
        reasoning.append(
            f"Good domain alignment ({factors.domain_alignment}%) "
            f"for {domain.domain} domain"
        )
    elif factors.domain_alignment >= 40:
        reasoning.append(
            f"Moderate domain alignment ({factors.domain_alignment}%) "
            f"for {domain.domain} domain"
        )

    intent = semantics.intent_type.value
    if factors.intent_match >= 80:
        reasoning.append(f"Strong intent match ({factors.intent_match}%) for {intent} intent")
    elif factors.intent_match >= 60:
        reasoning.append(f"Good intent match ({factors.intent_match}%) for {intent} intent")

    complexity = semantics.complexity.value
    if factors.complexity_appropriate >= 80:
        reasoning.append(f"Highly appropriate for {complexity} complexity level")
    elif factors.complexity_appropriate >= 60:
        reasoning.append(f"Appropriate for {complexity} complexity level")

    completeness = semantics.completeness.value
    if factors.completeness_support >= 80:
        reasoning.append(f"Excellent support for {completeness} completeness level")
    elif factors.completeness_support >= 60:
        reasoning.append(f"Good support for {completeness} completeness level")

    active_markers = semantics.context.active_markers()
    if active_markers and factors.contextual_relevance >= 70:
        reasoning.append(
            f"Strong contextual relevance for: {', '.join(active_markers)}"
        )

    if factors.overall_score >= 85:
        reasoning.append(f"Excellent overall match ({factors.overall_score}%)")
    elif factors.overall_score >= 70:
        reasoning.append(f"Good overall match ({factors.overall_score}%)")
    elif factors.overall_score >= 55:
        reasoning.append(f"Moderate overall match ({factors.overall_score}%)")

    return reasoning


def calculate_selection_confidence(
    factors: ModelTemplateScoreFactors, semantics: ModelPromptSemantics
) -> int:
    """Boost the overall score by semantic certainty, clamped to [20, 100]."""
    confidence = factors.overall_score

    for threshold, bonus in _SEMANTIC_CONFIDENCE_BONUSES:
        if semantics.confidence >= threshold:
            confidence += bonus
            break

    confidence += _SPECIFICITY_CONFIDENCE_BONUS.get(semantics.specificity, 0)

    if semantics.completeness == EnumCompletenessLevel.COMPREHENSIVE:
        confidence += _COMPREHENSIVE_CONFIDENCE_BONUS

    return _clamp(confidence, lower=_MIN_SELECTION_CONFIDENCE)


# =============================================================================
# Public Scoring API
# =============================================================================


def score_template(
    template_type: EnumTemplateType,
    semantics: ModelPromptSemantics,
    domain: ModelDomainClassification,
    lint_issues: Sequence[ModelLintIssue] = (),
) -> ModelTemplateScore:
    """Score one template type for one prompt.

    Args:
        template_type: Template to score.
        semantics: Semantic analysis of the prompt.
        domain: Domain classification of the prompt.
        lint_issues: Lint issues of the prompt. Accepted for interface
            symmetry with selection; no current factor reads them.

    Returns:
        A freshly built ModelTemplateScore.
    """
    factors = calculate_selection_factors(template_type, semantics, domain)
    reasoning = generate_reasoning(factors, semantics, domain)
    confidence = calculate_selection_confidence(factors, semantics)

    logger.debug(
        "Scored %s: overall=%d confidence=%d (lint issues: %d)",
        template_type.value,
        factors.overall_score,
        confidence,
        len(lint_issues),
    )

    return ModelTemplateScore(
        template_type=template_type,
        factors=factors,
        reasoning=tuple(reasoning),
        confidence=confidence,
    )


def score_all_templates(
    semantics: ModelPromptSemantics,
    domain: ModelDomainClassification,
    lint_issues: Sequence[ModelLintIssue] = (),
) -> list[ModelTemplateScore]:
    """Score every template type, in enum declaration order."""
    return [
        score_template(template_type, semantics, domain, lint_issues)
        for template_type in EnumTemplateType
    ]


__all__ = [
    "COMPLETENESS_TEMPLATE_BONUS",
    "COMPLEXITY_TEMPLATE_BONUS",
    "CONTEXT_TEMPLATE_BONUS",
    "DOMAIN_TEMPLATE_BONUS",
    "FACTOR_WEIGHTS",
    "INTENT_TEMPLATE_BONUS",
    "calculate_domain_alignment",
    "calculate_selection_confidence",
    "calculate_weighted_score",
    "score_all_templates",
    "score_template",
]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handler for tiered, diversity-aware template selection.

Selection tiers (by domain confidence, thresholds in ModelSelectionConfig):
    high       -> score all templates, keep top 2 under the diversity filter
    moderate   -> score all templates, keep top 3 under the diversity filter
    low        -> fixed rule table (handler_fallback_rules), no scoring

Ranking:
    Scores sort by overall_score descending. Ties break on template
    priority (task_io 80, bullet 70, sequential 60, minimal 50).

Diversity filter:
    Walk the ranked list and accept a template if its similarity to every
    accepted template is below the similarity threshold, or if nothing has
    been accepted yet.

Similarity matrix:
    bullet and sequential are both list-structured renderings of the same
    requirements, so that pair sits above the default 0.8 threshold and
    the filter keeps only the better-ranked of the two.

Similarity matrix maintenance:
    SIMILARITY_MATRIX is hand-authored. A new EnumTemplateType needs a row
    against every existing type; _validate_similarity_matrix() fails at
    import time if a pair is missing.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from itertools import combinations
from typing import Final

from promptlint.enums import TEMPLATE_PRIORITY, EnumSelectionStrategy, EnumTemplateType
from promptlint.models import (
    ModelDomainClassification,
    ModelLintIssue,
    ModelPromptSemantics,
    ModelTemplateScore,
    ModelTemplateSelection,
)
from promptlint.nodes.node_template_selection_compute.handlers.handler_fallback_rules import (
    apply_fallback_rules,
)
from promptlint.nodes.node_template_selection_compute.handlers.handler_template_scoring import (
    score_all_templates,
)
from promptlint.nodes.node_template_selection_compute.models import (
    DEFAULT_SELECTION_CONFIG,
    ModelSelectionConfig,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Similarity Matrix
# =============================================================================

_TASK_IO = EnumTemplateType.TASK_IO
_BULLET = EnumTemplateType.BULLET
_SEQUENTIAL = EnumTemplateType.SEQUENTIAL
_MINIMAL = EnumTemplateType.MINIMAL

# Upper triangle only; template_similarity() reads it symmetrically.
SIMILARITY_MATRIX: Final[dict[frozenset[EnumTemplateType], float]] = {
    frozenset((_TASK_IO, _BULLET)): 0.4,
    frozenset((_TASK_IO, _SEQUENTIAL)): 0.6,
    frozenset((_TASK_IO, _MINIMAL)): 0.3,
    frozenset((_BULLET, _SEQUENTIAL)): 0.85,
    frozenset((_BULLET, _MINIMAL)): 0.3,
    frozenset((_SEQUENTIAL, _MINIMAL)): 0.2,
}


def _validate_similarity_matrix() -> None:
    for first, second in combinations(EnumTemplateType, 2):
        pair = frozenset((first, second))
        if pair not in SIMILARITY_MATRIX:
            raise RuntimeError(
                f"SIMILARITY_MATRIX has no entry for {first.value}/{second.value}"
            )
        if not 0.0 <= SIMILARITY_MATRIX[pair] <= 1.0:
            raise RuntimeError(
                f"SIMILARITY_MATRIX value for {first.value}/{second.value} "
                "must be within [0, 1]"
            )


_validate_similarity_matrix()


def template_similarity(first: EnumTemplateType, second: EnumTemplateType) -> float:
    """Return the structural similarity of two template types (1.0 on the diagonal)."""
    if first == second:
        return 1.0
    return SIMILARITY_MATRIX[frozenset((first, second))]


# =============================================================================
# Selection Steps
# =============================================================================


def determine_selection_strategy(
    domain: ModelDomainClassification,
    config: ModelSelectionConfig = DEFAULT_SELECTION_CONFIG,
) -> EnumSelectionStrategy:
    """Pick the selection tier from the domain confidence."""
    if domain.confidence >= config.high_confidence_threshold:
        return EnumSelectionStrategy.HIGH
    if domain.confidence >= config.moderate_confidence_threshold:
        return EnumSelectionStrategy.MODERATE
    return EnumSelectionStrategy.LOW_CONFIDENCE_FALLBACK


def rank_template_scores(
    scores: Sequence[ModelTemplateScore],
) -> list[ModelTemplateScore]:
    """Order scores best-first, breaking ties on template priority."""
    return sorted(
        scores,
        key=lambda s: (-s.factors.overall_score, -TEMPLATE_PRIORITY[s.template_type]),
    )


def apply_diversity_filter(
    ranked: Sequence[EnumTemplateType],
    limit: int,
    similarity_threshold: float = DEFAULT_SELECTION_CONFIG.similarity_threshold,
) -> list[EnumTemplateType]:
    """Keep up to `limit` templates that are pairwise dissimilar.

    Example:
        >>> ranked = [EnumTemplateType.BULLET, EnumTemplateType.SEQUENTIAL]
        >>> [t.value for t in apply_diversity_filter(ranked, 2)]
        ['bullet']
    """
    accepted: list[EnumTemplateType] = []
    for template_type in ranked:
        if len(accepted) >= limit:
            break
        if template_type in accepted:
            continue
        if all(
            template_similarity(template_type, other) < similarity_threshold
            for other in accepted
        ):
            accepted.append(template_type)
    return accepted


# =============================================================================
# Handler Entry Points
# =============================================================================


def handle_template_selection(
    prompt: str,
    semantics: ModelPromptSemantics,
    domain: ModelDomainClassification,
    lint_issues: Sequence[ModelLintIssue] = (),
    config: ModelSelectionConfig | None = None,
) -> ModelTemplateSelection:
    """Select 1-3 template types for a prompt.

    Args:
        prompt: Original prompt text (read by the rule-table tier).
        semantics: Semantic analysis of the prompt.
        domain: Domain classification of the prompt.
        lint_issues: Lint issues of the prompt.
        config: Selection thresholds. Defaults to DEFAULT_SELECTION_CONFIG.

    Returns:
        ModelTemplateSelection with best-first, duplicate-free types.
    """
    if config is None:
        config = DEFAULT_SELECTION_CONFIG

    start_time = time.perf_counter()
    strategy = determine_selection_strategy(domain, config)
    scores: list[ModelTemplateScore] = []

    if strategy == EnumSelectionStrategy.LOW_CONFIDENCE_FALLBACK:
        template_types = apply_fallback_rules(prompt, lint_issues)
    else:
        if strategy == EnumSelectionStrategy.HIGH:
            limit = config.high_tier_count
        else:
            limit = config.moderate_tier_count
        limit = min(limit, config.max_templates)

        scores = rank_template_scores(score_all_templates(semantics, domain, lint_issues))
        ranked = [score.template_type for score in scores]
        if config.enable_diversity:
            template_types = apply_diversity_filter(
                ranked, limit, config.similarity_threshold
            )
        else:
            template_types = ranked[:limit]

    template_types = template_types[: config.max_templates]
    processing_time_ms = (time.perf_counter() - start_time) * 1000

    logger.debug(
        "Selected %s via %s tier (domain=%s confidence=%.1f) in %.2fms",
        [t.value for t in template_types],
        strategy.value,
        domain.domain,
        domain.confidence,
        processing_time_ms,
    )

    return ModelTemplateSelection(
        strategy=strategy,
        template_types=tuple(template_types),
        scores=tuple(scores),
        processing_time_ms=processing_time_ms,
    )


def select_templates(
    prompt: str,
    semantics: ModelPromptSemantics,
    domain: ModelDomainClassification,
    lint_issues: Sequence[ModelLintIssue] = (),
    config: ModelSelectionConfig | None = None,
) -> list[EnumTemplateType]:
    """Return the selected template types, best first.

    Thin wrapper over handle_template_selection() for callers that only
    need the types.
    """
    selection = handle_template_selection(prompt, semantics, domain, lint_issues, config)
    return list(selection.template_types)


__all__ = [
    "SIMILARITY_MATRIX",
    "apply_diversity_filter",
    "determine_selection_strategy",
    "handle_template_selection",
    "rank_template_scores",
    "select_templates",
    "template_similarity",
]

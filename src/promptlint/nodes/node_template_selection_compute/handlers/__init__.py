# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for the template selection compute node."""

from promptlint.nodes.node_template_selection_compute.handlers.handler_fallback_rules import (
    SelectionCriteria,
    analyze_selection_criteria,
    apply_fallback_rules,
)
from promptlint.nodes.node_template_selection_compute.handlers.handler_template_scoring import (
    score_all_templates,
    score_template,
)
from promptlint.nodes.node_template_selection_compute.handlers.handler_template_selection import (
    SIMILARITY_MATRIX,
    apply_diversity_filter,
    determine_selection_strategy,
    handle_template_selection,
    rank_template_scores,
    select_templates,
    template_similarity,
)

__all__ = [
    "SIMILARITY_MATRIX",
    "SelectionCriteria",
    "analyze_selection_criteria",
    "apply_diversity_filter",
    "apply_fallback_rules",
    "determine_selection_strategy",
    "handle_template_selection",
    "rank_template_scores",
    "score_all_templates",
    "score_template",
    "select_templates",
    "template_similarity",
]

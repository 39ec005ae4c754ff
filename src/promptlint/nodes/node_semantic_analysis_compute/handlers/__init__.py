# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for the semantic analysis compute node."""

from promptlint.nodes.node_semantic_analysis_compute.handlers.handler_semantic_analysis import (
    CONTEXT_MARKER_PATTERNS,
    analyze_prompt_semantics,
    create_empty_semantics,
    has_trailing_explanatory_clause,
)

__all__ = [
    "CONTEXT_MARKER_PATTERNS",
    "analyze_prompt_semantics",
    "create_empty_semantics",
    "has_trailing_explanatory_clause",
]

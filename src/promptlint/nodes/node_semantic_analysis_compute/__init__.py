# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Semantic Analysis Compute Node package."""

from promptlint.nodes.node_semantic_analysis_compute.handlers import (
    analyze_prompt_semantics,
    create_empty_semantics,
)

__all__ = ["analyze_prompt_semantics", "create_empty_semantics"]

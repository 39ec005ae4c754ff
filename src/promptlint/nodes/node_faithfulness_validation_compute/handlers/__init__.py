# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for the faithfulness validation compute node."""

from promptlint.nodes.node_faithfulness_validation_compute.handlers.handler_faithfulness_validation import (
    check_context_assumptions,
    check_forbidden_additions,
    check_requirement_expansion,
    check_scope_changes,
    check_technical_additions,
    validate_faithfulness,
)

__all__ = [
    "check_context_assumptions",
    "check_forbidden_additions",
    "check_requirement_expansion",
    "check_scope_changes",
    "check_technical_additions",
    "validate_faithfulness",
]

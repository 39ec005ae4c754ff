# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Lint issue enums consumed from the external lint service."""

from __future__ import annotations

from enum import Enum


class EnumLintIssueType(str, Enum):
    """Structural defects a lint service can report for a prompt.

    Attributes:
        MISSING_TASK_VERB: No clear action verb.
        MISSING_LANGUAGE: No programming language or technology named.
        MISSING_IO_SPECIFICATION: Input and output formats are not described.
        VAGUE_WORDING: Hedging or filler words ("something", "maybe").
        UNCLEAR_SCOPE: Boundaries of the task are not defined.
        REDUNDANT_LANGUAGE: Repeated or unnecessary wording.
    """

    MISSING_TASK_VERB = "missing_task_verb"
    MISSING_LANGUAGE = "missing_language"
    MISSING_IO_SPECIFICATION = "missing_io_specification"
    VAGUE_WORDING = "vague_wording"
    UNCLEAR_SCOPE = "unclear_scope"
    REDUNDANT_LANGUAGE = "redundant_language"


class EnumLintSeverity(str, Enum):
    """Severity attached to a lint issue."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


__all__ = ["EnumLintIssueType", "EnumLintSeverity"]

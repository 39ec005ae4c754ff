# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Semantic classification enums produced by the semantic analyzer.

Each enum is ordered from the weakest to the strongest tier so that
scoring tables can be read top to bottom.
"""

from __future__ import annotations

from enum import Enum


class EnumIntentType(str, Enum):
    """Primary intent detected in a prompt.

    Exactly one intent is assigned per prompt. GENERATIVE is the default
    when no intent pattern matches.
    """

    INSTRUCTIONAL = "instructional"
    CREATIVE = "creative"
    ANALYTICAL = "analytical"
    COMPARATIVE = "comparative"
    PLANNING = "planning"
    DEBUGGING = "debugging"
    EXPLANATORY = "explanatory"
    INVESTIGATIVE = "investigative"
    GENERATIVE = "generative"


class EnumComplexityLevel(str, Enum):
    """Complexity tier derived from length, task count and technical density."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"
    EXPERT = "expert"


class EnumCompletenessLevel(str, Enum):
    """How much of the information needed to act on the prompt is present."""

    MINIMAL = "minimal"
    PARTIAL = "partial"
    DETAILED = "detailed"
    COMPREHENSIVE = "comprehensive"


class EnumSpecificityLevel(str, Enum):
    """How precise the wording of the prompt is."""

    VAGUE = "vague"
    GENERAL = "general"
    SPECIFIC = "specific"
    PRECISE = "precise"


__all__ = [
    "EnumCompletenessLevel",
    "EnumComplexityLevel",
    "EnumIntentType",
    "EnumSpecificityLevel",
]

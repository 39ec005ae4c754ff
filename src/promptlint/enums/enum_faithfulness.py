# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Faithfulness violation enums.

A rendered template is faithful when it adds nothing the user did not say.
These enums categorize the ways a rendering can break that contract.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class EnumViolationType(str, Enum):
    """Category of content a rendering introduced.

    Attributes:
        ADDED_REQUIREMENT: Feature or constraint vocabulary not in the original.
        CHANGED_SCOPE: Rendering is much longer or shorter than the original.
        ADDED_ASSUMPTION: Reserved for assumptions outside the other categories.
        TECHNICAL_ADDITION: Language, framework, version or environment added.
        CONTEXT_ASSUMPTION: Skill level or project type added.
    """

    ADDED_REQUIREMENT = "added_requirement"
    CHANGED_SCOPE = "changed_scope"
    ADDED_ASSUMPTION = "added_assumption"
    TECHNICAL_ADDITION = "technical_addition"
    CONTEXT_ASSUMPTION = "context_assumption"


class EnumViolationSeverity(str, Enum):
    """Severity of a faithfulness violation. CRITICAL fails validation outright."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# Score penalty subtracted from 100 per violation.
SEVERITY_PENALTY: Final[dict[EnumViolationSeverity, int]] = {
    EnumViolationSeverity.CRITICAL: 50,
    EnumViolationSeverity.HIGH: 25,
    EnumViolationSeverity.MEDIUM: 15,
    EnumViolationSeverity.LOW: 5,
}


__all__ = ["SEVERITY_PENALTY", "EnumViolationSeverity", "EnumViolationType"]

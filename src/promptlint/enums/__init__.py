# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Prompt Template Enums Package.

Consolidated enums for the template engine:

    from promptlint.enums import (
        EnumTemplateType,
        EnumIntentType,
        EnumLintIssueType,
        EnumViolationSeverity,
    )

Exports:
    Template Enums:
        - EnumTemplateType: Closed set of restructuring templates
        - EnumSelectionStrategy: Confidence tier used for selection
        - TEMPLATE_PRIORITY: Template priority table (tie-break order)

    Semantic Enums:
        - EnumIntentType, EnumComplexityLevel, EnumCompletenessLevel,
          EnumSpecificityLevel

    Lint Enums:
        - EnumLintIssueType, EnumLintSeverity

    Faithfulness Enums:
        - EnumViolationType, EnumViolationSeverity, SEVERITY_PENALTY
"""

from promptlint.enums.enum_faithfulness import (
    SEVERITY_PENALTY,
    EnumViolationSeverity,
    EnumViolationType,
)
from promptlint.enums.enum_lint_issue import EnumLintIssueType, EnumLintSeverity
from promptlint.enums.enum_prompt_semantics import (
    EnumCompletenessLevel,
    EnumComplexityLevel,
    EnumIntentType,
    EnumSpecificityLevel,
)
from promptlint.enums.enum_selection_strategy import EnumSelectionStrategy
from promptlint.enums.enum_template_type import TEMPLATE_PRIORITY, EnumTemplateType

__all__ = [
    "SEVERITY_PENALTY",
    "TEMPLATE_PRIORITY",
    "EnumCompletenessLevel",
    "EnumComplexityLevel",
    "EnumIntentType",
    "EnumLintIssueType",
    "EnumLintSeverity",
    "EnumSelectionStrategy",
    "EnumSpecificityLevel",
    "EnumTemplateType",
    "EnumViolationSeverity",
    "EnumViolationType",
]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Rule table used when the domain classification is not trusted.

Bypasses scoring entirely and maps lint issue combinations plus a few
prompt keywords to template types. Rules fire in order and each appends
its template(s); the result is de-duplicated, truncated to three entries
and never empty (minimal is the default).

Rules:
    1. missing_language + missing_io, not complex, not vague -> task_io
    2. vague_wording + unclear_scope                          -> bullet
    3. sequential keywords                                    -> sequential
    4. simple and at most one issue                           -> minimal
    5. complex and three or more issues -> bullet, task_io, sequential
    6. missing_task_verb -> bullet if vague or complex, else task_io
    7. needs IO, not complex, not vague                       -> task_io
    8. vague                                                  -> bullet
    9. task structure + missing_language + simple             -> task_io
    10. task structure + simple                               -> minimal
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Literal

from promptlint.enums import EnumLintIssueType, EnumTemplateType
from promptlint.models import ModelLintIssue

PromptComplexity = Literal["simple", "medium", "complex"]

SEQUENTIAL_KEYWORDS: Final[tuple[str, ...]] = (
    "step", "steps", "then", "first", "next", "after", "before", "sequence",
    "process", "procedure", "workflow", "pipeline", "stage", "phase",
)

TASK_STRUCTURE_KEYWORDS: Final[tuple[str, ...]] = (
    "implement", "create", "build", "develop", "write", "generate", "design",
    "make", "construct", "program", "code", "architect", "engineer",
    "optimize", "debug", "analyze", "refactor", "fix", "improve", "enhance",
    "test", "validate", "review", "audit", "monitor", "troubleshoot",
)

VAGUE_KEYWORDS: Final[tuple[str, ...]] = (
    "something", "somehow", "maybe", "perhaps", "kind of", "sort of",
    "basically", "just", "whatever", "anything", "everything",
)

_MAX_TEMPLATES: Final[int] = 3


@dataclass(frozen=True, slots=True)
class SelectionCriteria:
    """Prompt features the rule table is keyed on."""

    issue_types: frozenset[EnumLintIssueType]
    issue_count: int
    complexity: PromptComplexity
    has_sequential_keywords: bool
    has_task_structure: bool
    needs_io_specification: bool
    has_vague_wording: bool

    def has_issue(self, issue_type: EnumLintIssueType) -> bool:
        return issue_type in self.issue_types


def determine_prompt_complexity(prompt: str, issue_count: int) -> PromptComplexity:
    """Coarse complexity from space-separated word count and issue count."""
    word_count = len(prompt.split(" "))
    if word_count <= 5 and issue_count <= 1:
        return "simple"
    if word_count <= 20 and issue_count <= 3:
        return "medium"
    return "complex"


def analyze_selection_criteria(
    prompt: str, lint_issues: Sequence[ModelLintIssue]
) -> SelectionCriteria:
    text = prompt.lower()
    issue_types = frozenset(issue.type for issue in lint_issues)
    return SelectionCriteria(
        issue_types=issue_types,
        issue_count=len(lint_issues),
        complexity=determine_prompt_complexity(prompt, len(lint_issues)),
        has_sequential_keywords=any(k in text for k in SEQUENTIAL_KEYWORDS),
        has_task_structure=any(k in text for k in TASK_STRUCTURE_KEYWORDS),
        needs_io_specification=(
            EnumLintIssueType.MISSING_IO_SPECIFICATION in issue_types
        ),
        has_vague_wording=(
            EnumLintIssueType.VAGUE_WORDING in issue_types
            or any(k in text for k in VAGUE_KEYWORDS)
        ),
    )


def apply_fallback_rules(
    prompt: str, lint_issues: Sequence[ModelLintIssue]
) -> list[EnumTemplateType]:
    """Select templates from the fixed rule table.

    Example:
        >>> [t.value for t in apply_fallback_rules("first do X, then Y", [])]
        ['sequential', 'minimal']
    """
    criteria = analyze_selection_criteria(prompt, lint_issues)
    complex_prompt = criteria.complexity == "complex"
    simple_prompt = criteria.complexity == "simple"
    vague = criteria.has_vague_wording
    selected: list[EnumTemplateType] = []

    if (
        criteria.has_issue(EnumLintIssueType.MISSING_LANGUAGE)
        and criteria.has_issue(EnumLintIssueType.MISSING_IO_SPECIFICATION)
        and not complex_prompt
        and not vague
    ):
        selected.append(EnumTemplateType.TASK_IO)

    if criteria.has_issue(EnumLintIssueType.VAGUE_WORDING) and criteria.has_issue(
        EnumLintIssueType.UNCLEAR_SCOPE
    ):
        selected.append(EnumTemplateType.BULLET)

    if criteria.has_sequential_keywords:
        selected.append(EnumTemplateType.SEQUENTIAL)

    if simple_prompt and criteria.issue_count <= 1:
        selected.append(EnumTemplateType.MINIMAL)

    if complex_prompt and criteria.issue_count >= 3:
        selected.extend(
            (EnumTemplateType.BULLET, EnumTemplateType.TASK_IO, EnumTemplateType.SEQUENTIAL)
        )

    if criteria.has_issue(EnumLintIssueType.MISSING_TASK_VERB):
        if vague or complex_prompt:
            selected.append(EnumTemplateType.BULLET)
        else:
            selected.append(EnumTemplateType.TASK_IO)

    if criteria.needs_io_specification and not complex_prompt and not vague:
        selected.append(EnumTemplateType.TASK_IO)

    if vague:
        selected.append(EnumTemplateType.BULLET)

    if (
        criteria.has_task_structure
        and criteria.has_issue(EnumLintIssueType.MISSING_LANGUAGE)
        and simple_prompt
    ):
        selected.append(EnumTemplateType.TASK_IO)

    if criteria.has_task_structure and simple_prompt:
        selected.append(EnumTemplateType.MINIMAL)

    if not selected:
        selected.append(EnumTemplateType.MINIMAL)

    # dict.fromkeys keeps first-seen order
    return list(dict.fromkeys(selected))[:_MAX_TEMPLATES]


__all__ = [
    "SEQUENTIAL_KEYWORDS",
    "TASK_STRUCTURE_KEYWORDS",
    "VAGUE_KEYWORDS",
    "SelectionCriteria",
    "analyze_selection_criteria",
    "apply_fallback_rules",
    "determine_prompt_complexity",
]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Base class and shared text helpers for the default template renderers.

Every renderer restructures the user's own words. Helpers here only pull
phrases out of the prompt (action verb, objective, input and output
specifications, constraint sentences); none of them invents content.

Scaffolding text (headings, placeholders, generic steps) must stay clear of
the faithfulness validator's CONSTRAINT_TERMS and FEATURE_TERMS, or every
rendering is flagged with an added_requirement violation it did not earn.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Final

from promptlint.enums import EnumLintIssueType, EnumTemplateType
from promptlint.models import ModelRenderContext, ModelRenderedTemplate

ACTION_VERBS: Final[tuple[str, ...]] = (
    "implement", "create", "build", "develop", "write", "generate", "design",
    "make", "construct", "program", "code", "architect", "engineer",
    "optimize", "debug", "analyze", "refactor", "fix", "improve", "enhance",
    "test", "validate", "review", "audit", "monitor", "troubleshoot",
)

INPUT_KEYWORDS: Final[tuple[str, ...]] = ("input", "given", "with", "using")
OUTPUT_KEYWORDS: Final[tuple[str, ...]] = ("output", "result", "return", "generate")
CONSTRAINT_KEYWORDS: Final[tuple[str, ...]] = (
    "must", "should", "cannot", "avoid", "ensure", "require",
)

DEFAULT_ACTION_VERB: Final[str] = "Create"

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")
_REPEATED_PUNCTUATION: Final[tuple[tuple[re.Pattern[str], str], ...]] = (
    (re.compile(r"\.{2,}"), "."),
    (re.compile(r"!{2,}"), "!"),
    (re.compile(r"\?{2,}"), "?"),
)


@dataclass(frozen=True, slots=True)
class TaskInfo:
    """Phrases extracted from a prompt. Text fields are lower-cased."""

    action_verb: str | None = None
    objective: str | None = None
    input_spec: str | None = None
    output_spec: str | None = None
    constraints: tuple[str, ...] = ()

    @property
    def professional_verb(self) -> str:
        """Capitalized action verb, or "Create" when the prompt has none."""
        if self.action_verb:
            return capitalize_first_letter(self.action_verb)
        return DEFAULT_ACTION_VERB


# =============================================================================
# Text Helpers
# =============================================================================


def capitalize_first_letter(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def _collapse_punctuation(text: str) -> str:
    for pattern, replacement in _REPEATED_PUNCTUATION:
        text = pattern.sub(replacement, text)
    return text


def clean_prompt(prompt: str) -> str:
    """Trim, collapse whitespace runs and repeated terminal punctuation."""
    return _collapse_punctuation(_WHITESPACE.sub(" ", prompt.strip()))


def clean_template_content(content: str) -> str:
    """Trim and collapse repeated punctuation, keeping line breaks."""
    return _collapse_punctuation(content.strip())


def strip_leading_verb(text: str, verb: str) -> str:
    """Drop `verb` from the start of `text` (case-insensitive)."""
    text = text.strip()
    return re.sub(rf"^{re.escape(verb)}\s+", "", text, flags=re.IGNORECASE).strip()


def first_sentence(text: str, separators: str = r"[.!?]", min_length: int = 0) -> str | None:
    """First sentence longer than `min_length` characters, stripped."""
    for sentence in re.split(separators, text):
        if len(sentence.strip()) > min_length:
            return sentence.strip()
    return None


# =============================================================================
# Task Extraction
# =============================================================================


def _find_action_verb(text: str) -> str | None:
    best_verb: str | None = None
    best_position = -1
    for verb in ACTION_VERBS:
        position = text.find(verb)
        if position != -1 and (best_verb is None or position < best_position):
            best_verb, best_position = verb, position
    return best_verb


def _extract_objective(text: str, verb: str) -> str | None:
    match = re.search(rf"\b{re.escape(verb)}\b", text)
    if match:
        after_verb = text[match.end():].strip()
        return after_verb.split(".")[0].strip() or None
    # verb only occurs inside a longer word; fall back to the first sentence
    objective = text.split(".")[0].strip()
    return strip_leading_verb(objective, verb) or None


def _extract_specification(text: str, keywords: tuple[str, ...]) -> str | None:
    for keyword in keywords:
        index = text.find(keyword)
        if index != -1:
            after_keyword = text[index + len(keyword):].strip()
            if after_keyword:
                return after_keyword.split(".")[0].strip() or None
    return None


def _extract_constraints(text: str) -> tuple[str, ...]:
    constraints: list[str] = []
    for keyword in CONSTRAINT_KEYWORDS:
        if keyword in text:
            constraints.extend(
                sentence.strip() for sentence in text.split(".") if keyword in sentence
            )
    return tuple(dict.fromkeys(c for c in constraints if c))


def extract_task_info(prompt: str) -> TaskInfo:
    """Extract the action verb and the phrases around it.

    The action verb is the listed verb that occurs earliest in the prompt.

    Example:
        >>> info = extract_task_info("Build a parser. It must handle errors.")
        >>> info.action_verb, info.objective, info.constraints
        ('build', 'a parser', ('it must handle errors',))
    """
    text = prompt.lower().strip()
    action_verb = _find_action_verb(text)
    return TaskInfo(
        action_verb=action_verb,
        objective=_extract_objective(text, action_verb) if action_verb else None,
        input_spec=_extract_specification(text, INPUT_KEYWORDS),
        output_spec=_extract_specification(text, OUTPUT_KEYWORDS),
        constraints=_extract_constraints(text),
    )


# =============================================================================
# Base Renderer
# =============================================================================


class BaseTemplateRenderer(ABC):
    """Synchronous renderer for one template type.

    Subclasses set `template_type` and `quality_score` and implement
    `is_suitable` and `build_content`. `render` cleans the content and
    attaches the quality score.
    """

    template_type: ClassVar[EnumTemplateType]
    quality_score: ClassVar[float]

    @abstractmethod
    def is_suitable(self, context: ModelRenderContext) -> bool:
        """Return True if this template fits the prompt."""

    @abstractmethod
    def build_content(self, context: ModelRenderContext, task_info: TaskInfo) -> str:
        """Build the raw restructured prompt."""

    def render(self, context: ModelRenderContext) -> ModelRenderedTemplate:
        task_info = extract_task_info(context.prompt)
        content = self.build_content(context, task_info)
        return ModelRenderedTemplate(
            content=clean_template_content(content),
            quality_score=self.quality_score,
        )

    @staticmethod
    def has_lint_issue(context: ModelRenderContext, issue_type: EnumLintIssueType) -> bool:
        return context.lint_result.has_issue(issue_type)


__all__ = [
    "ACTION_VERBS",
    "BaseTemplateRenderer",
    "TaskInfo",
    "capitalize_first_letter",
    "clean_prompt",
    "clean_template_content",
    "extract_task_info",
    "first_sentence",
    "strip_leading_verb",
]

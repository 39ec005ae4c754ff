# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Minimal renderer: light cleanup for prompts that are already usable."""

from __future__ import annotations

import re
from typing import Final

from promptlint.enums import EnumLintIssueType, EnumTemplateType
from promptlint.models import ModelRenderContext
from promptlint.renderers.renderer_base import (
    BaseTemplateRenderer,
    TaskInfo,
    capitalize_first_letter,
    clean_prompt,
)

TONE_REPLACEMENTS: Final[tuple[tuple[re.Pattern[str], str], ...]] = (
    (re.compile(r"\bcan you\b", re.IGNORECASE), "please"),
    (re.compile(r"\bkinda\b", re.IGNORECASE), "somewhat"),
    (re.compile(r"\bgonna\b", re.IGNORECASE), "going to"),
    (re.compile(r"\bwanna\b", re.IGNORECASE), "want to"),
    (re.compile(r"\bu\b", re.IGNORECASE), "you"),
    (re.compile(r"\br\b", re.IGNORECASE), "are"),
)

SUITABLE_LINT_SCORE: Final[float] = 70.0
MAX_SUITABLE_ISSUES: Final[int] = 2

_TERMINAL_PUNCTUATION: Final[re.Pattern[str]] = re.compile(r"[.!?]$")


def improve_professional_tone(text: str) -> str:
    for pattern, replacement in TONE_REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return text


def add_missing_punctuation(text: str) -> str:
    text = text.strip()
    if text and not _TERMINAL_PUNCTUATION.search(text):
        text += "."
    return text


class MinimalTemplateRenderer(BaseTemplateRenderer):
    """Basic cleanup and professional formatting.

    Also the renderer behind the engine's fallback candidate, so it must
    work for any prompt, including empty ones.
    """

    template_type = EnumTemplateType.MINIMAL
    quality_score = 70.0

    def is_suitable(self, context: ModelRenderContext) -> bool:
        lint_result = context.lint_result
        return (
            lint_result.score > SUITABLE_LINT_SCORE
            or len(lint_result.issues) <= MAX_SUITABLE_ISSUES
        )

    def build_content(self, context: ModelRenderContext, task_info: TaskInfo) -> str:
        text = improve_professional_tone(clean_prompt(context.prompt))
        text = capitalize_first_letter(add_missing_punctuation(text))

        missing_verb = self.has_lint_issue(context, EnumLintIssueType.MISSING_TASK_VERB)
        if missing_verb or self.has_lint_issue(context, EnumLintIssueType.VAGUE_WORDING):
            verb = task_info.professional_verb
            if missing_verb and verb.lower() not in text.lower():
                text = f"{verb} {text.lower()}"
            text = capitalize_first_letter(text)

        return text


__all__ = [
    "MinimalTemplateRenderer",
    "add_missing_punctuation",
    "improve_professional_tone",
]

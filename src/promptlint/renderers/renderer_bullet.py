# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Bullet point renderer.

Turns vague or broad prompts into an action statement followed by up to
five bullet points taken from the prompt, then a "Please specify"
block listing what the lint issues say is missing.
"""

from __future__ import annotations

import re
from typing import Final

from promptlint.enums import EnumLintIssueType, EnumTemplateType
from promptlint.models import ModelRenderContext
from promptlint.renderers.renderer_base import (
    BaseTemplateRenderer,
    TaskInfo,
    clean_prompt,
    first_sentence,
)

PLANNING_KEYWORDS: Final[tuple[str, ...]] = (
    "outline", "list", "organize", "plan", "structure", "breakdown",
    "categorize", "summarize", "points", "items", "goals", "objectives",
    "requirements", "features", "benefits", "steps", "factors", "aspects",
)

REQUIREMENT_KEYWORDS: Final[tuple[str, ...]] = (
    "must", "should", "need", "require", "ensure", "include", "use", "implement",
)

# Lint issue -> missing-information prompt, in display order.
MISSING_INFORMATION: Final[tuple[tuple[EnumLintIssueType, str], ...]] = (
    (EnumLintIssueType.MISSING_LANGUAGE, "Programming language or technology to use"),
    (EnumLintIssueType.MISSING_IO_SPECIFICATION, "Input format and expected output format"),
    (EnumLintIssueType.MISSING_TASK_VERB, "Specific action to perform"),
    (EnumLintIssueType.VAGUE_WORDING, "More specific details and limits"),
    (EnumLintIssueType.UNCLEAR_SCOPE, "Project scope and boundaries"),
)

DEFAULT_REQUIREMENT: Final[str] = "Complete the requested task"
MAX_REQUIREMENTS: Final[int] = 5


class BulletTemplateRenderer(BaseTemplateRenderer):
    """Organizes vague prompts into bullet point requirements."""

    template_type = EnumTemplateType.BULLET
    quality_score = 85.0

    def is_suitable(self, context: ModelRenderContext) -> bool:
        lint_result = context.lint_result
        if (
            lint_result.has_issue(EnumLintIssueType.VAGUE_WORDING)
            or lint_result.has_issue(EnumLintIssueType.UNCLEAR_SCOPE)
            or len(lint_result.issues) >= 3
        ):
            return True
        text = context.prompt.lower()
        return any(keyword in text for keyword in PLANNING_KEYWORDS)

    def build_content(self, context: ModelRenderContext, task_info: TaskInfo) -> str:
        objective = task_info.objective or _main_objective(context.prompt)
        content = (
            f"{task_info.professional_verb} {objective} "
            "with the following points:\n\n"
        )
        content += "".join(
            f"• {r}\n" for r in extract_requirements(context.prompt, task_info)
        )

        missing = [
            text
            for issue_type, text in MISSING_INFORMATION
            if self.has_lint_issue(context, issue_type)
        ]
        if missing:
            content += "\n**Please specify:**\n"
            content += "".join(f"• {m}\n" for m in missing)

        return content


def _main_objective(prompt: str) -> str:
    cleaned = clean_prompt(prompt)
    return first_sentence(cleaned, min_length=5) or cleaned


def extract_requirements(prompt: str, task_info: TaskInfo) -> list[str]:
    """Collect bullet requirements from the prompt, at most five."""
    requirements: list[str] = []
    if task_info.input_spec:
        requirements.append(f"Input: {task_info.input_spec}")
    if task_info.output_spec:
        requirements.append(f"Output: {task_info.output_spec}")
    requirements.extend(task_info.constraints)

    for sentence in re.split(r"[.!?]", prompt):
        sentence = sentence.strip()
        if len(sentence) <= 10:
            continue
        prefix = sentence[:20]
        if any(prefix in existing for existing in requirements):
            continue
        lowered = sentence.lower()
        if any(keyword in lowered for keyword in REQUIREMENT_KEYWORDS):
            requirements.append(sentence)

    if not requirements:
        requirements.append(DEFAULT_REQUIREMENT)
    return requirements[:MAX_REQUIREMENTS]


__all__ = ["BulletTemplateRenderer", "extract_requirements"]

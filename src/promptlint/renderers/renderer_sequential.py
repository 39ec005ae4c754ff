# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Sequential steps renderer.

Reuses steps the user already wrote (numbered items, or sentences opening
with first/then/next/after/finally). When there are none, it lays out a
generic plan built only from what the prompt mentions. Between two and
six steps are rendered.
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

SEQUENTIAL_KEYWORDS: Final[tuple[str, ...]] = (
    "step", "steps", "then", "first", "next", "after", "before", "sequence",
    "process", "procedure", "workflow", "stage", "phase", "implement", "build",
    "create", "develop", "setup", "configure", "install", "deploy", "execute",
    "run", "perform", "complete",
)

MULTI_STAGE_PATTERNS: Final[tuple[str, ...]] = (
    "and then", "and implement", "and create", "and build", "and develop",
    "then implement", "then create", "then build", "then develop",
)

STEP_INDICATORS: Final[tuple[str, ...]] = ("step", "first", "then", "process", "procedure")
STEP_OPENERS: Final[tuple[str, ...]] = ("first", "then", "next", "after", "finally")

MIN_STEPS: Final[int] = 2
MAX_STEPS: Final[int] = 6
MAX_CONSTRAINT_REQUIREMENTS: Final[int] = 3

_NUMBERED_STEP: Final[re.Pattern[str]] = re.compile(r"\d+\.\s*([^\n.]+)")


class SequentialTemplateRenderer(BaseTemplateRenderer):
    """Organizes process-oriented prompts into numbered steps."""

    template_type = EnumTemplateType.SEQUENTIAL
    quality_score = 85.0

    def is_suitable(self, context: ModelRenderContext) -> bool:
        text = context.prompt.lower()
        return any(k in text for k in SEQUENTIAL_KEYWORDS) or any(
            p in text for p in MULTI_STAGE_PATTERNS
        )

    def build_content(self, context: ModelRenderContext, task_info: TaskInfo) -> str:
        objective = task_info.objective or _main_objective(context.prompt)
        content = f"{task_info.professional_verb} {objective} using the following steps:\n\n"

        steps = self.extract_steps(context, task_info)
        content += "".join(f"{i}. {step}\n" for i, step in enumerate(steps, start=1))

        requirements: list[str] = []
        if self.has_lint_issue(context, EnumLintIssueType.MISSING_LANGUAGE):
            requirements.append("Specify programming language or technology to use")
        if self.has_lint_issue(context, EnumLintIssueType.MISSING_IO_SPECIFICATION):
            requirements.append("Define input and output formats clearly")
        requirements.extend(task_info.constraints[:MAX_CONSTRAINT_REQUIREMENTS])

        if requirements:
            content += "\n**Details to confirm:**\n"
            content += "".join(f"• {r}\n" for r in requirements)

        return content

    def extract_steps(self, context: ModelRenderContext, task_info: TaskInfo) -> list[str]:
        steps = extract_existing_steps(context.prompt)
        if not steps:
            steps = self._generate_logical_steps(context, task_info)
        if len(steps) < MIN_STEPS:
            steps.extend(("Complete the implementation", "Test and verify the results"))
        return steps[:MAX_STEPS]

    def _generate_logical_steps(
        self, context: ModelRenderContext, task_info: TaskInfo
    ) -> list[str]:
        missing_io = self.has_lint_issue(
            context, EnumLintIssueType.MISSING_IO_SPECIFICATION
        )
        steps = ["Review the goal and plan the approach"]
        if task_info.input_spec or missing_io:
            steps.append("Prepare and validate input data")
        if task_info.action_verb:
            steps.append(f"{task_info.professional_verb} the core functionality")
        else:
            steps.append("Implement the core functionality")
        if task_info.output_spec or missing_io:
            steps.append("Format and deliver the output")
        steps.append("Test and validate the results")
        return steps


def _main_objective(prompt: str) -> str:
    cleaned = clean_prompt(prompt)
    lowered = cleaned.lower()
    for indicator in STEP_INDICATORS:
        index = lowered.find(indicator)
        if index > 10:
            return cleaned[:index].strip()
    return first_sentence(cleaned, min_length=5) or cleaned


def extract_existing_steps(prompt: str) -> list[str]:
    """Steps the user already wrote, numbered items first."""
    steps = [match.strip() for match in _NUMBERED_STEP.findall(prompt)]
    for sentence in re.split(r"[.!?\n]", prompt):
        stripped = sentence.strip()
        if len(stripped) > 5 and stripped.lower().startswith(STEP_OPENERS):
            steps.append(stripped)
    return steps


__all__ = ["SequentialTemplateRenderer", "extract_existing_steps"]

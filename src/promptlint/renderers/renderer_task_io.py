# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Task / Input / Output renderer.

Layout:
    **Task:** <Verb> <objective>

    **Input:** <input spec | placeholder>

    **Output:** <output spec | placeholder>

    **Conditions:**        (only when the prompt states constraints)
    • <constraint>
"""

from __future__ import annotations

from typing import Final

from promptlint.enums import EnumLintIssueType, EnumTemplateType
from promptlint.models import ModelRenderContext
from promptlint.renderers.renderer_base import (
    BaseTemplateRenderer,
    TaskInfo,
    clean_prompt,
    strip_leading_verb,
)

MISSING_INPUT_PLACEHOLDER: Final[str] = "[Please specify input format and details]"
MISSING_OUTPUT_PLACEHOLDER: Final[str] = "[Please specify expected output format]"
DEFAULT_INPUT: Final[str] = "As provided by user"
DEFAULT_OUTPUT: Final[str] = "Completed task result"

_SUITABLE_ISSUES: Final[frozenset[EnumLintIssueType]] = frozenset(
    {
        EnumLintIssueType.MISSING_TASK_VERB,
        EnumLintIssueType.MISSING_IO_SPECIFICATION,
        EnumLintIssueType.MISSING_LANGUAGE,
    }
)


class TaskIOTemplateRenderer(BaseTemplateRenderer):
    """Structures prompts missing a clear task or I/O specification."""

    template_type = EnumTemplateType.TASK_IO
    quality_score = 90.0

    def is_suitable(self, context: ModelRenderContext) -> bool:
        return bool(context.lint_result.issue_types & _SUITABLE_ISSUES)

    def build_content(self, context: ModelRenderContext, task_info: TaskInfo) -> str:
        verb = task_info.professional_verb
        missing_io = self.has_lint_issue(
            context, EnumLintIssueType.MISSING_IO_SPECIFICATION
        )

        objective = task_info.objective or _main_objective(context.prompt)
        content = f"**Task:** {verb} {strip_leading_verb(objective, verb)}\n\n"

        if task_info.input_spec:
            input_text = task_info.input_spec
        elif missing_io:
            input_text = MISSING_INPUT_PLACEHOLDER
        else:
            input_text = DEFAULT_INPUT
        content += f"**Input:** {input_text}\n\n"

        if task_info.output_spec:
            output_text = task_info.output_spec
        elif missing_io:
            output_text = MISSING_OUTPUT_PLACEHOLDER
        else:
            output_text = DEFAULT_OUTPUT
        content += f"**Output:** {output_text}"

        if task_info.constraints:
            content += "\n\n**Conditions:**\n"
            content += "".join(f"• {c}\n" for c in task_info.constraints)

        return content


def _main_objective(prompt: str) -> str:
    cleaned = clean_prompt(prompt)
    for sentence in cleaned.split("."):
        if sentence.strip():
            return sentence.strip()
    return cleaned


__all__ = ["TaskIOTemplateRenderer"]

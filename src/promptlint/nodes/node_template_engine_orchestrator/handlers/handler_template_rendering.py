# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Renderer construction, template metadata and deadline-bounded rendering."""

from __future__ import annotations

import inspect
import logging
from typing import Final

from promptlint.enums import TEMPLATE_PRIORITY, EnumTemplateType
from promptlint.models import (
    ModelRenderContext,
    ModelRenderedTemplate,
    ModelTemplateMetadata,
    ModelTimedResult,
    ModelTimerConfig,
)
from promptlint.nodes.node_template_engine_orchestrator.handlers.exceptions import (
    TemplateRenderError,
)
from promptlint.protocols import ProtocolTemplateRenderer
from promptlint.renderers import (
    BaseTemplateRenderer,
    BulletTemplateRenderer,
    MinimalTemplateRenderer,
    SequentialTemplateRenderer,
    TaskIOTemplateRenderer,
)
from promptlint.utils import measure_async

logger = logging.getLogger(__name__)

TEMPLATE_METADATA: Final[dict[EnumTemplateType, ModelTemplateMetadata]] = {
    EnumTemplateType.TASK_IO: ModelTemplateMetadata(
        name="Task/Input/Output Template",
        description=(
            "Structures prompts with clear task definition, input requirements, "
            "and expected output"
        ),
        priority=TEMPLATE_PRIORITY[EnumTemplateType.TASK_IO],
    ),
    EnumTemplateType.BULLET: ModelTemplateMetadata(
        name="Bullet Point Template",
        description="Organizes vague prompts into clear bullet point requirements",
        priority=TEMPLATE_PRIORITY[EnumTemplateType.BULLET],
    ),
    EnumTemplateType.SEQUENTIAL: ModelTemplateMetadata(
        name="Sequential Steps Template",
        description="Organizes process-oriented prompts into numbered sequential steps",
        priority=TEMPLATE_PRIORITY[EnumTemplateType.SEQUENTIAL],
    ),
    EnumTemplateType.MINIMAL: ModelTemplateMetadata(
        name="Minimal Template",
        description="Basic cleanup and professional formatting for well-structured prompts",
        priority=TEMPLATE_PRIORITY[EnumTemplateType.MINIMAL],
    ),
}


def create_renderer(template_type: EnumTemplateType) -> BaseTemplateRenderer:
    """Construct the default renderer for a template type."""
    if template_type == EnumTemplateType.TASK_IO:
        return TaskIOTemplateRenderer()
    elif template_type == EnumTemplateType.BULLET:
        return BulletTemplateRenderer()
    elif template_type == EnumTemplateType.SEQUENTIAL:
        return SequentialTemplateRenderer()
    elif template_type == EnumTemplateType.MINIMAL:
        return MinimalTemplateRenderer()
    raise ValueError(f"No renderer for template type: {template_type!r}")


def create_default_renderers() -> dict[EnumTemplateType, ProtocolTemplateRenderer]:
    """Build one default renderer per template type."""
    return {template_type: create_renderer(template_type) for template_type in EnumTemplateType}


def get_available_templates() -> list[EnumTemplateType]:
    """Template types in descending priority order."""
    return sorted(EnumTemplateType, key=lambda t: -TEMPLATE_PRIORITY[t])


def get_template_metadata(template_type: EnumTemplateType) -> ModelTemplateMetadata:
    return TEMPLATE_METADATA[template_type]


async def _render(
    renderer: ProtocolTemplateRenderer, context: ModelRenderContext
) -> ModelRenderedTemplate:
    rendered = renderer.render(context)
    if inspect.isawaitable(rendered):
        rendered = await rendered
    return rendered


async def render_template(
    renderer: ProtocolTemplateRenderer,
    context: ModelRenderContext,
    timer_config: ModelTimerConfig,
) -> ModelTimedResult[ModelRenderedTemplate]:
    """Render under the timer deadline.

    Raises:
        TemplateRenderError: The render missed its deadline or returned
            something other than a ModelRenderedTemplate.
        Exception: Anything the renderer itself raises.
    """
    label = f"render:{renderer.template_type.value}"
    timed = await measure_async(
        lambda: _render(renderer, context),
        config=timer_config,
        label=label,
    )
    if timed.result is None:
        raise TemplateRenderError(
            f"{label} exceeded {timer_config.max_execution_time_ms:.0f}ms deadline"
        )
    if not isinstance(timed.result, ModelRenderedTemplate):
        raise TemplateRenderError(
            f"{label} returned {type(timed.result).__name__}, "
            "expected ModelRenderedTemplate"
        )
    logger.debug("%s completed in %.2fms", label, timed.execution_time_ms)
    return timed


__all__ = [
    "TEMPLATE_METADATA",
    "create_default_renderers",
    "create_renderer",
    "get_available_templates",
    "get_template_metadata",
    "render_template",
]

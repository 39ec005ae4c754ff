# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Default template renderers.

One renderer per EnumTemplateType. Each satisfies ProtocolTemplateRenderer
and renders synchronously.
"""

from promptlint.renderers.renderer_base import (
    BaseTemplateRenderer,
    TaskInfo,
    extract_task_info,
)
from promptlint.renderers.renderer_bullet import BulletTemplateRenderer
from promptlint.renderers.renderer_minimal import MinimalTemplateRenderer
from promptlint.renderers.renderer_sequential import SequentialTemplateRenderer
from promptlint.renderers.renderer_task_io import TaskIOTemplateRenderer

__all__ = [
    "BaseTemplateRenderer",
    "BulletTemplateRenderer",
    "MinimalTemplateRenderer",
    "SequentialTemplateRenderer",
    "TaskIOTemplateRenderer",
    "TaskInfo",
    "extract_task_info",
]

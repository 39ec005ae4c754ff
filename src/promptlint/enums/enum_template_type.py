# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Template type enum for the prompt restructuring engine.

The set of template types is closed. Every lookup table keyed by template
type (scoring tables, similarity matrix, priorities, renderer dispatch) must
be extended together when a member is added.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class EnumTemplateType(str, Enum):
    """Restructuring styles a prompt can be rendered into.

    Attributes:
        TASK_IO: Task / Input / Output sections.
        BULLET: Objective followed by enumerated bullet requirements.
        SEQUENTIAL: Objective followed by numbered steps.
        MINIMAL: Light cleanup of the original wording.

    Example:
        >>> EnumTemplateType("bullet") is EnumTemplateType.BULLET
        True
    """

    TASK_IO = "task_io"
    BULLET = "bullet"
    SEQUENTIAL = "sequential"
    MINIMAL = "minimal"


# Selection priority, also used to break ranking ties (higher wins).
TEMPLATE_PRIORITY: Final[dict[EnumTemplateType, int]] = {
    EnumTemplateType.TASK_IO: 80,
    EnumTemplateType.BULLET: 70,
    EnumTemplateType.SEQUENTIAL: 60,
    EnumTemplateType.MINIMAL: 50,
}


__all__ = ["TEMPLATE_PRIORITY", "EnumTemplateType"]

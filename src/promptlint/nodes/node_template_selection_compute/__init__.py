# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Template Selection Compute Node package."""

from promptlint.nodes.node_template_selection_compute.handlers import (
    handle_template_selection,
    score_template,
    select_templates,
)
from promptlint.nodes.node_template_selection_compute.models import (
    DEFAULT_SELECTION_CONFIG,
    ModelSelectionConfig,
)

__all__ = [
    "DEFAULT_SELECTION_CONFIG",
    "ModelSelectionConfig",
    "handle_template_selection",
    "score_template",
    "select_templates",
]

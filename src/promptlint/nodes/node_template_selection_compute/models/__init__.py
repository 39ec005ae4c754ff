# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for the template selection compute node."""

from promptlint.nodes.node_template_selection_compute.models.model_selection_config import (
    DEFAULT_SELECTION_CONFIG,
    ModelSelectionConfig,
)

__all__ = ["DEFAULT_SELECTION_CONFIG", "ModelSelectionConfig"]

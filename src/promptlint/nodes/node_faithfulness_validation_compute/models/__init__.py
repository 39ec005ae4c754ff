# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for the faithfulness validation compute node."""

from promptlint.nodes.node_faithfulness_validation_compute.models.model_faithfulness_config import (
    DEFAULT_FAITHFULNESS_CONFIG,
    ModelFaithfulnessConfig,
)

__all__ = ["DEFAULT_FAITHFULNESS_CONFIG", "ModelFaithfulnessConfig"]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Faithfulness Validation Compute Node package."""

from promptlint.nodes.node_faithfulness_validation_compute.handlers import (
    validate_faithfulness,
)
from promptlint.nodes.node_faithfulness_validation_compute.models import (
    DEFAULT_FAITHFULNESS_CONFIG,
    ModelFaithfulnessConfig,
)

__all__ = [
    "DEFAULT_FAITHFULNESS_CONFIG",
    "ModelFaithfulnessConfig",
    "validate_faithfulness",
]

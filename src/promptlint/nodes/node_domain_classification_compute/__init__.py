# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Domain Classification Compute Node package."""

from promptlint.nodes.node_domain_classification_compute.handlers import (
    RuleBasedDomainClassifier,
    classify_domain,
)

__all__ = ["RuleBasedDomainClassifier", "classify_domain"]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for the domain classification compute node."""

from promptlint.nodes.node_domain_classification_compute.handlers.handler_domain_rules import (
    DOMAIN_RULES,
    DomainRule,
    DomainScore,
    RuleBasedDomainClassifier,
    calibrate_rule_score,
    classify_domain,
    score_domain,
)

__all__ = [
    "DOMAIN_RULES",
    "DomainRule",
    "DomainScore",
    "RuleBasedDomainClassifier",
    "calibrate_rule_score",
    "classify_domain",
    "score_domain",
]

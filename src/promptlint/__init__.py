# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""PromptLint - adaptive prompt template engine.

Restructures a user's prompt into 1-3 ranked template candidates
(task/input/output, bullet points, sequential steps, minimal cleanup),
checking every rendering against the original so nothing the user did not
say is added.

Quick Start:
    >>> import asyncio
    >>> from promptlint import RuleBasedDomainClassifier, generate_candidates
    >>> candidates = asyncio.run(
    ...     generate_candidates(
    ...         "first do the setup, then run the tests",
    ...         domain_service=RuleBasedDomainClassifier(),
    ...     )
    ... )
    >>> 1 <= len(candidates) <= 3
    True
"""

from promptlint.enums import EnumTemplateType
from promptlint.models import (
    ModelDomainClassification,
    ModelFaithfulnessResult,
    ModelLintIssue,
    ModelLintResult,
    ModelTemplateCandidate,
)
from promptlint.nodes.node_domain_classification_compute import (
    RuleBasedDomainClassifier,
)
from promptlint.nodes.node_faithfulness_validation_compute import (
    validate_faithfulness,
)
from promptlint.nodes.node_semantic_analysis_compute import analyze_prompt_semantics
from promptlint.nodes.node_template_engine_orchestrator import (
    ModelGenerationConfig,
    NodeTemplateEngineOrchestrator,
    TemplateEngineSettings,
    generate_candidates,
)
from promptlint.nodes.node_template_selection_compute import select_templates

__version__ = "0.1.0"

__all__ = [
    # Types
    "EnumTemplateType",
    "ModelDomainClassification",
    "ModelFaithfulnessResult",
    "ModelLintIssue",
    "ModelLintResult",
    "ModelTemplateCandidate",
    # Configuration
    "ModelGenerationConfig",
    "TemplateEngineSettings",
    # Main API
    "NodeTemplateEngineOrchestrator",
    "RuleBasedDomainClassifier",
    "analyze_prompt_semantics",
    "generate_candidates",
    "select_templates",
    "validate_faithfulness",
]

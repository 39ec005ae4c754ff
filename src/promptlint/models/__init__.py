# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared models for the prompt template engine.

All models are frozen pydantic models; tuples are used for sequence
fields so instances stay immutable after construction.
"""

from promptlint.models.model_domain_classification import (
    DEFAULT_DOMAIN,
    ModelDomainClassification,
    create_default_domain_classification,
)
from promptlint.models.model_faithfulness import (
    ModelFaithfulnessResult,
    ModelFaithfulnessViolation,
)
from promptlint.models.model_lint_result import ModelLintIssue, ModelLintResult
from promptlint.models.model_prompt_semantics import (
    ModelContextMarkers,
    ModelPromptSemantics,
)
from promptlint.models.model_render import (
    ModelRenderContext,
    ModelRenderedTemplate,
    ModelTemplateMetadata,
)
from promptlint.models.model_template_candidate import (
    ModelCandidateMetadata,
    ModelTemplateCandidate,
    generate_candidate_id,
)
from promptlint.models.model_template_score import (
    ModelTemplateScore,
    ModelTemplateScoreFactors,
    ModelTemplateSelection,
)
from promptlint.models.model_timed_result import (
    ModelPerformanceMetrics,
    ModelTimedResult,
    ModelTimerConfig,
)

__all__ = [
    "DEFAULT_DOMAIN",
    "ModelCandidateMetadata",
    "ModelContextMarkers",
    "ModelDomainClassification",
    "ModelFaithfulnessResult",
    "ModelFaithfulnessViolation",
    "ModelLintIssue",
    "ModelLintResult",
    "ModelPerformanceMetrics",
    "ModelPromptSemantics",
    "ModelRenderContext",
    "ModelRenderedTemplate",
    "ModelTemplateCandidate",
    "ModelTemplateMetadata",
    "ModelTemplateScore",
    "ModelTemplateScoreFactors",
    "ModelTemplateSelection",
    "ModelTimedResult",
    "ModelTimerConfig",
    "create_default_domain_classification",
    "generate_candidate_id",
]

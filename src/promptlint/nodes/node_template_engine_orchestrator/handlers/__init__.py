# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for the template engine orchestrator node."""

from promptlint.nodes.node_template_engine_orchestrator.handlers.exceptions import (
    ERROR_CODE_DOMAIN_CLASSIFICATION_FAILED,
    ERROR_CODE_GENERATION_FAILED,
    ERROR_CODE_RENDER_FAILED,
    DomainClassificationError,
    TemplateEngineError,
    TemplateGenerationError,
    TemplateRenderError,
)
from promptlint.nodes.node_template_engine_orchestrator.handlers.handler_candidate_generation import (
    FALLBACK_SCORE,
    FALLBACK_WARNING,
    ULTIMATE_FALLBACK_SCORE,
    ULTIMATE_FALLBACK_WARNING,
    CandidateGenerationResult,
    calculate_candidate_score,
    classify_domain_with_deadline,
    create_fallback_candidate,
    create_ultimate_fallback_candidate,
    generate_candidate,
    generate_candidates,
    resolve_lint_result,
    validate_engine_health,
)
from promptlint.nodes.node_template_engine_orchestrator.handlers.handler_template_rendering import (
    TEMPLATE_METADATA,
    create_default_renderers,
    create_renderer,
    get_available_templates,
    get_template_metadata,
    render_template,
)

__all__ = [
    "ERROR_CODE_DOMAIN_CLASSIFICATION_FAILED",
    "ERROR_CODE_GENERATION_FAILED",
    "ERROR_CODE_RENDER_FAILED",
    "FALLBACK_SCORE",
    "FALLBACK_WARNING",
    "TEMPLATE_METADATA",
    "ULTIMATE_FALLBACK_SCORE",
    "ULTIMATE_FALLBACK_WARNING",
    "CandidateGenerationResult",
    "DomainClassificationError",
    "TemplateEngineError",
    "TemplateGenerationError",
    "TemplateRenderError",
    "calculate_candidate_score",
    "classify_domain_with_deadline",
    "create_default_renderers",
    "create_fallback_candidate",
    "create_renderer",
    "create_ultimate_fallback_candidate",
    "generate_candidate",
    "generate_candidates",
    "get_available_templates",
    "get_template_metadata",
    "render_template",
    "resolve_lint_result",
    "validate_engine_health",
]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Template Engine Orchestrator Node package."""

from promptlint.nodes.node_template_engine_orchestrator.handlers import (
    TemplateEngineError,
    generate_candidates,
    get_available_templates,
    get_template_metadata,
    validate_engine_health,
)
from promptlint.nodes.node_template_engine_orchestrator.models import (
    DEFAULT_GENERATION_CONFIG,
    ModelEngineHealth,
    ModelGenerationConfig,
    TemplateEngineSettings,
)
from promptlint.nodes.node_template_engine_orchestrator.node import (
    NodeTemplateEngineOrchestrator,
)

__all__ = [
    "DEFAULT_GENERATION_CONFIG",
    "ModelEngineHealth",
    "ModelGenerationConfig",
    "NodeTemplateEngineOrchestrator",
    "TemplateEngineError",
    "TemplateEngineSettings",
    "generate_candidates",
    "get_available_templates",
    "get_template_metadata",
    "validate_engine_health",
]

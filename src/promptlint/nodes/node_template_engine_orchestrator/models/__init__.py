# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for the template engine orchestrator.

Exports:
    ModelGenerationConfig: Frozen per-call generation configuration.
    ModelEngineHealth: Result of an engine health check.
    TemplateEngineSettings: Pydantic Settings for environment-driven configuration.
"""

from promptlint.nodes.node_template_engine_orchestrator.models.model_engine_health import (
    ModelEngineHealth,
)
from promptlint.nodes.node_template_engine_orchestrator.models.model_engine_settings import (
    TemplateEngineSettings,
)
from promptlint.nodes.node_template_engine_orchestrator.models.model_generation_config import (
    DEFAULT_GENERATION_CONFIG,
    ModelGenerationConfig,
)

__all__ = [
    "DEFAULT_GENERATION_CONFIG",
    "ModelEngineHealth",
    "ModelGenerationConfig",
    "TemplateEngineSettings",
]

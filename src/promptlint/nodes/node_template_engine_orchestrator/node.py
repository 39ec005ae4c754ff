# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Template Engine Orchestrator Node.

Thin shell orchestrator node holding the engine's collaborators and
configuration. All logic is delegated to the handler functions; the node
adds nothing but the wiring.

The node is a plain class rather than a framework node base: there is no
container or contract to load, so construction takes the collaborators
directly (or from PROMPTLINT_* settings via from_settings()).

Workflow (4 steps):
1. Classify domain (injected domain service, deadline-bounded)
2. Analyze semantics (node_semantic_analysis_compute)
3. Select templates (node_template_selection_compute)
4. Render and validate each template (node_faithfulness_validation_compute)
"""

from __future__ import annotations

from collections.abc import Mapping

from promptlint.enums import EnumTemplateType
from promptlint.models import (
    ModelLintResult,
    ModelTemplateCandidate,
    ModelTemplateMetadata,
)
from promptlint.nodes.node_template_engine_orchestrator.handlers import (
    create_default_renderers,
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
from promptlint.protocols import (
    ProtocolDomainService,
    ProtocolLintService,
    ProtocolTemplateRenderer,
)


class NodeTemplateEngineOrchestrator:
    """Orchestrator node turning a prompt into ranked template candidates.

    The node is a thin shell: generation, introspection and health checks
    are delegated to the handler functions with the node's collaborators.

    The node keeps no per-call state: collaborators and config are fixed at
    construction and every call builds its own context, so one instance may
    serve concurrent calls.
    """

    def __init__(
        self,
        domain_service: ProtocolDomainService | None = None,
        lint_service: ProtocolLintService | None = None,
        renderers: Mapping[EnumTemplateType, ProtocolTemplateRenderer] | None = None,
        config: ModelGenerationConfig | None = None,
    ) -> None:
        """Initialize the orchestrator node.

        Args:
            domain_service: Domain classifier. None uses the default domain.
            lint_service: Consulted when a call passes no lint result.
            renderers: Renderer per template type. None uses the defaults.
            config: Generation config. Defaults to DEFAULT_GENERATION_CONFIG.
        """
        self._domain_service = domain_service
        self._lint_service = lint_service
        self._renderers = (
            dict(renderers) if renderers is not None else create_default_renderers()
        )
        self._config = config if config is not None else DEFAULT_GENERATION_CONFIG

    @classmethod
    def from_settings(
        cls,
        settings: TemplateEngineSettings | None = None,
        *,
        domain_service: ProtocolDomainService | None = None,
        lint_service: ProtocolLintService | None = None,
        renderers: Mapping[EnumTemplateType, ProtocolTemplateRenderer] | None = None,
    ) -> NodeTemplateEngineOrchestrator:
        """Build a node configured from PROMPTLINT_* environment variables."""
        if settings is None:
            settings = TemplateEngineSettings()
        return cls(
            domain_service=domain_service,
            lint_service=lint_service,
            renderers=renderers,
            config=settings.to_generation_config(),
        )

    @property
    def config(self) -> ModelGenerationConfig:
        return self._config

    async def generate_candidates(
        self,
        prompt: str,
        lint_result: ModelLintResult | None = None,
        *,
        max_candidates: int | None = None,
        enable_diversity: bool | None = None,
        faithfulness_threshold: float | None = None,
    ) -> list[ModelTemplateCandidate]:
        """Generate candidates by delegating to the handler function.

        Returns:
            Non-empty list of candidates, best first. Never raises.
        """
        return await generate_candidates(
            prompt,
            lint_result,
            max_candidates=max_candidates,
            enable_diversity=enable_diversity,
            faithfulness_threshold=faithfulness_threshold,
            domain_service=self._domain_service,
            lint_service=self._lint_service,
            renderers=self._renderers,
            config=self._config,
        )

    def get_available_templates(self) -> list[EnumTemplateType]:
        """Template types with a registered renderer, highest priority first."""
        return [t for t in get_available_templates() if t in self._renderers]

    def get_template_metadata(self, template_type: EnumTemplateType) -> ModelTemplateMetadata:
        return get_template_metadata(template_type)

    def validate_health(self) -> ModelEngineHealth:
        return validate_engine_health(self._renderers, self._config)


__all__ = ["NodeTemplateEngineOrchestrator"]

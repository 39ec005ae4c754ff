# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for the template engine orchestrator node shell."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from promptlint import NodeTemplateEngineOrchestrator
from promptlint.enums import EnumLintIssueType, EnumTemplateType
from promptlint.models import ModelDomainClassification, ModelLintResult
from promptlint.nodes.node_template_engine_orchestrator import (
    DEFAULT_GENERATION_CONFIG,
    TemplateEngineSettings,
)
from promptlint.nodes.node_template_engine_orchestrator import node as node_module


@pytest.mark.unit
class TestNodeConstruction:
    """Collaborators and config are fixed at construction."""

    def test_defaults(self) -> None:
        node = NodeTemplateEngineOrchestrator()

        assert node.config is DEFAULT_GENERATION_CONFIG
        assert node.get_available_templates() == list(EnumTemplateType)
        assert node.validate_health().is_healthy is True

    def test_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROMPTLINT_MAX_CANDIDATES", "1")

        node = NodeTemplateEngineOrchestrator.from_settings()

        assert node.config.max_candidates == 1

    def test_from_explicit_settings(self) -> None:
        node = NodeTemplateEngineOrchestrator.from_settings(
            TemplateEngineSettings(total_budget_ms=250.0)
        )
        assert node.config.total_budget_ms == 250.0

    def test_partial_renderer_registry(
        self, static_renderer_factory: Callable[..., object]
    ) -> None:
        node = NodeTemplateEngineOrchestrator(
            renderers={
                EnumTemplateType.MINIMAL: static_renderer_factory(
                    EnumTemplateType.MINIMAL, "x"
                ),
                EnumTemplateType.BULLET: static_renderer_factory(
                    EnumTemplateType.BULLET, "x"
                ),
            }
        )

        assert node.get_available_templates() == [
            EnumTemplateType.BULLET,
            EnumTemplateType.MINIMAL,
        ]
        assert node.validate_health().template_count == 2

    def test_template_metadata(self) -> None:
        node = NodeTemplateEngineOrchestrator()
        assert node.get_template_metadata(EnumTemplateType.BULLET).priority == 70


@pytest.mark.unit
class TestNodeGenerateCandidates:
    """The node delegates to the handler with its own collaborators."""

    @pytest.mark.asyncio
    async def test_uses_injected_domain_service(
        self, domain_service_factory: Callable[..., AsyncMock]
    ) -> None:
        service = domain_service_factory(
            ModelDomainClassification(domain="code", confidence=92.0)
        )
        node = NodeTemplateEngineOrchestrator(domain_service=service)

        candidates = await node.generate_candidates("implement a binary search")

        service.classify.assert_awaited_once_with("implement a binary search")
        assert 1 <= len(candidates) <= 3

    @pytest.mark.asyncio
    async def test_per_call_override(
        self, lint_result_factory: Callable[..., ModelLintResult]
    ) -> None:
        node = NodeTemplateEngineOrchestrator()
        lint_result = lint_result_factory(
            EnumLintIssueType.MISSING_LANGUAGE,
            EnumLintIssueType.MISSING_IO_SPECIFICATION,
        )

        candidates = await node.generate_candidates(
            "write sorting code then test it", lint_result, max_candidates=1
        )

        assert len(candidates) == 1

    @pytest.mark.asyncio
    async def test_never_raises(self) -> None:
        service = AsyncMock()
        service.classify = AsyncMock(side_effect=ConnectionError("unreachable"))
        node = NodeTemplateEngineOrchestrator(domain_service=service)

        candidates = await node.generate_candidates("")

        assert len(candidates) == 1

    @pytest.mark.asyncio
    async def test_delegates_to_handler_with_collaborators(
        self,
        monkeypatch: pytest.MonkeyPatch,
        domain_service_factory: Callable[..., AsyncMock],
        static_renderer_factory: Callable[..., object],
    ) -> None:
        service = domain_service_factory(
            ModelDomainClassification(domain="code", confidence=92.0)
        )
        renderers = {
            EnumTemplateType.MINIMAL: static_renderer_factory(
                EnumTemplateType.MINIMAL, "x"
            )
        }
        handler = AsyncMock(return_value=[])
        monkeypatch.setattr(node_module, "generate_candidates", handler)
        node = NodeTemplateEngineOrchestrator(domain_service=service, renderers=renderers)

        result = await node.generate_candidates("sort it", enable_diversity=False)

        assert result == []
        handler.assert_awaited_once_with(
            "sort it",
            None,
            max_candidates=None,
            enable_diversity=False,
            faithfulness_threshold=None,
            domain_service=service,
            lint_service=None,
            renderers=renderers,
            config=DEFAULT_GENERATION_CONFIG,
        )

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Protocol definitions for the template engine's external collaborators.

The engine never imports a concrete lint service, domain classifier or
renderer. Anything matching these protocols can be injected, including
test doubles.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from promptlint.enums import EnumTemplateType
    from promptlint.models import (
        ModelDomainClassification,
        ModelLintResult,
        ModelRenderContext,
        ModelRenderedTemplate,
    )


@runtime_checkable
class ProtocolLintService(Protocol):
    """Synchronous prompt linter, total over any string."""

    def analyze(self, prompt: str) -> ModelLintResult:
        """Return the lint score and issue list for a prompt."""
        ...


@runtime_checkable
class ProtocolDomainService(Protocol):
    """Asynchronous domain classifier.

    Implementations may raise or hang; the engine bounds the call with a
    deadline and substitutes a minimal-confidence default domain.
    """

    async def classify(self, prompt: str) -> ModelDomainClassification:
        """Classify the prompt into a domain with a 0-100 confidence."""
        ...


@runtime_checkable
class ProtocolTemplateRenderer(Protocol):
    """Renderer for exactly one template type.

    `render` may return the rendered template directly or an awaitable
    resolving to it. Callers check `is_suitable` before rendering.
    """

    @property
    def template_type(self) -> EnumTemplateType:
        """Template type this renderer produces."""
        ...

    def is_suitable(self, context: ModelRenderContext) -> bool:
        """Return True if this template fits the prompt."""
        ...

    def render(
        self, context: ModelRenderContext
    ) -> ModelRenderedTemplate | Awaitable[ModelRenderedTemplate]:
        """Render the prompt into this template."""
        ...


__all__ = [
    "ProtocolDomainService",
    "ProtocolLintService",
    "ProtocolTemplateRenderer",
]

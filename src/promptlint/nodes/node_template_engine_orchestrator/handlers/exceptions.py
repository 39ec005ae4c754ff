# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for the template engine orchestrator.

None of these cross the public boundary: generate_candidates() catches them
and converts them into skipped templates, the default domain or the
fallback candidate. They exist so failures carry a code into logs and
result records.

Error Codes:
    - TEMPLATE_001: Rendering a template failed or exceeded its deadline
      (template skipped)
    - TEMPLATE_002: Domain classification failed or timed out
      (default domain used)
    - TEMPLATE_003: Candidate generation failed as a whole
      (fallback candidate returned)
"""

from __future__ import annotations

from typing import Final

ERROR_CODE_RENDER_FAILED: Final[str] = "TEMPLATE_001"
ERROR_CODE_DOMAIN_CLASSIFICATION_FAILED: Final[str] = "TEMPLATE_002"
ERROR_CODE_GENERATION_FAILED: Final[str] = "TEMPLATE_003"


class TemplateEngineError(Exception):
    """Base exception for template engine errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., TEMPLATE_001).

    Example:
        >>> try:
        ...     raise TemplateEngineError("Something failed", code="TEMPLATE_999")
        ... except TemplateEngineError as e:
        ...     print(f"Error {e.code}: {e.message}")
        Error TEMPLATE_999: Something failed
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class TemplateRenderError(TemplateEngineError):
    """Raised when a renderer fails, returns nothing, or misses its deadline.

    Error Code: TEMPLATE_001
    Recovery: the template is skipped; remaining templates still render.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ERROR_CODE_RENDER_FAILED)


class DomainClassificationError(TemplateEngineError):
    """Raised when the domain service fails or misses its deadline.

    Error Code: TEMPLATE_002
    Recovery: the default minimal-confidence domain is used.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ERROR_CODE_DOMAIN_CLASSIFICATION_FAILED)


class TemplateGenerationError(TemplateEngineError):
    """Raised when no candidate could be produced.

    Error Code: TEMPLATE_003
    Recovery: the fallback candidate is returned.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ERROR_CODE_GENERATION_FAILED)


__all__ = [
    "ERROR_CODE_DOMAIN_CLASSIFICATION_FAILED",
    "ERROR_CODE_GENERATION_FAILED",
    "ERROR_CODE_RENDER_FAILED",
    "DomainClassificationError",
    "TemplateEngineError",
    "TemplateGenerationError",
    "TemplateRenderError",
]

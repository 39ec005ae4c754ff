# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for template engine exceptions."""

from __future__ import annotations

import pytest

from promptlint.nodes.node_template_engine_orchestrator.handlers import (
    ERROR_CODE_DOMAIN_CLASSIFICATION_FAILED,
    ERROR_CODE_GENERATION_FAILED,
    ERROR_CODE_RENDER_FAILED,
    DomainClassificationError,
    TemplateEngineError,
    TemplateGenerationError,
    TemplateRenderError,
)


@pytest.mark.unit
class TestTemplateEngineExceptions:
    """Each exception carries its error code and message."""

    @pytest.mark.parametrize(
        ("exception_class", "code"),
        [
            (TemplateRenderError, ERROR_CODE_RENDER_FAILED),
            (DomainClassificationError, ERROR_CODE_DOMAIN_CLASSIFICATION_FAILED),
            (TemplateGenerationError, ERROR_CODE_GENERATION_FAILED),
        ],
    )
    def test_code_and_message(
        self, exception_class: type[TemplateEngineError], code: str
    ) -> None:
        error = exception_class("went wrong")

        assert isinstance(error, TemplateEngineError)
        assert error.code == code
        assert error.message == "went wrong"
        assert str(error) == "went wrong"

    def test_codes_are_distinct(self) -> None:
        codes = {
            ERROR_CODE_RENDER_FAILED,
            ERROR_CODE_DOMAIN_CLASSIFICATION_FAILED,
            ERROR_CODE_GENERATION_FAILED,
        }
        assert codes == {"TEMPLATE_001", "TEMPLATE_002", "TEMPLATE_003"}

    def test_base_error_without_code(self) -> None:
        assert TemplateEngineError("plain").code is None

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Prompt template engine nodes.

Compute nodes are pure and synchronous; the orchestrator node wires them
together with the injected domain service and renderers.

Example:
    from promptlint.nodes.node_template_engine_orchestrator import (
        NodeTemplateEngineOrchestrator,
    )
"""

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Utility modules for the prompt template engine."""

from promptlint.utils.util_performance_timer import (
    DEFAULT_TIMER_CONFIG,
    elapsed_time_ms,
    get_performance_metrics,
    measure,
    measure_async,
)

__all__ = [
    "DEFAULT_TIMER_CONFIG",
    "elapsed_time_ms",
    "get_performance_metrics",
    "measure",
    "measure_async",
]

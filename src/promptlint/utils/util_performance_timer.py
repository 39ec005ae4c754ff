# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Performance timer for template engine stages.

Two entry points:
    - measure(): wraps a synchronous callable. The callable always runs to
      completion; thresholds are evaluated afterwards. When the hard limit
      is exceeded and a fallback is supplied, the fallback runs and the
      combined time is reported.
    - measure_async(): wraps a coroutine factory with asyncio.wait_for. The
      operation is cancelled at the hard limit and the fallback, if any,
      supplies the result.

Usage:
    from promptlint.utils import measure, measure_async

    timed = measure(lambda: renderer.render(context))
    if timed.timeout_exceeded:
        ...

    timed = await measure_async(lambda: service.classify(prompt))
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Final, TypeVar

from promptlint.models import (
    ModelPerformanceMetrics,
    ModelTimedResult,
    ModelTimerConfig,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)

DEFAULT_TIMER_CONFIG: Final[ModelTimerConfig] = ModelTimerConfig()


def elapsed_time_ms(start_time: float) -> float:
    """Calculate elapsed time in milliseconds."""
    return (time.perf_counter() - start_time) * 1000


def _threshold_warnings(
    label: str, execution_time_ms: float, config: ModelTimerConfig
) -> list[str]:
    warnings: list[str] = []
    if execution_time_ms > config.warning_threshold_ms:
        warnings.append(
            f"{label} took {execution_time_ms:.2f}ms, exceeding warning "
            f"threshold of {config.warning_threshold_ms:.0f}ms"
        )
    if execution_time_ms > config.max_execution_time_ms:
        warnings.append(
            f"{label} exceeded maximum execution time of "
            f"{config.max_execution_time_ms:.0f}ms"
        )
    return warnings


def measure(
    operation: Callable[[], T],
    *,
    fallback: Callable[[], T] | None = None,
    config: ModelTimerConfig | None = None,
    label: str = "operation",
) -> ModelTimedResult[T]:
    """Measure a synchronous operation.

    Exceptions raised by the operation or the fallback propagate to the
    caller unchanged.

    Args:
        operation: Zero-argument callable to run.
        fallback: Cheaper callable run when the hard limit was exceeded.
        config: Timer thresholds. Defaults to DEFAULT_TIMER_CONFIG.
        label: Name used in warnings and log lines.

    Returns:
        ModelTimedResult with the operation (or fallback) result.

    Example:
        >>> measure(lambda: 2 + 2).result
        4
    """
    if config is None:
        config = DEFAULT_TIMER_CONFIG

    start_time = time.perf_counter()
    result = operation()
    execution_time_ms = elapsed_time_ms(start_time)

    warnings = _threshold_warnings(label, execution_time_ms, config)
    timeout_exceeded = execution_time_ms > config.max_execution_time_ms
    fallback_used = False

    if timeout_exceeded and fallback is not None:
        result = fallback()
        fallback_used = True
        execution_time_ms = elapsed_time_ms(start_time)
        warnings.append(f"{label} replaced by fallback result")

    for warning in warnings:
        logger.warning(warning)

    return ModelTimedResult(
        result=result,
        execution_time_ms=execution_time_ms,
        timeout_exceeded=timeout_exceeded,
        fallback_used=fallback_used,
        warnings=tuple(warnings),
    )


async def measure_async(
    operation: Callable[[], Awaitable[T]],
    *,
    fallback: Callable[[], T | Awaitable[T]] | None = None,
    config: ModelTimerConfig | None = None,
    label: str = "operation",
) -> ModelTimedResult[T]:
    """Measure an asynchronous operation under a real deadline.

    The awaitable returned by `operation` is cancelled once
    `max_execution_time_ms` elapses. Exceptions other than the deadline
    propagate to the caller.

    Args:
        operation: Zero-argument callable returning an awaitable.
        fallback: Callable supplying the result after cancellation. May be
            sync or async.
        config: Timer thresholds. Defaults to DEFAULT_TIMER_CONFIG.
        label: Name used in warnings and log lines.

    Returns:
        ModelTimedResult. `result` is None when the operation was cancelled
        and no fallback was supplied.
    """
    if config is None:
        config = DEFAULT_TIMER_CONFIG

    start_time = time.perf_counter()
    result: T | None
    try:
        result = await asyncio.wait_for(
            operation(),
            timeout=config.max_execution_time_ms / 1000,
        )
        cancelled = False
    except TimeoutError:
        result = None
        cancelled = True

    execution_time_ms = elapsed_time_ms(start_time)
    warnings = _threshold_warnings(label, execution_time_ms, config)
    timeout_exceeded = cancelled or execution_time_ms > config.max_execution_time_ms
    fallback_used = False

    if cancelled:
        warnings.append(
            f"{label} cancelled at {config.max_execution_time_ms:.0f}ms deadline"
        )
        if fallback is not None:
            fallback_result = fallback()
            if inspect.isawaitable(fallback_result):
                fallback_result = await fallback_result
            result = fallback_result
            fallback_used = True
            execution_time_ms = elapsed_time_ms(start_time)

    for warning in warnings:
        logger.warning(warning)

    return ModelTimedResult(
        result=result,
        execution_time_ms=execution_time_ms,
        timeout_exceeded=timeout_exceeded,
        fallback_used=fallback_used,
        warnings=tuple(warnings),
    )


def get_performance_metrics(
    execution_time_ms: float,
    config: ModelTimerConfig | None = None,
) -> ModelPerformanceMetrics:
    """Assess an execution time against the timer budget.

    Example:
        >>> get_performance_metrics(40.0).is_acceptable
        True
    """
    if config is None:
        config = DEFAULT_TIMER_CONFIG
    return ModelPerformanceMetrics(
        execution_time_ms=execution_time_ms,
        max_allowed_time_ms=config.max_execution_time_ms,
        warning_threshold_ms=config.warning_threshold_ms,
        is_acceptable=execution_time_ms <= config.max_execution_time_ms,
        is_warning=execution_time_ms > config.warning_threshold_ms,
        performance_ratio=execution_time_ms / config.max_execution_time_ms,
    )


__all__ = [
    "DEFAULT_TIMER_CONFIG",
    "elapsed_time_ms",
    "get_performance_metrics",
    "measure",
    "measure_async",
]

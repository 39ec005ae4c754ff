# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Rule-based domain classification (pure computation).

Keyword rules per domain (code, analysis, writing, research):
    - exclusions: any match removes the domain from consideration
    - bonus patterns: any match scores the domain at 0.9
    - otherwise 0.3 per primary, 0.2 per secondary and 0.1 per context
      keyword, capped at 0.8

Raw scores are then calibrated (stronger evidence raises the score), and
domains under 0.3 are dropped. The best remaining domain is reported with
confidence on the 0-100 scale.

Prompts with no usable evidence default to the code domain:
    empty prompt        -> code, 50
    no domain >= 20     -> code, 20
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Final

from promptlint.models import ModelDomainClassification

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DomainRule:
    """Keyword evidence for one domain."""

    domain: str
    primary_keywords: tuple[str, ...]
    secondary_keywords: tuple[str, ...]
    context_keywords: tuple[str, ...]
    exclusions: tuple[str, ...]
    bonus_patterns: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class DomainScore:
    """Calibrated score of one domain, with the evidence that produced it."""

    domain: str
    score: float
    indicators: tuple[str, ...]


DOMAIN_RULES: Final[tuple[DomainRule, ...]] = (
    DomainRule(
        domain="code",
        primary_keywords=(
            "implement", "debug", "optimize", "refactor", "code", "program",
            "develop", "build",
        ),
        secondary_keywords=(
            "algorithm", "function", "method", "class", "variable", "array",
            "loop", "api", "database",
        ),
        context_keywords=(
            "programming", "development", "software", "application", "system",
        ),
        exclusions=(
            "analyze data", "write about", "research methods", "study trends",
            "evaluate performance", "assess results", "compare approaches",
            "research mobile app", "research best practices",
            "investigate approaches",
        ),
        bonus_patterns=(
            "in python", "in javascript", "in java", "in typescript", "in c++",
            "write a function", "implement algorithm", "debug code",
            "create api", "optimize database", "build rest api",
            "fix memory leak", "create database",
        ),
    ),
    DomainRule(
        domain="analysis",
        primary_keywords=(
            "analyze", "evaluate", "assess", "examine", "study", "investigate",
            "measure", "calculate", "track", "monitor",
        ),
        secondary_keywords=(
            "data", "trends", "patterns", "metrics", "performance", "results",
            "findings", "statistics", "traffic", "scores", "benchmark",
        ),
        context_keywords=(
            "data analysis", "performance evaluation", "comparative study",
            "statistical analysis", "measurement analysis",
        ),
        exclusions=(
            "debug code", "implement algorithm", "write function",
            "create program", "write article", "compose essay",
            "research best practices",
        ),
        bonus_patterns=(
            "analyze data", "evaluate performance", "assess results",
            "examine trends", "compare approaches", "benchmark performance",
            "statistical analysis",
        ),
    ),
    DomainRule(
        domain="writing",
        primary_keywords=("write", "create", "compose", "draft", "author", "publish"),
        secondary_keywords=(
            "article", "blog", "post", "essay", "story", "content", "document",
            "report",
        ),
        context_keywords=(
            "content creation", "documentation", "publishing", "communication",
        ),
        exclusions=(
            "debug code", "implement algorithm", "analyze data",
            "research methods", "evaluate performance", "study trends",
            "investigate approaches",
        ),
        bonus_patterns=(
            "write article", "create blog", "compose essay", "draft report",
            "publish content", "author story", "document process",
        ),
    ),
    DomainRule(
        domain="research",
        primary_keywords=(
            "research", "investigate", "explore", "study", "find", "discover",
        ),
        secondary_keywords=(
            "best practices", "methodologies", "approaches", "techniques",
            "solutions", "tools", "frameworks", "strategies",
        ),
        context_keywords=(
            "methodology exploration", "best practices research",
            "solution discovery", "framework research",
        ),
        exclusions=(
            "debug code", "implement algorithm", "write article",
            "analyze data", "evaluate performance", "compose essay",
            "create content",
        ),
        bonus_patterns=(
            "research best practices", "investigate approaches",
            "explore methodologies", "find solutions", "discover techniques",
            "study methods",
        ),
    ),
)

FALLBACK_DOMAIN: Final[str] = "code"
EMPTY_PROMPT_CONFIDENCE: Final[float] = 50.0
LOW_CONFIDENCE_FLOOR: Final[float] = 20.0

_BONUS_SCORE: Final[float] = 0.9
_MAX_KEYWORD_SCORE: Final[float] = 0.8
_MIN_DOMAIN_SCORE: Final[float] = 0.3


def calibrate_rule_score(
    score: float, primary_matches: int, secondary_matches: int, context_matches: int
) -> float:
    """Raise a raw keyword score according to how much evidence backs it."""
    if score >= _BONUS_SCORE:
        return 0.95

    total_matches = primary_matches + secondary_matches + context_matches
    if total_matches >= 3:
        return min(0.9, score + 0.15)
    if total_matches >= 2:
        return min(0.85, score + 0.1)
    if primary_matches >= 2:
        return min(0.8, score + 0.1)
    if primary_matches == 1 and secondary_matches >= 1:
        return min(0.75, score + 0.05)
    return score


def score_domain(rule: DomainRule, text: str) -> DomainScore | None:
    """Score one domain against a lower-cased prompt; None when excluded or weak."""
    if any(exclusion in text for exclusion in rule.exclusions):
        return None

    indicators: list[str] = []
    score = 0.0

    for pattern in rule.bonus_patterns:
        if pattern in text:
            score = _BONUS_SCORE
            indicators.append(f"bonus: {pattern}")

    primary = [k for k in rule.primary_keywords if k in text]
    secondary = [k for k in rule.secondary_keywords if k in text]
    context = [k for k in rule.context_keywords if k in text]
    indicators.extend(f"primary: {k}" for k in primary)
    indicators.extend(f"secondary: {k}" for k in secondary)
    indicators.extend(f"context: {k}" for k in context)

    if score == 0.0:
        score = min(
            _MAX_KEYWORD_SCORE,
            0.3 * len(primary) + 0.2 * len(secondary) + 0.1 * len(context),
        )

    calibrated = calibrate_rule_score(score, len(primary), len(secondary), len(context))
    if calibrated < _MIN_DOMAIN_SCORE:
        return None
    return DomainScore(domain=rule.domain, score=calibrated, indicators=tuple(indicators))


def classify_domain(prompt: str) -> ModelDomainClassification:
    """Classify a prompt into a domain with rule-based keyword evidence.

    Example:
        >>> classify_domain("write a function in python").domain
        'code'
    """
    text = prompt.lower().strip()
    if not text:
        return ModelDomainClassification(
            domain=FALLBACK_DOMAIN,
            confidence=EMPTY_PROMPT_CONFIDENCE,
            indicators=("empty prompt",),
        )

    best: DomainScore | None = None
    for rule in DOMAIN_RULES:
        candidate = score_domain(rule, text)
        if candidate is not None and (best is None or candidate.score > best.score):
            best = candidate

    confidence = math.floor(best.score * 100 + 0.5) if best is not None else 0
    if best is None or confidence < LOW_CONFIDENCE_FLOOR:
        return ModelDomainClassification(
            domain=FALLBACK_DOMAIN,
            confidence=LOW_CONFIDENCE_FLOOR,
            indicators=("extremely low confidence",),
        )

    return ModelDomainClassification(
        domain=best.domain,
        confidence=float(min(100, confidence)),
        indicators=best.indicators,
    )


class RuleBasedDomainClassifier:
    """Domain service backed by classify_domain().

    Satisfies ProtocolDomainService so it can be injected into the template
    engine. Holds no state; one instance may serve concurrent calls.
    """

    async def classify(self, prompt: str) -> ModelDomainClassification:
        result = classify_domain(prompt)
        logger.debug(
            "Rule-based domain classification: %s (%.0f)",
            result.domain,
            result.confidence,
        )
        return result


__all__ = [
    "DOMAIN_RULES",
    "DomainRule",
    "DomainScore",
    "RuleBasedDomainClassifier",
    "calibrate_rule_score",
    "classify_domain",
    "score_domain",
]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handler for faithfulness validation of rendered prompts (pure computation).

Compares a rendered prompt against the original and reports every piece of
content the rendering introduced. Five independent checkers each append
zero or more violations:

    Checker                 Violation type        Severity
    forbidden additions     technical_addition    critical (language), high (framework)
    scope changes           changed_scope         high (expansion), medium (reduction)
    context assumptions     context_assumption    medium
    technical additions     technical_addition    high (version), medium (environment)
    requirement expansion   added_requirement     high (feature), medium (constraint)

A term counts as introduced when it occurs in the rendering as a whole word
(case-insensitive) and does not occur in the original. Each introduced term
produces its own violation.

Score:
    100 minus the per-severity penalty of every violation, floored at 0.
    is_valid is False as soon as a single critical violation exists,
    whatever the score.
"""

from __future__ import annotations

import logging
import re
from typing import Final

from promptlint.enums import EnumViolationSeverity, EnumViolationType
from promptlint.models import ModelFaithfulnessResult, ModelFaithfulnessViolation
from promptlint.nodes.node_faithfulness_validation_compute.models import (
    DEFAULT_FAITHFULNESS_CONFIG,
    ModelFaithfulnessConfig,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Vocabulary
# =============================================================================

PROGRAMMING_LANGUAGES: Final[tuple[str, ...]] = (
    "python", "javascript", "typescript", "java", "c++", "c#", "ruby", "php",
    "swift", "kotlin", "rust", "golang", "scala", "perl", "haskell", "sql",
)

FRAMEWORKS: Final[tuple[str, ...]] = (
    "react", "angular", "vue", "django", "flask", "fastapi", "express",
    "spring", "rails", "laravel", "next.js", "node.js", "tensorflow",
    "pytorch", "pandas", "numpy", "jquery", "bootstrap", "tailwind", "svelte",
)

SKILL_LEVELS: Final[tuple[str, ...]] = (
    "beginner", "intermediate", "advanced", "expert", "junior", "senior",
    "novice",
)

PROJECT_TYPES: Final[tuple[str, ...]] = (
    "web application", "mobile app", "startup", "enterprise", "e-commerce",
    "saas", "microservice", "microservices", "prototype",
)

ENVIRONMENTS: Final[tuple[str, ...]] = (
    "production", "staging", "docker", "kubernetes", "aws", "azure", "gcp",
    "linux", "windows", "macos", "heroku", "serverless", "cloud",
)

FEATURE_TERMS: Final[tuple[str, ...]] = ("feature", "features")

CONSTRAINT_TERMS: Final[tuple[str, ...]] = (
    "must", "constraint", "constraints", "requirement", "requirements",
    "mandatory", "required",
)

_VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"\bv?\d+\.\d+(?:\.\d+)*\b")


def _compile_terms(terms: tuple[str, ...]) -> dict[str, re.Pattern[str]]:
    # Lookarounds instead of \b so terms such as "c++" and "c#" still match.
    return {term: re.compile(rf"(?<!\w){re.escape(term)}(?!\w)") for term in terms}


_LANGUAGE_PATTERNS: Final = _compile_terms(PROGRAMMING_LANGUAGES)
_FRAMEWORK_PATTERNS: Final = _compile_terms(FRAMEWORKS)
_SKILL_LEVEL_PATTERNS: Final = _compile_terms(SKILL_LEVELS)
_PROJECT_TYPE_PATTERNS: Final = _compile_terms(PROJECT_TYPES)
_ENVIRONMENT_PATTERNS: Final = _compile_terms(ENVIRONMENTS)
_FEATURE_PATTERNS: Final = _compile_terms(FEATURE_TERMS)
_CONSTRAINT_PATTERNS: Final = _compile_terms(CONSTRAINT_TERMS)


def _introduced_terms(
    original: str, generated: str, patterns: dict[str, re.Pattern[str]]
) -> list[str]:
    """Terms present in `generated` but absent from `original` (both lower-cased)."""
    return [
        term
        for term, pattern in patterns.items()
        if pattern.search(generated) and not pattern.search(original)
    ]


def _violation(
    violation_type: EnumViolationType,
    description: str,
    severity: EnumViolationSeverity,
) -> ModelFaithfulnessViolation:
    return ModelFaithfulnessViolation(
        type=violation_type, description=description, severity=severity
    )


# =============================================================================
# Checkers
# =============================================================================


def check_forbidden_additions(
    original: str, generated: str
) -> list[ModelFaithfulnessViolation]:
    """Flag programming languages (critical) and frameworks (high) the user never named."""
    violations = [
        _violation(
            EnumViolationType.TECHNICAL_ADDITION,
            f"Added programming language '{term}' not present in original",
            EnumViolationSeverity.CRITICAL,
        )
        for term in _introduced_terms(original, generated, _LANGUAGE_PATTERNS)
    ]
    violations.extend(
        _violation(
            EnumViolationType.TECHNICAL_ADDITION,
            f"Added framework or library '{term}' not present in original",
            EnumViolationSeverity.HIGH,
        )
        for term in _introduced_terms(original, generated, _FRAMEWORK_PATTERNS)
    )
    return violations


def check_scope_changes(
    original: str,
    generated: str,
    config: ModelFaithfulnessConfig = DEFAULT_FAITHFULNESS_CONFIG,
) -> list[ModelFaithfulnessViolation]:
    """Flag renderings much longer (high) or much shorter (medium) than the original."""
    original_words = len(original.split())
    if original_words == 0:
        return []

    generated_words = len(generated.split())
    ratio = generated_words / original_words

    if ratio > config.max_expansion_ratio:
        return [
            _violation(
                EnumViolationType.CHANGED_SCOPE,
                f"Expanded scope: {generated_words} words vs {original_words} "
                f"in original (ratio {ratio:.2f})",
                EnumViolationSeverity.HIGH,
            )
        ]
    if ratio < config.min_contraction_ratio:
        return [
            _violation(
                EnumViolationType.CHANGED_SCOPE,
                f"Reduced scope: {generated_words} words vs {original_words} "
                f"in original (ratio {ratio:.2f})",
                EnumViolationSeverity.MEDIUM,
            )
        ]
    return []


def check_context_assumptions(
    original: str, generated: str
) -> list[ModelFaithfulnessViolation]:
    """Flag assumed skill levels and project types."""
    violations = [
        _violation(
            EnumViolationType.CONTEXT_ASSUMPTION,
            f"Assumed skill level '{term}' not stated in original",
            EnumViolationSeverity.MEDIUM,
        )
        for term in _introduced_terms(original, generated, _SKILL_LEVEL_PATTERNS)
    ]
    violations.extend(
        _violation(
            EnumViolationType.CONTEXT_ASSUMPTION,
            f"Assumed project type '{term}' not stated in original",
            EnumViolationSeverity.MEDIUM,
        )
        for term in _introduced_terms(original, generated, _PROJECT_TYPE_PATTERNS)
    )
    return violations


def check_technical_additions(
    original: str, generated: str
) -> list[ModelFaithfulnessViolation]:
    """Flag new version numbers (high) and named environments (medium)."""
    original_versions = set(_VERSION_PATTERN.findall(original))
    new_versions = [
        version
        for version in dict.fromkeys(_VERSION_PATTERN.findall(generated))
        if version not in original_versions
    ]

    violations = [
        _violation(
            EnumViolationType.TECHNICAL_ADDITION,
            f"Added version number '{version}' not present in original",
            EnumViolationSeverity.HIGH,
        )
        for version in new_versions
    ]
    violations.extend(
        _violation(
            EnumViolationType.TECHNICAL_ADDITION,
            f"Added environment '{term}' not present in original",
            EnumViolationSeverity.MEDIUM,
        )
        for term in _introduced_terms(original, generated, _ENVIRONMENT_PATTERNS)
    )
    return violations


def check_requirement_expansion(
    original: str, generated: str
) -> list[ModelFaithfulnessViolation]:
    """Flag feature vocabulary (high) and constraint vocabulary (medium)."""
    violations = [
        _violation(
            EnumViolationType.ADDED_REQUIREMENT,
            f"Added feature requirement '{term}' not present in original",
            EnumViolationSeverity.HIGH,
        )
        for term in _introduced_terms(original, generated, _FEATURE_PATTERNS)
    ]
    violations.extend(
        _violation(
            EnumViolationType.ADDED_REQUIREMENT,
            f"Added constraint '{term}' not present in original",
            EnumViolationSeverity.MEDIUM,
        )
        for term in _introduced_terms(original, generated, _CONSTRAINT_PATTERNS)
    )
    return violations


# =============================================================================
# Scoring and Report
# =============================================================================


def calculate_faithfulness_score(
    violations: list[ModelFaithfulnessViolation],
    config: ModelFaithfulnessConfig = DEFAULT_FAITHFULNESS_CONFIG,
) -> int:
    penalty = sum(config.penalty_for(v.severity) for v in violations)
    return max(0, 100 - penalty)


def build_faithfulness_report(
    score: int, violations: list[ModelFaithfulnessViolation]
) -> str:
    lines = [f"Faithfulness score: {score}/100 ({len(violations)} violations)"]
    lines.extend(
        f"- [{v.severity.value}] {v.type.value}: {v.description}" for v in violations
    )
    return "\n".join(lines)


def validate_faithfulness(
    original: str,
    generated: str,
    config: ModelFaithfulnessConfig | None = None,
) -> ModelFaithfulnessResult:
    """Validate that `generated` adds nothing the user did not state in `original`.

    Args:
        original: The user's prompt.
        generated: A rendering of that prompt.
        config: Ratios and penalties. Defaults to DEFAULT_FAITHFULNESS_CONFIG.

    Returns:
        ModelFaithfulnessResult. Never raises for string input.

    Example:
        >>> result = validate_faithfulness("write sorting code", "Write sorting code in Python")
        >>> result.is_valid
        False
    """
    if config is None:
        config = DEFAULT_FAITHFULNESS_CONFIG

    original_text = original.lower()
    generated_text = generated.lower()

    violations: list[ModelFaithfulnessViolation] = []
    violations.extend(check_forbidden_additions(original_text, generated_text))
    violations.extend(check_scope_changes(original_text, generated_text, config))
    violations.extend(check_context_assumptions(original_text, generated_text))
    violations.extend(check_technical_additions(original_text, generated_text))
    violations.extend(check_requirement_expansion(original_text, generated_text))

    score = calculate_faithfulness_score(violations, config)
    is_valid = not any(
        v.severity == EnumViolationSeverity.CRITICAL for v in violations
    )

    if violations:
        logger.debug(
            "Faithfulness check found %d violations (score=%d, valid=%s)",
            len(violations),
            score,
            is_valid,
        )

    return ModelFaithfulnessResult(
        is_valid=is_valid,
        score=score,
        violations=tuple(violations),
        report=build_faithfulness_report(score, violations),
    )


__all__ = [
    "CONSTRAINT_TERMS",
    "ENVIRONMENTS",
    "FEATURE_TERMS",
    "FRAMEWORKS",
    "PROGRAMMING_LANGUAGES",
    "PROJECT_TYPES",
    "SKILL_LEVELS",
    "build_faithfulness_report",
    "calculate_faithfulness_score",
    "check_context_assumptions",
    "check_forbidden_additions",
    "check_requirement_expansion",
    "check_scope_changes",
    "check_technical_additions",
    "validate_faithfulness",
]

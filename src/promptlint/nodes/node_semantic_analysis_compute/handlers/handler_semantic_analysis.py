# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handler for rule-based semantic analysis of prompts (pure computation).

Converts raw prompt text into a ModelPromptSemantics record:
    - Intent type (first matching pattern group wins)
    - Complexity tier (additive score over size, tasks, technical terms)
    - Completeness tier (six presence checks)
    - Specificity tier (specific vs vague vocabulary)
    - Eight context markers
    - Overall confidence (20-100)

Design Principles:
    - Pure computation: no I/O, no external services
    - Total: every string input yields a result, empty input included
    - Deterministic: same input produces the same record apart from
      processing_time_ms
    - Pattern tables are module-level tuples built once at import

All matching is case-insensitive substring matching on the stripped,
lower-cased prompt. Substring matching is deliberate: "vs" matches inside
longer words, and the tables are tuned around that behavior.

Known heuristic gap:
    The trailing explanatory clause check suppresses the explanatory intent
    when a clause such as "and document" appears together with a primary
    verb ("analyze", "implement", ...). It only knows the verbs listed in
    _PRIMARY_VERBS and does not inspect word order, so prompts outside that
    list can still be labelled explanatory.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from typing import Final

from promptlint.enums import (
    EnumCompletenessLevel,
    EnumComplexityLevel,
    EnumIntentType,
    EnumSpecificityLevel,
)
from promptlint.models import ModelContextMarkers, ModelPromptSemantics

logger = logging.getLogger(__name__)

# =============================================================================
# Intent Patterns
# =============================================================================

_EXPLANATORY_PATTERNS: Final[tuple[str, ...]] = (
    "explain", "what is", "what are", "define", "describe", "tell me about",
    "meaning of", "purpose of", "why", "how does", "how is", "clarify",
    "elaborate", "detail", "information about", "document", "documentation",
    "document the", "document how", "provide documentation",
    "create documentation", "write documentation", "outline the", "summarize",
    "overview of", "description of",
)

_TRAILING_EXPLANATORY_CLAUSES: Final[tuple[str, ...]] = (
    "and document", "and summarize", "and explain", "and describe",
    "and outline", "and detail", "and clarify", "then document",
    "then summarize", "then explain", "then describe",
)

_PRIMARY_VERBS: Final[tuple[str, ...]] = (
    "analyze", "optimize", "implement", "build", "create", "develop", "improve",
)

_INVESTIGATIVE_PATTERNS: Final[tuple[str, ...]] = (
    "research", "investigate", "explore", "find out", "discover", "study",
    "look into", "examine", "survey", "gather information", "collect data",
    "best practices", "industry standards", "methodologies", "approaches",
    "solutions", "options", "alternatives", "possibilities",
)

_INSTRUCTIONAL_PATTERNS: Final[tuple[str, ...]] = (
    "how to", "how do i", "how can i", "show me", "teach me", "create a",
    "build a", "implement", "write a", "make a", "generate", "step by step",
    "tutorial", "guide", "instructions",
)

_BUILD_VERBS: Final[tuple[str, ...]] = ("build", "create", "develop", "make")

_BUILD_ARTIFACTS: Final[tuple[str, ...]] = (
    "website", "app", "application", "system", "component", "interface",
    "dashboard", "tool", "service", "api", "database", "framework",
)

_CREATIVE_PATTERNS: Final[tuple[str, ...]] = (
    "creative", "story", "poem", "song", "art", "design", "imagine",
    "brainstorm", "ideas", "inspiration", "artistic", "fictional", "character",
    "plot", "narrative", "style", "tone", "engaging", "compelling",
    "interesting", "captivating", "original", "unique", "blog post", "article",
    "content", "copy", "marketing", "creative writing",
)

_COMPARATIVE_PATTERNS: Final[tuple[str, ...]] = (
    "compare", "contrast", "versus", "vs", "difference between", "similar to",
    "unlike", "better than", "worse than", "prefer", "evaluate different",
    "choose between", "select between", "decide between", "pros and cons",
    "advantages and disadvantages", "benefits and drawbacks",
    "which is better", "which should", "alternative to", "options for",
    "different approaches", "different methods", "different solutions",
)

_ANALYTICAL_PATTERNS: Final[tuple[str, ...]] = (
    "analyze", "analysis", "evaluate", "assess", "review", "examine",
    "compare", "contrast", "pros and cons", "advantages", "disadvantages",
    "strengths", "weaknesses", "critique", "criticism",
)

_PLANNING_PATTERNS: Final[tuple[str, ...]] = (
    "plan", "planning", "outline", "roadmap", "strategy", "timeline",
    "schedule", "milestone", "goal", "objective", "project", "organize",
    "structure", "framework", "approach",
)

_DEBUGGING_PATTERNS: Final[tuple[str, ...]] = (
    "debug", "fix", "error", "problem", "issue", "bug", "troubleshoot",
    "solve", "resolve", "correct", "repair", "malfunction", "not working",
    "broken", "failed", "exception",
)

# =============================================================================
# Complexity, Completeness and Specificity Vocabulary
# =============================================================================

_TASK_WORDS: Final[tuple[str, ...]] = (
    "create", "build", "implement", "write", "generate", "develop", "design",
    "make", "analyze", "process",
)

_TECHNICAL_TERMS: Final[tuple[str, ...]] = (
    "algorithm", "api", "database", "framework", "library", "function",
    "method", "class", "object", "variable", "parameter", "configuration",
    "optimization", "performance", "security", "authentication",
    "authorization", "encryption",
)

_CONDITIONAL_WORDS: Final[tuple[str, ...]] = (
    "if", "when", "unless", "provided that", "in case", "assuming",
)

# (vocabulary, points) for each completeness presence check
_COMPLETENESS_CHECKS: Final[tuple[tuple[tuple[str, ...], int], ...]] = (
    (("context", "background", "situation", "environment", "scenario"), 1),
    (("require", "need", "must", "should", "specification", "criteria"), 2),
    (("limit", "constraint", "restriction", "boundary", "within", "maximum",
      "minimum"), 1),
    (("output", "result", "return", "format", "structure", "deliverable"), 2),
    (("example", "sample", "instance", "illustration", "demonstration"), 1),
    (("format", "style", "template", "structure", "layout", "presentation"), 1),
)

_SPECIFIC_TERMS: Final[tuple[str, ...]] = (
    "exactly", "precisely", "specifically", "particular", "specific",
    "detailed", "comprehensive", "thorough", "complete", "full", "entire",
)

_VAGUE_TERMS: Final[tuple[str, ...]] = (
    "something", "anything", "stuff", "things", "maybe", "probably", "kinda",
    "sorta", "roughly", "approximately", "about", "around", "some", "various",
    "different",
)

_QUANTIFIERS: Final[tuple[str, ...]] = (
    "all", "every", "each", "some", "many", "few", "several", "multiple",
    "single", "one", "two", "three", "first", "second", "last", "final",
)

_TECHNICAL_SPECS: Final[tuple[str, ...]] = (
    "version", "size", "length", "width", "height", "duration", "timeout",
    "limit", "threshold", "capacity", "bandwidth", "latency", "throughput",
)

# =============================================================================
# Context Marker Vocabulary
# =============================================================================

CONTEXT_MARKER_PATTERNS: Final[dict[str, tuple[str, ...]]] = {
    "temporal": (
        "time", "when", "before", "after", "during", "while", "schedule",
        "timeline",
    ),
    "conditional": ("if", "when", "unless", "provided", "assuming", "condition"),
    "comparative": (
        "compare", "versus", "vs", "better", "worse", "similar", "different",
    ),
    "sequential": (
        "first", "second", "then", "next", "finally", "step", "sequence",
        "order",
    ),
    "organizational": (
        "organize", "structure", "plan", "outline", "framework", "hierarchy",
        "category",
    ),
    "technical": (
        "technical", "implementation", "code", "system", "architecture",
        "infrastructure",
    ),
    "creative": (
        "creative", "artistic", "design", "style", "aesthetic", "imagination",
    ),
    "analytical": (
        "analysis", "evaluation", "assessment", "review", "examination",
        "critique",
    ),
}

# =============================================================================
# Confidence Bonuses
# =============================================================================

_BASE_CONFIDENCE: Final[int] = 50
_INTENT_BONUS: Final[int] = 10
_CONTEXT_MARKER_BONUS: Final[int] = 3
_MIN_CONFIDENCE: Final[int] = 20
_MAX_CONFIDENCE: Final[int] = 100

_COMPLEXITY_BONUS: Final[dict[EnumComplexityLevel, int]] = {
    EnumComplexityLevel.SIMPLE: 0,
    EnumComplexityLevel.MODERATE: 10,
    EnumComplexityLevel.COMPLEX: 15,
    EnumComplexityLevel.EXPERT: 15,
}

_COMPLETENESS_BONUS: Final[dict[EnumCompletenessLevel, int]] = {
    EnumCompletenessLevel.MINIMAL: 0,
    EnumCompletenessLevel.PARTIAL: 5,
    EnumCompletenessLevel.DETAILED: 10,
    EnumCompletenessLevel.COMPREHENSIVE: 15,
}

_SPECIFICITY_BONUS: Final[dict[EnumSpecificityLevel, int]] = {
    EnumSpecificityLevel.VAGUE: 0,
    EnumSpecificityLevel.GENERAL: 5,
    EnumSpecificityLevel.SPECIFIC: 10,
    EnumSpecificityLevel.PRECISE: 15,
}

_SENTENCE_SPLIT: Final[re.Pattern[str]] = re.compile(r"[.!?]+")


# =============================================================================
# Factory Functions
# =============================================================================


def create_empty_semantics(processing_time_ms: float = 0.0) -> ModelPromptSemantics:
    """Create the fixed semantics returned for empty or whitespace-only prompts.

    Example:
        >>> create_empty_semantics().confidence
        20
    """
    return ModelPromptSemantics(
        intent_type=EnumIntentType.GENERATIVE,
        complexity=EnumComplexityLevel.SIMPLE,
        completeness=EnumCompletenessLevel.MINIMAL,
        specificity=EnumSpecificityLevel.VAGUE,
        context=ModelContextMarkers(),
        confidence=_MIN_CONFIDENCE,
        indicators=("empty prompt",),
        processing_time_ms=processing_time_ms,
    )


# =============================================================================
# Core Analysis Function
# =============================================================================


def analyze_prompt_semantics(prompt: str) -> ModelPromptSemantics:
    """Analyze a prompt into intent, complexity, completeness and specificity.

    Args:
        prompt: Raw prompt text. Any string is accepted.

    Returns:
        ModelPromptSemantics. Empty or whitespace-only prompts return
        create_empty_semantics().

    Example:
        >>> semantics = analyze_prompt_semantics("debug the login error")
        >>> semantics.intent_type.value
        'debugging'
    """
    start_time = time.perf_counter()

    if not isinstance(prompt, str):
        logger.warning(  # type: ignore[unreachable]
            "Invalid prompt type %s, expected str. Converting to string.",
            type(prompt).__name__,
        )
        prompt = str(prompt) if prompt is not None else ""

    if not prompt.strip():
        return create_empty_semantics(
            round((time.perf_counter() - start_time) * 1000, 2)
        )

    text = prompt.lower().strip()
    indicators: list[str] = []

    intent_type = detect_intent_type(text, indicators)
    complexity = assess_complexity(text, indicators)
    completeness = evaluate_completeness(text, indicators)
    specificity = assess_specificity(text, indicators)
    context = detect_context_markers(text, indicators)
    confidence = calculate_semantic_confidence(
        intent_type, complexity, completeness, specificity, context
    )

    processing_time_ms = (time.perf_counter() - start_time) * 1000
    logger.debug(
        "Semantic analysis completed in %.2fms: intent=%s complexity=%s",
        processing_time_ms,
        intent_type.value,
        complexity.value,
    )

    return ModelPromptSemantics(
        intent_type=intent_type,
        complexity=complexity,
        completeness=completeness,
        specificity=specificity,
        context=context,
        confidence=confidence,
        indicators=tuple(indicators),
        processing_time_ms=round(processing_time_ms, 2),
    )


# =============================================================================
# Intent Detection
# =============================================================================


def _contains_any(text: str, patterns: tuple[str, ...]) -> bool:
    return any(pattern in text for pattern in patterns)


def _count_present(text: str, patterns: tuple[str, ...]) -> int:
    return sum(1 for pattern in patterns if pattern in text)


def _is_explanatory(text: str) -> bool:
    return _contains_any(text, _EXPLANATORY_PATTERNS) and not (
        has_trailing_explanatory_clause(text)
    )


def has_trailing_explanatory_clause(text: str) -> bool:
    """Return True when an explanatory clause trails a stronger primary verb.

    Example:
        >>> has_trailing_explanatory_clause("analyze the logs and summarize")
        True
    """
    return _contains_any(text, _TRAILING_EXPLANATORY_CLAUSES) and _contains_any(
        text, _PRIMARY_VERBS
    )


def _is_instructional(text: str) -> bool:
    if _contains_any(text, _INSTRUCTIONAL_PATTERNS):
        return True
    # "build ... dashboard": a build verb followed later by an artifact noun
    for verb in _BUILD_VERBS:
        position = text.find(verb)
        if position != -1 and _contains_any(text[position:], _BUILD_ARTIFACTS):
            return True
    return False


# Priority order: first detector that matches decides the intent.
_INTENT_DETECTORS: Final[tuple[tuple[EnumIntentType, Callable[[str], bool]], ...]] = (
    (EnumIntentType.EXPLANATORY, _is_explanatory),
    (EnumIntentType.INVESTIGATIVE, lambda t: _contains_any(t, _INVESTIGATIVE_PATTERNS)),
    (EnumIntentType.INSTRUCTIONAL, _is_instructional),
    (EnumIntentType.CREATIVE, lambda t: _contains_any(t, _CREATIVE_PATTERNS)),
    (EnumIntentType.COMPARATIVE, lambda t: _contains_any(t, _COMPARATIVE_PATTERNS)),
    (EnumIntentType.ANALYTICAL, lambda t: _contains_any(t, _ANALYTICAL_PATTERNS)),
    (EnumIntentType.PLANNING, lambda t: _contains_any(t, _PLANNING_PATTERNS)),
    (EnumIntentType.DEBUGGING, lambda t: _contains_any(t, _DEBUGGING_PATTERNS)),
)


def detect_intent_type(text: str, indicators: list[str]) -> EnumIntentType:
    """Detect the primary intent of a normalized prompt.

    Args:
        text: Lower-cased, stripped prompt.
        indicators: Trace list, appended in place.

    Returns:
        The first intent whose detector matches, else GENERATIVE.
    """
    for intent_type, detector in _INTENT_DETECTORS:
        if detector(text):
            indicators.append(f"intent: {intent_type.value} patterns detected")
            return intent_type

    indicators.append("intent: generative (default)")
    return EnumIntentType.GENERATIVE


# =============================================================================
# Tier Assessments
# =============================================================================


def assess_complexity(text: str, indicators: list[str]) -> EnumComplexityLevel:
    """Score size, task count, technical density and conditional logic."""
    word_count = len(text.split())
    sentence_count = sum(1 for s in _SENTENCE_SPLIT.split(text) if s.strip())
    task_count = _count_present(text, _TASK_WORDS)
    technical_count = _count_present(text, _TECHNICAL_TERMS)

    score = 0
    if word_count > 50:
        score += 2
    if word_count > 100:
        score += 2
    if sentence_count > 3:
        score += 1
    if sentence_count > 6:
        score += 2
    if task_count > 1:
        score += 2
    if task_count > 3:
        score += 2
    if technical_count > 3:
        score += 2
    if technical_count > 6:
        score += 2
    if _contains_any(text, _CONDITIONAL_WORDS):
        score += 3

    if score >= 8:
        level = EnumComplexityLevel.EXPERT
    elif score >= 5:
        level = EnumComplexityLevel.COMPLEX
    elif score >= 2:
        level = EnumComplexityLevel.MODERATE
    else:
        level = EnumComplexityLevel.SIMPLE

    indicators.append(f"complexity: {level.value} (score: {score})")
    return level


def evaluate_completeness(text: str, indicators: list[str]) -> EnumCompletenessLevel:
    """Sum the points of every completeness check present in the prompt."""
    score = sum(
        points
        for vocabulary, points in _COMPLETENESS_CHECKS
        if _contains_any(text, vocabulary)
    )

    if score >= 6:
        level = EnumCompletenessLevel.COMPREHENSIVE
    elif score >= 4:
        level = EnumCompletenessLevel.DETAILED
    elif score >= 2:
        level = EnumCompletenessLevel.PARTIAL
    else:
        level = EnumCompletenessLevel.MINIMAL

    indicators.append(f"completeness: {level.value} (score: {score})")
    return level


def assess_specificity(text: str, indicators: list[str]) -> EnumSpecificityLevel:
    """Weigh specific terms, quantifiers and technical specs against vague terms."""
    score = (
        2 * _count_present(text, _SPECIFIC_TERMS)
        + _count_present(text, _QUANTIFIERS)
        + (3 if _contains_any(text, _TECHNICAL_SPECS) else 0)
        - _count_present(text, _VAGUE_TERMS)
    )

    if score >= 8:
        level = EnumSpecificityLevel.PRECISE
    elif score >= 5:
        level = EnumSpecificityLevel.SPECIFIC
    elif score >= 2:
        level = EnumSpecificityLevel.GENERAL
    else:
        level = EnumSpecificityLevel.VAGUE

    indicators.append(f"specificity: {level.value} (score: {score})")
    return level


def detect_context_markers(text: str, indicators: list[str]) -> ModelContextMarkers:
    """Set each context marker whose vocabulary appears in the prompt."""
    flags = {
        marker: _contains_any(text, patterns)
        for marker, patterns in CONTEXT_MARKER_PATTERNS.items()
    }
    indicators.extend(f"context: {marker}" for marker, active in flags.items() if active)
    return ModelContextMarkers(**flags)


def calculate_semantic_confidence(
    intent_type: EnumIntentType,
    complexity: EnumComplexityLevel,
    completeness: EnumCompletenessLevel,
    specificity: EnumSpecificityLevel,
    context: ModelContextMarkers,
) -> int:
    """Combine tier bonuses into an overall confidence clamped to [20, 100]."""
    confidence = _BASE_CONFIDENCE
    if intent_type != EnumIntentType.GENERATIVE:
        confidence += _INTENT_BONUS
    confidence += _COMPLEXITY_BONUS[complexity]
    confidence += _COMPLETENESS_BONUS[completeness]
    confidence += _SPECIFICITY_BONUS[specificity]
    confidence += _CONTEXT_MARKER_BONUS * len(context.active_markers())
    return min(_MAX_CONFIDENCE, max(_MIN_CONFIDENCE, confidence))


__all__ = [
    "CONTEXT_MARKER_PATTERNS",
    "analyze_prompt_semantics",
    "assess_complexity",
    "assess_specificity",
    "calculate_semantic_confidence",
    "create_empty_semantics",
    "detect_context_markers",
    "detect_intent_type",
    "evaluate_completeness",
    "has_trailing_explanatory_clause",
]

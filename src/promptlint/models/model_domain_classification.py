# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Domain classification model consumed from the domain service."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

# Domain label used when no classification is available.
DEFAULT_DOMAIN: Final[str] = "general"


class ModelDomainClassification(BaseModel):
    """Coarse subject-matter classification of a prompt.

    Attributes:
        domain: Domain label (code, writing, analysis, research, ...).
        confidence: Classifier confidence on a 0-100 scale.
        indicators: Optional trace of the evidence used by the classifier.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    domain: str = Field(
        ...,
        min_length=1,
        description="Domain label",
    )
    confidence: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Classifier confidence (0-100)",
    )
    indicators: tuple[str, ...] = Field(
        default=(),
        description="Evidence trace from the classifier",
    )


def create_default_domain_classification(
    reason: str = "domain classification unavailable",
) -> ModelDomainClassification:
    """Create the minimal-confidence domain used when classification fails.

    Example:
        >>> create_default_domain_classification().confidence
        0.0
    """
    return ModelDomainClassification(
        domain=DEFAULT_DOMAIN,
        confidence=0.0,
        indicators=(reason,),
    )


__all__ = [
    "DEFAULT_DOMAIN",
    "ModelDomainClassification",
    "create_default_domain_classification",
]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Selection strategy enum."""

from __future__ import annotations

from enum import Enum


class EnumSelectionStrategy(str, Enum):
    """Confidence tier used to pick template types.

    The tier is chosen from the domain classification confidence.

    Attributes:
        HIGH: Confidence >= 90. Scored selection, top 2.
        MODERATE: Confidence >= 70. Scored selection, top 3.
        LOW_CONFIDENCE_FALLBACK: Rule table keyed on lint issues.
    """

    HIGH = "high"
    MODERATE = "moderate"
    LOW_CONFIDENCE_FALLBACK = "low_confidence_fallback"


__all__ = ["EnumSelectionStrategy"]

"""Confidence scoring — a heuristic proxy derived from validator warnings."""

from __future__ import annotations

from typing import Sequence

from . import constants


def confidence_score(warnings: Sequence[str]) -> int:
    """Return ``BASE - PENALTY * len(warnings)``, floored at 0.

    Args:
        warnings: Warnings reported for one translated output.

    Returns:
        An integer in [0, 100]; 95 when there are no warnings.
    """
    penalty = constants.CONFIDENCE_PENALTY_PER_WARNING * len(warnings)
    return max(constants.CONFIDENCE_BASE - penalty, 0)

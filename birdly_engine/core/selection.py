"""
Weighted random selection.

Single roulette-wheel primitive shared by group, exercise-kind and variant
selection.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def select_weighted(
    items: Sequence[T],
    weights: Sequence[float],
    rng: random.Random | None = None,
) -> T | None:
    """
    Pick one item with probability proportional to its weight.

    Draws ``u`` uniformly in ``[0, total)`` and returns the first item whose
    cumulative weight exceeds ``u``, so each item owns a half-open interval.

    Args:
        items: Candidates
        weights: Parallel non-negative weights (negatives count as 0)
        rng: Random source (defaults to the ``random`` module)

    Returns:
        Selected item, the first item when weights are degenerate,
        or None for empty input
    """
    if not items:
        return None
    if len(items) != len(weights):
        return items[0]

    clean = [max(0.0, float(w)) for w in weights]
    total = sum(clean)
    if total <= 0:
        return items[0]

    draw = (rng or random).random() * total
    cumulative = 0.0
    for item, weight in zip(items, clean):
        cumulative += weight
        if draw < cumulative:
            return item

    # Float rounding can leave the draw just past the final boundary
    for item, weight in zip(reversed(items), reversed(clean)):
        if weight > 0:
            return item
    return items[0]

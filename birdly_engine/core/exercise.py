"""
Exercise kinds and the policy that unlocks and weights them.

Each kind has a fixed difficulty (0-1), which scales mastery rewards and
penalties, and a required concept mastery (0-100) that unlocks it. Harder
kinds become progressively more likely as the concept's mastery grows past
their requirement.
"""

from __future__ import annotations

import random
from enum import Enum

from birdly_engine.core.selection import select_weighted

BASE_KIND_WEIGHT = 0.1
EXCESS_KIND_WEIGHT = 0.9


class ExerciseKind(str, Enum):
    """Type of practice interaction."""

    INTRODUCTION = "introduction"
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    LETTER_SELECTION = "letter_selection"
    WORD_SEARCH = "word_search"

    @property
    def difficulty(self) -> float:
        """Difficulty from 0.0 (easiest) to 1.0 (hardest)."""
        return _DIFFICULTY[self]

    @property
    def required_mastery(self) -> float:
        """Minimum concept mastery (0-100) that unlocks this kind."""
        return _REQUIRED_MASTERY[self]

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()

    def is_valid_for_mastery(self, concept_mastery: float) -> bool:
        """Check whether this kind is unlocked at the given concept mastery."""
        if self is ExerciseKind.INTRODUCTION:
            return concept_mastery == 0
        return concept_mastery >= self.required_mastery


_DIFFICULTY = {
    ExerciseKind.INTRODUCTION: 0.2,
    ExerciseKind.MULTIPLE_CHOICE: 0.4,
    ExerciseKind.TRUE_FALSE: 0.4,
    ExerciseKind.LETTER_SELECTION: 0.5,
    ExerciseKind.WORD_SEARCH: 0.7,
}

# Non-zero for the recognition drills so they only unlock after introduction
_REQUIRED_MASTERY = {
    ExerciseKind.INTRODUCTION: 0.0,
    ExerciseKind.MULTIPLE_CHOICE: 0.01,
    ExerciseKind.TRUE_FALSE: 0.01,
    ExerciseKind.LETTER_SELECTION: 40.0,
    ExerciseKind.WORD_SEARCH: 40.0,
}


def legal_kinds(concept_mastery: float) -> set[ExerciseKind]:
    """
    Every exercise kind unlocked at the given concept mastery.

    Introduction is only legal for an unseen concept (mastery exactly 0).
    """
    return {kind for kind in ExerciseKind if kind.is_valid_for_mastery(concept_mastery)}


def selection_weight(kind: ExerciseKind, concept_mastery: float) -> float:
    """
    Selection weight of a kind, growing quadratically past its requirement.

    Formula:
        excess = (mastery - required) / (100 - required)
        weight = 0.1 + 0.9 * excess^2

    Args:
        kind: Exercise kind to weigh
        concept_mastery: Aggregate mastery of the concept (0-100)

    Returns:
        Weight in [0.1, 1.0], or 0.0 when the kind is still locked
    """
    required = kind.required_mastery
    if concept_mastery < required:
        return 0.0
    if required >= 100.0:
        excess = 0.0
    else:
        excess = min(1.0, (concept_mastery - required) / (100.0 - required))
    return BASE_KIND_WEIGHT + EXCESS_KIND_WEIGHT * excess * excess


def select_kind(
    concept_mastery: float,
    rng: random.Random | None = None,
) -> ExerciseKind | None:
    """
    Choose the exercise kind for a concept.

    A single legal kind is returned directly. With several legal kinds,
    Introduction is dropped and the rest are drawn by selection weight.

    Args:
        concept_mastery: Aggregate mastery of the concept (0-100)
        rng: Random source

    Returns:
        Chosen kind, or None when nothing is unlocked
    """
    # Enum order keeps the candidate list stable for seeded draws
    valid = [kind for kind in ExerciseKind if kind.is_valid_for_mastery(concept_mastery)]
    if not valid:
        return None
    if len(valid) == 1:
        return valid[0]

    practice = [kind for kind in valid if kind is not ExerciseKind.INTRODUCTION]
    candidates = practice or valid
    weights = [selection_weight(kind, concept_mastery) for kind in candidates]
    return select_weighted(candidates, weights, rng)

"""
Core Module - Shared domain models and primitives.

This module contains the canonical implementations of concepts used by
both the study scheduler and the puzzle generators.

Components:
- mastery: Progress data model (MasteryEntity, ConceptGroup, PracticeSet)
- exercise: Exercise kinds and the unlock/weighting policy
- selection: Weighted random selector

Design Principle:
Domain modules (study/, puzzles/) should import from core/ rather than
reimplementing shared concepts.
"""

from birdly_engine.core.exercise import (
    ExerciseKind,
    legal_kinds,
    select_kind,
    selection_weight,
)
from birdly_engine.core.mastery import (
    ConceptGroup,
    MasteryEntity,
    MasteryLevel,
    PracticeSet,
    reset_mastery,
)
from birdly_engine.core.selection import select_weighted

__all__ = [
    # Mastery
    "ConceptGroup",
    "MasteryEntity",
    "MasteryLevel",
    "PracticeSet",
    "reset_mastery",
    # Exercise policy
    "ExerciseKind",
    "legal_kinds",
    "select_kind",
    "selection_weight",
    # Selection
    "select_weighted",
]

"""
birdly-engine - practice scheduling and word-search generation for birdly.

Public entry points used by the app layer:
- advance(practice_set) -> PracticeUnit | None
- record_attempt(entity, kind, was_correct) -> float
- generate_word_search(word, ...) -> GridPuzzle | None
"""

from birdly_engine.core import (
    ConceptGroup,
    ExerciseKind,
    MasteryEntity,
    MasteryLevel,
    PracticeSet,
    reset_mastery,
)
from birdly_engine.puzzles import GridPosition, GridPuzzle, generate_word_search
from birdly_engine.study import PracticeUnit, advance, record_attempt

__version__ = "1.0.0"

__all__ = [
    "ConceptGroup",
    "ExerciseKind",
    "GridPosition",
    "GridPuzzle",
    "MasteryEntity",
    "MasteryLevel",
    "PracticeSet",
    "PracticeUnit",
    "advance",
    "generate_word_search",
    "record_attempt",
    "reset_mastery",
    "__version__",
]

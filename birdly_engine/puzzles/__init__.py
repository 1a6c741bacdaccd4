"""
Puzzles Module - Word-search generation and answer checking.

Components:
- path_search: Randomized self-avoiding walk search
- grid_generator: Grid synthesis with size escalation
- word_search: Selection checking and round state
"""

from birdly_engine.puzzles.grid_generator import (
    GridPuzzle,
    WordSearchGridGenerator,
    generate_word_search,
)
from birdly_engine.puzzles.path_search import (
    GridPosition,
    find_path,
    is_adjacent,
    is_contiguous,
    is_valid_path,
    snake_path,
)
from birdly_engine.puzzles.word_search import (
    WordSearchRound,
    check_selection,
    normalize_word,
    read_path,
)

__all__ = [
    "GridPosition",
    "GridPuzzle",
    "WordSearchGridGenerator",
    "WordSearchRound",
    "check_selection",
    "find_path",
    "generate_word_search",
    "is_adjacent",
    "is_contiguous",
    "is_valid_path",
    "normalize_word",
    "read_path",
    "snake_path",
]

"""
Word-search answer checking.

A selection is accepted when the letters along it spell the target word
forwards or backwards.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from birdly_engine.config import get_settings
from birdly_engine.puzzles.path_search import GridPosition


def normalize_word(text: str) -> str:
    """Uppercase with spaces removed, as placed in the grid."""
    return text.upper().replace(" ", "")


def read_path(grid: Sequence[Sequence[str]], path: Sequence[GridPosition]) -> str:
    """Letters along a path; cells outside the grid are skipped."""
    letters = []
    for row, col in path:
        if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
            letters.append(grid[row][col])
    return "".join(letters)


def check_selection(
    selection: Sequence[GridPosition],
    grid: Sequence[Sequence[str]],
    target: str,
) -> bool:
    """
    Check a learner's selection against the target word.

    Args:
        selection: Cells in the order they were selected
        grid: Puzzle grid
        target: Word to find (normalized before comparing)

    Returns:
        True when the selection spells the word in either direction
    """
    if not selection:
        return False
    word = normalize_word(target)
    spelled = read_path(grid, selection)
    return spelled == word or spelled[::-1] == word


@dataclass
class WordSearchRound:
    """Learner state for one puzzle: solved, or out of attempts."""
    grid: list[list[str]]
    word: str
    max_incorrect: int = field(default_factory=lambda: get_settings().max_incorrect_attempts)
    incorrect_attempts: int = 0
    found: bool = False

    @property
    def is_over(self) -> bool:
        return self.found or self.incorrect_attempts >= self.max_incorrect

    def submit(self, selection: Sequence[GridPosition]) -> bool:
        """
        Submit a selection.

        Returns:
            True when it spells the word
        """
        if self.is_over:
            return False
        if check_selection(selection, self.grid, self.word):
            self.found = True
            return True
        self.incorrect_attempts += 1
        return False

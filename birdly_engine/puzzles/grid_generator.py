"""
Word Search Grid Generator.

Hides a word along a random self-avoiding 8-connected path in a square grid
of filler letters. When the path search fails at one size, the grid grows
and the search is retried for a fixed number of rounds.

Generation is conservative: if no round succeeds the generator returns None
so the caller can offer a different exercise instead of an unsolvable
puzzle. A deterministic snake placement is available as an explicit opt-in.
"""
from __future__ import annotations

import asyncio
import math
import random
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from birdly_engine.config import Settings, get_settings
from birdly_engine.puzzles.path_search import GridPosition, find_path, snake_path
from birdly_engine.puzzles.word_search import normalize_word, read_path


@dataclass(frozen=True)
class GridPuzzle:
    """Generated puzzle and the path the word was placed along."""
    grid: list[list[str]]
    size: int
    word: str
    path: tuple[GridPosition, ...]

    def hidden_word(self) -> str:
        """Letters read back along the placement path."""
        return read_path(self.grid, self.path)

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.grid]


class WordSearchGridGenerator:
    """
    Builds word-search puzzles with grid-size escalation.

    The algorithm:
    1. Start at the smallest size that holds the word (at least min_grid_size)
    2. Fill the grid with random filler letters
    3. Search for a random path as long as the word
    4. On success write the word along the path; otherwise grow and retry
    """

    def __init__(
        self,
        max_grid_size: int = 10,
        attempts_per_size: int = 100,
        min_grid_size: int = 4,
        size_step: int = 2,
        max_size_rounds: int = 3,
        max_expansions: Optional[int] = None,
        alphabet: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize generator.

        Args:
            max_grid_size: Largest grid edge allowed
            attempts_per_size: Path search restarts per grid size
            min_grid_size: Smallest grid edge to start from
            size_step: Edge growth after a failed round
            max_size_rounds: Grid sizes tried before giving up
            max_expansions: Cap on cell placements per search attempt
            alphabet: Filler letters
            rng: Random source
        """
        self.max_grid_size = max_grid_size
        self.attempts_per_size = attempts_per_size
        self.min_grid_size = min_grid_size
        self.size_step = size_step
        self.max_size_rounds = max_size_rounds
        self.max_expansions = max_expansions
        self.alphabet = alphabet
        self.rng = rng or random.Random()

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ) -> WordSearchGridGenerator:
        settings = settings or get_settings()
        return cls(
            max_grid_size=settings.max_grid_size,
            attempts_per_size=settings.attempts_per_size,
            min_grid_size=settings.min_grid_size,
            size_step=settings.grid_size_step,
            max_size_rounds=settings.max_size_rounds,
            max_expansions=settings.max_expansions_per_attempt,
            alphabet=settings.filler_alphabet,
            rng=rng,
        )

    def starting_size(self, word_length: int) -> int:
        """Smallest grid edge that can hold the word, within the limits."""
        fits = math.isqrt(word_length)
        if fits * fits < word_length:
            fits += 1
        return min(self.max_grid_size, max(self.min_grid_size, fits))

    def filler_grid(self, size: int) -> list[list[str]]:
        return [[self.rng.choice(self.alphabet) for _ in range(size)] for _ in range(size)]

    def _place(self, word: str, size: int, path: list[GridPosition]) -> GridPuzzle:
        grid = self.filler_grid(size)
        for char, (row, col) in zip(word, path):
            grid[row][col] = char
        return GridPuzzle(grid=grid, size=size, word=word, path=tuple(path))

    def generate(self, word: str, allow_fallback: bool = False) -> Optional[GridPuzzle]:
        """
        Generate a puzzle hiding ``word``.

        Args:
            word: Target word (uppercased, spaces removed)
            allow_fallback: Place the word along a snake path when every
                search round fails, instead of returning None

        Returns:
            GridPuzzle, or None when the word cannot be placed
        """
        word = normalize_word(word)
        length = len(word)
        if length == 0:
            return None
        if length > self.max_grid_size * self.max_grid_size:
            logger.info(f"'{word}' does not fit a {self.max_grid_size}x{self.max_grid_size} grid")
            return None

        size = self.starting_size(length)
        for round_index in range(self.max_size_rounds):
            path = find_path(
                length,
                size,
                max_attempts=self.attempts_per_size,
                rng=self.rng,
                max_expansions=self.max_expansions,
            )
            if path is not None:
                logger.debug(f"Placed '{word}' in a {size}x{size} grid (round {round_index + 1})")
                return self._place(word, size, path)

            logger.debug(f"No path for '{word}' in a {size}x{size} grid, growing")
            size = min(self.max_grid_size, size + self.size_step)

        if allow_fallback:
            logger.warning(f"Path search exhausted for '{word}', using snake placement")
            return self._place(word, size, snake_path(length, size))

        logger.warning(f"Path search exhausted for '{word}' after {self.max_size_rounds} rounds")
        return None

    async def generate_async(self, word: str, allow_fallback: bool = False) -> Optional[GridPuzzle]:
        """
        Generate off the event loop in a worker thread.

        Cancelling the awaiting task discards the result; generation has no
        side effects to undo.
        """
        return await asyncio.to_thread(self.generate, word, allow_fallback)


def generate_word_search(
    word: str,
    max_grid_size: Optional[int] = None,
    attempts_per_size: Optional[int] = None,
    rng: Optional[random.Random] = None,
    allow_fallback: bool = False,
) -> Optional[GridPuzzle]:
    """
    Generate a word-search puzzle with settings-based defaults.

    Args:
        word: Target word
        max_grid_size: Override for the largest grid edge
        attempts_per_size: Override for path search restarts per size
        rng: Random source
        allow_fallback: Use snake placement when search fails

    Returns:
        GridPuzzle, or None when no puzzle could be built
    """
    generator = WordSearchGridGenerator.from_settings(rng=rng)
    if max_grid_size is not None:
        generator.max_grid_size = max_grid_size
    if attempts_per_size is not None:
        generator.attempts_per_size = attempts_per_size
    return generator.generate(word, allow_fallback=allow_fallback)

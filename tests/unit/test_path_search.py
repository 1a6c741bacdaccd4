"""
Unit tests for the randomized self-avoiding path search.
"""

import random

import pytest

from birdly_engine.puzzles.path_search import (
    GridPosition,
    find_path,
    is_contiguous,
    is_valid_path,
    snake_path,
)


class TestFindPath:
    @pytest.mark.parametrize("length,size", [(1, 1), (4, 4), (8, 4), (12, 5), (16, 4), (20, 6)])
    def test_paths_are_self_avoiding_and_connected(self, rng, length, size):
        path = find_path(length, size, max_attempts=100, rng=rng)
        assert path is not None
        assert len(path) == length
        assert is_valid_path(path, size)

    def test_repeated_calls_differ(self):
        rng = random.Random(42)
        paths = {tuple(find_path(6, 6, rng=rng)) for _ in range(20)}
        assert len(paths) > 1

    def test_same_seed_reproduces_path(self):
        first = find_path(10, 5, rng=random.Random(99))
        second = find_path(10, 5, rng=random.Random(99))
        assert first == second

    def test_too_long_for_grid(self, rng):
        assert find_path(10, 3, rng=rng) is None

    def test_invalid_input(self, rng):
        assert find_path(0, 4, rng=rng) is None
        assert find_path(3, 0, rng=rng) is None

    def test_full_grid_walk(self, rng):
        path = find_path(9, 3, max_attempts=100, rng=rng)
        assert path is not None
        assert set(path) == {GridPosition(r, c) for r in range(3) for c in range(3)}

    def test_expansion_cap_can_abort_attempts(self, rng):
        # A single placement per attempt can never reach five cells
        assert find_path(5, 5, max_attempts=5, rng=rng, max_expansions=1) is None

    def test_results_are_grid_positions(self, rng):
        path = find_path(3, 4, rng=rng)
        assert all(isinstance(cell, GridPosition) for cell in path)


class TestSnakePath:
    def test_boustrophedon_order(self):
        assert snake_path(6, 3) == [
            GridPosition(0, 0),
            GridPosition(0, 1),
            GridPosition(0, 2),
            GridPosition(1, 2),
            GridPosition(1, 1),
            GridPosition(1, 0),
        ]

    def test_snake_is_valid(self):
        assert is_valid_path(snake_path(25, 5), 5)

    def test_snake_too_long(self):
        assert snake_path(10, 3) is None


class TestIsValidPath:
    def test_rejects_repeats(self):
        assert not is_valid_path([GridPosition(0, 0), GridPosition(0, 1), GridPosition(0, 0)], 3)

    def test_rejects_gaps(self):
        assert not is_valid_path([GridPosition(0, 0), GridPosition(0, 2)], 3)

    def test_rejects_out_of_bounds(self):
        assert not is_valid_path([GridPosition(2, 2), GridPosition(3, 3)], 3)

    def test_accepts_diagonals(self):
        assert is_valid_path([GridPosition(0, 0), GridPosition(1, 1), GridPosition(2, 0)], 3)

    def test_agrees_with_contiguity_inside_grid(self, rng):
        for _ in range(50):
            cells = [GridPosition(rng.randrange(3), rng.randrange(3)) for _ in range(4)]
            assert is_valid_path(cells, 3) == is_contiguous(cells)

"""Starting layouts for every level of the coin-flip puzzle.

A cell holding 1 shows a gold coin (face up), 0 shows a silver one.
"""

from __future__ import annotations

import random

Grid = list[list[int]]

LEVEL_COUNT = 20

_FIXED_LEVELS: dict[int, tuple[tuple[int, ...], ...]] = {
    1: ((1, 0, 1, 1),
        (0, 0, 1, 1),
        (1, 1, 0, 0),
        (1, 1, 0, 1)),
    2: ((0, 1, 0, 1),
        (1, 0, 0, 0),
        (1, 0, 0, 0),
        (0, 1, 0, 1)),
    3: ((1, 0, 1, 1),
        (1, 1, 0, 0),
        (0, 0, 1, 1),
        (1, 1, 0, 1)),
    4: ((0, 1, 1, 1),
        (1, 1, 0, 1),
        (1, 0, 1, 1),
        (1, 1, 1, 0)),
    5: ((1, 0, 0, 1),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
        (1, 0, 0, 1)),
    6: ((1, 0, 0, 1),
        (0, 1, 1, 0),
        (0, 1, 1, 0),
        (1, 0, 0, 1)),
    7: ((0, 1, 1, 0),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
        (0, 1, 1, 0)),
    8: ((0, 1, 1, 0),
        (1, 1, 1, 1),
        (1, 1, 1, 1),
        (0, 1, 1, 0)),
    9: ((0, 0, 0, 0),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
        (0, 0, 0, 0)),
    11: ((0, 0, 0, 0, 0),
         (0, 1, 0, 1, 0),
         (0, 0, 1, 0, 0),
         (0, 1, 0, 1, 0),
         (0, 0, 0, 0, 0)),
    12: ((0, 0, 0, 1, 0),
         (1, 0, 1, 1, 1),
         (1, 0, 1, 1, 0),
         (1, 0, 1, 1, 1),
         (0, 0, 0, 1, 0)),
    13: ((1, 1, 1, 0, 0),
         (0, 1, 0, 0, 0),
         (0, 1, 1, 1, 1),
         (0, 1, 0, 0, 1),
         (1, 1, 1, 0, 1)),
    14: ((1, 1, 1, 1, 1),
         (1, 0, 0, 0, 0),
         (1, 0, 0, 0, 0),
         (1, 0, 1, 1, 1),
         (1, 0, 1, 1, 1)),
    16: ((0, 0, 0, 0, 0, 0),
         (0, 1, 1, 1, 1, 0),
         (0, 1, 1, 1, 1, 0),
         (0, 1, 1, 1, 1, 0),
         (0, 1, 1, 1, 1, 0),
         (0, 0, 0, 0, 0, 0)),
    17: ((1, 1, 0, 0, 0, 0),
         (1, 1, 0, 0, 0, 1),
         (1, 1, 0, 0, 0, 0),
         (1, 1, 0, 0, 0, 0),
         (1, 1, 0, 0, 0, 1),
         (1, 1, 0, 0, 0, 0)),
    18: ((0, 0, 0, 0, 0, 1),
         (0, 0, 1, 0, 0, 0),
         (0, 1, 1, 0, 0, 0),
         (1, 0, 0, 1, 1, 0),
         (1, 1, 0, 1, 0, 0),
         (1, 1, 1, 0, 0, 0)),
    19: ((0, 0, 0, 0, 0, 0),
         (1, 0, 0, 0, 0, 0),
         (0, 0, 0, 0, 0, 0),
         (0, 0, 0, 0, 0, 0),
         (0, 0, 0, 0, 0, 0),
         (0, 0, 0, 0, 0, 0)),
}

# (level number, board size, row and column of the cell toggled to fix parity)
_RANDOM_LEVELS = ((10, 4, 0, 0), (15, 5, 3, 3), (20, 6, 4, 4))


def random_level(size, fix_row, fix_col, rng=None):
    """Return a random size x size grid holding an even number of gold coins.

    If the random draw has an odd number of ones, the cell at
    (fix_row, fix_col) is toggled to make it even.
    """
    if size <= 0:
        raise ValueError(f"board size must be positive, got {size}")
    if not (0 <= fix_row < size and 0 <= fix_col < size):
        raise ValueError(
            f"fix cell ({fix_row}, {fix_col}) lies outside a {size}x{size} board"
        )
    if rng is None:
        rng = random.Random()
    grid = [[rng.randrange(2) for _ in range(size)] for _ in range(size)]
    if sum(map(sum, grid)) % 2:
        grid[fix_row][fix_col] ^= 1
    return grid


def load_levels(rng=None):
    """Return a mapping of level number (1..20) to a fresh starting grid."""
    if rng is None:
        rng = random.Random()
    levels: dict[int, Grid] = {
        number: [list(row) for row in rows] for number, rows in _FIXED_LEVELS.items()
    }
    for number, size, fix_row, fix_col in _RANDOM_LEVELS:
        levels[number] = random_level(size, fix_row, fix_col, rng)
    return dict(sorted(levels.items()))
"""The playing field: a 4x4 board of coins that flip in a cross pattern."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from coinflip.coin import Coin
from coinflip.levels import LEVEL_COUNT, load_levels

BOARD_SIZE = 4
NEIGHBOUR_DELAY_MS = 300
GOLD = "G"
SILVER = "S"


def neighbours(x, y, size=BOARD_SIZE):
    """Return the on-board cells next to (x, y): right, left, below, above."""
    candidates = ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))
    return [(cx, cy) for cx, cy in candidates if 0 <= cx < size and 0 <= cy < size]


class PlayScene:
    """One level in play.

    The board is indexed as board()[x][y]; only the top-left 4x4 corner of a
    level's layout is used. Clicking a coin flips it and its neighbours, and
    once every coin shows gold the level is won and the board is locked.
    """

    def __init__(self, level, rng=None, layout: Sequence[Sequence[int]] | None = None):
        if not 1 <= level <= LEVEL_COUNT:
            raise ValueError(f"level must be in 1..{LEVEL_COUNT}, got {level}")
        if layout is None:
            layout = load_levels(rng)[level]
        columns = [list(column[:BOARD_SIZE]) for column in layout[:BOARD_SIZE]]
        if len(columns) != BOARD_SIZE or any(len(c) != BOARD_SIZE for c in columns):
            raise ValueError(f"a level layout must cover at least {BOARD_SIZE}x{BOARD_SIZE} cells")
        self.level = level
        self._coins = [
            [Coin(x, y, bool(value)) for y, value in enumerate(column)]
            for x, column in enumerate(columns)
        ]

    def _all_coins(self) -> Iterator[Coin]:
        for column in self._coins:
            yield from column

    def _settle(self):
        for coin in self._all_coins():
            while coin.animating:
                coin.tick()

    def click(self, x, y):
        """Click the coin at (x, y); return True if the level is now won.

        Clicks on a locked board (a won level) change nothing.
        """
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            raise ValueError(f"cell ({x}, {y}) lies outside the {BOARD_SIZE}x{BOARD_SIZE} board")
        if not self._coins[x][y].can_press():
            return self.is_won()
        for coin in self._all_coins():
            coin.locked = True
        for cx, cy in [(x, y), *neighbours(x, y)]:
            self._coins[cx][cy].flip()
        self._settle()
        won = self.is_won()
        if not won:
            for coin in self._all_coins():
                coin.locked = False
        return won

    def is_won(self):
        """True when every coin shows its gold side."""
        return all(coin.face_up for coin in self._all_coins())

    def board(self):
        """Return a copy of the board as board()[x][y], 1 for gold and 0 for silver."""
        return [[int(coin.face_up) for coin in column] for column in self._coins]

    def render(self):
        """Return the level title and the board as text, one screen row per line."""
        header = "  " + " ".join(str(x) for x in range(BOARD_SIZE))
        rows = [
            f"{y} " + " ".join(
                GOLD if self._coins[x][y].face_up else SILVER for x in range(BOARD_SIZE)
            )
            for y in range(BOARD_SIZE)
        ]
        return "\n".join([f"Level: {self.level}", header, *rows])
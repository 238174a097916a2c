"""Text front end: main menu, level chooser and the playing field."""

from __future__ import annotations

import argparse
import random
import sys

from coinflip.levels import LEVEL_COUNT
from coinflip.play import PlayScene

WINDOW_WIDTH = 320
WINDOW_HEIGHT = 588
LEVELS_PER_ROW = 4
LEVEL_BUTTON_SPACING = 70
LEVEL_GRID_ORIGIN = (25, 130)
TITLE = "Coin Flip"


def level_button_position(index):
    """Return the window position of the button for level index+1."""
    if not 0 <= index < LEVEL_COUNT:
        raise ValueError(f"level index must be in 0..{LEVEL_COUNT - 1}, got {index}")
    row, column = divmod(index, LEVELS_PER_ROW)
    left, top = LEVEL_GRID_ORIGIN
    return left + column * LEVEL_BUTTON_SPACING, top + row * LEVEL_BUTTON_SPACING


def _level_menu():
    rows: dict[int, list[str]] = {}
    for index in range(LEVEL_COUNT):
        _, top = level_button_position(index)
        rows.setdefault(top, []).append(f"{index + 1:>3}")
    lines = ["Choose a level:"]
    lines.extend(" ".join(buttons) for buttons in rows.values())
    lines.append("Type a level number, 'back' or 'quit'.")
    return "\n".join(lines)


_MAIN_MENU = f"{TITLE}\nType 'start' to choose a level or 'quit' to leave."
_PLAY_HELP = "Type 'x y' to flip a coin, 'back' or 'quit'."


def run(stdin=None, stdout=None, rng=None):
    """Play the game reading commands from stdin; return the exit status."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    rng = random.Random() if rng is None else rng

    def say(text):
        print(text, file=stdout)

    scene = "main"
    play: PlayScene | None = None
    say(_MAIN_MENU)
    for raw in stdin:
        command = raw.strip().lower()
        if not command:
            continue
        if command == "quit":
            return 0
        if scene == "main":
            if command == "start":
                scene = "choose"
                say(_level_menu())
            else:
                say(f"Unknown command: {command}")
        elif scene == "choose":
            if command == "back":
                scene = "main"
                say(_MAIN_MENU)
                continue
            try:
                level = int(command)
                play = PlayScene(level, rng)
            except ValueError:
                say(f"No such level: {command}")
                continue
            scene = "play"
            say(f"Entering level {level}")
            say(play.render())
            say(_PLAY_HELP)
        else:
            assert play is not None
            if command == "back":
                scene = "choose"
                play = None
                say(_level_menu())
                continue
            parts = command.split()
            try:
                if len(parts) != 2:
                    raise ValueError(f"expected two coordinates, got {command!r}")
                x, y = (int(part) for part in parts)
                won = play.click(x, y)
            except ValueError as error:
                say(f"Invalid move: {error}")
                continue
            say(play.render())
            if won:
                say("Level complete!")
    return 0


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="coinflip", description="Flip every coin to gold.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random levels")
    args = parser.parse_args(argv)
    return run(sys.stdin, sys.stdout, random.Random(args.seed))


if __name__ == "__main__":
    sys.exit(main())
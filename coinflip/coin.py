"""A single coin on the board and its flip animation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

FIRST_FRAME = 1
LAST_FRAME = 8
FRAME_INTERVAL_MS = 30


def coin_image(frame):
    """Return the image name of one animation frame (1 is gold, 8 is silver)."""
    if not FIRST_FRAME <= frame <= LAST_FRAME:
        raise ValueError(f"coin frame must be in {FIRST_FRAME}..{LAST_FRAME}, got {frame}")
    return f"Coin{frame:04d}.png"


@dataclass
class Coin:
    """A coin at board position (x, y), gold side up when face_up is true.

    A flip switches the face at once and queues the frames of the animation;
    each call to tick shows the next frame.
    """

    x: int
    y: int
    face_up: bool
    locked: bool = False
    _frame: int = field(default=FIRST_FRAME, init=False, repr=False)
    _pending: deque = field(default_factory=deque, init=False, repr=False)

    def __post_init__(self):
        self.face_up = bool(self.face_up)
        self._frame = FIRST_FRAME if self.face_up else LAST_FRAME

    @property
    def animating(self):
        """True while animation frames remain to be shown."""
        return bool(self._pending)

    def flip(self):
        """Turn the coin over and start its animation."""
        if self.face_up:
            frames = range(FIRST_FRAME, LAST_FRAME + 1)
        else:
            frames = range(LAST_FRAME, FIRST_FRAME - 1, -1)
        self.face_up = not self.face_up
        self._pending = deque(frames)

    def tick(self):
        """Advance the animation by one frame and return the image now shown."""
        if self._pending:
            self._frame = self._pending.popleft()
        return self.image()

    def can_press(self):
        """A coin reacts to a press only when idle and not locked."""
        return not (self.animating or self.locked)

    def image(self):
        """Return the image currently shown."""
        return coin_image(self._frame)
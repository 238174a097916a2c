"""Image buttons with a pressed state and their bounce animation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

BOUNCE_OFFSET = 10
BOUNCE_DURATION_MS = 200


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in window coordinates."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"rectangle size must not be negative: {self.width}x{self.height}")

    def moved(self, dx=0, dy=0):
        """Return the same rectangle shifted by (dx, dy)."""
        return replace(self, x=self.x + dx, y=self.y + dy)


@dataclass(frozen=True)
class Animation:
    """A geometry animation from one rectangle to another."""

    start: Rect
    end: Rect
    duration_ms: int = BOUNCE_DURATION_MS
    easing: str = "out_bounce"


def bounce_down(rect):
    """Animation that drops the button by the bounce offset."""
    return Animation(rect, rect.moved(dy=BOUNCE_OFFSET))


def bounce_up(rect):
    """Animation that lifts the button back from the bounce offset."""
    return Animation(rect.moved(dy=BOUNCE_OFFSET), rect)


@dataclass
class ImageButton:
    """A button drawn with an image, optionally swapped while held down."""

    normal_image: str
    pressed_image: str = ""
    pressed: bool = field(default=False, init=False)

    def __post_init__(self):
        if not self.normal_image:
            raise ValueError("a button needs a normal image")

    def press(self):
        """Hold the button down and return the image now shown."""
        self.pressed = True
        return self.current_image()

    def release(self):
        """Let the button go; return True if this completes a click."""
        clicked = self.pressed
        self.pressed = False
        return clicked

    def current_image(self):
        """Return the image to draw for the current state."""
        if self.pressed and self.pressed_image:
            return self.pressed_image
        return self.normal_image
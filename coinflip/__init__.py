"""Coin-flipping puzzle game played in the terminal: turn every coin gold side up."""

__version__ = "1.0.0"
__all__ = ["levels", "coin", "button", "play", "app"]
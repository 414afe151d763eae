"""Screen rectangles and 16-bit word helpers."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Rect", "split_word", "join_word"]


@dataclass(frozen=True)
class Rect:
    """An inclusive rectangle: both ``right`` and ``bottom`` lie inside it."""

    left: int
    top: int
    right: int
    bottom: int

    def length(self) -> int:
        """Width in pixels."""
        return self.right - self.left + 1

    def height(self) -> int:
        """Height in lines."""
        return self.bottom - self.top + 1

    def area(self) -> int:
        """Number of pixels covered."""
        return self.length() * self.height()


def split_word(word: int) -> tuple[int, int]:
    """Split a 16-bit word into its ``(low, high)`` bytes."""
    if not 0 <= word <= 0xFFFF:
        raise ValueError(f"word out of range: {word}")
    return word & 0xFF, word >> 8


def join_word(low: int, high: int) -> int:
    """Combine a low and a high byte into a 16-bit word."""
    for name, value in (("low", low), ("high", high)):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{name} byte out of range: {value}")
    return (high << 8) | low
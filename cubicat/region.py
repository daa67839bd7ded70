"""Axis-aligned screen rectangle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Region:
    """Rectangle given by its top-left corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def valid(self) -> bool:
        return self.w > 0 and self.h > 0

    def zero(self) -> None:
        self.x = self.y = self.w = self.h = 0

    def combine(self, other: Region) -> Region:
        """Grow this region to cover ``other``; empty regions are ignored."""
        if other.w == 0 or other.h == 0:
            return self
        if self.w == 0 and self.h == 0:
            self.x, self.y, self.w, self.h = other.x, other.y, other.w, other.h
            return self
        end_x = max(self.x + self.w, other.x + other.w)
        end_y = max(self.y + self.h, other.y + other.h)
        self.x = min(self.x, other.x)
        self.y = min(self.y, other.y)
        self.w = end_x - self.x
        self.h = end_y - self.y
        return self
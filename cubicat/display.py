"""Frame buffer display with primitive drawing and dirty-window tracking."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, Sequence

INT16_MAX = 32767
INT16_MIN = -32768


def rgb565(r: int, g: int, b: int) -> int:
    """Pack 8-bit red, green and blue into a 16-bit RGB565 colour."""
    return ((r & 0xF8) << 8) | ((g & 0xFC) << 3) | (b >> 3)


RED = rgb565(255, 0, 0)
GREEN = rgb565(0, 255, 0)
BLUE = rgb565(0, 0, 255)
BLACK = rgb565(0, 0, 0)
WHITE = rgb565(255, 255, 255)
GRAY = rgb565(128, 128, 128)
DARKGRAY = rgb565(64, 64, 64)
YELLOW = rgb565(255, 255, 0)
CYAN = rgb565(0, 156, 209)
PURPLE = rgb565(128, 0, 128)


class Direction(IntEnum):
    DIRECTION0 = 0
    DIRECTION90 = 1
    DIRECTION180 = 2
    DIRECTION270 = 3


class Panel(Protocol):
    """The screen a display sends its pixels to."""

    def push_pixels(self, x1: int, y1: int, x2: int, y2: int, pixels: Sequence[int]) -> None: ...

    def rotate(self, direction: Direction) -> None: ...


@dataclass
class DirtyWindow:
    """Inclusive rectangle of the back buffer that changed since the last swap."""

    x1: int = INT16_MAX
    y1: int = INT16_MAX
    x2: int = INT16_MIN
    y2: int = INT16_MIN

    def invalidate(self) -> None:
        self.x1 = self.y1 = INT16_MAX
        self.x2 = self.y2 = INT16_MIN

    def valid(self) -> bool:
        return self.x1 < self.x2 and self.y1 < self.y2

    def combine(self, other: DirtyWindow) -> None:
        """Grow to cover ``other``; an invalid ``other`` is ignored."""
        if not other.valid():
            return
        if not self.valid():
            self.x1, self.y1, self.x2, self.y2 = other.x1, other.y1, other.x2, other.y2
            return
        self.x1 = min(self.x1, other.x1)
        self.y1 = min(self.y1, other.y1)
        self.x2 = max(self.x2, other.x2)
        self.y2 = max(self.y2, other.y2)


class Display:
    """RGB565 back buffer with drawing primitives, flushed to a panel on swap."""

    def __init__(self, width: int, height: int, panel: Panel | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("display size must be positive")
        self.width = width
        self.height = height
        self.panel = panel
        self.rotation = 1 if width > height else 0
        self.background_color = 0
        self.dirty_window = DirtyWindow()
        self._buffer = [0] * (width * height)
        self._lock = threading.RLock()
        # The panel is portrait; a landscape display turns it by 270 degrees.
        if width > height and panel is not None:
            panel.rotate(Direction.DIRECTION270)
        self.swap_buffer()

    def pixel(self, x: int, y: int) -> int:
        """Colour of the back-buffer pixel at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the display")
        return self._buffer[y * self.width + x]

    def _put(self, x: int, y: int, color: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._buffer[y * self.width + x] = color

    def set_rotation(self, direction: Direction) -> None:
        if self.panel is not None:
            self.panel.rotate(Direction(direction))

    def push_pixels_to_screen(self, x1: int, y1: int, x2: int, y2: int, pixels: Sequence[int]) -> None:
        """Send pixels straight to the panel, bypassing the back buffer."""
        if self.panel is None:
            raise RuntimeError("no panel attached")
        self.panel.push_pixels(x1, y1, x2, y2, pixels)

    def swap_buffer(self) -> None:
        """Push the dirty rows of the back buffer to the panel."""
        if not self.dirty_window.valid():
            return
        x1, x2 = 0, self.width - 1
        y1 = max(self.dirty_window.y1, 0)
        y2 = min(self.dirty_window.y2, self.height - 1)
        with self._lock:
            if self.panel is not None and y1 <= y2:
                rows = self._buffer[y1 * self.width:(y2 + 1) * self.width]
                self.panel.push_pixels(x1, y1, x2, y2, rows)
            self.dirty_window.invalidate()

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int, thickness: int = 1) -> None:
        min_x, max_x = min(x1, x2), max(x1, x2)
        min_y, max_y = min(y1, y2), max(y1, y2)
        if x1 == x2 and y1 == y2:
            return
        if min_x > self.width or max_x < 0 or min_y > self.height or max_y < 0:
            return
        with self._lock:
            self.dirty_window.combine(DirtyWindow(min_x, min_y, max_x, max_y))
            dx = max_x - min_x
            dy = max_y - min_y
            sx = 1 if x2 > x1 else -1
            sy = 1 if y2 > y1 else -1
            x, y = x1, y1
            if dx > dy:
                err = -dx
                for _ in range(dx + 1):
                    self._put(x, y, color)
                    x += sx
                    err += 2 * dy
                    if err >= 0:
                        y += sy
                        err -= 2 * dx
            else:
                err = -dy
                for _ in range(dy + 1):
                    self._put(x, y, color)
                    y += sy
                    err += 2 * dx
                    if err >= 0:
                        x += sx
                        err -= 2 * dy

    def _draw_rect(
        self, xs: int, ys: int, w: int, h: int, color: int, fill: bool, thickness: int, corner_radius: int
    ) -> None:
        if xs + w <= 0 or ys + h <= 0 or xs >= self.width or ys >= self.height:
            return
        with self._lock:
            self.dirty_window.combine(DirtyWindow(xs, ys, xs + w - 1, ys + h - 1))
            if fill and corner_radius == 0:
                xs = max(xs, 0)
                ys = max(ys, 0)
                if xs + w > self.width:
                    w = self.width - xs
                if ys + h > self.height:
                    h = self.height - ys
                row = [color] * w
                for y in range(ys, ys + h):
                    start = y * self.width + xs
                    self._buffer[start:start + w] = row
                return

            if thickness == 0:
                thickness = 1
            if corner_radius > 0 and thickness > 2 * corner_radius:
                thickness = 2 * corner_radius
            corner_radius = min(corner_radius, min(w, h) >> 1)

            rx1 = xs + corner_radius
            ry1 = ys + corner_radius
            rx2 = rx1 + w - 2 * corner_radius
            ry2 = ry1 + h - 2 * corner_radius
            center_l = xs + thickness
            center_r = xs + w - thickness
            center_t = ys + thickness
            center_b = ys + h - thickness
            outer = corner_radius * corner_radius
            inner = (corner_radius - thickness) * (corner_radius - thickness)

            for y in range(max(ys, 0), min(ys + h, self.height)):
                for x in range(max(xs, 0), min(xs + w, self.width)):
                    if rx1 <= x <= rx2 or ry1 <= y <= ry2:
                        if fill or x < center_l or x >= center_r or y < center_t or y >= center_b:
                            self._put(x, y, color)
                        continue
                    cx = rx1 if x <= rx1 else rx2
                    cy = ry1 if y <= ry1 else ry2
                    dist_sqr = (x - cx) ** 2 + (y - cy) ** 2
                    if dist_sqr <= outer and (fill or dist_sqr >= inner):
                        self._put(x, y, color)

    def draw_rect(self, x: int, y: int, w: int, h: int, color: int, thickness: int = 1) -> None:
        self._draw_rect(x, y, w, h, color, False, thickness, 0)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        self._draw_rect(x, y, w, h, color, True, 0, 0)

    def draw_round_rect(
        self, x: int, y: int, w: int, h: int, color: int, thickness: int = 1, corner_radius: int = 2
    ) -> None:
        self._draw_rect(x, y, w, h, color, False, thickness, corner_radius)

    def fill_round_rect(self, x: int, y: int, w: int, h: int, color: int, corner_radius: int = 2) -> None:
        self._draw_rect(x, y, w, h, color, True, 0, corner_radius)

    def _draw_circle(self, x: int, y: int, radius: int, color: int, fill: bool, thickness: int) -> None:
        if (
            radius == 0
            or x + radius < 0
            or x - radius >= self.width
            or y + radius < 0
            or y - radius >= self.height
        ):
            return
        with self._lock:
            self.dirty_window.combine(DirtyWindow(x - radius, y - radius, x + radius, y + radius))
            outer = radius * radius
            inner = (radius - thickness) * (radius - thickness)
            for py in range(y - radius, y + radius + 1):
                for px in range(x - radius, x + radius + 1):
                    dist_sqr = (px - x) ** 2 + (py - y) ** 2
                    if dist_sqr <= outer and (fill or dist_sqr >= inner):
                        self._put(px, py, color)

    def draw_circle(self, x: int, y: int, radius: int, color: int, thickness: int = 1) -> None:
        self._draw_circle(x, y, radius, color, False, thickness)

    def fill_circle(self, x: int, y: int, radius: int, color: int) -> None:
        self._draw_circle(x, y, radius, color, True, 0)

    def fill_screen(self, color: int) -> None:
        self.fill_rect(0, 0, self.width, self.height, color)
        self.background_color = color

    def draw_image(self, x: int, y: int, img_width: int, img_height: int, img: Sequence[int]) -> None:
        """Copy a row-major RGB565 image into the back buffer, clipped to the screen."""
        if x >= self.width or y >= self.height:
            return
        if len(img) < img_width * img_height:
            raise ValueError("image data is shorter than its size")
        with self._lock:
            self.dirty_window.combine(DirtyWindow(x, y, x + img_width, y + img_height))
            width = min(img_width, self.width - x)
            height = min(img_height, self.height - y)
            for row in range(height):
                src = row * img_width
                dst = (y + row) * self.width + x
                self._buffer[dst:dst + width] = img[src:src + width]
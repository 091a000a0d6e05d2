"""Gesture feedback animations drawn on a transparent overlay surface.

The window system passed to an animation provides ``create_surface()``,
returning an object with a ``draw(shapes)`` method. Each call to ``draw``
replaces what is shown on the overlay with the given shapes.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

__all__ = [
    "Rectangle",
    "Box",
    "Animation",
    "MaximizeWindowAnimation",
    "MinimizeWindowAnimation",
    "TileWindowAnimation",
    "animation_value",
]

_FRAME_INTERVAL_MS = 1000 // 30


@dataclass
class Rectangle:
    """Screen area in pixels."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Box:
    """A rectangle to draw: filled with ``fill`` and outlined with ``border``.

    ``None`` as a colour means fully transparent. ``line_width`` of 0 means
    the border is not stroked.
    """

    x: float
    y: float
    width: float
    height: float
    fill: Any
    border: Any
    alpha: float
    line_width: float = 2


def animation_value(
    initial_value: float, target_value: float, percentage: float
) -> float:
    """Linear value between ``initial_value`` and ``target_value`` at ``percentage``."""
    return ((target_value - initial_value) * percentage) / 100 + initial_value


class Animation(ABC):
    """Base class for animations, limiting redraws to about 30 per second."""

    MAX_ALPHA = 0.6

    def __init__(
        self,
        window_system: Any,
        window: Any,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.window_system = window_system
        self.window = window
        self.surface = window_system.create_surface()
        self._clock = clock
        self._last_render_ms = 0

    def on_update(self, percentage: float) -> bool:
        """Render if enough time passed since the last frame; tell whether it did."""
        now_ms = int(self._clock() * 1000)
        if now_ms < self._last_render_ms + _FRAME_INTERVAL_MS:
            return False
        self._last_render_ms = now_ms
        self.render(percentage)
        return True

    @abstractmethod
    def render(self, percentage: float) -> List[Box]:
        """Draw the animation at ``percentage`` (0..100) and return the shapes."""

    def _show(self, shapes: Sequence[Box]) -> List[Box]:
        shapes = list(shapes)
        if self.surface is not None:
            self.surface.draw(shapes)
        return shapes


class MaximizeWindowAnimation(Animation):
    """A rectangle growing from the top centre to fill the work area."""

    def __init__(
        self,
        window_system: Any,
        window: Any,
        color: Any,
        border_color: Any,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(window_system, window, clock)
        self.max_size: Rectangle = window_system.get_desktop_workarea()
        self.color = color
        self.border_color = border_color

    def render(self, percentage: float) -> List[Box]:
        area = self.max_size
        width = animation_value(0, area.width, percentage)
        height = animation_value(0, area.height, percentage)
        alpha = animation_value(0, self.MAX_ALPHA, percentage)
        box = Box(
            x=area.x + (area.width - width) / 2,
            y=area.y,
            width=width,
            height=height,
            fill=self.color,
            border=self.border_color,
            alpha=alpha,
        )
        return self._show([box])


class MinimizeWindowAnimation(Animation):
    """A rectangle shrinking from the window towards its minimized icon."""

    def __init__(
        self,
        window_system: Any,
        window: Any,
        color: Any,
        border_color: Any,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(window_system, window, clock)
        self.initial_size: Rectangle = window_system.get_window_size(window)
        final: Optional[Rectangle] = window_system.minimize_window_icon_size(window)
        if final is None or (
            final.x == 0 and final.y == 0 and final.width == 0 and final.height == 0
        ):
            # Without an icon position, shrink to the centre of the window
            initial = self.initial_size
            final = Rectangle(
                initial.x + initial.width // 2,
                initial.y + initial.height // 2,
                0,
                0,
            )
        self.final_size = final
        self.color = color
        self.border_color = border_color

    def render(self, percentage: float) -> List[Box]:
        start, end = self.initial_size, self.final_size
        box = Box(
            x=animation_value(start.x, end.x, percentage),
            y=animation_value(start.y, end.y, percentage),
            width=animation_value(start.width, end.width, percentage),
            height=animation_value(start.height, end.height, percentage),
            fill=self.color,
            border=self.border_color,
            alpha=animation_value(0, self.MAX_ALPHA, percentage),
        )
        return self._show([box])


class TileWindowAnimation(Animation):
    """A rectangle growing to cover the left or right half of the work area."""

    def __init__(
        self,
        window_system: Any,
        window: Any,
        color: Any,
        border_color: Any,
        to_the_left: bool,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(window_system, window, clock)
        self.color = color
        self.border_color = border_color
        self.to_the_left = to_the_left
        workarea: Rectangle = window_system.get_desktop_workarea()
        half = workarea.width // 2
        self.max_size = Rectangle(
            workarea.x if to_the_left else workarea.x + half,
            workarea.y,
            half,
            workarea.height,
        )

    def render(self, percentage: float) -> List[Box]:
        area = self.max_size
        width = animation_value(0, area.width, percentage)
        height = animation_value(0, area.height, percentage)
        x = area.x if self.to_the_left else area.x + (area.width - width)
        y = area.y + (area.height - height) / 2
        box = Box(
            x=x,
            y=y,
            width=width,
            height=height,
            fill=self.color,
            border=self.border_color,
            alpha=animation_value(0, self.MAX_ALPHA, percentage),
        )
        return self._show([box])
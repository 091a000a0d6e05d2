"""Animations drawing a tinted frame over a window or the whole work area."""

from __future__ import annotations

import time
from typing import Any, Callable, List

from swipegest.animation import Animation, Box, Rectangle, animation_value

__all__ = ["CloseWindowAnimation", "RestoreWindowAnimation", "ShowDesktopAnimation"]


def _frame(
    area: Rectangle,
    inner_width: float,
    inner_height: float,
    color: Any,
    border_color: Any,
    alpha: float,
) -> List[Box]:
    """A filled area with a transparent, outlined rectangle centred inside."""
    background = Box(
        x=area.x,
        y=area.y,
        width=area.width,
        height=area.height,
        fill=color,
        border=None,
        alpha=alpha,
        line_width=0,
    )
    hole = Box(
        x=area.x + (area.width - inner_width) / 2,
        y=area.y + (area.height - inner_height) / 2,
        width=inner_width,
        height=inner_height,
        fill=None,
        border=border_color,
        alpha=alpha,
    )
    return [background, hole]


def _max_diff(area: Rectangle) -> int:
    """Five per cent of the larger side of ``area``."""
    return (5 * max(area.width, area.height)) // 100


class _ShrinkingFrameAnimation(Animation):
    """A coloured area whose transparent centre shrinks as the gesture goes on."""

    def __init__(
        self,
        window_system: Any,
        window: Any,
        color: Any,
        border_color: Any,
        max_size: Rectangle,
        clock: Callable[[], float],
    ) -> None:
        super().__init__(window_system, window, clock)
        self.max_size = max_size
        self.color = color
        self.border_color = border_color

    def render(self, percentage: float) -> List[Box]:
        area = self.max_size
        alpha = animation_value(0, self.MAX_ALPHA, percentage)
        diff = _max_diff(area)
        width = animation_value(area.width, area.width - diff, percentage)
        height = animation_value(area.height, area.height - diff, percentage)
        return self._show(
            _frame(area, width, height, self.color, self.border_color, alpha)
        )


class CloseWindowAnimation(_ShrinkingFrameAnimation):
    """A frame closing in over the window about to be closed."""

    def __init__(
        self,
        window_system: Any,
        window: Any,
        color: Any,
        border_color: Any,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(
            window_system,
            window,
            color,
            border_color,
            window_system.get_window_size(window),
            clock,
        )

    def render(self, percentage: float) -> List[Box]:
        return super().render(percentage)


class RestoreWindowAnimation(_ShrinkingFrameAnimation):
    """A frame closing in over the whole work area."""

    def __init__(
        self,
        window_system: Any,
        window: Any,
        color: Any,
        border_color: Any,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(
            window_system,
            window,
            color,
            border_color,
            window_system.get_desktop_workarea(),
            clock,
        )

    def render(self, percentage: float) -> List[Box]:
        return super().render(percentage)


class ShowDesktopAnimation(Animation):
    """A frame over the work area, closing in or opening out.

    When the desktop is already shown the frame closes in; otherwise it opens
    out from a smaller rectangle to the full work area.
    """

    def __init__(
        self,
        window_system: Any,
        window: Any,
        color: Any,
        border_color: Any,
        showing_desktop: bool,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(window_system, window, clock)
        self.max_size: Rectangle = window_system.get_desktop_workarea()
        self.color = color
        self.border_color = border_color
        self.showing_desktop = showing_desktop

    def render(self, percentage: float) -> List[Box]:
        area = self.max_size
        alpha = animation_value(0, self.MAX_ALPHA, percentage)
        diff = _max_diff(area)
        if self.showing_desktop:
            width = animation_value(area.width, area.width - diff, percentage)
            height = animation_value(area.height, area.height - diff, percentage)
        else:
            width = animation_value(area.width - diff, area.width, percentage)
            height = animation_value(area.height - diff, area.height, percentage)
        return self._show(
            _frame(area, width, height, self.color, self.border_color, alpha)
        )
"""Half-disc with an arrow shown at a screen edge when changing desktop."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Tuple, Union

from swipegest.action_types import ActionDirection
from swipegest.animation import Animation, Rectangle, animation_value

__all__ = ["Arc", "Polyline", "ChangeDesktopAnimation"]

_Point = Tuple[float, float]


@dataclass(frozen=True)
class Arc:
    """A circular sector from ``angle_start`` to ``angle_end`` (radians)."""

    x_center: float
    y_center: float
    radius: float
    angle_start: float
    angle_end: float
    fill: Any
    border: Any
    alpha: float
    line_width: float = 2


@dataclass(frozen=True)
class Polyline:
    """Connected line segments; ``color`` of ``None`` clears what is beneath."""

    points: Tuple[_Point, ...]
    line_width: float
    color: Any = None
    alpha: float = 0.0


Shape = Union[Arc, Polyline]


class ChangeDesktopAnimation(Animation):
    """A growing half-disc at one screen edge, with an arrow pointing outwards."""

    def __init__(
        self,
        window_system: Any,
        window: Any,
        color: Any,
        border_color: Any,
        animation_position: ActionDirection,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(window_system, window, clock)
        self.color = color
        self.border_color = border_color

        workarea: Rectangle = window_system.get_desktop_workarea()
        size = workarea.height // 7
        centered_x = workarea.x + workarea.width // 2 - size // 2

        if animation_position is ActionDirection.UP:
            x, y = centered_x, workarea.y
            self.angle = math.pi + math.pi / 2
        elif animation_position is ActionDirection.DOWN:
            x, y = centered_x, workarea.y + workarea.height - size
            self.angle = math.pi / 2
        elif animation_position is ActionDirection.LEFT:
            x, y = workarea.x, workarea.y + size * 3
            self.angle = math.pi
        else:
            x, y = workarea.x + workarea.width - size, workarea.y + size * 3
            self.angle = 0.0

        self.max_size = Rectangle(x, y, size, size)

    def render(self, percentage: float) -> List[Shape]:
        area = self.max_size
        angle = self.angle
        half_w = area.width // 2
        half_h = area.height // 2
        mid_x = area.x + half_w
        mid_y = area.y + half_h

        radius = animation_value(0, half_w, percentage)
        alpha = animation_value(0, self.MAX_ALPHA, percentage)
        arc = Arc(
            x_center=mid_x + half_w * math.cos(angle),
            y_center=mid_y + half_h * math.sin(angle),
            radius=radius,
            angle_start=math.fmod(angle + math.radians(90), 2 * math.pi),
            angle_end=math.fmod(angle + math.radians(270), 2 * math.pi),
            fill=self.color,
            border=self.border_color,
            alpha=alpha,
        )

        head_angle = math.pi / 4
        length = radius / 2
        head_length = radius / 3

        p1 = (
            mid_x + (length / 2) * math.cos(angle),
            mid_y + (length / 2) * math.sin(angle),
        )
        p2 = (p1[0] + length * math.cos(angle), p1[1] + length * math.sin(angle))
        p3 = (
            p2[0] - head_length * math.cos(angle - head_angle),
            p2[1] - head_length * math.sin(angle - head_angle),
        )
        p4 = (
            p3[0] + head_length * math.cos(angle - head_angle),
            p3[1] + head_length * math.sin(angle - head_angle),
        )
        p5 = (
            p4[0] - head_length * math.cos(angle + head_angle),
            p4[1] - head_length * math.sin(angle + head_angle),
        )

        line_width = radius / 10
        shaft = Polyline(points=(p1, p2), line_width=line_width)
        head = Polyline(points=(p3, p4, p5), line_width=line_width)
        return self._show([arc, shaft, head])
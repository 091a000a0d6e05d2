"""Animated actions acting on windows and desktops."""

from __future__ import annotations

from swipegest.action import AnimatedAction
from swipegest.action_types import ActionDirection, action_direction_from_str
from swipegest.animation import (
    MaximizeWindowAnimation,
    MinimizeWindowAnimation,
    TileWindowAnimation,
)
from swipegest.change_desktop_animation import ChangeDesktopAnimation
from swipegest.frame_animations import (
    CloseWindowAnimation,
    RestoreWindowAnimation,
    ShowDesktopAnimation,
)
from swipegest.gesture import Gesture, GestureDirection

__all__ = [
    "ChangeDesktop",
    "CloseWindow",
    "FullscreenWindow",
    "MaximizeRestoreWindow",
    "MinimizeWindow",
    "ShowDesktop",
    "TileWindow",
]

_FALLBACK_ANIMATION_POSITION = {
    ActionDirection.AUTO: ActionDirection.AUTO,
    ActionDirection.UP: ActionDirection.UP,
    ActionDirection.DOWN: ActionDirection.DOWN,
    ActionDirection.LEFT: ActionDirection.LEFT,
    ActionDirection.RIGHT: ActionDirection.RIGHT,
    ActionDirection.NEXT: ActionDirection.RIGHT,
}


class ChangeDesktop(AnimatedAction):
    """Switch to the next or previous desktop."""

    def __init__(self, settings, window_system, window, config) -> None:
        super().__init__(settings, window_system, window, config)
        self.direction = ActionDirection.AUTO

    def run_on_system_windows(self) -> bool:
        return True

    def on_gesture_begin(self, gesture: Gesture) -> None:
        if "direction" in self.settings:
            self.direction = action_direction_from_str(self.settings["direction"])

        if not self.animate:
            return

        if "animationPosition" in self.settings:
            position = action_direction_from_str(self.settings["animationPosition"])
        else:
            # Without an explicit position, follow the action direction
            position = _FALLBACK_ANIMATION_POSITION.get(
                self.direction, ActionDirection.LEFT
            )

        if position is ActionDirection.AUTO:
            position = self._animation_auto_direction(gesture)

        self.animation = ChangeDesktopAnimation(
            self.window_system, self.window, self.color, self.border_color, position
        )

    def execute_action(self, gesture: Gesture) -> None:
        direction = self.direction
        if direction is ActionDirection.AUTO:
            direction = self._action_auto_direction(gesture)
        self.window_system.change_desktop(direction)

    def _natural(self, gesture: Gesture) -> bool:
        return bool(
            self.window_system.is_natural_scroll_enabled(
                gesture.performed_on_device_type
            )
        )

    def _animation_auto_direction(self, gesture: Gesture) -> ActionDirection:
        natural = self._natural(gesture)
        if gesture.direction == GestureDirection.UP:
            return ActionDirection.DOWN if natural else ActionDirection.UP
        if gesture.direction == GestureDirection.DOWN:
            return ActionDirection.UP if natural else ActionDirection.DOWN
        if gesture.direction == GestureDirection.RIGHT:
            return ActionDirection.LEFT if natural else ActionDirection.RIGHT
        return ActionDirection.RIGHT if natural else ActionDirection.LEFT

    def _action_auto_direction(self, gesture: Gesture) -> ActionDirection:
        natural = self._natural(gesture)
        if gesture.direction in (GestureDirection.LEFT, GestureDirection.UP):
            return ActionDirection.NEXT if natural else ActionDirection.PREVIOUS
        return ActionDirection.PREVIOUS if natural else ActionDirection.NEXT


class CloseWindow(AnimatedAction):
    """Close the window under the pointer."""

    def run_on_system_windows(self) -> bool:
        return False

    def on_gesture_begin(self, gesture: Gesture) -> None:
        if self.animate:
            self.animation = CloseWindowAnimation(
                self.window_system, self.window, self.color, self.border_color
            )

    def execute_action(self, gesture: Gesture) -> None:
        self.window_system.close_window(self.window)


class FullscreenWindow(AnimatedAction):
    """Toggle full screen on the window under the pointer."""

    def run_on_system_windows(self) -> bool:
        return False

    def on_gesture_begin(self, gesture: Gesture) -> None:
        if not self.animate:
            return
        if self.window_system.is_window_fullscreen(self.window):
            animation_class = RestoreWindowAnimation
        else:
            animation_class = MaximizeWindowAnimation
        self.animation = animation_class(
            self.window_system, self.window, self.color, self.border_color
        )

    def execute_action(self, gesture: Gesture) -> None:
        self.window_system.toggle_fullscreen_window(self.window)


class MaximizeRestoreWindow(AnimatedAction):
    """Maximize the window under the pointer, or restore it if maximized."""

    def run_on_system_windows(self) -> bool:
        return False

    def on_gesture_begin(self, gesture: Gesture) -> None:
        if not self.animate:
            return
        if self.window_system.is_window_maximized(self.window):
            animation_class = RestoreWindowAnimation
        else:
            animation_class = MaximizeWindowAnimation
        self.animation = animation_class(
            self.window_system, self.window, self.color, self.border_color
        )

    def execute_action(self, gesture: Gesture) -> None:
        self.window_system.maximize_or_restore_window(self.window)


class MinimizeWindow(AnimatedAction):
    """Minimize the window under the pointer."""

    def run_on_system_windows(self) -> bool:
        return False

    def on_gesture_begin(self, gesture: Gesture) -> None:
        if self.animate:
            self.animation = MinimizeWindowAnimation(
                self.window_system, self.window, self.color, self.border_color
            )

    def execute_action(self, gesture: Gesture) -> None:
        self.window_system.minimize_window(self.window)


class ShowDesktop(AnimatedAction):
    """Show the desktop, or bring the windows back if it is already shown."""

    def __init__(self, settings, window_system, window, config) -> None:
        super().__init__(settings, window_system, window, config)
        self.showing_desktop = False

    def run_on_system_windows(self) -> bool:
        return True

    def on_gesture_begin(self, gesture: Gesture) -> None:
        self.showing_desktop = bool(self.window_system.is_showing_desktop())
        if self.animate:
            self.animation = ShowDesktopAnimation(
                self.window_system,
                self.window,
                self.color,
                self.border_color,
                self.showing_desktop,
            )

    def execute_action(self, gesture: Gesture) -> None:
        self.window_system.show_desktop(not self.showing_desktop)


class TileWindow(AnimatedAction):
    """Tile the window under the pointer to the left or right half."""

    def __init__(self, settings, window_system, window, config) -> None:
        super().__init__(settings, window_system, window, config)
        self.to_the_left = True

    def run_on_system_windows(self) -> bool:
        return False

    def on_gesture_begin(self, gesture: Gesture) -> None:
        if "direction" in self.settings:
            self.to_the_left = self.settings["direction"] == "left"
        if self.animate:
            self.animation = TileWindowAnimation(
                self.window_system,
                self.window,
                self.color,
                self.border_color,
                self.to_the_left,
            )

    def execute_action(self, gesture: Gesture) -> None:
        self.window_system.tile_window(self.window, self.to_the_left)
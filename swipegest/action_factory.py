"""Build the action configured for a gesture."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from swipegest.action import Action
from swipegest.action_types import ActionType
from swipegest.config import Config
from swipegest.input_actions import MouseClick, RunCommand, SendKeys
from swipegest.window_actions import (
    ChangeDesktop,
    CloseWindow,
    FullscreenWindow,
    MaximizeRestoreWindow,
    MinimizeWindow,
    ShowDesktop,
    TileWindow,
)

__all__ = ["build_action"]

_ACTION_CLASSES = {
    ActionType.MAXIMIZE_RESTORE_WINDOW: MaximizeRestoreWindow,
    ActionType.FULLSCREEN_WINDOW: FullscreenWindow,
    ActionType.MINIMIZE_WINDOW: MinimizeWindow,
    ActionType.TILE_WINDOW: TileWindow,
    ActionType.CLOSE_WINDOW: CloseWindow,
    ActionType.CHANGE_DESKTOP: ChangeDesktop,
    ActionType.SHOW_DESKTOP: ShowDesktop,
    ActionType.SEND_KEYS: SendKeys,
    ActionType.RUN_COMMAND: RunCommand,
    ActionType.MOUSE_CLICK: MouseClick,
}


def build_action(
    action_type: ActionType,
    settings: Mapping[str, str],
    window_system: Any,
    window: Any,
    config: Config,
) -> Optional[Action]:
    """Return the action for ``action_type``, or ``None`` if it is not supported."""
    action_class = _ACTION_CLASSES.get(action_type)
    if action_class is None:
        return None
    return action_class(settings, window_system, window, config)
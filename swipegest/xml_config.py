"""Load the XML configuration file into a :class:`Config` and watch it."""

from __future__ import annotations

import logging
import os
import threading
import xml.etree.ElementTree as ElementTree
from pathlib import Path
from typing import List, Optional, Tuple, Union

from swipegest.action_types import action_type_from_str
from swipegest.config import Config
from swipegest.gesture import gesture_direction_from_str, gesture_type_from_str

__all__ = ["ConfigError", "XmlConfigLoader", "load_config_string"]

_log = logging.getLogger(__name__)

DEFAULT_SYSTEM_CONFIG_FILE = Path("/usr/share/swipegest/swipegest.conf")
CONFIG_FILE_NAME = "swipegest.conf"
_POLL_INTERVAL = 0.1

_Snapshot = Optional[Tuple[Tuple[str, int, int], ...]]


class ConfigError(Exception):
    """The configuration file is missing or cannot be parsed."""


def _default_user_config_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "swipegest"


def _node_text(element: Optional[ElementTree.Element]) -> str:
    """Text content of a node; whitespace-only text counts as empty."""
    if element is None or element.text is None:
        return ""
    return "" if not element.text.strip() else element.text


def _split_applications(text: str) -> List[str]:
    if not text:
        return []
    parts = text.split(",")
    if parts[-1] == "":
        parts.pop()
    return parts


def _parse_global_settings(config: Config, root: ElementTree.Element) -> None:
    settings = root.find("settings")
    if settings is None:
        return
    for prop in settings.findall("property"):
        config.save_global_setting(prop.get("name", ""), _node_text(prop))


def _parse_applications(config: Config, root: ElementTree.Element) -> None:
    for application_node in root.findall("application"):
        applications = _split_applications(application_node.get("name", ""))

        for gesture_node in application_node.findall("gesture"):
            gesture_type = gesture_type_from_str(gesture_node.get("type", ""))
            fingers = gesture_node.get("fingers", "")
            direction = gesture_direction_from_str(gesture_node.get("direction", ""))

            action_node = gesture_node.find("action")
            if action_node is None:
                action_type = action_type_from_str("")
                settings = {}
            else:
                action_type = action_type_from_str(action_node.get("type", ""))
                settings = {child.tag: _node_text(child) for child in action_node}

            for application in applications:
                config.save_gesture_config(
                    application.strip(),
                    gesture_type,
                    fingers,
                    direction,
                    action_type,
                    settings,
                )


def load_config_string(config: Config, text: Union[str, bytes]) -> None:
    """Parse an XML configuration document and store it in ``config``."""
    try:
        root = ElementTree.fromstring(text)
    except ElementTree.ParseError as exc:
        raise ConfigError("Error parsing configuration file") from exc
    _parse_global_settings(config, root)
    _parse_applications(config, root)


class XmlConfigLoader:
    """Read the user configuration file, falling back to the system one.

    The user configuration directory is watched and the configuration is
    reloaded whenever something in it changes.
    """

    def __init__(
        self,
        config: Config,
        system_config_file: Union[str, os.PathLike, None] = None,
        user_config_dir: Union[str, os.PathLike, None] = None,
    ) -> None:
        self.config = config
        self.system_config_file = Path(system_config_file or DEFAULT_SYSTEM_CONFIG_FILE)
        self.user_config_dir = Path(user_config_dir or _default_user_config_dir())
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def user_config_file(self) -> Path:
        return self.user_config_dir / CONFIG_FILE_NAME

    def load(self) -> None:
        """Parse the configuration and start watching it for changes."""
        self.parse_config()
        self.watch()

    def config_file_path(self) -> Path:
        """Return the configuration file to use.

        Raises :class:`ConfigError` when the system file does not exist.
        """
        if not self.system_config_file.exists():
            raise ConfigError(
                f"File {self.system_config_file} not found.\n"
                "Reinstall the package to solve this issue"
            )
        if self.user_config_file.exists():
            return self.user_config_file
        return self.system_config_file

    def parse_config(self) -> None:
        """Parse the configuration file into the configuration store."""
        path = self.config_file_path()
        _log.info("Using configuration file %s", path)
        try:
            text = path.read_bytes()
        except OSError as exc:
            raise ConfigError("Error parsing configuration file") from exc
        load_config_string(self.config, text)

    def watch(self) -> None:
        """Start a background thread reloading the configuration on change."""
        if self._thread is not None and self._thread.is_alive():
            return
        try:
            self.user_config_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            _log.warning(
                "It was not possible to monitor your configuration file for "
                "changes. You will need to restart to apply your "
                "configuration changes"
            )
            return

        self._stop_event.clear()
        initial = self._snapshot()
        self._thread = threading.Thread(
            target=self._watch_loop, args=(initial,), daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop watching the configuration directory."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _snapshot(self) -> _Snapshot:
        try:
            entries = []
            with os.scandir(self.user_config_dir) as it:
                for entry in it:
                    try:
                        st = entry.stat()
                    except OSError:
                        continue
                    entries.append((entry.name, st.st_mtime_ns, st.st_size))
        except OSError:
            return None
        return tuple(sorted(entries))

    def _watch_loop(self, last: _Snapshot) -> None:
        while not self._stop_event.wait(_POLL_INTERVAL):
            current = self._snapshot()
            if current == last:
                continue
            last = current
            _log.info("Your configuration file changed, reloading your settings")
            with self._lock:
                self.config.clear()
                try:
                    self.parse_config()
                except ConfigError as exc:
                    _log.error("%s", exc)
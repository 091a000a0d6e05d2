import time

import pytest

from swipegest.action_types import ActionType
from swipegest.config import Config
from swipegest.gesture import GestureDirection, GestureType
from swipegest.xml_config import ConfigError, XmlConfigLoader, load_config_string

SAMPLE = """<config>
  <settings>
    <property name="animation_delay">300</property>
    <property name="color">FF0000</property>
  </settings>
  <application name="All">
    <gesture type="SWIPE" fingers="3" direction="UP">
      <action type="MAXIMIZE_RESTORE_WINDOW">
        <animate>true</animate>
      </action>
    </gesture>
    <gesture type="DRAG" fingers="4" direction="LEFT">
      <action type="CHANGE_DESKTOP">
        <direction>auto</direction>
      </action>
    </gesture>
  </application>
  <application name="Google-chrome, Firefox">
    <gesture type="PINCH" fingers="2" direction="IN">
      <action type="SEND_KEYS">
        <modifiers>Control_L</modifiers>
        <keys>KP_Subtract</keys>
        <repeat>
        </repeat>
      </action>
    </gesture>
  </application>
</config>
"""


def test_global_settings_are_loaded():
    config = Config()
    load_config_string(config, SAMPLE)
    assert config.get_global_setting("animation_delay") == "300"
    assert config.get_global_setting("color") == "FF0000"
    assert config.get_global_setting("action_execute_threshold") == "20"


def test_gesture_settings_are_loaded():
    config = Config()
    load_config_string(config, SAMPLE)
    action, settings = config.get_gesture_config(
        "All", GestureType.SWIPE, 3, GestureDirection.UP
    )
    assert action is ActionType.MAXIMIZE_RESTORE_WINDOW
    assert settings == {"animate": "true"}


def test_drag_is_read_as_swipe():
    config = Config()
    load_config_string(config, SAMPLE)
    action, settings = config.get_gesture_config(
        "All", GestureType.SWIPE, 4, GestureDirection.LEFT
    )
    assert action is ActionType.CHANGE_DESKTOP
    assert settings == {"direction": "auto"}


def test_application_list_is_split_and_trimmed():
    config = Config()
    load_config_string(config, SAMPLE)
    for app in ("Google-chrome", "Firefox", "firefox"):
        action, settings = config.get_gesture_config(
            app, GestureType.PINCH, 2, GestureDirection.IN
        )
        assert action is ActionType.SEND_KEYS
        assert settings["modifiers"] == "Control_L"
        assert settings["keys"] == "KP_Subtract"
        assert settings["repeat"] == ""
    assert not config.has_gesture_config(
        "All", GestureType.PINCH, 2, GestureDirection.IN
    )


def test_invalid_xml_raises():
    with pytest.raises(ConfigError):
        load_config_string(Config(), "<config><settings></config>")


def test_missing_system_file_raises(tmp_path):
    loader = XmlConfigLoader(Config(), tmp_path / "missing.conf", tmp_path / "user")
    with pytest.raises(ConfigError):
        loader.config_file_path()


def test_user_file_takes_precedence(tmp_path):
    system = tmp_path / "system.conf"
    system.write_text(SAMPLE)
    user_dir = tmp_path / "user"
    loader = XmlConfigLoader(Config(), system, user_dir)
    assert loader.config_file_path() == system

    user_dir.mkdir()
    (user_dir / "swipegest.conf").write_text("<config/>")
    assert loader.config_file_path() == user_dir / "swipegest.conf"


def test_parse_config_reads_file(tmp_path):
    system = tmp_path / "system.conf"
    system.write_text(SAMPLE)
    config = Config()
    XmlConfigLoader(config, system, tmp_path / "user").parse_config()
    assert config.has_gesture_config("All", GestureType.SWIPE, 3, GestureDirection.UP)


def test_watch_reloads_on_change(tmp_path):
    system = tmp_path / "system.conf"
    system.write_text(SAMPLE)
    user_dir = tmp_path / "user"
    config = Config()
    loader = XmlConfigLoader(config, system, user_dir)
    loader.load()
    try:
        assert user_dir.is_dir()
        assert config.get_global_setting("animation_delay") == "300"
        (user_dir / "swipegest.conf").write_text(
            '<config><settings><property name="animation_delay">75</property>'
            "</settings></config>"
        )
        deadline = time.monotonic() + 5
        while time.monotonic() < deadline:
            if config.get_global_setting("animation_delay") == "75":
                break
            time.sleep(0.05)
        assert config.get_global_setting("animation_delay") == "75"
        assert not config.has_gesture_config(
            "All", GestureType.SWIPE, 3, GestureDirection.UP
        )
    finally:
        loader.stop()
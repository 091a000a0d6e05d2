# swipegest

swipegest is a library that turns multi-touch gestures into desktop actions.
A gesture is a swipe, pinch or tap made with several fingers on a touchpad or
touchscreen. The actions are: maximise or restore a window, toggle
fullscreen, minimise, tile, close, change desktop, show the desktop, send a
keyboard shortcut, click the mouse or run a shell command.

The library has no third-party dependencies.

## What it does not do

swipegest does not read touch devices and does not talk to a window manager
or display server. It has no command-line program and no background service.
You supply the gestures as `Gesture` objects. You also supply a window-system
object that carries out the actions and draws the animation shapes.

## Configuration

Gestures are set up in an XML document. Global settings go in a `settings`
element. Each `application` element names one or more window class names,
separated by commas. Class names are matched without regard to case. The name
`All` is used when no entry exists for the window's own class.

```xml
<swipegest>
  <settings>
    <property name="animation_delay">150</property>
    <property name="action_execute_threshold">20</property>
    <property name="color">3E9FED</property>
    <property name="borderColor">3E9FED</property>
  </settings>

  <application name="All">
    <gesture type="SWIPE" fingers="3" direction="UP">
      <action type="MAXIMIZE_RESTORE_WINDOW">
        <animate>true</animate>
      </action>
    </gesture>
    <gesture type="SWIPE" fingers="4" direction="LEFT">
      <action type="CHANGE_DESKTOP">
        <direction>auto</direction>
        <animate>true</animate>
      </action>
    </gesture>
    <gesture type="PINCH" fingers="4" direction="IN">
      <action type="SEND_KEYS">
        <repeat>true</repeat>
        <modifiers>Control_L</modifiers>
        <keys>KP_Subtract</keys>
        <decreaseKeys>KP_Add</decreaseKeys>
      </action>
    </gesture>
  </application>
</swipegest>
```

Gesture types are `SWIPE`, `PINCH` and `TAP`. `DRAG` is accepted as another
name for `SWIPE`. Directions are `UP`, `DOWN`, `LEFT`, `RIGHT`, `IN` and
`OUT`.

There are two global settings with defaults:

- `animation_delay`: milliseconds before an animation starts. The default is
  `150`.
- `action_execute_threshold`: the percentage a gesture must reach before an
  action runs when the gesture ends. The default is `20`. The value is
  clamped to 0–100, and an unreadable value falls back to 20.

`color` and `borderColor` can be set globally or for a single action. They are
passed to the animations as given.

| Action type | Settings |
| --- | --- |
| `MAXIMIZE_RESTORE_WINDOW` | `animate`, `color`, `borderColor` |
| `FULLSCREEN_WINDOW` | `animate`, `color`, `borderColor` |
| `MINIMIZE_WINDOW` | `animate`, `color`, `borderColor` |
| `TILE_WINDOW` | `direction` (`left`, otherwise right), `animate`, `color`, `borderColor` |
| `CLOSE_WINDOW` | `animate`, `color`, `borderColor` |
| `CHANGE_DESKTOP` | `direction` (`up`, `down`, `left`, `right`, `previous`, `next`, `auto`), `animationPosition`, `animate`, `color`, `borderColor` |
| `SHOW_DESKTOP` | `animate`, `color`, `borderColor` |
| `SEND_KEYS` | `modifiers`, `keys`, `decreaseKeys` (each joined with `+`), `repeat`, `on` |
| `RUN_COMMAND` | `command`, `decreaseCommand`, `repeat`, `on` |
| `MOUSE_CLICK` | `button` (default 1), `on` (`begin` or `end`) |

When each action runs:

- Animated window and desktop actions run when the gesture ends. If
  `animate` is on, they run only when the gesture has reached the threshold.
  If `animate` is `false`, they always run.
- `SEND_KEYS` and `RUN_COMMAND` run when the gesture begins by default. If
  `on` is set to something other than `begin`, they run at the end instead,
  and only once the threshold is reached. With `repeat` set to `true`, they
  run again for every 10 % the gesture moves forward. The reverse keys or
  command run for every 10 % it moves back.
- `RUN_COMMAND` runs its command through the shell.
- `MOUSE_CLICK` clicks when the gesture begins or when it ends, depending on
  `on`.

## Using the library

```python
from swipegest.config import Config
from swipegest.xml_config import load_config_string
from swipegest.gesture_controller import GestureController
from swipegest.gesture import Gesture, GestureType, GestureDirection, DeviceType

config = Config()
with open("swipegest.conf", encoding="utf-8") as fh:
    load_config_string(config, fh.read())

controller = GestureController(config, window_system)

gesture = Gesture(GestureType.SWIPE, GestureDirection.UP, 0.0, 3,
                  DeviceType.TOUCHPAD, 0)
controller.on_gesture_begin(gesture)
# ...controller.on_gesture_update(...) while the fingers move...
controller.on_gesture_end(gesture)
```

`load_config_string` raises `swipegest.xml_config.ConfigError` if the
document is not valid XML.

`GestureController` handles one gesture at a time:

1. It asks the window system for the window under the cursor.
2. It looks up the action for that window's class, falling back to `All`, and
   builds it with `swipegest.action_factory.build_action`.
3. It skips system windows, such as panels, docks and the desktop, unless the
   action allows them. `CHANGE_DESKTOP`, `SHOW_DESKTOP`, `SEND_KEYS`,
   `RUN_COMMAND` and `MOUSE_CLICK` allow them.
4. It passes the begin, update and end events on to the action.

### Loading from a file

`swipegest.xml_config.XmlConfigLoader(config, system_config_file=None,
user_config_dir=None)` reads the user file `swipegest.conf` from
`$XDG_CONFIG_HOME/swipegest` (or `~/.config/swipegest`). If that file does not
exist, it reads the system file `/usr/share/swipegest/swipegest.conf`.
`ConfigError` is raised when the system file does not exist.

- `load()` parses the file and starts a background thread. The thread polls
  the user directory and reloads the configuration when something in it
  changes.
- `stop()` ends the watching.
- `parse_config()` and `config_file_path()` can also be called on their own.

### The window-system object

Depending on the action, the window-system object needs these methods.

Windows:

- `get_window_under_cursor()`
- `is_system_window(window)`
- `get_window_class_name(window)`
- `get_window_size(window)`
- `minimize_window_icon_size(window)`
- `is_window_maximized(window)`
- `is_window_fullscreen(window)`
- `activate_window(window)`

Desktop:

- `get_desktop_workarea()`
- `is_showing_desktop()`
- `is_natural_scroll_enabled(device_type)`

Actions:

- `maximize_or_restore_window(window)`
- `toggle_fullscreen_window(window)`
- `minimize_window(window)`
- `tile_window(window, to_the_left)`
- `close_window(window)`
- `change_desktop(direction)`
- `show_desktop(show)`
- `send_keys(keys, press)`
- `send_mouse_click(button)`

Drawing:

- `create_surface()`

The size methods return `swipegest.animation.Rectangle` values.
`create_surface()` returns an object with a `draw(shapes)` method. Each frame
calls it with the full list of shapes to show, which replace whatever was
drawn before. The shapes are:

- `Box` from `swipegest.animation`
- `Arc` and `Polyline` from `swipegest.change_desktop_animation`

Animations redraw at most about 30 times a second.
"""Keyboard and joystick state, and the mapping of input events to game actions."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag


class Action(Enum):
    """What an input event asks the game to do."""

    NOTHING = "nothing"
    FINISH = "finish"
    EXPLOSION = "explosion"
    PAUSE = "pause"
    KILL_ALL = "kill_all"
    CAMERA_ROTATE = "camera_rotate"


class Modifier(IntFlag):
    """Keyboard modifier keys held while a key is pressed."""

    NONE = 0
    LSHIFT = 0x0001
    RSHIFT = 0x0002
    LCTRL = 0x0040
    RCTRL = 0x0080
    LALT = 0x0100
    RALT = 0x0200
    LGUI = 0x0400
    RGUI = 0x0800


class MouseButton(IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


def _key_name(key) -> str:
    return str(key).lower()


class KeyboardState:
    """Which keys and joystick buttons are currently held down."""

    def __init__(self) -> None:
        self._keys: set[str] = set()
        self._buttons: set[int] = set()

    def press(self, key) -> None:
        self._keys.add(_key_name(key))

    def release(self, key) -> None:
        self._keys.discard(_key_name(key))

    def is_pressed(self, key) -> bool:
        return _key_name(key) in self._keys

    def is_released(self, key) -> bool:
        return not self.is_pressed(key)

    def joystick_button_down(self, button: int) -> None:
        self._buttons.add(button)

    def joystick_button_up(self, button: int) -> None:
        self._buttons.discard(button)

    def joystick_button_pressed(self, button: int) -> bool:
        return button in self._buttons


class InputManager:
    """Turns key presses and mouse movement into actions."""

    def __init__(self) -> None:
        self.right_button_pressed = False
        self._previous = (0.0, 0.0)
        self._offset = (0.0, 0.0)

    def process_key_down(self, key, modifiers: Modifier = Modifier.NONE) -> Action:
        name = _key_name(key)
        if name == "escape":
            return Action.PAUSE
        if name == "space":
            return Action.EXPLOSION
        if name == "delete":
            left = Modifier.LCTRL in modifiers and Modifier.LALT in modifiers
            right = Modifier.RCTRL in modifiers and Modifier.RALT in modifiers
            if left or right:
                return Action.KILL_ALL
        return Action.NOTHING

    def process_mouse_motion(self, x: float, y: float) -> Action:
        """Record the drag offset while the right button is held."""
        if not self.right_button_pressed:
            return Action.NOTHING
        prev_x, prev_y = self._previous
        self._offset = (float(x - prev_x), float(prev_y - y))
        self._previous = (float(x), float(y))
        return Action.CAMERA_ROTATE

    def process_mouse_button(self, button, pressed: bool, x: float, y: float) -> None:
        if button == MouseButton.RIGHT:
            self.right_button_pressed = pressed
            self._previous = (float(x), float(y))

    def mouse_offset(self) -> tuple[float, float]:
        return self._offset
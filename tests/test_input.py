import pytest

from blastgrid.input import Action, InputManager, KeyboardState, Modifier, MouseButton


def test_key_press_and_release():
    keys = KeyboardState()
    keys.press("W")
    assert keys.is_pressed("w")
    assert not keys.is_released("w")
    keys.release("w")
    assert not keys.is_pressed("w")
    assert keys.is_released("w")


def test_joystick_buttons():
    keys = KeyboardState()
    keys.joystick_button_down(2)
    assert keys.joystick_button_pressed(2)
    assert not keys.joystick_button_pressed(1)
    keys.joystick_button_up(2)
    assert not keys.joystick_button_pressed(2)


@pytest.mark.parametrize(
    "key, modifiers, expected",
    [
        ("escape", Modifier.NONE, Action.PAUSE),
        ("space", Modifier.NONE, Action.EXPLOSION),
        ("delete", Modifier.LCTRL | Modifier.LALT, Action.KILL_ALL),
        ("delete", Modifier.RCTRL | Modifier.RALT, Action.KILL_ALL),
        ("delete", Modifier.LCTRL, Action.NOTHING),
        ("delete", Modifier.LCTRL | Modifier.RALT, Action.NOTHING),
        ("a", Modifier.NONE, Action.NOTHING),
    ],
)
def test_process_key_down(key, modifiers, expected):
    assert InputManager().process_key_down(key, modifiers) is expected


def test_motion_without_right_button_does_nothing():
    manager = InputManager()
    assert manager.process_mouse_motion(100, 100) is Action.NOTHING
    assert manager.mouse_offset() == (0.0, 0.0)


def test_right_drag_rotates_camera():
    manager = InputManager()
    manager.process_mouse_button(MouseButton.RIGHT, True, 10, 20)
    assert manager.process_mouse_motion(15, 12) is Action.CAMERA_ROTATE
    assert manager.mouse_offset() == (5.0, 8.0)


def test_left_button_does_not_start_drag():
    manager = InputManager()
    manager.process_mouse_button(MouseButton.LEFT, True, 0, 0)
    assert manager.process_mouse_motion(5, 5) is Action.NOTHING


def test_releasing_right_button_ends_drag():
    manager = InputManager()
    manager.process_mouse_button(MouseButton.RIGHT, True, 0, 0)
    manager.process_mouse_button(MouseButton.RIGHT, False, 0, 0)
    assert manager.process_mouse_motion(3, 3) is Action.NOTHING
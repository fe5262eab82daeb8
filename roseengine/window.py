"""The application window: creation, event translation and buffer swapping."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from roseengine.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseMovedEvent,
    WindowCloseEvent,
)
from roseengine.input import Input
from roseengine.keycodes import KeyCode

logger = logging.getLogger(__name__)

UNKNOWN_KEY = -1

# Window key symbols are X11 keysyms; letters arrive in lower case.
_KEYSYMS: dict[int, KeyCode] = {
    32: KeyCode.KEY_SPACE,
    39: KeyCode.KEY_APOSTROPHE,
    44: KeyCode.KEY_COMMA,
    45: KeyCode.KEY_MINUS,
    46: KeyCode.KEY_PERIOD,
    47: KeyCode.KEY_SLASH,
    59: KeyCode.KEY_SEMICOLON,
    61: KeyCode.KEY_EQUAL,
    91: KeyCode.KEY_LEFT_BRACKET,
    92: KeyCode.KEY_BACKSLASH,
    93: KeyCode.KEY_RIGHT_BRACKET,
    96: KeyCode.KEY_GRAVE_ACCENT,
    0xFF1B: KeyCode.KEY_ESCAPE,
    0xFF0D: KeyCode.KEY_ENTER,
    0xFF09: KeyCode.KEY_TAB,
    0xFF08: KeyCode.KEY_BACKSPACE,
    0xFF63: KeyCode.KEY_INSERT,
    0xFFFF: KeyCode.KEY_DELETE,
    0xFF53: KeyCode.KEY_RIGHT,
    0xFF51: KeyCode.KEY_LEFT,
    0xFF54: KeyCode.KEY_DOWN,
    0xFF52: KeyCode.KEY_UP,
    0xFF55: KeyCode.KEY_PAGE_UP,
    0xFF56: KeyCode.KEY_PAGE_DOWN,
    0xFF50: KeyCode.KEY_HOME,
    0xFF57: KeyCode.KEY_END,
    0xFFE5: KeyCode.KEY_CAPS_LOCK,
    0xFF14: KeyCode.KEY_SCROLL_LOCK,
    0xFF7F: KeyCode.KEY_NUM_LOCK,
    0xFF61: KeyCode.KEY_PRINT_SCREEN,
    0xFF13: KeyCode.KEY_PAUSE,
    0xFFAE: KeyCode.KEY_KP_DECIMAL,
    0xFFAF: KeyCode.KEY_KP_DIVIDE,
    0xFFAA: KeyCode.KEY_KP_MULTIPLY,
    0xFFAD: KeyCode.KEY_KP_SUBTRACT,
    0xFFAB: KeyCode.KEY_KP_ADD,
    0xFF8D: KeyCode.KEY_KP_ENTER,
    0xFFBD: KeyCode.KEY_KP_EQUAL,
    0xFFE1: KeyCode.KEY_LEFT_SHIFT,
    0xFFE3: KeyCode.KEY_LEFT_CONTROL,
    0xFFE9: KeyCode.KEY_LEFT_ALT,
    0xFFEB: KeyCode.KEY_LEFT_SUPER,
    0xFFE7: KeyCode.KEY_LEFT_SUPER,
    0xFFE2: KeyCode.KEY_RIGHT_SHIFT,
    0xFFE4: KeyCode.KEY_RIGHT_CONTROL,
    0xFFEA: KeyCode.KEY_RIGHT_ALT,
    0xFFEC: KeyCode.KEY_RIGHT_SUPER,
    0xFFE8: KeyCode.KEY_RIGHT_SUPER,
    0xFF67: KeyCode.KEY_MENU,
}
_KEYSYMS.update({ord("0") + i: KeyCode(KeyCode.KEY_0 + i) for i in range(10)})
_KEYSYMS.update({ord("a") + i: KeyCode(KeyCode.KEY_A + i) for i in range(26)})
_KEYSYMS.update({0xFFBE + i: KeyCode(KeyCode.KEY_F1 + i) for i in range(20)})
_KEYSYMS.update({0xFFB0 + i: KeyCode(KeyCode.KEY_KP_0 + i) for i in range(10)})

# Window mouse buttons are bit flags; events number them left 0, right 1, middle 2.
_MOUSE_BUTTONS = {1: 0, 4: 1, 2: 2}


def translate_key(symbol: int) -> KeyCode | None:
    """Key code for a window key symbol, or None if the key has no code."""
    return _KEYSYMS.get(symbol)


@dataclass
class WindowAttributes:
    title: str = "Rose Engine"
    width: int = 1280
    height: int = 720


def _create_native(attributes: WindowAttributes) -> Any:
    import pyglet

    config = pyglet.gl.Config(
        major_version=4, minor_version=1, forward_compatible=True, double_buffer=True
    )
    native = pyglet.window.Window(
        width=attributes.width,
        height=attributes.height,
        caption=attributes.title,
        resizable=False,
        config=config,
    )
    logger.info("Created Window '%s'", attributes.title)
    return native


class Window:
    """A non-resizable OpenGL window that turns native input into engine events."""

    def __init__(self, attributes: WindowAttributes | None = None, *, native: Any = None) -> None:
        self.attributes = attributes if attributes is not None else WindowAttributes()
        self.clear_color: tuple[float, float, float, float] = (0.2, 0.2, 0.2, 1.0)
        self._callback: Callable[[Event], object] | None = None
        self.native = native if native is not None else _create_native(self.attributes)
        self.native.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_close=self._on_close,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_press=self._on_mouse_press,
        )

    @property
    def width(self) -> int:
        return self.attributes.width

    @property
    def height(self) -> int:
        return self.attributes.height

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _emit(self, event: Event) -> None:
        if self._callback is not None:
            self._callback(event)

    def _on_key_press(self, symbol: int, modifiers: int) -> bool:
        key = translate_key(symbol)
        if key is not None:
            Input.set_key_state(key, True)
        self._emit(KeyPressedEvent(int(key) if key is not None else UNKNOWN_KEY, 0))
        return True

    def _on_key_release(self, symbol: int, modifiers: int) -> bool:
        key = translate_key(symbol)
        if key is not None:
            Input.set_key_state(key, False)
        self._emit(KeyReleasedEvent(int(key) if key is not None else UNKNOWN_KEY))
        return True

    def _on_close(self) -> bool:
        # Handled here so the window stays open until the application stops.
        self._emit(WindowCloseEvent())
        return True

    def _on_mouse_motion(self, x: float, y: float, dx: float, dy: float) -> None:
        height = getattr(self.native, "height", self.attributes.height)
        self._emit(MouseMovedEvent(float(x), float(height - y)))

    def _on_mouse_press(self, x: float, y: float, button: int, modifiers: int) -> None:
        self._emit(MouseButtonPressedEvent(_MOUSE_BUTTONS.get(button, button), 0, 0))

    def on_update(self) -> None:
        """Process pending window events and clear the frame."""
        from pyglet import gl

        self.native.switch_to()
        self.native.dispatch_events()
        gl.glClearColor(*self.clear_color)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)

    def swap_buffers(self) -> None:
        self.native.flip()

    def set_event_callback(self, callback: Callable[[Event], object]) -> None:
        self._callback = callback

    def set_clear_color(self, color: tuple[float, float, float, float]) -> None:
        values = tuple(float(channel) for channel in color)
        if len(values) != 4:
            raise ValueError("clear colour needs four components")
        self.clear_color = values  # type: ignore[assignment]

    def close(self) -> None:
        self.native.close()
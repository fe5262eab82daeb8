"""Global keyboard state, polled by key code."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, ClassVar


class KeyAction(IntEnum):
    """What happened to a key in a keyboard callback."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Input:
    """Process-wide table of which keys are currently held down."""

    MAX_KEYS: ClassVar[int] = 1024
    _keys: ClassVar[list[bool]] = [False] * 1024

    @classmethod
    def _check(cls, key: int) -> int:
        index = int(key)
        if not 0 <= index < cls.MAX_KEYS:
            raise ValueError(f"key code {index} is outside 0..{cls.MAX_KEYS - 1}")
        return index

    @classmethod
    def is_key_down(cls, key: int) -> bool:
        return cls._keys[cls._check(key)]

    @classmethod
    def set_key_state(cls, key: int, pressed: bool) -> None:
        cls._keys[cls._check(key)] = bool(pressed)


def key_callback(window: Any, key: int, scancode: int, action: int, mods: int) -> None:
    """Record a press or release in :class:`Input`; repeats and unknown keys are ignored."""
    if not 0 <= key < Input.MAX_KEYS:
        return
    if action == KeyAction.PRESS:
        Input.set_key_state(key, True)
    elif action == KeyAction.RELEASE:
        Input.set_key_state(key, False)
"""Keyboard state tracked frame by frame."""

from __future__ import annotations

import enum
from typing import FrozenSet, Iterable, Union

KeyLike = Union["Key", int]

_KEY_COUNT = 256


class Key(enum.IntEnum):
    """Keyboard scan codes used by the game."""

    ESCAPE = 0x01
    RETURN = 0x1C
    SPACE = 0x39
    UP = 0xC8
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


def _check(key: KeyLike) -> int:
    code = int(key)
    if not 0 <= code < _KEY_COUNT:
        raise ValueError(f"key code {code} out of range 0..{_KEY_COUNT - 1}")
    return code


class Keyboard:
    """Current and previous frame's set of held keys."""

    def __init__(self) -> None:
        self._current: FrozenSet[int] = frozenset()
        self._previous: FrozenSet[int] = frozenset()

    def update(self, pressed: Iterable[KeyLike]) -> None:
        """Start a new frame in which exactly ``pressed`` are held."""
        self._previous = self._current
        self._current = frozenset(_check(key) for key in pressed)

    def push_key(self, key: KeyLike) -> bool:
        """True while the key is held."""
        return _check(key) in self._current

    def trigger_key(self, key: KeyLike) -> bool:
        """True only on the frame the key goes down."""
        code = _check(key)
        return code in self._current and code not in self._previous
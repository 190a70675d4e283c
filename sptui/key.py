"""Keys as the interface understands them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class KeyKind(Enum):
    ENTER = "Enter"
    TAB = "Tab"
    BACKSPACE = "Backspace"
    ESC = "Esc"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    INS = "Ins"
    DELETE = "Delete"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    F0 = "F0"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    CHAR = "Char"
    CTRL = "Ctrl"
    ALT = "Alt"
    UNKNOWN = "Unknown"


_CHAR_KINDS = frozenset({KeyKind.CHAR, KeyKind.CTRL, KeyKind.ALT})
_ARROWS = frozenset({KeyKind.LEFT, KeyKind.RIGHT, KeyKind.UP, KeyKind.DOWN})
_BRACKETED = frozenset(
    {
        KeyKind.ENTER,
        KeyKind.TAB,
        KeyKind.BACKSPACE,
        KeyKind.ESC,
        KeyKind.INS,
        KeyKind.DELETE,
        KeyKind.HOME,
        KeyKind.END,
        KeyKind.PAGE_UP,
        KeyKind.PAGE_DOWN,
    }
)
_SPACE_NAMES = {
    KeyKind.ALT: "<Alt+Space>",
    KeyKind.CTRL: "<Ctrl+Space>",
    KeyKind.CHAR: "<Space>",
}


@dataclass(frozen=True)
class Key:
    """A key press; CHAR, CTRL and ALT keys carry the character pressed."""

    kind: KeyKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind in _CHAR_KINDS:
            if not isinstance(self.char, str) or len(self.char) != 1:
                raise ValueError(f"{self.kind.value} key needs a single character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} key carries no character")

    @classmethod
    def character(cls, char: str) -> "Key":
        return cls(KeyKind.CHAR, char)

    @classmethod
    def ctrl(cls, char: str) -> "Key":
        return cls(KeyKind.CTRL, char)

    @classmethod
    def alt(cls, char: str) -> "Key":
        return cls(KeyKind.ALT, char)

    def __str__(self) -> str:
        if self.kind in _CHAR_KINDS:
            if self.char == " ":
                return _SPACE_NAMES[self.kind]
            if self.kind is KeyKind.ALT:
                return f"<Alt+{self.char}>"
            if self.kind is KeyKind.CTRL:
                return f"<Ctrl+{self.char}>"
            return str(self.char)
        if self.kind in _ARROWS:
            return f"<{self.kind.value} Arrow Key>"
        if self.kind in _BRACKETED:
            return f"<{self.kind.value}>"
        return self.kind.value


def function_key(n: int) -> Key:
    """Return the function key F``n``, for ``n`` from 0 to 12."""
    if not 0 <= n <= 12:
        raise ValueError(f"unknown function key: F{n}")
    return Key(KeyKind(f"F{n}"))


_NAMED = {
    "KEY_ENTER": KeyKind.ENTER,
    "KEY_TAB": KeyKind.TAB,
    "KEY_BACKSPACE": KeyKind.BACKSPACE,
    "KEY_ESCAPE": KeyKind.ESC,
    "KEY_LEFT": KeyKind.LEFT,
    "KEY_RIGHT": KeyKind.RIGHT,
    "KEY_UP": KeyKind.UP,
    "KEY_DOWN": KeyKind.DOWN,
    "KEY_INSERT": KeyKind.INS,
    "KEY_IC": KeyKind.INS,
    "KEY_DELETE": KeyKind.DELETE,
    "KEY_DC": KeyKind.DELETE,
    "KEY_HOME": KeyKind.HOME,
    "KEY_END": KeyKind.END,
    "KEY_PGUP": KeyKind.PAGE_UP,
    "KEY_PPAGE": KeyKind.PAGE_UP,
    "KEY_PGDOWN": KeyKind.PAGE_DOWN,
    "KEY_NPAGE": KeyKind.PAGE_DOWN,
}
_FUNCTION_NAME = re.compile(r"KEY_F(\d+)")
_PLAIN_CONTROLS = {
    "\r": KeyKind.ENTER,
    "\n": KeyKind.ENTER,
    "\t": KeyKind.TAB,
    "\x7f": KeyKind.BACKSPACE,
    "\x08": KeyKind.BACKSPACE,
    "\x1b": KeyKind.ESC,
}


def _from_char(char: str) -> Key:
    if char in _PLAIN_CONTROLS:
        return Key(_PLAIN_CONTROLS[char])
    code = ord(char)
    if code == 0:
        return Key.ctrl(" ")
    if 1 <= code <= 26:
        return Key.ctrl(chr(code + ord("a") - 1))
    if 28 <= code <= 31:
        return Key.ctrl(chr(code - 28 + ord("4")))
    return Key.character(char)


def key_from_keystroke(keystroke: Any) -> Key:
    """Turn a terminal keystroke (a string, optionally with a ``name``) into a Key."""
    name = getattr(keystroke, "name", None)
    if name in _NAMED:
        return Key(_NAMED[name])
    if name is not None:
        match = _FUNCTION_NAME.fullmatch(name)
        if match:
            return function_key(int(match.group(1)))
    text = str(keystroke)
    if len(text) == 1:
        return _from_char(text)
    if len(text) == 2 and text[0] == "\x1b":
        return Key.alt(text[1])
    return Key(KeyKind.UNKNOWN)
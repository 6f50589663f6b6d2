"""Editor input events and their canonical binding names."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union


class Key(enum.IntEnum):
    """Terminal key codes; control keys share codes with their ASCII values."""

    CTRL_SPACE = 0
    CTRL_A = 1
    CTRL_B = 2
    CTRL_C = 3
    CTRL_D = 4
    CTRL_E = 5
    CTRL_F = 6
    CTRL_G = 7
    CTRL_H = 8
    CTRL_I = 9
    CTRL_J = 10
    CTRL_K = 11
    CTRL_L = 12
    CTRL_M = 13
    CTRL_N = 14
    CTRL_O = 15
    CTRL_P = 16
    CTRL_Q = 17
    CTRL_R = 18
    CTRL_S = 19
    CTRL_T = 20
    CTRL_U = 21
    CTRL_V = 22
    CTRL_W = 23
    CTRL_X = 24
    CTRL_Y = 25
    CTRL_Z = 26
    CTRL_LEFT_SQ = 27
    CTRL_BACKSLASH = 28
    CTRL_RIGHT_SQ = 29
    CTRL_CARAT = 30
    CTRL_UNDERSCORE = 31
    BACKSPACE2 = 127

    # Aliases sharing codes with control keys.
    BACKSPACE = 8
    TAB = 9
    ENTER = 13
    ESCAPE = 27

    RUNE = 256
    UP = 257
    DOWN = 258
    RIGHT = 259
    LEFT = 260
    UP_LEFT = 261
    UP_RIGHT = 262
    DOWN_LEFT = 263
    DOWN_RIGHT = 264
    CENTER = 265
    PGUP = 266
    PGDN = 267
    HOME = 268
    END = 269
    INSERT = 270
    DELETE = 271
    HELP = 272
    EXIT = 273
    CLEAR = 274
    CANCEL = 275
    PRINT = 276
    PAUSE = 277
    BACKTAB = 278
    F1 = 279
    F2 = 280
    F3 = 281
    F4 = 282
    F5 = 283
    F6 = 284
    F7 = 285
    F8 = 286
    F9 = 287
    F10 = 288
    F11 = 289
    F12 = 290


class ModMask(enum.IntFlag):
    """Keyboard modifiers held during an event."""

    NONE = 0
    SHIFT = 1
    CTRL = 2
    ALT = 4
    META = 8


class ButtonMask(enum.IntFlag):
    """Mouse buttons and wheel directions."""

    NONE = 0
    BUTTON1 = 1
    BUTTON2 = 2
    BUTTON3 = 4
    BUTTON4 = 8
    BUTTON5 = 16
    BUTTON6 = 32
    BUTTON7 = 64
    BUTTON8 = 128
    WHEEL_UP = 256
    WHEEL_DOWN = 512
    WHEEL_LEFT = 1024
    WHEEL_RIGHT = 2048


class MouseState(enum.IntEnum):
    PRESS = 0
    DRAG = 1
    RELEASE = 2


def _build_key_names() -> Mapping[int, str]:
    names = {
        Key.CTRL_SPACE: "Ctrl-Space",
        Key.BACKSPACE: "OldBackspace",
        Key.TAB: "Tab",
        Key.ENTER: "Enter",
        Key.ESCAPE: "Esc",
        Key.CTRL_BACKSLASH: "Ctrl-\\",
        Key.CTRL_RIGHT_SQ: "Ctrl-]",
        Key.CTRL_CARAT: "Ctrl-^",
        Key.CTRL_UNDERSCORE: "Ctrl-_",
        Key.BACKSPACE2: "Backspace",
        Key.UP: "Up",
        Key.DOWN: "Down",
        Key.RIGHT: "Right",
        Key.LEFT: "Left",
        Key.UP_LEFT: "UpLeft",
        Key.UP_RIGHT: "UpRight",
        Key.DOWN_LEFT: "DownLeft",
        Key.DOWN_RIGHT: "DownRight",
        Key.CENTER: "Center",
        Key.PGUP: "PgUp",
        Key.PGDN: "PgDn",
        Key.HOME: "Home",
        Key.END: "End",
        Key.INSERT: "Insert",
        Key.DELETE: "Delete",
        Key.HELP: "Help",
        Key.EXIT: "Exit",
        Key.CLEAR: "Clear",
        Key.CANCEL: "Cancel",
        Key.PRINT: "Print",
        Key.PAUSE: "Pause",
        Key.BACKTAB: "Backtab",
    }
    for letter in "ABCDEFGJKLNOPQRSTUVWXYZ":
        names.setdefault(Key[f"CTRL_{letter}"], f"Ctrl-{letter}")
    for number in range(1, 13):
        names[Key[f"F{number}"]] = f"F{number}"
    return MappingProxyType({int(k): v for k, v in names.items()})


KEY_NAMES: Mapping[int, str] = _build_key_names()

MOUSE_EVENTS: Mapping[str, ButtonMask] = MappingProxyType(
    {
        "MouseLeft": ButtonMask.BUTTON1,
        "MouseMiddle": ButtonMask.BUTTON3,
        "MouseRight": ButtonMask.BUTTON2,
        "MouseWheelUp": ButtonMask.WHEEL_UP,
        "MouseWheelDown": ButtonMask.WHEEL_DOWN,
        "MouseWheelLeft": ButtonMask.WHEEL_LEFT,
        "MouseWheelRight": ButtonMask.WHEEL_RIGHT,
    }
)

_MOD_LABELS = (
    (ModMask.SHIFT, "Shift"),
    (ModMask.ALT, "Alt"),
    (ModMask.META, "Meta"),
    (ModMask.CTRL, "Ctrl"),
)


def meta_to_alt(mod: int) -> ModMask:
    """Fold the Meta modifier into Alt."""
    mod = ModMask(mod)
    if mod & ModMask.META:
        mod = (mod & ~ModMask.META) | ModMask.ALT
    return ModMask(mod)


def key_name(key: int) -> Optional[str]:
    """Return the canonical name of a key code, or None if it has none."""
    return KEY_NAMES.get(int(key))


@dataclass(frozen=True)
class RawEvent:
    """A raw escape sequence bound directly by the user."""

    esc: str

    def name(self) -> str:
        return self.esc


@dataclass(frozen=True)
class KeyEvent:
    """A key press with modifiers; `r` holds the character for rune keys."""

    code: int
    mod: ModMask = ModMask.NONE
    r: str = ""
    wildcard: bool = False

    def name(self) -> str:
        if self.wildcard:
            return "<any>"
        mods = [label for flag, label in _MOD_LABELS if self.mod & flag]
        s = key_name(self.code)
        if s is None:
            s = self.r if self.code == Key.RUNE else f"Key[{int(self.code)}]"
        if mods:
            if self.mod & ModMask.CTRL and s.startswith("Ctrl-"):
                s = s[5:]
                if len(s) == 1:
                    s = s.lower()
            return f"{'-'.join(mods)}-{s}"
        return s


@dataclass(frozen=True)
class MouseEvent:
    """A mouse button event with modifiers and press state."""

    btn: ButtonMask
    mod: ModMask = ModMask.NONE
    state: MouseState = MouseState.PRESS

    def name(self) -> str:
        mod = ""
        for flag, label in _MOD_LABELS:
            if self.mod & flag:
                mod = f"{label}-"
        state = {MouseState.DRAG: "Drag", MouseState.RELEASE: "Release"}.get(
            self.state, ""
        )
        for button_name, button in MOUSE_EVENTS.items():
            if button == self.btn:
                return f"{mod}{button_name}{state}"
        return ""


@dataclass(frozen=True)
class KeySequenceEvent:
    """Consecutive key or mouse events bound as one."""

    keys: Tuple["Event", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", tuple(self.keys))

    def name(self) -> str:
        return "".join(f"<{e.name()}>" for e in self.keys)


Event = Union[RawEvent, KeyEvent, KeySequenceEvent, MouseEvent]
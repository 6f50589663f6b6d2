# microkeys

Building blocks for the key handling of a terminal text editor.

- `microkeys.events` describes keyboard, mouse, raw escape-code and
  key-sequence events (`KeyEvent`, `MouseEvent`, `RawEvent`,
  `KeySequenceEvent`). Each has a `name()` method that gives its canonical
  binding name, such as `Ctrl-s`, `Shift-Alt-Left` or `MouseLeftDrag`. The
  module also has the `Key`, `ModMask`, `ButtonMask` and `MouseState` enums,
  plus `meta_to_alt(mod)` and `key_name(key)`.
- `microkeys.keytree` holds `KeyTree`, a trie that maps single events and
  event sequences to actions. It honours mode constraints (`set_mode`,
  `has_mode`) and reports when a prefix could still be extended by more
  keys. Actions may take the pane alone, the pane plus wildcard key events,
  or the pane plus mouse information.
- `microkeys.completion` has completion helpers for a command bar:
  `get_arg`, `slice_end`, `prefix_complete`, `bool_value_suggestions`,
  `option_value_complete` and `plugin_complete`. Each completer returns two
  lists:
  - the text still to be typed for each suggestion;
  - the full suggestions, sorted.

## Installing

```
pip install .
```

## Event names

```python
from microkeys.events import Key, KeyEvent, ModMask, MouseEvent, ButtonMask, MouseState

KeyEvent(Key.CTRL_S, ModMask.CTRL).name()                 # "Ctrl-s"
KeyEvent(Key.LEFT, ModMask.SHIFT | ModMask.ALT).name()    # "Shift-Alt-Left"
KeyEvent(Key.RUNE, r="a").name()                          # "a"
MouseEvent(ButtonMask.BUTTON1, state=MouseState.DRAG).name()  # "MouseLeftDrag"
```

## Key trees

```python
from microkeys.events import Key, KeyEvent, ModMask, KeySequenceEvent
from microkeys.keytree import KeyTree

tree = KeyTree()
ctrl_x = KeyEvent(Key.CTRL_X, ModMask.CTRL)
ctrl_s = KeyEvent(Key.CTRL_S, ModMask.CTRL)
tree.register_key_binding(KeySequenceEvent((ctrl_x, ctrl_s)), lambda pane: True)

action, more = tree.next_event(ctrl_x, None)   # None, True: waiting for more keys
action, more = tree.next_event(ctrl_s, None)   # callable, False
tree.recorded_events_str()                     # "Ctrl-xCtrl-s"
tree.reset_events()
```

## Completion

```python
from microkeys.completion import prefix_complete, option_value_complete

prefix_complete(["set", "setlocal", "show"], "se", 2)
# (["t", "tlocal"], ["set", "setlocal"])

option_value_complete("set autoindent o", 16, {"autoindent": True})
# (["ff", "n"], ["off", "on"])
```

## What it does not do

The package does not read input from a terminal, draw anything on the
screen, or run commands. It only names events, resolves them to the actions
you register, and computes completions. It also ships no table of default
key bindings, so every binding has to be registered by the caller.

## Running the tests

```
pip install .[test]
pytest
```
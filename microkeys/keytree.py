"""A trie of key bindings that resolves event sequences to actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from .events import Event, KeyEvent, KeySequenceEvent, MouseEvent, RawEvent

PaneKeyAction = Callable[[Any], bool]
PaneMouseAction = Callable[[Any, Any], bool]
PaneKeyAnyAction = Callable[[Any, List[KeyEvent]], bool]


@dataclass(frozen=True)
class ModeConstraint:
    """Restricts an action to when a mode is enabled or disabled."""

    mode: str
    disabled: bool = False


@dataclass
class TreeAction:
    """An action of one kind, plus the mode constraints that gate it."""

    action: Optional[PaneKeyAction] = None
    any_action: Optional[PaneKeyAnyAction] = None
    mouse_action: Optional[PaneMouseAction] = None
    modes: Tuple[ModeConstraint, ...] = ()


@dataclass
class KeyTreeNode:
    children: Dict[Any, "KeyTreeNode"] = field(default_factory=dict)
    actions: List[TreeAction] = field(default_factory=list)


@dataclass
class KeyTreeCursor:
    """Current position in the tree and what has been seen on the way."""

    node: KeyTreeNode
    recorded_events: List[Any] = field(default_factory=list)
    wildcards: List[KeyEvent] = field(default_factory=list)
    mouse_info: Any = None

    def make_closure(self, a: TreeAction) -> Optional[PaneKeyAction]:
        """Turn a tree action into a callable taking only the pane."""
        if a.action is not None:
            return a.action
        if a.any_action is not None:
            any_action = a.any_action
            return lambda pane: any_action(pane, self.wildcards)
        if a.mouse_action is not None:
            mouse_action = a.mouse_action
            return lambda pane: mouse_action(pane, self.mouse_info)
        return None


class KeyTree:
    """Maps events and event sequences to actions, subject to modes."""

    def __init__(self) -> None:
        self.root = KeyTreeNode()
        self.modes: Dict[str, bool] = {}
        self.cursor = KeyTreeCursor(node=self.root)

    def register_key_binding(self, e: Event, a: PaneKeyAction) -> None:
        self._register_binding(e, TreeAction(action=a))

    def register_key_any_binding(self, e: Event, a: PaneKeyAnyAction) -> None:
        self._register_binding(e, TreeAction(any_action=a))

    def register_mouse_binding(self, e: Event, a: PaneMouseAction) -> None:
        self._register_binding(e, TreeAction(mouse_action=a))

    def _register_binding(self, e: Event, a: TreeAction) -> None:
        if isinstance(e, (KeyEvent, MouseEvent, RawEvent)):
            node = self.root.children.setdefault(e, KeyTreeNode())
            node.actions = [a]
        elif isinstance(e, KeySequenceEvent):
            node = self.root
            for key in e.keys:
                node = node.children.setdefault(key, KeyTreeNode())
            node.actions = [a]

    def next_event(
        self, e: Event, mouse: Any = None
    ) -> Tuple[Optional[PaneKeyAction], bool]:
        """Advance by one event.

        Returns the active action for the sequence so far (or None) and
        whether longer bindings continue from this point.
        """
        child = self.cursor.node.children.get(e)
        if child is None:
            return None, False

        more = bool(child.children)
        self.cursor.node = child
        self.cursor.recorded_events.append(e)

        if isinstance(e, KeyEvent):
            if e.wildcard:
                self.cursor.wildcards.append(e)
        elif isinstance(e, MouseEvent):
            self.cursor.mouse_info = mouse

        for a in child.actions:
            active = all(
                self.modes.get(mc.mode, False) == mc.disabled for mc in a.modes
            )
            if active:
                return self.cursor.make_closure(a), more

        return None, more

    def reset_events(self) -> None:
        """Return the cursor to the root and forget recorded events."""
        self.cursor.node = self.root
        self.cursor.wildcards = []
        self.cursor.recorded_events = []
        self.cursor.mouse_info = None

    def recorded_events_str(self) -> str:
        return "".join(e.name() for e in self.cursor.recorded_events)

    def set_mode(self, mode: str, en: bool) -> None:
        self.modes[mode] = en

    def has_mode(self, mode: str) -> bool:
        return self.modes.get(mode, False)
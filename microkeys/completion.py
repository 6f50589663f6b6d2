"""Tab completion for the command bar: commands, options and plugins."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

Completion = Tuple[List[str], List[str]]

_SUCMD_CHOICES = ("sudo", "doas")


def get_arg(line: str, cursor_x: int) -> Tuple[str, int]:
    """Return the space-separated argument ending at the cursor and where it starts."""
    args = line[: max(cursor_x, 0)].split(" ")
    argstart = sum(len(a) + 1 for a in args[:-1])
    return args[-1], argstart


def slice_end(s: str, n: int) -> str:
    """Return ``s`` without its first ``n`` characters; empty if ``n`` exceeds it."""
    return s[max(n, 0):]


def _finish(suggestions: Iterable[str], line: str, cursor_x: int) -> Completion:
    _, argstart = get_arg(line, cursor_x)
    ordered = sorted(suggestions)
    offset = cursor_x - argstart
    return [slice_end(s, offset) for s in ordered], ordered


def prefix_complete(candidates: Iterable[str], line: str, cursor_x: int) -> Completion:
    """Complete the argument at the cursor against a set of names.

    Returns the sorted matching names together with the text each one
    still needs after what has already been typed.
    """
    word, _ = get_arg(line, cursor_x)
    return _finish((c for c in candidates if c.startswith(word)), line, cursor_x)


def bool_value_suggestions(input: str) -> List[str]:
    """Suggest boolean spellings beginning with ``input``."""
    suggestions = []
    if "on".startswith(input):
        suggestions.append("on")
    elif "true".startswith(input):
        suggestions.append("true")
    if "off".startswith(input):
        suggestions.append("off")
    elif "false".startswith(input):
        suggestions.append("false")
    return suggestions


def _filetype_suggestions(known: Sequence[str], word: str) -> List[str]:
    suggestions: List[str] = []
    for filetype in known:
        if filetype in ("off", "unknown") or filetype in suggestions:
            continue
        if filetype.startswith(word):
            suggestions.append(filetype)
    if "off".startswith(word):
        suggestions.append("off")
    return suggestions


def _string_value_suggestions(
    option: str, word: str, choices: Mapping[str, Sequence[str]]
) -> List[str]:
    if option == "filetype":
        return _filetype_suggestions(choices.get("filetype", ()), word)
    if option == "sucmd":
        return [c for c in _SUCMD_CHOICES if c.startswith(word)]
    return [c for c in choices.get(option, ()) if c.startswith(word)]


def option_value_complete(
    line: str,
    cursor_x: int,
    settings: Mapping[str, Any],
    choices: Optional[Mapping[str, Sequence[str]]] = None,
) -> Completion:
    """Complete an option name, or its value when an option precedes the cursor.

    ``settings`` maps option names to their current values, whose type
    decides which values are offered. ``choices`` lists the permitted values
    of string options; for ``colorscheme`` and ``filetype`` it holds the
    names known to the editor.
    """
    choices = choices or {}
    args = line[: max(cursor_x, 0)].split(" ")
    if len(args) < 2 or args[-2] not in settings:
        return prefix_complete(settings.keys(), line, cursor_x)

    option = args[-2].strip()
    word, _ = get_arg(line, cursor_x)
    value = settings.get(option)

    suggestions: List[str] = []
    if isinstance(value, bool):
        suggestions = bool_value_suggestions(word)
    elif isinstance(value, str):
        suggestions = _string_value_suggestions(option, word, choices)
    return _finish(suggestions, line, cursor_x)


def plugin_complete(
    line: str,
    cursor_x: int,
    plugin_cmds: Sequence[str],
    plugin_names: Iterable[str],
) -> Completion:
    """Complete a plugin subcommand, or a plugin name after one."""
    args = line[: max(cursor_x, 0)].split(" ")
    if len(args) < 2 or args[-2] not in plugin_cmds:
        return prefix_complete(plugin_cmds, line, cursor_x)
    return prefix_complete(plugin_names, line, cursor_x)
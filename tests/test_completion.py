import pytest

from microkeys.completion import (
    bool_value_suggestions,
    get_arg,
    option_value_complete,
    plugin_complete,
    prefix_complete,
    slice_end,
)

SETTINGS = {
    "autoindent": True,
    "autosave": 0,
    "colorscheme": "default",
    "filetype": "unknown",
    "sucmd": "sudo",
    "clipboard": "external",
    "tabsize": 4,
}

CHOICES = {
    "clipboard": ["internal", "external", "terminal"],
    "colorscheme": ["default", "monokai", "solarized"],
    "filetype": ["go", "python", "off", "unknown", "go"],
}


@pytest.mark.parametrize(
    "line,cursor",
    [("set tab", 7), ("help", 4), ("a b c", 3), ("", 0), ("set  x", 6)],
)
def test_get_arg_slices_line(line, cursor):
    word, start = get_arg(line, cursor)
    assert line[start:cursor] == word
    assert " " not in word


def test_slice_end():
    assert slice_end("colorscheme", 5) == "scheme"
    assert slice_end("abc", 10) == ""
    assert slice_end("abc", -1) == "abc"


def test_prefix_complete_sorted_and_suffixes():
    cmds = ["vsplit", "set", "setlocal", "save", "show"]
    completions, suggestions = prefix_complete(cmds, "se", 2)
    assert suggestions == ["set", "setlocal"]
    for comp, sug in zip(completions, suggestions):
        assert "se" + comp == sug


def test_prefix_complete_no_match():
    assert prefix_complete(["quit"], "zz", 2) == ([], [])


def test_prefix_complete_second_argument():
    completions, suggestions = prefix_complete(["monokai", "default"], "x mo", 4)
    assert suggestions == ["monokai"]
    assert "mo" + completions[0] == "monokai"


def test_bool_value_suggestions():
    assert bool_value_suggestions("") == ["on", "off"]
    assert bool_value_suggestions("t") == ["true"]
    assert bool_value_suggestions("f") == ["false"]
    assert bool_value_suggestions("of") == ["off"]
    assert bool_value_suggestions("x") == []


def test_option_value_completes_names_without_option():
    line = "set auto"
    completions, suggestions = option_value_complete(line, len(line), SETTINGS, CHOICES)
    assert suggestions == ["autoindent", "autosave"]
    assert all("auto" + c == s for c, s in zip(completions, suggestions))


def test_option_value_bool():
    line = "set autoindent o"
    _, suggestions = option_value_complete(line, len(line), SETTINGS, CHOICES)
    assert suggestions == ["off", "on"]


def test_option_value_choices():
    line = "set clipboard "
    completions, suggestions = option_value_complete(line, len(line), SETTINGS, CHOICES)
    assert suggestions == sorted(CHOICES["clipboard"])
    assert completions == suggestions


def test_option_value_sucmd():
    line = "set sucmd d"
    _, suggestions = option_value_complete(line, len(line), SETTINGS, CHOICES)
    assert suggestions == ["doas"]


def test_option_value_colorscheme():
    line = "set colorscheme so"
    completions, suggestions = option_value_complete(line, len(line), SETTINGS, CHOICES)
    assert suggestions == ["solarized"]
    assert "so" + completions[0] == "solarized"


def test_option_value_filetype_dedupes_and_adds_off():
    line = "set filetype "
    _, suggestions = option_value_complete(line, len(line), SETTINGS, CHOICES)
    assert suggestions.count("off") == 1
    assert suggestions.count("go") == 1
    assert "unknown" not in suggestions
    assert suggestions == sorted(suggestions)


def test_option_value_non_string_non_bool_has_no_values():
    line = "set tabsize "
    assert option_value_complete(line, len(line), SETTINGS, CHOICES) == ([], [])


def test_option_value_without_choices():
    line = "set clipboard e"
    assert option_value_complete(line, len(line), SETTINGS) == ([], [])


def test_plugin_complete_commands():
    cmds = ["install", "remove", "update", "list", "search", "available"]
    line = "plugin re"
    completions, suggestions = plugin_complete(line, len(line), cmds, ["foo"])
    assert suggestions == ["remove"]
    assert "re" + completions[0] == "remove"


def test_plugin_complete_names():
    cmds = ["install", "remove"]
    line = "plugin remove f"
    _, suggestions = plugin_complete(line, len(line), cmds, ["fzf", "filemanager", "linter"])
    assert suggestions == ["filemanager", "fzf"]
import pytest
from blessed.keyboard import Keystroke

from sptui.key import Key, KeyKind, function_key, key_from_keystroke


@pytest.mark.parametrize(
    "key, text",
    [
        (Key.alt(" "), "<Alt+Space>"),
        (Key.ctrl(" "), "<Ctrl+Space>"),
        (Key.character(" "), "<Space>"),
        (Key.alt("x"), "<Alt+x>"),
        (Key.ctrl("c"), "<Ctrl+c>"),
        (Key.character("q"), "q"),
        (Key(KeyKind.LEFT), "<Left Arrow Key>"),
        (Key(KeyKind.DOWN), "<Down Arrow Key>"),
        (Key(KeyKind.ENTER), "<Enter>"),
        (Key(KeyKind.PAGE_UP), "<PageUp>"),
        (Key(KeyKind.F5), "F5"),
        (Key(KeyKind.UNKNOWN), "Unknown"),
    ],
)
def test_display(key, text):
    assert str(key) == text


@pytest.mark.parametrize("n", range(13))
def test_function_key_roundtrip(n):
    key = function_key(n)
    assert str(key) == f"F{n}"


@pytest.mark.parametrize("n", [13, -1])
def test_function_key_out_of_range(n):
    with pytest.raises(ValueError):
        function_key(n)


def test_char_key_requires_one_character():
    with pytest.raises(ValueError):
        Key(KeyKind.CHAR)
    with pytest.raises(ValueError):
        Key(KeyKind.CTRL, "ab")
    with pytest.raises(ValueError):
        Key(KeyKind.ENTER, "x")


def test_keys_are_hashable_and_comparable():
    assert {Key.ctrl("c"): 1}[Key(KeyKind.CTRL, "c")] == 1
    assert Key.ctrl("c") != Key.character("c")


@pytest.mark.parametrize(
    "name, kind",
    [
        ("KEY_UP", KeyKind.UP),
        ("KEY_LEFT", KeyKind.LEFT),
        ("KEY_DELETE", KeyKind.DELETE),
        ("KEY_PGDOWN", KeyKind.PAGE_DOWN),
        ("KEY_ESCAPE", KeyKind.ESC),
        ("KEY_F7", KeyKind.F7),
    ],
)
def test_named_keystrokes(name, kind):
    assert key_from_keystroke(Keystroke("\x1b[", None, name)) == Key(kind)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a", Key.character("a")),
        ("\r", Key(KeyKind.ENTER)),
        ("\n", Key(KeyKind.ENTER)),
        ("\t", Key(KeyKind.TAB)),
        ("\x7f", Key(KeyKind.BACKSPACE)),
        ("\x1b", Key(KeyKind.ESC)),
        ("\x03", Key.ctrl("c")),
        ("\x00", Key.ctrl(" ")),
        ("\x1bx", Key.alt("x")),
        ("\x1b[99~", Key(KeyKind.UNKNOWN)),
    ],
)
def test_raw_keystrokes(text, expected):
    assert key_from_keystroke(text) == expected


def test_unnamed_blessed_keystroke_is_character():
    assert key_from_keystroke(Keystroke("z")) == Key.character("z")
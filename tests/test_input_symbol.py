import pytest

from dfalex.input_symbol import InputSymbol, get_input_symbol


@pytest.mark.parametrize("ch", ["a", "z", "A", "Z", "_", "q"])
def test_letters(ch):
    assert get_input_symbol(ch) is InputSymbol.LETTER


@pytest.mark.parametrize("ch", list("0123456789"))
def test_digits(ch):
    assert get_input_symbol(ch) is InputSymbol.DIGIT


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("+", InputSymbol.PLUS),
        ("-", InputSymbol.MINUS),
        ("*", InputSymbol.STAR),
        ("/", InputSymbol.SLASH),
        ("%", InputSymbol.PERCENT),
        ("!", InputSymbol.BANG),
        ("=", InputSymbol.EQUAL),
        ("&", InputSymbol.AMPERSAND),
        ("|", InputSymbol.VERTICAL),
        ("(", InputSymbol.OPEN_PAREN),
        (")", InputSymbol.CLOSE_PAREN),
        ("{", InputSymbol.OPEN_BRACE),
        ("}", InputSymbol.CLOSE_BRACE),
        ("[", InputSymbol.OPEN_BRACKET),
        ("]", InputSymbol.CLOSE_BRACKET),
        (";", InputSymbol.SEMICOLON),
        (",", InputSymbol.COMMA),
        ("<", InputSymbol.SMALLER),
        (">", InputSymbol.GREATER),
        (" ", InputSymbol.WHITESPACE),
        ("\0", InputSymbol.SYMBOL_EOF),
    ],
)
def test_punctuation(ch, expected):
    assert get_input_symbol(ch) is expected


@pytest.mark.parametrize("ch", ["\t", "\n", "@", "#", "é", "."])
def test_unknown_characters(ch):
    assert get_input_symbol(ch) is InputSymbol.UNKNOWN


@pytest.mark.parametrize("text", ["", "ab", "  "])
def test_rejects_non_single_character(text):
    with pytest.raises(ValueError):
        get_input_symbol(text)


def test_every_symbol_is_reachable_from_some_character():
    seen = {get_input_symbol(chr(code)) for code in range(256)}
    assert seen == set(InputSymbol)
    assert len(seen) == 24


def test_symbols_are_numbered_from_zero():
    assert int(get_input_symbol("a")) == 0
    assert int(get_input_symbol("7")) == 1
    assert int(get_input_symbol("\0")) == len(InputSymbol) - 1
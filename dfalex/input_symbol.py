"""Classification of single characters into the lexer's input symbols."""

from __future__ import annotations

import enum
import string

__all__ = ["InputSymbol", "get_input_symbol"]


class InputSymbol(enum.IntEnum):
    """Character classes the scanner's automaton works on."""

    LETTER = 0  # a-z, A-Z, _
    DIGIT = 1  # 0-9
    PLUS = 2
    MINUS = 3
    STAR = 4
    SLASH = 5
    PERCENT = 6
    BANG = 7
    EQUAL = 8
    AMPERSAND = 9
    VERTICAL = 10
    OPEN_PAREN = 11
    CLOSE_PAREN = 12
    OPEN_BRACE = 13
    CLOSE_BRACE = 14
    OPEN_BRACKET = 15
    CLOSE_BRACKET = 16
    SEMICOLON = 17
    COMMA = 18
    SMALLER = 19
    GREATER = 20
    WHITESPACE = 21
    UNKNOWN = 22
    SYMBOL_EOF = 23


_LETTERS = frozenset(string.ascii_letters + "_")
_DIGITS = frozenset(string.digits)

_PUNCTUATION = {
    "+": InputSymbol.PLUS,
    "-": InputSymbol.MINUS,
    "*": InputSymbol.STAR,
    "/": InputSymbol.SLASH,
    "%": InputSymbol.PERCENT,
    "!": InputSymbol.BANG,
    "=": InputSymbol.EQUAL,
    "&": InputSymbol.AMPERSAND,
    "|": InputSymbol.VERTICAL,
    "(": InputSymbol.OPEN_PAREN,
    ")": InputSymbol.CLOSE_PAREN,
    "{": InputSymbol.OPEN_BRACE,
    "}": InputSymbol.CLOSE_BRACE,
    "[": InputSymbol.OPEN_BRACKET,
    "]": InputSymbol.CLOSE_BRACKET,
    ";": InputSymbol.SEMICOLON,
    ",": InputSymbol.COMMA,
    "<": InputSymbol.SMALLER,
    ">": InputSymbol.GREATER,
    " ": InputSymbol.WHITESPACE,
    "\0": InputSymbol.SYMBOL_EOF,
}


def get_input_symbol(ch: str) -> InputSymbol:
    """Return the input symbol for a single character.

    Only the ASCII space counts as whitespace; NUL marks the end of input.
    """
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch in _LETTERS:
        return InputSymbol.LETTER
    if ch in _DIGITS:
        return InputSymbol.DIGIT
    return _PUNCTUATION.get(ch, InputSymbol.UNKNOWN)
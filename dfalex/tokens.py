"""Automaton states and the tokens the scanner produces."""

from __future__ import annotations

import enum

__all__ = ["State", "Token", "token_to_string"]


class State(enum.IntEnum):
    """States of the scanner's deterministic automaton."""

    START = 0
    IN_ID = 1
    ACC_ID = 2

    IN_DECIMAL = 3
    ACC_DECIMAL = 4

    AFTER_BANG = 5
    ACC_LOGICAL_BANG = 6
    ACC_NOT_BANG = 7

    AFTER_PERCENT = 8
    ACC_REMAIN_ASSIGN = 9
    ACC_REMAIN = 10

    AFTER_AMPERSAND = 11
    ACC_LOGICAL_AND = 12
    ACC_LOGICAL_BIT_AND = 13

    AFTER_VERTICAL = 14
    ACC_LOGICAL_OR = 15
    ACC_LOGICAL_BIT_OR = 16

    ACC_OPEN_PARENTHESES = 17
    ACC_CLOSE_PARENTHESES = 18
    ACC_OPEN_BRACE = 19
    ACC_CLOSE_BRACE = 20
    ACC_OPEN_BRACKET = 21
    ACC_CLOSE_BRACKET = 22

    AFTER_STAR = 23
    ACC_MUL_ASSIGN = 24
    ACC_MUL = 25

    AFTER_PLUS = 26
    ACC_PLUSPLUS = 27
    ACC_PLUS_ASSIGN = 28
    ACC_ADD = 29
    AFTER_MINUS = 30
    ACC_MINUSMINUS = 31
    ACC_MINUS_ASSIGN = 32
    ACC_SUB = 33

    AFTER_SLASH = 34
    ACC_SHARE_ASSIGN = 35
    ACC_SHARE = 36
    AFTER_EQUAL = 37
    ACC_LOGICAL_EQUAL = 38
    ACC_ASSIGN = 39

    AFTER_SMALLER = 40
    ACC_SMALLER_EQUAL = 41
    ACC_SMALLER_THAN = 42
    AFTER_GREATER = 43
    ACC_GREATER_EQUAL = 44
    ACC_GREATER_THAN = 45

    ACC_COMMA = 46
    ACC_SEMICOLON = 47


class Token(enum.IntEnum):
    """Kinds of token the scanner can report."""

    ID = 0
    DECIMAL = 1

    LOGICAL_BANG = 2
    NOT_BANG = 3

    REMAIN_ASSIGN = 4
    REMAIN = 5

    LOGICAL_AND = 6
    LOGICAL_BIT_AND = 7

    LOGICAL_OR = 8
    LOGICAL_BIT_OR = 9

    OPEN_PARENTHESES = 10
    CLOSE_PARENTHESES = 11
    OPEN_BRACE = 12
    CLOSE_BRACE = 13
    OPEN_BRACKET = 14
    CLOSE_BRACKET = 15

    MUL_ASSIGN = 16
    MUL = 17

    PLUSPLUS = 18
    PLUS_ASSIGN = 19
    ADD = 20

    MINUSMINUS = 21
    MINUS_ASSIGN = 22
    SUB = 23

    SHARE_ASSIGN = 24
    SHARE = 25

    LOGICAL_EQUAL = 26
    ASSIGN = 27

    SMALLER_EQUAL = 28
    SMALLER_THAN = 29

    GREATER_EQUAL = 30
    GREATER_THAN = 31

    COMMA = 32
    SEMICOLON = 33

    KW_CONST = 34
    KW_IF = 35
    KW_ELSE = 36
    KW_WHILE = 37
    KW_RETURN = 38
    KW_INT = 39
    KW_VOID = 40

    ERROR = 41

    def __str__(self) -> str:
        return token_to_string(self)


_UNKNOWN_NAME = "unknown_token"

# MUL_ASSIGN has no printable name of its own.
_UNNAMED = frozenset({Token.MUL_ASSIGN})


def token_to_string(token: Token | int) -> str:
    """Return the printable name of a token, such as ``t_id``."""
    try:
        token = Token(token)
    except ValueError:
        return _UNKNOWN_NAME
    if token in _UNNAMED:
        return _UNKNOWN_NAME
    return "t_" + token.name.lower()
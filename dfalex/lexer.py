"""Scanning one lexeme at a time with the transition table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .input_symbol import InputSymbol, get_input_symbol
from .tokens import State, Token
from .transition_table import get_next_state

__all__ = ["Lexeme", "lex"]

_ACCEPTED = {
    State.ACC_ID: Token.ID,
    State.ACC_DECIMAL: Token.DECIMAL,
    State.ACC_NOT_BANG: Token.LOGICAL_BANG,
    State.ACC_REMAIN_ASSIGN: Token.REMAIN_ASSIGN,
    State.ACC_REMAIN: Token.REMAIN,
    State.ACC_LOGICAL_OR: Token.LOGICAL_OR,
    State.ACC_LOGICAL_BIT_OR: Token.LOGICAL_BIT_OR,
    State.ACC_OPEN_PARENTHESES: Token.OPEN_PARENTHESES,
    State.ACC_CLOSE_PARENTHESES: Token.CLOSE_PARENTHESES,
    State.ACC_OPEN_BRACE: Token.OPEN_BRACE,
    State.ACC_CLOSE_BRACE: Token.CLOSE_BRACE,
    State.ACC_OPEN_BRACKET: Token.OPEN_BRACKET,
    State.ACC_CLOSE_BRACKET: Token.CLOSE_BRACKET,
    State.ACC_MUL: Token.MUL,
    State.ACC_PLUSPLUS: Token.PLUSPLUS,
    State.ACC_PLUS_ASSIGN: Token.PLUS_ASSIGN,
    State.ACC_ADD: Token.ADD,
    State.ACC_MINUSMINUS: Token.MINUSMINUS,
    State.ACC_MINUS_ASSIGN: Token.MINUS_ASSIGN,
    State.ACC_SUB: Token.SUB,
    State.ACC_SHARE_ASSIGN: Token.SHARE_ASSIGN,
    State.ACC_SHARE: Token.SHARE,
    State.ACC_LOGICAL_EQUAL: Token.LOGICAL_EQUAL,
    State.ACC_ASSIGN: Token.ASSIGN,
    State.ACC_SMALLER_EQUAL: Token.SMALLER_EQUAL,
    State.ACC_SMALLER_THAN: Token.SMALLER_THAN,
    State.ACC_GREATER_EQUAL: Token.GREATER_EQUAL,
    State.ACC_GREATER_THAN: Token.GREATER_THAN,
    State.ACC_COMMA: Token.COMMA,
    State.ACC_SEMICOLON: Token.SEMICOLON,
}

# States that still accept when the automaton gets stuck in them.
_ACCEPT_ON_STALL = {
    State.IN_DECIMAL: State.ACC_DECIMAL,
    State.IN_ID: State.ACC_ID,
}


@dataclass(frozen=True)
class Lexeme:
    """A scanned token: where it starts and how many characters it spans."""

    token: Token
    start: int
    length: int


def lex(text: str, start: int = 0) -> Lexeme:
    """Scan the longest accepted lexeme of ``text`` from ``start``.

    Leading spaces are skipped and the returned length counts from the first
    character after them. Input ends at the string's end or at a NUL. When
    nothing is accepted, an ``Token.ERROR`` lexeme of length 1 is returned.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")

    nul = text.find("\0")
    end = len(text) if nul < 0 else nul

    pos = start
    while pos < end and get_input_symbol(text[pos]) is InputSymbol.WHITESPACE:
        pos += 1
    lexeme_start = pos

    state = State.START
    last_state: Optional[State] = None
    last_pos = -1

    for pos, ch in enumerate(text[lexeme_start:end], start=lexeme_start):
        next_state = get_next_state(state, get_input_symbol(ch))
        if next_state is None:
            if state in _ACCEPT_ON_STALL:
                last_state = _ACCEPT_ON_STALL[state]
            if last_state is not None:
                last_pos = pos - 1
            break
        state = next_state
        if state in _ACCEPTED:
            last_state = state
            last_pos = pos

    if last_state is None:
        return Lexeme(Token.ERROR, lexeme_start, 1)
    return Lexeme(_ACCEPTED[last_state], lexeme_start, last_pos - lexeme_start + 1)
"""The scanner's state transition table."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .input_symbol import InputSymbol
from .tokens import State

__all__ = ["TransitionTable", "build_transition_table", "get_next_state"]

_S = State
_I = InputSymbol

_FINISHING = (_I.WHITESPACE, _I.SYMBOL_EOF)

# (first symbol, intermediate state, symbols that stay there, accepting state)
_WORDS = (
    (_I.LETTER, _S.IN_ID, (_I.LETTER, _I.DIGIT), _S.ACC_ID),
    (_I.DIGIT, _S.IN_DECIMAL, (_I.DIGIT,), _S.ACC_DECIMAL),
)

# (first symbol, intermediate state, {second symbol: state}, state on finish)
_OPERATORS = (
    (_I.BANG, _S.AFTER_BANG, {_I.EQUAL: _S.ACC_NOT_BANG}, _S.ACC_LOGICAL_BANG),
    (_I.PERCENT, _S.AFTER_PERCENT, {_I.EQUAL: _S.ACC_REMAIN_ASSIGN}, _S.ACC_REMAIN),
    (
        _I.AMPERSAND,
        _S.AFTER_AMPERSAND,
        {_I.AMPERSAND: _S.ACC_LOGICAL_AND},
        _S.ACC_LOGICAL_BIT_AND,
    ),
    (
        _I.VERTICAL,
        _S.AFTER_VERTICAL,
        {_I.VERTICAL: _S.ACC_LOGICAL_OR},
        _S.ACC_LOGICAL_BIT_OR,
    ),
    (_I.STAR, _S.AFTER_STAR, {_I.EQUAL: _S.ACC_MUL_ASSIGN}, _S.ACC_MUL),
    (
        _I.PLUS,
        _S.AFTER_PLUS,
        {_I.PLUS: _S.ACC_PLUSPLUS, _I.EQUAL: _S.ACC_PLUS_ASSIGN},
        _S.ACC_ADD,
    ),
    (
        _I.MINUS,
        _S.AFTER_MINUS,
        {_I.MINUS: _S.ACC_MINUSMINUS, _I.EQUAL: _S.ACC_MINUS_ASSIGN},
        _S.ACC_SUB,
    ),
    (_I.SLASH, _S.AFTER_SLASH, {_I.EQUAL: _S.ACC_SHARE_ASSIGN}, _S.ACC_SHARE),
    (_I.EQUAL, _S.AFTER_EQUAL, {_I.EQUAL: _S.ACC_LOGICAL_EQUAL}, _S.ACC_ASSIGN),
    (
        _I.SMALLER,
        _S.AFTER_SMALLER,
        {_I.EQUAL: _S.ACC_SMALLER_EQUAL},
        _S.ACC_SMALLER_THAN,
    ),
    (
        _I.GREATER,
        _S.AFTER_GREATER,
        {_I.EQUAL: _S.ACC_GREATER_EQUAL},
        _S.ACC_GREATER_THAN,
    ),
)

_SINGLES = {
    _I.OPEN_PAREN: _S.ACC_OPEN_PARENTHESES,
    _I.CLOSE_PAREN: _S.ACC_CLOSE_PARENTHESES,
    _I.OPEN_BRACE: _S.ACC_OPEN_BRACE,
    _I.CLOSE_BRACE: _S.ACC_CLOSE_BRACE,
    _I.OPEN_BRACKET: _S.ACC_OPEN_BRACKET,
    _I.CLOSE_BRACKET: _S.ACC_CLOSE_BRACKET,
    _I.COMMA: _S.ACC_COMMA,
    _I.SEMICOLON: _S.ACC_SEMICOLON,
}


def build_transition_table() -> Dict[Tuple[State, InputSymbol], State]:
    """Build the mapping from (state, input symbol) to the next state.

    Pairs that are absent have no transition.
    """
    table: Dict[Tuple[State, InputSymbol], State] = {}

    for first, inner, repeat, accept in _WORDS:
        table[(_S.START, first)] = inner
        for symbol in repeat:
            table[(inner, symbol)] = inner
        for symbol in _FINISHING:
            table[(inner, symbol)] = accept

    for first, after, seconds, finish in _OPERATORS:
        table[(_S.START, first)] = after
        for symbol, target in seconds.items():
            table[(after, symbol)] = target
        for symbol in _FINISHING:
            table[(after, symbol)] = finish

    for symbol, target in _SINGLES.items():
        table[(_S.START, symbol)] = target

    return table


class TransitionTable:
    """Lookup of the automaton's next state."""

    def __init__(self) -> None:
        self._table = build_transition_table()

    def next_state(self, state: State, symbol: InputSymbol) -> Optional[State]:
        """Return the state reached from ``state`` on ``symbol``, or None."""
        return self._table.get((state, symbol))


_DEFAULT_TABLE = TransitionTable()


def get_next_state(state: State, symbol: InputSymbol) -> Optional[State]:
    """Return the next state from the shared table, or None if there is none."""
    return _DEFAULT_TABLE.next_state(state, symbol)
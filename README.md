# dfalex

A small lexer for a C-like language, driven by an explicit deterministic
finite automaton. Characters are classified into input symbols, a transition
table maps `(state, symbol)` to the next state, and the lexer follows
transitions while remembering the last accepting state it reached.

## Installation

```
pip install .
```

## Usage

```python
from dfalex.lexer import lex
from dfalex.tokens import token_to_string

text = "count += 42 ;"
position = 0
while position < len(text):
    lexeme = lex(text, position)
    print(token_to_string(lexeme.token), lexeme.start, lexeme.length)
    position = lexeme.start + lexeme.length
```

This prints:

```
t_id 0 6
t_plus_assign 6 2
t_decimal 9 3
t_semicolon 12 1
```

`lex(text, start=0)` skips leading spaces from `start`, runs the automaton
and returns a frozen `Lexeme` with three fields:

- `token` – a `Token` member;
- `start` – the index of the first character after the skipped spaces;
- `length` – how many characters were consumed from `start`.

When the automaton reaches a terminating space, that space is part of the
consumed length (as with `"count "` above). When no accepting state is
reached, the result is `Token.ERROR` with length 1. Input ends at the end of
the string or at the first NUL character. A negative `start` raises
`ValueError`.

### What is recognised

- Identifiers (letters, digits and `_`, not starting with a digit) and
  decimal integers. They are accepted when followed by a space, or when the
  next character has no transition (for example `abc+` gives an identifier of
  length 3). An identifier or number that runs to the very end of the input
  is reported as `Token.ERROR`.
- Single characters `(`, `)`, `{`, `}`, `[`, `]`, `,` and `;`.
- `+`, `++`, `+=`; `-`, `--`, `-=`; `/`, `/=`; `%`, `%=`; `=`, `==`;
  `<`, `<=`; `>`, `>=`; `*`; `||` and `|`; `!=` (reported as
  `Token.LOGICAL_BANG`). The one-character forms among these must be followed
  by a space; at the end of input, or followed by another character, they
  give `Token.ERROR`.

Only the ASCII space counts as whitespace; tabs, newlines and other
characters are `InputSymbol.UNKNOWN` and produce `Token.ERROR`.

### Building blocks

- `dfalex.input_symbol.get_input_symbol(ch)` classifies one character as an
  `InputSymbol`; anything but a single character raises `ValueError`.
- `dfalex.transition_table.build_transition_table()` returns the automaton as
  a dict from `(State, InputSymbol)` to `State`.
  `TransitionTable().next_state(state, symbol)` looks up a transition, and
  `get_next_state(state, symbol)` does the same on a shared table; both
  return `None` where there is no transition.
- `dfalex.tokens` defines the `State` and `Token` enumerations.
  `token_to_string(token)` gives a token's printable name such as `"t_id"`,
  and `str(token)` returns the same name. Values that are not tokens, and
  `Token.MUL_ASSIGN`, give `"unknown_token"`.

## Limitations

- The package is a library only; it has no command-line program.
- Keywords are never produced: `Token.KW_CONST`, `Token.KW_IF` and the other
  `KW_` members exist, but `if` or `int` is scanned as an identifier.
- Some operators have automaton states but no token: `&`, `&&`, `!` and `*=`
  are reported as `Token.ERROR`.
- There is no parser; `lex` scans one lexeme per call and the caller drives
  the loop.

## Running the tests

```
pip install .[test]
pytest
```
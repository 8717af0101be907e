"""Table-driven DFA lexer for a small C-like language: input symbols, states and tokens, the transition table and the lexer."""

__version__ = "0.1.0"
__all__ = ["input_symbol", "tokens", "transition_table", "lexer"]
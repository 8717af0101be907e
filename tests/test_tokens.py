import pytest

from dfalex.tokens import State, Token, token_to_string


@pytest.mark.parametrize(
    "token, name",
    [
        (Token.ID, "t_id"),
        (Token.DECIMAL, "t_decimal"),
        (Token.LOGICAL_BANG, "t_logical_bang"),
        (Token.NOT_BANG, "t_not_bang"),
        (Token.OPEN_PARENTHESES, "t_open_parentheses"),
        (Token.PLUSPLUS, "t_plusplus"),
        (Token.SHARE_ASSIGN, "t_share_assign"),
        (Token.SEMICOLON, "t_semicolon"),
        (Token.KW_CONST, "t_kw_const"),
        (Token.KW_VOID, "t_kw_void"),
        (Token.ERROR, "t_error"),
    ],
)
def test_token_names(token, name):
    assert token_to_string(token) == name


def test_str_uses_token_name():
    assert token_to_string(Token.GREATER_EQUAL) == "t_greater_equal"
    assert str(Token.GREATER_EQUAL) == token_to_string(Token.GREATER_EQUAL)


def test_mul_assign_has_no_name():
    assert token_to_string(Token.MUL_ASSIGN) == "unknown_token"


@pytest.mark.parametrize("value", [-1, 10_000, len(Token)])
def test_out_of_range_values_are_unknown(value):
    assert token_to_string(value) == "unknown_token"


def test_integer_values_are_accepted():
    assert token_to_string(int(Token.ASSIGN)) == "t_assign"


def test_names_are_unique_and_prefixed():
    names = [token_to_string(t) for t in Token if t is not Token.MUL_ASSIGN]
    assert all(name.startswith("t_") for name in names)
    assert len(set(names)) == len(names)


def test_first_token_is_zero():
    assert int(Token.ID) == 0
    assert Token(0) is Token.ID


def test_states_numbered_consecutively():
    assert len(State) == 48
    assert [int(s) for s in State] == list(range(len(State)))
    assert State(0) is State.START
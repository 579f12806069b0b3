import pytest

from balafon.errors import EvalError, ParseError, describe_expected, describe_token
from balafon.lexer import Lexer, Pos, Token, TokenType


def test_describe_expected_counts():
    assert describe_expected([]) == "unexpected additional tokens"
    assert describe_expected(["a"]) == "expected a"
    assert describe_expected(["a", "b"]) == "expected either a or b"
    assert describe_expected(["a", "b", "c"]) == "expected one of a, b or c"
    assert describe_expected(["a", "b", "c", "d"]) == "expected one of a, b, c, or d"


def test_describe_expected_does_not_modify_input():
    tokens = ["a", "b", "c", "d"]
    describe_expected(tokens)
    assert tokens == ["a", "b", "c", "d"]


def test_describe_token_eof():
    assert describe_token(Lexer("").scan()) == "end-of-file"


def test_describe_token_invalid_and_valid():
    assert describe_token(Lexer("@").scan()) == 'unknown/invalid token "@"'
    assert describe_token(Lexer("c").scan()) == '"c"'


def test_parse_error_message_quotes_non_letters():
    tok = Lexer("@").scan()
    err = ParseError(tok, expected_tokens=[";", "noteSymbol"])
    assert str(err) == '1:1: error: expected either ";" or noteSymbol; got: unknown/invalid token "@"'


def test_parse_error_custom_error_with_source():
    tok = Token(TokenType.SYMBOL, "c", Pos(4, 2, 3, "song.bal"))
    err = ParseError(tok, err=ValueError("value must be in range"))
    assert str(err) == "song.bal:2:3: error: value must be in range"
    assert err.pos == tok.pos


def test_parse_error_is_raisable():
    tok = Lexer("c").scan()
    with pytest.raises(ParseError) as excinfo:
        raise ParseError(tok, expected_tokens=["x"])
    assert str(excinfo.value) == '1:1: error: expected x; got: "c"'
    assert excinfo.value.pos == tok.pos


def test_parse_error_details():
    tok = Lexer("c").scan()
    err = ParseError(tok, expected_tokens=["x", "y"], error_symbols=["sym"])
    text = err.details()
    lines = text.splitlines()
    assert lines[0] == "Error"
    assert lines[1] == f"Token: type={int(TokenType.SYMBOL)}, lit=c"
    assert "Expected one of: x y ErrorSymbol:" in text
    assert text.endswith("sym\n")


def test_parse_error_details_with_err():
    tok = Lexer("c").scan()
    err = ParseError(tok, err="boom")
    assert err.details().startswith("Error  boom\n")


def test_eval_error_without_source():
    err = EvalError("bar not defined", Pos(0, 3, 7))
    assert str(err) == "3:7: error: bar not defined"


def test_eval_error_with_source():
    err = EvalError(KeyError("x"), Pos(0, 1, 1, "a.bal"))
    assert str(err).startswith("a.bal:1:1: error: ")
    assert err.pos.source == "a.bal"
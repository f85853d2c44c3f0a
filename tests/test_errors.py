import pytest

from mirror.mirror_constants import TokenType
from mirror.mirror_errors import LexError, MirrorError, ParseError
from mirror.mirror_lexer import Token


def test_lex_error_fields_and_message() -> None:
    err = LexError("Unrecognized character '#'", 3, 7, "#")
    assert isinstance(err, SyntaxError)
    assert isinstance(err, MirrorError)
    assert (err.line, err.column, err.lexeme) == (3, 7, "#")
    assert str(err) == "Unrecognized character '#' at line 3, column 7"


def test_parse_error_takes_position_from_token() -> None:
    tok = Token(TokenType.RPAREN, ")", 2, 5)
    err = ParseError.unexpected("an expression", tok)
    assert str(err) == "Expected an expression but found ')' at line 2, column 5"
    assert err.expected == "an expression"
    assert err.token is tok
    assert err.lexeme == ")"


def test_parse_error_at_end_of_input() -> None:
    err = ParseError.unexpected("')'", Token(TokenType.EOF, "", 1, 4))
    assert err.message == "Expected ')' but found end of input"
    assert err.lexeme == ""


def test_parse_error_without_token() -> None:
    err = ParseError("Nothing to parse")
    assert err.token is None
    assert (err.line, err.column) == (0, 0)


def test_errors_are_catchable_as_syntax_error() -> None:
    with pytest.raises(SyntaxError, match="column 1"):
        raise ParseError.unexpected("identifier", Token(TokenType.INTEGER, "1", 1, 1))

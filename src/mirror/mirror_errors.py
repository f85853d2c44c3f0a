"""
Error types raised by the MIRROR lexer and parser.

Both error kinds derive from the builtin `SyntaxError`, so a caller can catch
the exact kind (`LexError`, `ParseError`) or treat any front-end failure as a
`SyntaxError`. Neither is recovered from internally: when one is raised the
current tokenization or parse is over and no partial result exists.

Every error carries the position of the offending lexeme (1-based line and
column) and the lexeme itself, and embeds both in its message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mirror.mirror_lexer import Token


class MirrorError(SyntaxError):
    """Base class for MIRROR front-end errors.

    Attributes:
        message (str): Human-readable description without the position suffix.
        line (int): 1-based line of the offending lexeme.
        column (int): 1-based column of the offending lexeme.
        lexeme (str): The offending source text (may be empty at end of input).
    """

    def __init__(self, message: str, line: int, column: int, lexeme: str = "") -> None:
        self.message = message
        self.line = line
        self.column = column
        self.lexeme = lexeme
        super().__init__(f"{message} at line {line}, column {column}")

    def __str__(self) -> str:
        return f"{self.message} at line {self.line}, column {self.column}"


class LexError(MirrorError):
    """A character (or character sequence) that no lexical rule accepts."""


class ParseError(MirrorError):
    """A token sequence that does not fit the grammar.

    Attributes:
        expected (str): What the parser was looking for.
        token (Token | None): The token it found instead.
    """

    def __init__(
        self,
        message: str,
        token: Token | None = None,
        expected: str = "",
    ) -> None:
        self.expected = expected
        self.token = token
        if token is None:
            super().__init__(message, 0, 0)
        else:
            super().__init__(message, token.line, token.col, token.value)

    @classmethod
    def unexpected(cls, expected: str, token: Token) -> ParseError:
        """Builds the standard "Expected X but found Y" error."""
        return cls(f"Expected {expected} but found {token.describe()}", token, expected)


__all__ = ["LexError", "MirrorError", "ParseError"]

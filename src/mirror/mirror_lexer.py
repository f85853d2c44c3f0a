"""
Lexical analyzer for the MIRROR programming language.

This module converts raw source text into a stream of typed tokens:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: An immutable token with type, lexeme and source position.
    Lexer: Converts source text into a sequence of tokens, one at a time.

Features:
    - Skips blanks (space, tab, carriage return) but not newlines; a newline is
      a `NEWLINE` token because it terminates statements.
    - Identifiers may contain letters, digits, `_`, `-` and `$`; reserved words
      are looked up in a keyword table passed in by the caller.
    - Numbers are recognized by the table-driven FSM in `mirror_fsm`
      (integers, decimals, exponents). A lone `.` becomes a `DOT` token, so
      `1.` lexes as `INTEGER(1) DOT`.
    - Strings run from `"` to the next `"`, quotes included, with no escape
      processing.
    - One- and two-character operators are told apart with one character of
      lookahead.

Positions are 1-based for both lines and columns.

Raises:
    LexError: For unrecognized characters, a lone `&` or `|`, unterminated
        strings and malformed exponents.

Example:
    >>> lexer = Lexer("let x = 42")
    >>> [t.type.name for t in lexer.tokenize()]
    ['LET', 'IDENT', 'ASSIGN', 'INTEGER']

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenize
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from mirror.mirror_chars import (
    is_arithmetic_operator,
    is_boolean_operator,
    is_comparison_operator,
    is_delimiter,
    is_identifier_char,
    is_letter_or_underscore,
    is_newline,
    is_number_start,
    is_whitespace,
)
from mirror.mirror_constants import (
    ARITHMETIC_TOKENS,
    BOOLEAN_TOKENS,
    COMPARISON_TOKENS,
    DELIMITERS,
    KEYWORDS,
    TokenType,
)
from mirror.mirror_errors import LexError
from mirror.mirror_fsm import NUMBER_RECOGNIZER, NumberState

logger = logging.getLogger(__name__)

NUMBER_TOKEN_TYPES: Mapping[NumberState, TokenType] = {
    NumberState.INTEGER: TokenType.INTEGER,
    NumberState.FRACTIONAL: TokenType.DECIMAL,
    NumberState.EXPONENT: TokenType.DECIMAL,
}


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        """
        Args:
            source (str): The text to read.
            position (int, optional): Starting index. Defaults to 0.
            line (int, optional): Line number of `position`. Defaults to 1.
            column (int, optional): Column number of `position`. Defaults to 1.
        """
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise EOFError(
                f"Attempted to read past end of source at position={self.position}, line={self.line}"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """
        Returns the character at the given offset from the current position without advancing.

        Returns:
            str: The character at the offset, or an empty string if out of bounds.
        """
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        """Returns True once every character has been consumed."""
        return self.position >= len(self.source)


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        type (TokenType): The token category.
        value (str): The lexeme exactly as it appears in the source (empty for EOF).
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    type: TokenType
    value: str
    line: int = 0
    col: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"

    def is_eof(self) -> bool:
        """True for the end-of-input token."""
        return self.type is TokenType.EOF

    def describe(self) -> str:
        """Returns the token as it should appear in an error message."""
        if self.type is TokenType.EOF:
            return "end of input"
        if self.type is TokenType.NEWLINE:
            return "newline"
        return f"'{self.value}'"


class Lexer:
    """Lexical analyzer for the MIRROR language.

    The lexer owns a `CharacterStream` over the source and hands out one token
    per `next_token()` call. Once the input is exhausted every further call
    returns an `EOF` token.

    Args:
        source (str): The text to tokenize.
        keywords (Mapping[str, TokenType], optional): Reserved-word table.
            Defaults to `KEYWORDS`.
    """

    def __init__(self, source: str, keywords: Mapping[str, TokenType] = KEYWORDS) -> None:
        self.stream = CharacterStream(source)
        self.keywords = keywords

    def __iter__(self) -> Iterator[Token]:
        """Yields tokens up to, but not including, EOF."""
        while True:
            tok = self.next_token()
            if tok.is_eof():
                return
            yield tok

    def peek(self, offset: int = 0) -> str:
        """Returns the character `offset` places ahead, or "" past the end."""
        return self.stream.peek(offset)

    def advance(self) -> str:
        """Consumes one character and returns it."""
        return self.stream.next()

    def skip_whitespace(self) -> None:
        """Skips blanks; newlines are left in place."""
        while is_whitespace(self.peek()):
            self.advance()

    def error(self, message: str, lexeme: str, line: int, col: int) -> LexError:
        """Builds (and logs) a LexError at the given position."""
        logger.debug("lex error: %s (%r) at %d:%d", message, lexeme, line, col)
        return LexError(message, line, col, lexeme)

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Raises:
            LexError: If no lexical rule accepts the next character.
        """
        self.skip_whitespace()

        line, col = self.stream.line, self.stream.column
        if self.stream.end_of_file():
            return Token(TokenType.EOF, "", line, col)

        ch = self.peek()

        if is_newline(ch):
            return self.recognize_newline()
        if is_letter_or_underscore(ch):
            return self.recognize_identifier()
        if is_number_start(ch):
            return self.recognize_number_or_dot()
        if ch == '"':
            return self.recognize_string()
        if is_comparison_operator(ch):
            return self.recognize_two_char_operator(COMPARISON_TOKENS)
        if is_boolean_operator(ch):
            return self.recognize_two_char_operator(BOOLEAN_TOKENS)
        if is_arithmetic_operator(ch):
            return self.recognize_arithmetic_operator()
        if is_delimiter(ch):
            return self.recognize_delimiter()

        raise self.error(f"Unrecognized character {ch!r}", ch, line, col)

    def tokenize(self) -> list[Token]:
        """Returns every token up to, but not including, the EOF token."""
        tokens = list(self)
        logger.debug("tokenized %d tokens", len(tokens))
        return tokens

    def recognize_newline(self) -> Token:
        """Recognizes a line break, which terminates statements."""
        line, col = self.stream.line, self.stream.column
        return Token(TokenType.NEWLINE, self.advance(), line, col)

    def recognize_identifier(self) -> Token:
        """Recognizes an identifier or, via the keyword table, a reserved word."""
        line, col = self.stream.line, self.stream.column
        ident = ""
        while is_identifier_char(self.peek()):
            ident += self.advance()
        return Token(self.keywords.get(ident, TokenType.IDENT), ident, line, col)

    def recognize_number_or_dot(self) -> Token:
        """Recognizes a number with the numeric FSM, or a lone `.` as DOT.

        Raises:
            LexError: If the longest match would end inside an exponent (`1e`).
        """
        line, col = self.stream.line, self.stream.column
        start = self.stream.position
        result = NUMBER_RECOGNIZER.run(self.stream.source, start)

        if result.recognized:
            dropped = self.stream.source[
                start + len(result.matched_text) : start + result.scanned
            ]
            # backing off over `.` is fine (`1.foo`), over an exponent is not
            if dropped[:1] in ("e", "E"):
                raise self.error(
                    f"Malformed exponent in number {result.matched_text + dropped!r}",
                    result.matched_text + dropped,
                    line,
                    col,
                )
            for _ in result.matched_text:
                self.advance()
            return Token(
                NUMBER_TOKEN_TYPES[NumberState(result.final_state)],
                result.matched_text,
                line,
                col,
            )

        if result.matched_text == "." and result.final_state is NumberState.BEGIN_FRACTIONAL:
            return Token(TokenType.DOT, self.advance(), line, col)

        raise self.error(  # pragma: no cover
            f"Malformed number {result.matched_text!r}", result.matched_text, line, col
        )

    def recognize_string(self) -> Token:
        """Recognizes a double-quoted string, quotes included.

        Raises:
            LexError: If the input ends before the closing quote.
        """
        line, col = self.stream.line, self.stream.column
        val = self.advance()
        while not self.stream.end_of_file() and self.peek() != '"':
            val += self.advance()
        if self.stream.end_of_file():
            raise self.error("Unterminated string", val, line, col)
        val += self.advance()
        return Token(TokenType.STRING, val, line, col)

    def recognize_two_char_operator(
        self, table: Mapping[str, tuple[TokenType | None, str, TokenType]]
    ) -> Token:
        """Recognizes `= == < <= > >=` or `! != && ||` with one-character lookahead."""
        line, col = self.stream.line, self.stream.column
        ch = self.peek()
        single, partner, double = table[ch]
        if self.peek(1) == partner:
            lexeme = self.advance() + self.advance()
            return Token(double, lexeme, line, col)
        if single is None:
            raise self.error(f"Unrecognized character {ch!r}", ch, line, col)
        return Token(single, self.advance(), line, col)

    def recognize_arithmetic_operator(self) -> Token:
        """Recognizes one of `+ - * / %`."""
        line, col = self.stream.line, self.stream.column
        ch = self.advance()
        return Token(ARITHMETIC_TOKENS[ch], ch, line, col)

    def recognize_delimiter(self) -> Token:
        """Recognizes a single-character delimiter such as `(` or `,`."""
        line, col = self.stream.line, self.stream.column
        ch = self.advance()
        return Token(DELIMITERS[ch], ch, line, col)


def tokenize(source: str, keywords: Mapping[str, TokenType] = KEYWORDS) -> list[Token]:
    """Convenience wrapper: ``Lexer(source, keywords).tokenize()``."""
    return Lexer(source, keywords).tokenize()


__all__ = ["CharacterStream", "Lexer", "Token", "tokenize"]

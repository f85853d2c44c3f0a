"""
Character classification for the MIRROR lexer.

Every predicate takes a single character (a one-code-point string) and answers
a yes/no question about it. They hold no state and never raise: anything that
is not a member of a class, including the empty string returned by
`CharacterStream.peek()` at end of input, is simply `False`.

Deciding what to do with a character nobody claims is the lexer's job.
"""

ARITHMETIC_OPERATORS = frozenset("+-*/%")
COMPARISON_OPERATORS = frozenset("=<>")
BOOLEAN_OPERATORS = frozenset("!&|")
OPERATOR_CHARS = ARITHMETIC_OPERATORS | COMPARISON_OPERATORS | BOOLEAN_OPERATORS
DELIMITER_CHARS = frozenset("(){}[],;@:")
WHITESPACE_CHARS = frozenset(" \t\r\f\v")
IDENTIFIER_EXTRA_CHARS = frozenset("_-$")


def is_digit(ch: str) -> bool:
    """ASCII decimal digits only; other Unicode digits are not numeric literals."""
    return len(ch) == 1 and "0" <= ch <= "9"


def is_letter(ch: str) -> bool:
    return len(ch) == 1 and ch.isalpha()


def is_letter_or_underscore(ch: str) -> bool:
    return is_letter(ch) or ch == "_"


def is_identifier_char(ch: str) -> bool:
    """Letters, digits, `_`, `-` and `$` may continue an identifier."""
    return is_letter(ch) or is_digit(ch) or ch in IDENTIFIER_EXTRA_CHARS


def is_whitespace(ch: str) -> bool:
    """Insignificant blanks. Newlines are tokens and do not count."""
    return ch in WHITESPACE_CHARS


def is_newline(ch: str) -> bool:
    return ch == "\n"


def is_arithmetic_operator(ch: str) -> bool:
    return ch in ARITHMETIC_OPERATORS


def is_comparison_operator(ch: str) -> bool:
    return ch in COMPARISON_OPERATORS


def is_boolean_operator(ch: str) -> bool:
    return ch in BOOLEAN_OPERATORS


def is_operator_char(ch: str) -> bool:
    return ch in OPERATOR_CHARS


def is_delimiter(ch: str) -> bool:
    return ch in DELIMITER_CHARS


def is_number_start(ch: str) -> bool:
    """A digit or `.`; both are handed to the numeric recognizer."""
    return is_digit(ch) or ch == "."


__all__ = [
    "is_arithmetic_operator",
    "is_boolean_operator",
    "is_comparison_operator",
    "is_delimiter",
    "is_digit",
    "is_identifier_char",
    "is_letter",
    "is_letter_or_underscore",
    "is_newline",
    "is_number_start",
    "is_operator_char",
    "is_whitespace",
]

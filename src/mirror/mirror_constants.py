"""
Token vocabulary shared by the MIRROR lexer and parser.

`TokenType` is the closed set of token categories. The lookup tables below are
built once at import time and exposed read-only; the lexer receives the
keyword table by reference and never mutates it.

Tables:
    KEYWORDS: reserved word -> TokenType (exact, case-sensitive match).
    DELIMITERS: single punctuation character -> TokenType.
    ARITHMETIC_TOKENS: `+ - * / %` -> TokenType.
    COMPARISON_TOKENS / BOOLEAN_TOKENS: one- and two-character operators.
    RELATIONAL_OPERATORS, ADDITIVE_OPERATORS, MULTIPLICATIVE_OPERATORS,
    UNARY_OPERATORS, SEPARATORS: token-type groups used by
    the parser's precedence levels.
"""

from enum import Enum
from types import MappingProxyType


class TokenType(str, Enum):
    # literals
    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    STRING = "STRING"
    IDENT = "IDENT"

    # keywords
    CLASS = "class"
    ELSE = "else"
    EXTENDS = "extends"
    FALSE = "false"
    FINAL = "final"
    FUNC = "func"
    FOR = "for"
    IF = "if"
    IN = "in"
    LET = "let"
    NEW = "new"
    NULL = "null"
    OVERRIDE = "override"
    PRIVATE = "private"
    RETURN = "return"
    SUPER = "super"
    TO = "to"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    # delimiters
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACK = "["
    RBRACK = "]"
    COMMA = ","
    DOT = "."
    AT = "@"
    SEMICOLON = ";"
    COLON = ":"

    # operators
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIV = "/"
    MODULO = "%"
    ASSIGN = "="
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS = "<"
    LESS_OR_EQUAL = "<="
    GREATER = ">"
    GREATER_OR_EQUAL = ">="
    AND = "&&"
    OR = "||"
    NOT = "!"

    NEWLINE = "NEWLINE"
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


_KEYWORD_TYPES = (
    TokenType.CLASS,
    TokenType.ELSE,
    TokenType.EXTENDS,
    TokenType.FALSE,
    TokenType.FINAL,
    TokenType.FUNC,
    TokenType.FOR,
    TokenType.IF,
    TokenType.IN,
    TokenType.LET,
    TokenType.NEW,
    TokenType.NULL,
    TokenType.OVERRIDE,
    TokenType.PRIVATE,
    TokenType.RETURN,
    TokenType.SUPER,
    TokenType.TO,
    TokenType.THIS,
    TokenType.TRUE,
    TokenType.VAR,
    TokenType.WHILE,
)

KEYWORDS = MappingProxyType({t.value: t for t in _KEYWORD_TYPES})

DELIMITERS = MappingProxyType(
    {
        t.value: t
        for t in (
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.LBRACE,
            TokenType.RBRACE,
            TokenType.LBRACK,
            TokenType.RBRACK,
            TokenType.COMMA,
            TokenType.AT,
            TokenType.SEMICOLON,
            TokenType.COLON,
        )
    }
)

ARITHMETIC_TOKENS = MappingProxyType(
    {
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.TIMES,
        "/": TokenType.DIV,
        "%": TokenType.MODULO,
    }
)

# lead character -> (single-char type, partner char, two-char type)
COMPARISON_TOKENS = MappingProxyType(
    {
        "=": (TokenType.ASSIGN, "=", TokenType.EQUAL),
        "<": (TokenType.LESS, "=", TokenType.LESS_OR_EQUAL),
        ">": (TokenType.GREATER, "=", TokenType.GREATER_OR_EQUAL),
    }
)

# `&` and `|` have no single-char form
BOOLEAN_TOKENS = MappingProxyType(
    {
        "!": (TokenType.NOT, "=", TokenType.NOT_EQUAL),
        "&": (None, "&", TokenType.AND),
        "|": (None, "|", TokenType.OR),
    }
)

RELATIONAL_OPERATORS = frozenset(
    {
        TokenType.EQUAL,
        TokenType.NOT_EQUAL,
        TokenType.LESS,
        TokenType.LESS_OR_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_OR_EQUAL,
    }
)
ADDITIVE_OPERATORS = frozenset({TokenType.PLUS, TokenType.MINUS})
MULTIPLICATIVE_OPERATORS = frozenset(
    {TokenType.TIMES, TokenType.DIV, TokenType.MODULO}
)
UNARY_OPERATORS = frozenset({TokenType.MINUS, TokenType.NOT})
SEPARATORS = frozenset({TokenType.NEWLINE, TokenType.SEMICOLON})


__all__ = [
    "ADDITIVE_OPERATORS",
    "ARITHMETIC_TOKENS",
    "BOOLEAN_TOKENS",
    "COMPARISON_TOKENS",
    "DELIMITERS",
    "KEYWORDS",
    "MULTIPLICATIVE_OPERATORS",
    "RELATIONAL_OPERATORS",
    "SEPARATORS",
    "TokenType",
    "UNARY_OPERATORS",
]

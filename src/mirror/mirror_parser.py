"""
MIRROR Language Parser

Parses MIRROR source text into an abstract syntax tree (see `mirror_ast`).

The parser is a recursive-descent engine that pulls tokens lazily from a
`Lexer` and keeps exactly one token of lookahead (`current_token`). It never
backtracks: constructs that would need more lookahead, such as telling the
function definition `f(a, b) = { ... }` from a call, are settled by checking
the node that was already parsed.

Grammar (loosest binding first)
-------------------------------
    program      := classDef*
    classDef     := 'class' IDENT params '{' (property | funcDef)* '}'
    property     := 'var' IDENT (':' type)? '=' assignment
    funcDef      := 'override'? 'func' IDENT params (':' type)? '=' ('{' block '}' | assignment)
    block        := statement ((NEWLINE | ';') statement)*
    statement    := 'var' IDENT (':' type)? '=' assignment | assignment
    assignment   := whileExpr ('=' assignment)?
    whileExpr    := conditional ('while' '(' assignment ')' '{' block '}')*
    conditional  := logicalOr ('if' '(' logicalOr ')' logicalOr ('else' logicalOr)?)*
    logicalOr    := logicalAnd ('||' logicalAnd)*
    logicalAnd   := relational ('&&' relational)*
    relational   := additive (relOp additive)*
    additive     := multiplicative (('+' | '-') multiplicative)*
    multiplicative := unary (('*' | '/' | '%') unary)*
    unary        := ('-' | '!') unary | primary
    primary      := literal | IDENT accessors | 'this' accessors
                  | 'new' IDENT args accessors | '(' assignment ')' accessors
                  | '[' (assignment (',' assignment)*)? ']'
                  | '{' mapEntries? '}' | '{' block '}'
                  | 'let' binding (',' binding)* 'in' assignment
                  | 'if' '(' logicalOr ')' logicalOr ('else' logicalOr)?
                  | 'while' '(' assignment ')' assignment
    accessors    := ('(' args ')' | '@' primary | '.' IDENT)*

Notes
-----
- `+ -`, `* / %`, `&&` and `||` are left-associative.
- Two-operand comparisons are `OperatorNode`s; longer chains such as
  `a < b < c` are `RelationalNode`s.
- Postfix `if` and `while` wrap the operand parsed before them; that operand
  is kept as the node's `subject`.
- The left-hand side of `=` must be a symbol or an accessor. A call whose
  callee and arguments are all symbols (`f(a, b) = { ... }`) is read as a
  function definition instead.
- A `{` in expression position is a map when its first entry is a plain
  `name = value` followed, possibly on a later line, by `,` or `}`; `{}` is
  an empty map. Otherwise it is a block.
- Newlines end statements. They are skipped after opening brackets, commas
  and binary operators, and before closing brackets. A newline before `else`
  also ends the statement, so `else` must stay on the line of its `if`
  branch; the parser never looks past a newline to find one.

Entry Points
------------
- `parse()`: Parse a whole source as a block. A single statement comes back
  as that statement's node, more than one as a `BlockNode`.
- `parse_block()`: The same without requiring the input to end afterwards.
- `parse_function()`: Parse a single `func` definition.
- `parse_class()`: Parse a single `class` definition.
- `parse_program()`: Parse a sequence of class definitions into a `Program`.

Raises
------
ParseError
    On the first token that does not fit the grammar. Nothing is recovered
    and no partial tree is returned.
LexError
    Propagated unchanged from the lexer.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar, cast

from mirror.mirror_ast import (
    AccessorKind,
    AccessorNode,
    ArrayNode,
    ASTNode,
    AssignmentNode,
    BlockNode,
    ClassDefinition,
    ConditionalNode,
    ConstructorCallNode,
    FunctionCallNode,
    FunctionDefinition,
    LetBinding,
    LetNode,
    Literal,
    LiteralKind,
    MapNode,
    OperatorNode,
    Parameter,
    Program,
    Property,
    RelationalNode,
    Symbol,
    This,
    UnaryExpression,
    WhileLoopNode,
)
from mirror.mirror_constants import (
    ADDITIVE_OPERATORS,
    KEYWORDS,
    MULTIPLICATIVE_OPERATORS,
    RELATIONAL_OPERATORS,
    SEPARATORS,
    UNARY_OPERATORS,
    TokenType,
)
from mirror.mirror_errors import ParseError
from mirror.mirror_lexer import Lexer, Token

logger = logging.getLogger(__name__)

T = TokenType

LITERAL_KINDS: Mapping[TokenType, LiteralKind] = {
    T.INTEGER: LiteralKind.INTEGER,
    T.DECIMAL: LiteralKind.DECIMAL,
    T.STRING: LiteralKind.STRING,
    T.TRUE: LiteralKind.BOOLEAN,
    T.FALSE: LiteralKind.BOOLEAN,
    T.NULL: LiteralKind.NULL,
}


def describe(token_type: TokenType) -> str:
    """Names a token type the way error messages refer to it."""
    if token_type is T.IDENT:
        return "identifier"
    if token_type is T.EOF:
        return "end of input"
    if token_type is T.NEWLINE:
        return "newline"
    if token_type in (T.INTEGER, T.DECIMAL, T.STRING):
        return f"{token_type.value.lower()} literal"
    return f"'{token_type.value}'"


F = TypeVar("F", bound=Callable[..., Any])


def guard_nesting(method: F) -> F:
    """Turns a `RecursionError` inside a parser entry point into a ParseError.

    Every nesting level of the source costs about a dozen `parse_*` frames, so
    deeply nested input can exhaust the interpreter stack. The error is
    reported at the token the parser had reached.
    """

    @functools.wraps(method)
    def wrapper(self: Parser, *args: Any, **kwargs: Any) -> Any:
        try:
            return method(self, *args, **kwargs)
        except RecursionError:
            err = ParseError(
                "Expression nested too deeply", self.current_token, "less nesting"
            )
            logger.debug("parse error: %s", err)
            raise err from None

    return cast(F, wrapper)


class Parser:
    """
    MIRROR Parser Class

    Turns MIRROR source text into `ASTNode` trees using a precedence cascade
    of `parse_*` methods, one per grammar level.

    Attributes
    ----------
    lexer : Lexer
        Token source, pulled one token at a time.
    current_token : Token
        The single token of lookahead.

    Raises
    ------
    ParseError
        When an unexpected token is encountered.
    """

    def __init__(self, source: str, keywords: Mapping[str, TokenType] = KEYWORDS) -> None:
        self.lexer = Lexer(source, keywords)
        self.current_token: Token = self.lexer.next_token()

    # token helpers

    def advance(self) -> Token:
        """Consumes the current token and returns it."""
        tok = self.current_token
        self.current_token = self.lexer.next_token()
        return tok

    def check(self, *types: TokenType) -> bool:
        """True when the current token has one of `types`; consumes nothing."""
        return self.current_token.type in types

    def match(self, *types: TokenType) -> Token | None:
        """Consumes the current token if it has one of `types`, else returns None."""
        if self.check(*types):
            return self.advance()
        return None

    def expect(self, *types: TokenType, expected: str | None = None) -> Token:
        """Consumes a token of one of `types` or raises ParseError."""
        if self.check(*types):
            return self.advance()
        raise self.error_expected(expected or " or ".join(describe(t) for t in types))

    def error_expected(self, expected: str) -> ParseError:
        """Builds (and logs) a ParseError for the current token."""
        err = ParseError.unexpected(expected, self.current_token)
        logger.debug("parse error: %s", err)
        return err

    def skip_newlines(self) -> None:
        """Skips line breaks where the grammar lets an expression continue."""
        while self.check(T.NEWLINE):
            self.advance()

    def skip_separators(self) -> None:
        """Skips any run of newlines and `;`."""
        while self.check(*SEPARATORS):
            self.advance()

    def finish(self) -> None:
        """Requires that nothing but separators is left."""
        self.skip_separators()
        self.expect(T.EOF)

    # entry points

    @guard_nesting
    def parse(self) -> ASTNode:
        """Parse the whole input as a block; see `parse_block`."""
        logger.debug("parse: start")
        node = self.parse_block()
        self.finish()
        logger.debug("parse: produced %s", node.kind.value)
        return node

    @guard_nesting
    def parse_block(self) -> ASTNode:
        """Parse statements up to `}` or end of input.

        Returns the statement itself when there is exactly one, otherwise a
        `BlockNode`.
        """
        stmts = self.parse_statements((T.RBRACE, T.EOF))
        if len(stmts) == 1:
            return stmts[0]
        return BlockNode(tuple(stmts), line=stmts[0].line, col=stmts[0].col)

    @guard_nesting
    def parse_function(self) -> FunctionDefinition:
        """Parse an input consisting of a single function definition."""
        logger.debug("parse_function: start")
        self.skip_separators()
        func = self.parse_function_definition()
        self.finish()
        return func

    @guard_nesting
    def parse_class(self) -> ClassDefinition:
        """Parse an input consisting of a single class definition."""
        logger.debug("parse_class: start")
        self.skip_separators()
        klass = self.parse_class_definition()
        self.finish()
        return klass

    @guard_nesting
    def parse_program(self) -> Program:
        """Parse a sequence of class definitions."""
        logger.debug("parse_program: start")
        start = self.current_token
        classes: list[ClassDefinition] = []
        self.skip_separators()
        while not self.check(T.EOF):
            classes.append(self.parse_class_definition())
            self.skip_separators()
        logger.debug("parse_program: %d classes", len(classes))
        return Program(tuple(classes), line=start.line, col=start.col)

    # statements

    def parse_statements(
        self, terminators: tuple[TokenType, ...], first: ASTNode | None = None
    ) -> list[ASTNode]:
        """Parse one or more separated statements, stopping before a terminator.

        If `first` is given it has already been parsed and counts as the first
        statement.
        """
        if first is None:
            self.skip_separators()
            if self.check(*terminators):
                raise self.error_expected("an expression")
            first = self.parse_statement()
        stmts = [first]
        while self.check(*SEPARATORS):
            self.skip_separators()
            if self.check(*terminators):
                break
            stmts.append(self.parse_statement())
        return stmts

    def parse_statement(self) -> ASTNode:
        """Parse a `var` declaration or an expression statement."""
        if self.check(T.VAR):
            tok, name, type_, value = self.parse_var()
            return AssignmentNode(
                Symbol(name.value, line=name.line, col=name.col),
                value,
                is_declaration=True,
                type=type_,
                line=tok.line,
                col=tok.col,
            )
        return self.parse_assignment()

    def parse_var(self) -> tuple[Token, Token, str | None, ASTNode]:
        """`var name (: Type)? = value`, shared by statements and class properties."""
        var_tok = self.expect(T.VAR)
        name = self.expect(T.IDENT)
        type_ = self.parse_type_annotation()
        self.expect(T.ASSIGN)
        self.skip_newlines()
        return var_tok, name, type_, self.parse_assignment()

    def parse_braced_block(self) -> BlockNode:
        """`{ block }`; always a BlockNode, even with one statement."""
        open_tok = self.expect(T.LBRACE)
        stmts = self.parse_statements((T.RBRACE,))
        self.expect(T.RBRACE)
        return BlockNode(tuple(stmts), line=open_tok.line, col=open_tok.col)

    # expression levels

    def parse_assignment(self) -> ASTNode:
        """Parse `target = value`, or the function definition `f(a, b) = { ... }`."""
        node = self.parse_while_loop()
        if not self.check(T.ASSIGN):
            return node

        assign_tok = self.advance()
        self.skip_newlines()

        if isinstance(node, (Symbol, AccessorNode)):
            value = self.parse_assignment()
            return AssignmentNode(node, value, line=node.line, col=node.col)

        if (
            isinstance(node, FunctionCallNode)
            and isinstance(node.callee, Symbol)
            and all(isinstance(arg, Symbol) for arg in node.args)
        ):
            params = tuple(Parameter(arg.name) for arg in node.args if isinstance(arg, Symbol))
            body = self.parse_braced_block()
            return FunctionDefinition(
                node.callee.name, params, None, body, line=node.line, col=node.col
            )

        err = ParseError(
            "Invalid left hand side of assignment", assign_tok, "symbol or accessor"
        )
        logger.debug("parse error: %s", err)
        raise err

    def parse_while_loop(self) -> ASTNode:
        """Parse an operand followed by any number of postfix `while` loops."""
        node = self.parse_conditional()
        while self.check(T.WHILE):
            self.advance()
            condition = self.parse_parenthesized(self.parse_assignment)
            body = self.parse_braced_block()
            node = WhileLoopNode(condition, body, subject=node, line=node.line, col=node.col)
        return node

    def parse_conditional(self) -> ASTNode:
        """Parse an operand followed by any number of postfix `if` clauses."""
        node = self.parse_logical_or()
        while self.check(T.IF):
            node = self.parse_if(subject=node)
        return node

    def parse_if(self, subject: ASTNode | None = None) -> ConditionalNode:
        """`if (condition) then (else otherwise)?`, after an optional subject."""
        if_tok = self.expect(T.IF)
        condition = self.parse_parenthesized(self.parse_logical_or)
        then_branch = self.parse_logical_or()
        else_branch = None
        if self.match(T.ELSE):
            else_branch = self.parse_logical_or()
        pos = subject if subject is not None else if_tok
        return ConditionalNode(
            condition,
            then_branch,
            else_branch,
            subject=subject,
            line=pos.line,
            col=pos.col,
        )

    def parse_parenthesized(self, parse_inner: Callable[[], ASTNode]) -> ASTNode:
        """Parse `( inner )`, allowing line breaks just inside the parentheses."""
        self.expect(T.LPAREN)
        self.skip_newlines()
        node = parse_inner()
        self.skip_newlines()
        self.expect(T.RPAREN)
        return node

    def parse_binary(
        self, operators: frozenset[TokenType], parse_operand: Callable[[], ASTNode]
    ) -> ASTNode:
        """One left-associative binary level."""
        node = parse_operand()
        while self.check(*operators):
            op_tok = self.advance()
            self.skip_newlines()
            right = parse_operand()
            node = OperatorNode(
                op_tok.value, op_tok.type, node, right, line=node.line, col=node.col
            )
        return node

    def parse_logical_or(self) -> ASTNode:
        """Parse `a || b || ...`."""
        return self.parse_binary(frozenset({T.OR}), self.parse_logical_and)

    def parse_logical_and(self) -> ASTNode:
        """Parse `a && b && ...`."""
        return self.parse_binary(frozenset({T.AND}), self.parse_relational)

    def parse_relational(self) -> ASTNode:
        """Parse a comparison: one operator gives an OperatorNode, more a RelationalNode."""
        operands = [self.parse_additive()]
        operators: list[Token] = []
        while self.check(*RELATIONAL_OPERATORS):
            operators.append(self.advance())
            self.skip_newlines()
            operands.append(self.parse_additive())

        first = operands[0]
        if not operators:
            return first
        if len(operators) == 1:
            op_tok = operators[0]
            return OperatorNode(
                op_tok.value,
                op_tok.type,
                first,
                operands[1],
                line=first.line,
                col=first.col,
            )
        return RelationalNode(
            tuple(op.value for op in operators),
            tuple(operands),
            line=first.line,
            col=first.col,
        )

    def parse_additive(self) -> ASTNode:
        """Parse `a + b - ...`."""
        return self.parse_binary(ADDITIVE_OPERATORS, self.parse_multiplicative)

    def parse_multiplicative(self) -> ASTNode:
        """Parse `a * b / c % ...`."""
        return self.parse_binary(MULTIPLICATIVE_OPERATORS, self.parse_unary)

    def parse_unary(self) -> ASTNode:
        """Parse prefix `-` and `!`, which nest to the right."""
        if self.check(*UNARY_OPERATORS):
            op_tok = self.advance()
            operand = self.parse_unary()
            return UnaryExpression(op_tok.value, operand, line=op_tok.line, col=op_tok.col)
        return self.parse_primary()

    # primaries

    def parse_primary(self) -> ASTNode:
        """Parse a literal, name, bracketed form or prefix keyword construct."""
        tok = self.current_token

        if tok.type in LITERAL_KINDS:
            self.advance()
            return Literal(tok.value, LITERAL_KINDS[tok.type], line=tok.line, col=tok.col)
        if tok.type is T.IDENT:
            self.advance()
            return self.parse_accessors(Symbol(tok.value, line=tok.line, col=tok.col))
        if tok.type is T.THIS:
            self.advance()
            return self.parse_accessors(This(line=tok.line, col=tok.col))
        if tok.type is T.NEW:
            return self.parse_accessors(self.parse_constructor_call())
        if tok.type is T.LPAREN:
            return self.parse_accessors(self.parse_parenthesized(self.parse_assignment))
        if tok.type is T.LBRACK:
            return self.parse_array()
        if tok.type is T.LBRACE:
            return self.parse_map_or_block()
        if tok.type is T.LET:
            return self.parse_let()
        if tok.type is T.IF:
            return self.parse_if()
        if tok.type is T.WHILE:
            return self.parse_prefix_while()

        raise self.error_expected("an expression")

    def parse_accessors(self, node: ASTNode) -> ASTNode:
        """Applies `(...)`, `@index` and `.name` suffixes left to right."""
        while True:
            if self.check(T.LPAREN):
                args = self.parse_arguments(T.LPAREN, T.RPAREN)
                node = FunctionCallNode(node, args, line=node.line, col=node.col)
            elif self.match(T.AT):
                index = self.parse_primary()
                node = AccessorNode(
                    node, index, AccessorKind.INDEX, line=node.line, col=node.col
                )
            elif self.match(T.DOT):
                name = self.expect(T.IDENT, expected="property name after '.'")
                member = Symbol(name.value, line=name.line, col=name.col)
                node = AccessorNode(
                    node, member, AccessorKind.MEMBER, line=node.line, col=node.col
                )
            else:
                return node

    def parse_arguments(self, open_type: TokenType, close_type: TokenType) -> tuple[ASTNode, ...]:
        """A comma-separated, possibly empty list of expressions in brackets."""
        self.expect(open_type)
        self.skip_newlines()
        items: list[ASTNode] = []
        if not self.check(close_type):
            items.append(self.parse_assignment())
            self.skip_newlines()
            while self.match(T.COMMA):
                self.skip_newlines()
                items.append(self.parse_assignment())
                self.skip_newlines()
        self.expect(close_type)
        return tuple(items)

    def parse_array(self) -> ArrayNode:
        """Parse `[a, b, ...]`."""
        tok = self.current_token
        elements = self.parse_arguments(T.LBRACK, T.RBRACK)
        return ArrayNode(elements, line=tok.line, col=tok.col)

    def parse_constructor_call(self) -> ConstructorCallNode:
        """Parse `new Type(args...)`."""
        new_tok = self.expect(T.NEW)
        type_name = self.expect(T.IDENT, expected="class name after 'new'")
        args = self.parse_arguments(T.LPAREN, T.RPAREN)
        return ConstructorCallNode(type_name.value, args, line=new_tok.line, col=new_tok.col)

    def parse_map_or_block(self) -> MapNode | BlockNode:
        """Parse a `{` in expression position as a map or a block."""
        open_tok = self.expect(T.LBRACE)
        self.skip_newlines()
        if self.match(T.RBRACE):
            return MapNode((), line=open_tok.line, col=open_tok.col)

        entry_tok = self.current_token
        first = self.parse_statement()
        broke_line = self.check(T.NEWLINE)
        self.skip_newlines()

        if self.is_map_entry(first) and self.check(T.COMMA, T.RBRACE):
            entries = [self.map_entry(first, entry_tok)]
            while self.match(T.COMMA):
                self.skip_newlines()
                entry_tok = self.current_token
                entries.append(self.map_entry(self.parse_statement(), entry_tok))
            self.skip_newlines()
            self.expect(T.RBRACE)
            return MapNode(tuple(entries), line=open_tok.line, col=open_tok.col)

        if broke_line and not self.check(T.RBRACE):
            # the newline after `first` was its separator
            stmts = [first, *self.parse_statements((T.RBRACE,))]
        else:
            stmts = self.parse_statements((T.RBRACE,), first=first)
        self.expect(T.RBRACE)
        return BlockNode(tuple(stmts), line=open_tok.line, col=open_tok.col)

    @staticmethod
    def is_map_entry(node: ASTNode) -> bool:
        """A plain, non-declaring `name = value` is the only valid map entry."""
        return (
            isinstance(node, AssignmentNode)
            and not node.is_declaration
            and isinstance(node.target, Symbol)
        )

    def map_entry(self, node: ASTNode, tok: Token) -> tuple[ASTNode, ASTNode]:
        """Splits a `name = value` assignment into a map entry pair."""
        if not isinstance(node, AssignmentNode) or not self.is_map_entry(node):
            err = ParseError("Invalid map entry, expected 'name = value'", tok, "map entry")
            logger.debug("parse error: %s", err)
            raise err
        return node.target, node.value

    def parse_let(self) -> LetNode:
        """Parse `let a: T = x, b = y in body`."""
        let_tok = self.expect(T.LET)
        bindings = [self.parse_let_binding()]
        while self.match(T.COMMA):
            self.skip_newlines()
            bindings.append(self.parse_let_binding())
        self.skip_newlines()
        self.expect(T.IN)
        self.skip_newlines()
        body = self.parse_assignment()
        return LetNode(tuple(bindings), body, line=let_tok.line, col=let_tok.col)

    def parse_let_binding(self) -> LetBinding:
        """Parse one `name (: Type)? = value` binding of a `let`."""
        name = self.expect(T.IDENT)
        type_ = self.parse_type_annotation()
        self.expect(T.ASSIGN)
        self.skip_newlines()
        return LetBinding(name.value, type_, self.parse_while_loop())

    def parse_prefix_while(self) -> WhileLoopNode:
        """Parse `while (condition) body`."""
        while_tok = self.expect(T.WHILE)
        condition = self.parse_parenthesized(self.parse_assignment)
        body = self.parse_assignment()
        return WhileLoopNode(condition, body, line=while_tok.line, col=while_tok.col)

    # declarations

    def parse_type_annotation(self) -> str | None:
        """Parse an optional `: Type` and return the type name."""
        if self.match(T.COLON):
            return self.expect(T.IDENT, expected="type name").value
        return None

    def parse_parameters(self) -> tuple[Parameter, ...]:
        """`(name: Type, ...)`; every declared parameter needs a type."""
        self.expect(T.LPAREN)
        self.skip_newlines()
        params: list[Parameter] = []
        if not self.check(T.RPAREN):
            params.append(self.parse_parameter())
            self.skip_newlines()
            while self.match(T.COMMA):
                self.skip_newlines()
                params.append(self.parse_parameter())
                self.skip_newlines()
        self.expect(T.RPAREN)
        return tuple(params)

    def parse_parameter(self) -> Parameter:
        """Parse one `name: Type` declared parameter."""
        name = self.expect(T.IDENT, expected="parameter name")
        self.expect(T.COLON, expected=f"':' and a type for parameter '{name.value}'")
        type_ = self.expect(T.IDENT, expected="type name")
        return Parameter(name.value, type_.value)

    def parse_function_definition(self) -> FunctionDefinition:
        """Parse `override? func name(params) (: Type)? = body`."""
        start = self.current_token
        override = self.match(T.OVERRIDE) is not None
        self.expect(T.FUNC)
        name = self.expect(T.IDENT, expected="function name")
        params = self.parse_parameters()
        return_type = self.parse_type_annotation()
        self.expect(T.ASSIGN)
        self.skip_newlines()

        if self.check(T.LBRACE):
            body = self.parse_braced_block()
        else:
            expr = self.parse_assignment()
            body = BlockNode((expr,), line=expr.line, col=expr.col)

        return FunctionDefinition(
            name.value,
            params,
            return_type,
            body,
            override=override,
            line=start.line,
            col=start.col,
        )

    def parse_class_definition(self) -> ClassDefinition:
        """Parse `class Name(params) { members }`; members need no separators."""
        class_tok = self.expect(T.CLASS)
        name = self.expect(T.IDENT, expected="class name")
        params = self.parse_parameters()
        self.skip_newlines()
        self.expect(T.LBRACE)

        properties: list[Property] = []
        functions: list[FunctionDefinition] = []
        self.skip_separators()
        while not self.check(T.RBRACE):
            if self.check(T.VAR):
                _, prop_name, type_, value = self.parse_var()
                properties.append(Property(prop_name.value, type_, value))
            elif self.check(T.FUNC, T.OVERRIDE):
                functions.append(self.parse_function_definition())
            else:
                raise self.error_expected("'var', 'func', 'override' or '}'")
            self.skip_separators()
        self.expect(T.RBRACE)

        return ClassDefinition(
            name.value,
            params,
            tuple(properties),
            tuple(functions),
            line=class_tok.line,
            col=class_tok.col,
        )


def parse(source: str) -> ASTNode:
    """Convenience wrapper: ``Parser(source).parse()``."""
    return Parser(source).parse()


__all__ = ["Parser", "describe", "parse"]

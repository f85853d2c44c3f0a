"""
Defines the abstract syntax tree (AST) produced by the MIRROR parser.

The tree is a closed set of node variants. Each variant is a frozen dataclass
deriving from `ASTNode` and tagged with a class-level `kind` (`NodeKind`).
Consumers discriminate variants through the `is_*` capability queries on
`ASTNode` (all of them are plain tag comparisons), or with a `match` statement
over the `Node` union.

Nodes are value-like: sequences are stored as tuples, nothing is mutated after
construction, and no node refers back to its parent. Equality is structural
and ignores source positions.

Variants:
    Literal, Symbol, This, UnaryExpression, OperatorNode, RelationalNode,
    ConditionalNode, WhileLoopNode, BlockNode, AssignmentNode,
    FunctionCallNode, ConstructorCallNode, AccessorNode, ArrayNode, MapNode,
    LetNode, FunctionDefinition, ClassDefinition, Program

Records (parts of a node, not nodes themselves):
    Parameter, LetBinding, Property

Helpers:
    walk(node): pre-order traversal of a subtree.
    ASTNode.to_dict(): nested plain-dict form for JSON output or debugging.

Example:
    node = OperatorNode("+", TokenType.PLUS, Symbol("a"), Literal("1", LiteralKind.INTEGER))
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from mirror.mirror_constants import TokenType


class NodeKind(str, Enum):
    LITERAL = "literal"
    SYMBOL = "symbol"
    THIS = "this"
    UNARY = "unary"
    OPERATOR = "operator"
    RELATIONAL = "relational"
    CONDITIONAL = "conditional"
    WHILE_LOOP = "while"
    BLOCK = "block"
    ASSIGNMENT = "assign"
    FUNCTION_CALL = "call"
    CONSTRUCTOR_CALL = "new"
    ACCESSOR = "accessor"
    ARRAY = "array"
    MAP = "map"
    LET = "let"
    FUNCTION = "func"
    CLASS = "class"
    PROGRAM = "program"


class LiteralKind(str, Enum):
    INTEGER = "integer"
    DECIMAL = "decimal"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"


class AccessorKind(str, Enum):
    MEMBER = "member"  # a.b
    INDEX = "index"  # a@b


def _serialize(value: Any) -> Any:
    if isinstance(value, ASTNode):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_serialize(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value):
        return {f.name: _serialize(getattr(value, f.name)) for f in fields(value)}
    return value


def _nodes_in(value: Any) -> Iterator[ASTNode]:
    if isinstance(value, ASTNode):
        yield value
    elif isinstance(value, tuple):
        for item in value:
            yield from _nodes_in(item)
    elif is_dataclass(value) and not isinstance(value, type):
        for f in fields(value):
            yield from _nodes_in(getattr(value, f.name))


@dataclass(frozen=True)
class ASTNode:
    """
    Base of every MIRROR AST node.

    Attributes:
        kind (NodeKind): Class-level tag identifying the variant.
        line (int): Source line of the node's first token (0 if unknown).
        col (int): Source column of the node's first token (0 if unknown).
    """

    kind: ClassVar[NodeKind]
    line: int = field(default=0, kw_only=True, compare=False, repr=False)
    col: int = field(default=0, kw_only=True, compare=False, repr=False)

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, list):
                object.__setattr__(self, f.name, tuple(value))

    def children(self) -> Iterator[ASTNode]:
        """Yields the direct child nodes in source order."""
        for f in fields(self):
            if f.name not in ("line", "col"):
                yield from _nodes_in(getattr(self, f.name))

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"kind": self.kind.value}
        for f in fields(self):
            result[f.name] = _serialize(getattr(self, f.name))
        return result

    # capability queries

    def is_literal(self, literal_kind: LiteralKind | None = None) -> bool:
        if self.kind is not NodeKind.LITERAL:
            return False
        return literal_kind is None or getattr(self, "literal_kind") is literal_kind

    def is_symbol(self) -> bool:
        return self.kind is NodeKind.SYMBOL

    def is_this(self) -> bool:
        return self.kind is NodeKind.THIS

    def is_unary(self) -> bool:
        return self.kind is NodeKind.UNARY

    def is_operator(self) -> bool:
        return self.kind is NodeKind.OPERATOR

    def is_relational(self) -> bool:
        return self.kind is NodeKind.RELATIONAL

    def is_conditional(self) -> bool:
        return self.kind is NodeKind.CONDITIONAL

    def is_while_loop(self) -> bool:
        return self.kind is NodeKind.WHILE_LOOP

    def is_block(self) -> bool:
        return self.kind is NodeKind.BLOCK

    def is_assignment(self) -> bool:
        return self.kind is NodeKind.ASSIGNMENT

    def is_function_call(self) -> bool:
        return self.kind is NodeKind.FUNCTION_CALL

    def is_constructor_call(self) -> bool:
        return self.kind is NodeKind.CONSTRUCTOR_CALL

    def is_accessor(self) -> bool:
        return self.kind is NodeKind.ACCESSOR

    def is_array(self) -> bool:
        return self.kind is NodeKind.ARRAY

    def is_map(self) -> bool:
        return self.kind is NodeKind.MAP

    def is_let(self) -> bool:
        return self.kind is NodeKind.LET

    def is_function(self) -> bool:
        return self.kind is NodeKind.FUNCTION

    def is_class(self) -> bool:
        return self.kind is NodeKind.CLASS

    def is_program(self) -> bool:
        return self.kind is NodeKind.PROGRAM


@dataclass(frozen=True)
class Parameter:
    """A declared parameter; `type` is None when the source gives none."""

    identifier: str
    type: str | None = None


@dataclass(frozen=True)
class LetBinding:
    identifier: str
    type: str | None
    value: ASTNode


@dataclass(frozen=True)
class Property:
    """A `var name: Type = value` member of a class."""

    name: str
    type: str | None
    value: ASTNode


@dataclass(frozen=True)
class Literal(ASTNode):
    """A literal kept verbatim; strings include their quotes."""

    value: str
    literal_kind: LiteralKind
    kind: ClassVar[NodeKind] = NodeKind.LITERAL


@dataclass(frozen=True)
class Symbol(ASTNode):
    """A reference to a name."""

    name: str
    kind: ClassVar[NodeKind] = NodeKind.SYMBOL


@dataclass(frozen=True)
class This(ASTNode):
    kind: ClassVar[NodeKind] = NodeKind.THIS


@dataclass(frozen=True)
class UnaryExpression(ASTNode):
    operator: str
    operand: ASTNode
    kind: ClassVar[NodeKind] = NodeKind.UNARY


@dataclass(frozen=True)
class OperatorNode(ASTNode):
    """A binary operation: arithmetic, a single comparison, `&&` or `||`."""

    operator: str
    operator_type: TokenType
    left: ASTNode
    right: ASTNode
    kind: ClassVar[NodeKind] = NodeKind.OPERATOR


@dataclass(frozen=True)
class RelationalNode(ASTNode):
    """A comparison chain of three or more operands, e.g. `a < b <= c`.

    ``operators[i]`` sits between ``operands[i]`` and ``operands[i + 1]``.
    Two-operand comparisons are plain `OperatorNode`s.
    """

    operators: tuple[str, ...]
    operands: tuple[ASTNode, ...]
    kind: ClassVar[NodeKind] = NodeKind.RELATIONAL

    def __post_init__(self) -> None:
        super().__post_init__()
        if len(self.operands) != len(self.operators) + 1:
            raise ValueError("A relational chain needs exactly one more operand than operators")


@dataclass(frozen=True)
class ConditionalNode(ASTNode):
    """`if (condition) then_branch else else_branch`.

    `subject` holds the operand a postfix `if` was written after
    (`a if (c) b`); it is None for the prefix form.
    """

    condition: ASTNode
    then_branch: ASTNode
    else_branch: ASTNode | None = None
    subject: ASTNode | None = None
    kind: ClassVar[NodeKind] = NodeKind.CONDITIONAL


@dataclass(frozen=True)
class WhileLoopNode(ASTNode):
    condition: ASTNode
    body: ASTNode
    subject: ASTNode | None = None
    kind: ClassVar[NodeKind] = NodeKind.WHILE_LOOP


@dataclass(frozen=True)
class BlockNode(ASTNode):
    expressions: tuple[ASTNode, ...]
    kind: ClassVar[NodeKind] = NodeKind.BLOCK

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.expressions:
            raise ValueError("A block needs at least one expression")


@dataclass(frozen=True)
class AssignmentNode(ASTNode):
    """`target = value`; `var target: type = value` sets `is_declaration`."""

    target: ASTNode
    value: ASTNode
    is_declaration: bool = False
    type: str | None = None
    kind: ClassVar[NodeKind] = NodeKind.ASSIGNMENT


@dataclass(frozen=True)
class FunctionCallNode(ASTNode):
    """`callee(args...)`; the callee may itself be a call or an accessor."""

    callee: ASTNode
    args: tuple[ASTNode, ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.FUNCTION_CALL

    @property
    def function_name(self) -> str | None:
        """`f` for `f(...)` and `obj.f(...)`; None when the callee is computed."""
        if isinstance(self.callee, Symbol):
            return self.callee.name
        if isinstance(self.callee, AccessorNode) and self.callee.accessor is AccessorKind.MEMBER:
            member = self.callee.member
            return member.name if isinstance(member, Symbol) else None
        return None

    @property
    def object(self) -> ASTNode | None:
        """The receiver of a method call (`obj` in `obj.f(...)`), else None."""
        if isinstance(self.callee, AccessorNode) and self.callee.accessor is AccessorKind.MEMBER:
            return self.callee.base
        return None


@dataclass(frozen=True)
class ConstructorCallNode(ASTNode):
    """`new Type(args...)`."""

    type_name: str
    args: tuple[ASTNode, ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.CONSTRUCTOR_CALL


@dataclass(frozen=True)
class AccessorNode(ASTNode):
    """`base.member` (MEMBER) or `base@member` (INDEX)."""

    base: ASTNode
    member: ASTNode
    accessor: AccessorKind = AccessorKind.MEMBER
    kind: ClassVar[NodeKind] = NodeKind.ACCESSOR


@dataclass(frozen=True)
class ArrayNode(ASTNode):
    elements: tuple[ASTNode, ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.ARRAY


@dataclass(frozen=True)
class MapNode(ASTNode):
    entries: tuple[tuple[ASTNode, ASTNode], ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.MAP

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "entries", tuple(tuple(e) for e in self.entries))


@dataclass(frozen=True)
class LetNode(ASTNode):
    """`let a: T = x, b = y in body`."""

    bindings: tuple[LetBinding, ...]
    body: ASTNode
    kind: ClassVar[NodeKind] = NodeKind.LET


@dataclass(frozen=True)
class FunctionDefinition(ASTNode):
    name: str
    parameters: tuple[Parameter, ...]
    return_type: str | None
    body: BlockNode
    override: bool = False
    kind: ClassVar[NodeKind] = NodeKind.FUNCTION


@dataclass(frozen=True)
class ClassDefinition(ASTNode):
    name: str
    parameters: tuple[Parameter, ...] = ()
    properties: tuple[Property, ...] = ()
    functions: tuple[FunctionDefinition, ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.CLASS


@dataclass(frozen=True)
class Program(ASTNode):
    classes: tuple[ClassDefinition, ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.PROGRAM


Node = Union[
    Literal,
    Symbol,
    This,
    UnaryExpression,
    OperatorNode,
    RelationalNode,
    ConditionalNode,
    WhileLoopNode,
    BlockNode,
    AssignmentNode,
    FunctionCallNode,
    ConstructorCallNode,
    AccessorNode,
    ArrayNode,
    MapNode,
    LetNode,
    FunctionDefinition,
    ClassDefinition,
    Program,
]
"""Every concrete node variant, for exhaustive `match` statements."""


def walk(node: ASTNode) -> Iterator[ASTNode]:
    """Yields `node` and all of its descendants, pre-order."""
    yield node
    for child in node.children():
        yield from walk(child)


__all__ = [
    "ASTNode",
    "AccessorKind",
    "AccessorNode",
    "ArrayNode",
    "AssignmentNode",
    "BlockNode",
    "ClassDefinition",
    "ConditionalNode",
    "ConstructorCallNode",
    "FunctionCallNode",
    "FunctionDefinition",
    "LetBinding",
    "LetNode",
    "Literal",
    "LiteralKind",
    "MapNode",
    "Node",
    "NodeKind",
    "OperatorNode",
    "Parameter",
    "Program",
    "Property",
    "RelationalNode",
    "Symbol",
    "This",
    "UnaryExpression",
    "WhileLoopNode",
    "walk",
]

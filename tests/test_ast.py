import pytest
from hypothesis import given
from hypothesis import strategies as st

from mirror.mirror_ast import (
    AccessorKind,
    AccessorNode,
    ArrayNode,
    AssignmentNode,
    BlockNode,
    ClassDefinition,
    ConstructorCallNode,
    FunctionCallNode,
    FunctionDefinition,
    Literal,
    LiteralKind,
    MapNode,
    NodeKind,
    OperatorNode,
    Parameter,
    Program,
    RelationalNode,
    Symbol,
    This,
    walk,
)
from mirror.mirror_constants import TokenType


def integer(text: str) -> Literal:
    return Literal(text, LiteralKind.INTEGER)


def test_equality_ignores_position() -> None:
    assert Symbol("x", line=1, col=1) == Symbol("x", line=4, col=9)
    assert Symbol("x") != Symbol("y")


def test_repr_omits_position() -> None:
    assert repr(Symbol("x", line=3, col=2)) == "Symbol(name='x')"


def test_nodes_are_immutable() -> None:
    node = Symbol("x")
    with pytest.raises(AttributeError):
        node.name = "y"  # type: ignore[misc]


def test_lists_are_stored_as_tuples() -> None:
    node = ArrayNode([integer("1"), integer("2")])  # type: ignore[arg-type]
    assert node.elements == (integer("1"), integer("2"))
    assert hash(node) == hash(ArrayNode((integer("1"), integer("2"))))


def test_kind_tags() -> None:
    assert Literal("1", LiteralKind.INTEGER).kind is NodeKind.LITERAL
    assert This().kind is NodeKind.THIS
    assert Program().kind is NodeKind.PROGRAM


def test_capability_queries() -> None:
    lit = Literal('"s"', LiteralKind.STRING)
    assert lit.is_literal()
    assert lit.is_literal(LiteralKind.STRING)
    assert not lit.is_literal(LiteralKind.INTEGER)
    assert not lit.is_symbol()
    assert Symbol("x").is_symbol()
    assert This().is_this()
    assert not This().is_symbol()
    assert ArrayNode().is_array()
    assert MapNode().is_map()
    assert Program().is_program()


def test_block_must_not_be_empty() -> None:
    with pytest.raises(ValueError, match="at least one"):
        BlockNode(())


def test_relational_chain_arity() -> None:
    RelationalNode(("<", "<"), (Symbol("a"), Symbol("b"), Symbol("c")))
    with pytest.raises(ValueError, match="one more operand"):
        RelationalNode(("<",), (Symbol("a"), Symbol("b"), Symbol("c")))


def test_function_call_name_and_object() -> None:
    plain = FunctionCallNode(Symbol("f"), (integer("1"),))
    assert plain.function_name == "f"
    assert plain.object is None

    method = FunctionCallNode(AccessorNode(Symbol("node"), Symbol("add")), ())
    assert method.function_name == "add"
    assert method.object == Symbol("node")

    computed = FunctionCallNode(FunctionCallNode(Symbol("g")), ())
    assert computed.function_name is None
    assert computed.object is None

    indexed = FunctionCallNode(AccessorNode(Symbol("fs"), integer("0"), AccessorKind.INDEX))
    assert indexed.function_name is None


def test_children_in_source_order() -> None:
    node = OperatorNode("+", TokenType.PLUS, Symbol("a"), integer("1"))
    assert list(node.children()) == [Symbol("a"), integer("1")]


def test_children_reach_into_records_and_pairs() -> None:
    func = FunctionDefinition(
        "get", (Parameter("n", "Int"),), "Int", BlockNode((Symbol("n"),))
    )
    klass = ClassDefinition("A", (), (), (func,))
    assert list(klass.children()) == [func]

    entries = MapNode(((Symbol("k"), integer("1")),))
    assert list(entries.children()) == [Symbol("k"), integer("1")]


def test_walk_is_pre_order() -> None:
    tree = AssignmentNode(
        Symbol("x"), OperatorNode("*", TokenType.TIMES, integer("2"), Symbol("y"))
    )
    kinds = [n.kind for n in walk(tree)]
    assert kinds == [
        NodeKind.ASSIGNMENT,
        NodeKind.SYMBOL,
        NodeKind.OPERATOR,
        NodeKind.LITERAL,
        NodeKind.SYMBOL,
    ]


def test_to_dict_basic() -> None:
    node = AssignmentNode(Symbol("x", line=1, col=1), integer("1"), line=1, col=1)
    d = node.to_dict()
    assert d["kind"] == "assign"
    assert d["target"]["kind"] == "symbol"
    assert d["target"]["name"] == "x"
    assert d["value"]["literal_kind"] == "integer"
    assert d["is_declaration"] is False
    assert d["line"] == 1


def test_to_dict_serializes_records_and_enums() -> None:
    func = FunctionDefinition(
        "max", (Parameter("a", "Int"), Parameter("b")), None, BlockNode((Symbol("a"),))
    )
    d = func.to_dict()
    assert d["parameters"] == [
        {"identifier": "a", "type": "Int"},
        {"identifier": "b", "type": None},
    ]
    assert d["body"]["expressions"][0]["name"] == "a"

    op = OperatorNode("&&", TokenType.AND, Symbol("p"), Symbol("q")).to_dict()
    assert op["operator_type"] == "&&"


@given(st.text(min_size=1, max_size=10))  # type: ignore[misc]
def test_symbol_equality_is_by_name(name: str) -> None:
    assert Symbol(name, line=1) == Symbol(name, line=2)
    assert Symbol(name).to_dict()["name"] == name


def test_accessor_and_constructor_field_names() -> None:
    accessor = AccessorNode(Symbol("xs"), integer("0"), AccessorKind.INDEX).to_dict()
    assert set(accessor) == {"kind", "base", "member", "accessor", "line", "col"}
    assert accessor["accessor"] == "index"

    ctor = ConstructorCallNode("Point", (integer("1"),)).to_dict()
    assert ctor["kind"] == "new"
    assert ctor["type_name"] == "Point"
    assert [a["value"] for a in ctor["args"]] == ["1"]

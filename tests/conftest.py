from collections.abc import Callable

import pytest

from mirror.mirror_ast import ASTNode, Program
from mirror.mirror_parser import Parser


@pytest.fixture  # type: ignore[misc]
def parse() -> Callable[[str], ASTNode]:
    return lambda source: Parser(source).parse()


@pytest.fixture  # type: ignore[misc]
def parse_program() -> Callable[[str], Program]:
    return lambda source: Parser(source).parse_program()

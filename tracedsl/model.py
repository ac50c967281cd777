from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Union

"""Dialect-neutral node model for generated trace code.

Nodes describe blocks, statements, declarations and try/catch constructs.
They carry no target syntax: a ``Dialect`` turns a tree into text, so the
same tree renders as Java, Kotlin or Python.
"""

from .errors import MissingCatchDescriptor, UnsupportedNodeError

if TYPE_CHECKING:
    from .dialects import Dialect

logger = logging.getLogger(__name__)


def _resolve(dialect: "Dialect | None") -> "Dialect":
    from .dialects import get_dialect

    return dialect if dialect is not None else get_dialect()


# -----------------------------
# Expressions
# -----------------------------

@dataclass(frozen=True)
class Expression:
    text: str

    def call(self, method: str, *args: "Expression | Variable | str") -> Expression:
        return Expression(f"{self.text}.{method}({_join_args(args)})")

    def property(self, name: str) -> Expression:
        return Expression(f"{self.text}.{name}")

    def to_code(self, indent: int = 0, dialect: "Dialect | None" = None) -> str:
        return _resolve(dialect).render_expression(self)


@dataclass(frozen=True)
class Variable:
    """A named, typed value; also usable wherever an expression is expected."""
    name: str
    type_name: str

    def as_expression(self) -> Expression:
        return Expression(self.name)

    def call(self, method: str, *args: "Expression | Variable | str") -> Expression:
        return self.as_expression().call(method, *args)

    def property(self, name: str) -> Expression:
        return self.as_expression().property(name)

    def to_code(self, indent: int = 0, dialect: "Dialect | None" = None) -> str:
        return _resolve(dialect).render_expression(self)


def as_expression(value: "Expression | Variable | str") -> Expression:
    if isinstance(value, Expression):
        return value
    if isinstance(value, Variable):
        return value.as_expression()
    if isinstance(value, str):
        return Expression(value)
    raise TypeError(f"Cannot use {type(value).__name__} as an expression")


def _join_args(args: tuple["Expression | Variable | str", ...]) -> str:
    return ", ".join(as_expression(a).text for a in args)


# -----------------------------
# Statements
# -----------------------------

@dataclass(frozen=True)
class VariableDeclaration:
    variable: Variable
    is_final: bool = False
    initializer: Expression | None = None

    @property
    def name(self) -> str:
        return self.variable.name

    def to_inline(self, dialect: "Dialect | None" = None) -> str:
        """Declaration fragment without indentation or terminator."""
        return _resolve(dialect).render_declaration(self)

    def to_code(self, indent: int = 0, dialect: "Dialect | None" = None) -> str:
        return _resolve(dialect).render(self, indent)


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Expression

    def to_code(self, indent: int = 0, dialect: "Dialect | None" = None) -> str:
        return _resolve(dialect).render(self, indent)


@dataclass(frozen=True)
class Assignment:
    target: Variable
    value: Expression

    def to_code(self, indent: int = 0, dialect: "Dialect | None" = None) -> str:
        return _resolve(dialect).render(self, indent)


@dataclass
class CodeBlock:
    """Ordered statements; insertion order is emission order."""
    statements: list["Statement"] = field(default_factory=list)

    def __post_init__(self) -> None:
        for st in self.statements:
            _check_statement(st)

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self) -> Iterator["Statement"]:
        return iter(self.statements)

    def add(self, statement: "Statement") -> "Statement":
        _check_statement(statement)
        self.statements.append(statement)
        return statement

    def declare(
        self,
        variable: Variable,
        initializer: "Expression | Variable | str | None" = None,
        is_final: bool = False,
    ) -> Variable:
        init = as_expression(initializer) if initializer is not None else None
        self.add(VariableDeclaration(variable, is_final, init))
        return variable

    def assign(self, variable: Variable, value: "Expression | Variable | str") -> None:
        self.add(Assignment(variable, as_expression(value)))

    def statement(self, expression: "Expression | Variable | str") -> None:
        self.add(ExpressionStatement(as_expression(expression)))

    def scope(self) -> "CodeBlock":
        """Append a nested block and return it for filling."""
        inner = CodeBlock()
        self.add(inner)
        return inner

    def try_catch(self, body: "CodeBlock", variable: Variable, handler: "CodeBlock") -> "TryBlock":
        tb = TryBlockBuilder(body).catch(variable, handler).build()
        self.add(tb)
        return tb

    def to_code(self, indent: int = 0, dialect: "Dialect | None" = None) -> str:
        return _resolve(dialect).render(self, indent)


@dataclass(frozen=True)
class TryCatchDescriptor:
    """Caught-variable declaration plus handler body of one catch clause."""
    variable: VariableDeclaration
    block: CodeBlock

    def __post_init__(self) -> None:
        if not isinstance(self.variable, VariableDeclaration):
            raise TypeError("catch variable must be a VariableDeclaration")
        if not isinstance(self.block, CodeBlock):
            raise TypeError("catch handler must be a CodeBlock")


@dataclass(frozen=True)
class TryBlock:
    """Protected block with exactly one catch clause.

    Both parts are fixed at construction; use ``TryBlockBuilder`` when the
    catch clause becomes known only after the protected block.
    """
    block: CodeBlock
    catch: TryCatchDescriptor

    def __post_init__(self) -> None:
        if self.catch is None:
            raise MissingCatchDescriptor()
        if not isinstance(self.catch, TryCatchDescriptor):
            raise TypeError("catch clause must be a TryCatchDescriptor")
        if not isinstance(self.block, CodeBlock):
            raise TypeError("protected body must be a CodeBlock")

    def to_code(self, indent: int = 0, dialect: "Dialect | None" = None) -> str:
        return _resolve(dialect).render(self, indent)


class TryBlockBuilder:
    """Two-phase construction: protected block first, catch clause later."""

    def __init__(self, block: CodeBlock) -> None:
        self.block = block
        self._descriptor: TryCatchDescriptor | None = None

    @property
    def configured(self) -> bool:
        return self._descriptor is not None

    def attach(self, descriptor: TryCatchDescriptor) -> "TryBlockBuilder":
        if self._descriptor is not None:
            logger.warning("Replacing catch clause for variable '%s'.", self._descriptor.variable.name)
        self._descriptor = descriptor
        return self

    def catch(self, variable: Variable, handler: CodeBlock) -> "TryBlockBuilder":
        return self.attach(TryCatchDescriptor(VariableDeclaration(variable, is_final=True), handler))

    def build(self) -> TryBlock:
        if self._descriptor is None:
            raise MissingCatchDescriptor()
        return TryBlock(self.block, self._descriptor)


Statement = Union[VariableDeclaration, ExpressionStatement, Assignment, TryBlock, CodeBlock]
STATEMENT_TYPES: tuple[type, ...] = (VariableDeclaration, ExpressionStatement, Assignment, TryBlock, CodeBlock)


def _check_statement(node: object) -> None:
    if not isinstance(node, STATEMENT_TYPES):
        raise UnsupportedNodeError(node)


def iter_statements(block: CodeBlock) -> Iterator[Statement]:
    """Depth-first walk over every statement below ``block``."""
    for st in block.statements:
        yield st
        if isinstance(st, CodeBlock):
            yield from iter_statements(st)
        elif isinstance(st, TryBlock):
            yield from iter_statements(st.block)
            yield from iter_statements(st.catch.block)

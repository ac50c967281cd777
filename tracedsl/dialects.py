from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .codegen import DEFAULT_INDENT_UNIT, CodeBuilder, indent_prefix
from .errors import UnknownDialectError, UnsupportedNodeError
from .factory import StatementFactory
from .model import (
    Assignment, CodeBlock, Expression, ExpressionStatement, Statement, TryBlock,
    Variable, VariableDeclaration,
)

logger = logging.getLogger(__name__)

DEFAULT_DIALECT = "java"


class Dialect(ABC):
    """
    Renders the neutral node tree as source text of one target language.

    ``render`` is the only entry point and dispatches over the closed
    ``Statement`` union; a node outside it raises ``UnsupportedNodeError``.
    Output is a pure function of the tree, the indent and ``indent_unit``.
    """
    name: str
    terminator: str = ""

    def __init__(self, indent_unit: str = DEFAULT_INDENT_UNIT, factory: StatementFactory | None = None) -> None:
        self.indent_unit = indent_unit
        self.factory = factory or StatementFactory()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(indent_unit={self.indent_unit!r})"

    # ---------- dispatch ----------

    def render(self, node: Statement, indent: int = 0) -> str:
        indent_prefix(indent, self.indent_unit)
        logger.debug("Rendering %s at indent %d as %s.", type(node).__name__, indent, self.name)
        if isinstance(node, CodeBlock):
            return self.render_block(node, indent)
        return self.render_statement(node, indent)

    def render_block(self, block: CodeBlock, indent: int) -> str:
        return "".join(self.render_statement(st, indent) for st in block.statements)

    def render_statement(self, node: Statement, indent: int) -> str:
        if isinstance(node, VariableDeclaration):
            return self._simple(self.render_declaration(node), indent)
        if isinstance(node, ExpressionStatement):
            return self._simple(self.render_expression(node.expression), indent)
        if isinstance(node, Assignment):
            return self._simple(self.render_assignment(node), indent)
        if isinstance(node, TryBlock):
            return self.render_try(node, indent)
        if isinstance(node, CodeBlock):
            return self.render_scope(node, indent)
        raise UnsupportedNodeError(node)

    def _simple(self, text: str, indent: int) -> str:
        return f"{indent_prefix(indent, self.indent_unit)}{text}{self.terminator}\n"

    def _builder(self, indent: int) -> CodeBuilder:
        return CodeBuilder(indent=self.indent_unit, level=indent)

    # ---------- inline fragments ----------

    def render_expression(self, expr: Expression | Variable) -> str:
        if isinstance(expr, Variable):
            return expr.name
        return expr.text

    def render_assignment(self, node: Assignment) -> str:
        return f"{node.target.name} = {self.render_expression(node.value)}"

    @abstractmethod
    def render_declaration(self, decl: VariableDeclaration) -> str: ...

    # ---------- compound statements ----------

    @abstractmethod
    def render_try(self, node: TryBlock, indent: int) -> str: ...

    @abstractmethod
    def render_scope(self, block: CodeBlock, indent: int) -> str: ...


class JavaDialect(Dialect):
    name = "java"
    terminator = ";"

    def render_declaration(self, decl: VariableDeclaration) -> str:
        s = f"{decl.variable.type_name} {decl.variable.name}"
        if decl.is_final:
            s = f"final {s}"
        if decl.initializer is not None:
            s += f" = {self.render_expression(decl.initializer)}"
        return s

    def render_try(self, node: TryBlock, indent: int) -> str:
        caught = self.factory.create_variable_declaration(node.catch.variable.variable, True)
        cb = self._builder(indent)
        cb.write("try {")
        cb.splice(self.render_block(node.block, indent + 1))
        cb.write(f"}} catch({self.render_declaration(caught)}) {{")
        cb.splice(self.render_block(node.catch.block, indent + 1))
        cb.write("}")
        return cb.render()

    def render_scope(self, block: CodeBlock, indent: int) -> str:
        cb = self._builder(indent)
        cb.write("{")
        cb.splice(self.render_block(block, indent + 1))
        cb.write("}")
        return cb.render()


class KotlinDialect(Dialect):
    name = "kotlin"

    def render_declaration(self, decl: VariableDeclaration) -> str:
        keyword = "val" if decl.is_final else "var"
        s = f"{keyword} {decl.variable.name}: {decl.variable.type_name}"
        if decl.initializer is not None:
            s += f" = {self.render_expression(decl.initializer)}"
        return s

    def render_try(self, node: TryBlock, indent: int) -> str:
        # catch parameters are implicitly read-only and take no `val`
        caught = node.catch.variable.variable
        cb = self._builder(indent)
        cb.write("try {")
        cb.splice(self.render_block(node.block, indent + 1))
        cb.write(f"}} catch({caught.name}: {caught.type_name}) {{")
        cb.splice(self.render_block(node.catch.block, indent + 1))
        cb.write("}")
        return cb.render()

    def render_scope(self, block: CodeBlock, indent: int) -> str:
        cb = self._builder(indent)
        cb.write("run {")
        cb.splice(self.render_block(block, indent + 1))
        cb.write("}")
        return cb.render()


class PythonDialect(Dialect):
    name = "python"

    def render_declaration(self, decl: VariableDeclaration) -> str:
        # finality has no runtime meaning here; annotations stay plain
        s = f"{decl.variable.name}: {decl.variable.type_name}"
        if decl.initializer is not None:
            s += f" = {self.render_expression(decl.initializer)}"
        return s

    def _suite(self, cb: CodeBuilder, block: CodeBlock, indent: int) -> None:
        body = self.render_block(block, indent + 1)
        if body:
            cb.splice(body)
        else:
            with cb.block():
                cb.write("pass")

    def render_try(self, node: TryBlock, indent: int) -> str:
        caught = node.catch.variable.variable
        cb = self._builder(indent)
        cb.write("try:")
        self._suite(cb, node.block, indent)
        cb.write(f"except {caught.type_name} as {caught.name}:")
        self._suite(cb, node.catch.block, indent)
        return cb.render()

    def render_scope(self, block: CodeBlock, indent: int) -> str:
        # no block scopes: statements are emitted in place
        return self.render_block(block, indent)


_DIALECTS: dict[str, type[Dialect]] = {
    "java": JavaDialect,
    "kotlin": KotlinDialect,
    "python": PythonDialect,
}


def available_dialects() -> tuple[str, ...]:
    return tuple(_DIALECTS)


def get_dialect(name: str = DEFAULT_DIALECT, indent_unit: str | None = None) -> Dialect:
    try:
        cls = _DIALECTS[name]
    except KeyError:
        raise UnknownDialectError(name, available_dialects()) from None
    if indent_unit is None:
        return cls()
    return cls(indent_unit=indent_unit)

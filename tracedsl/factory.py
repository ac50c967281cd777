from __future__ import annotations

from .model import (
    Assignment, CodeBlock, Expression, ExpressionStatement, TryBlockBuilder,
    TryCatchDescriptor, Variable, VariableDeclaration, as_expression,
)


class StatementFactory:
    """
    Single construction point for primitive nodes.

    Nodes are dialect-neutral; a ``Dialect`` owns a factory and uses it when
    a construct needs a derived node (e.g. the final declaration in a catch
    header). Every method is pure construction and never fails on valid types.
    """

    def create_variable(self, type_name: str, name: str) -> Variable:
        return Variable(name=name, type_name=type_name)

    def create_variable_declaration(
        self,
        variable: Variable,
        is_final: bool,
        initializer: Expression | Variable | str | None = None,
    ) -> VariableDeclaration:
        init = as_expression(initializer) if initializer is not None else None
        return VariableDeclaration(variable=variable, is_final=is_final, initializer=init)

    def create_expression(self, text: str) -> Expression:
        return Expression(text)

    def create_call(self, callee: str, *args: Expression | Variable | str) -> Expression:
        joined = ", ".join(as_expression(a).text for a in args)
        return Expression(f"{callee}({joined})")

    def create_expression_statement(self, expression: Expression | Variable | str) -> ExpressionStatement:
        return ExpressionStatement(as_expression(expression))

    def create_assignment(self, variable: Variable, value: Expression | Variable | str) -> Assignment:
        return Assignment(target=variable, value=as_expression(value))

    def create_code_block(self) -> CodeBlock:
        return CodeBlock()

    def create_catch_descriptor(self, variable: Variable, handler: CodeBlock) -> TryCatchDescriptor:
        return TryCatchDescriptor(self.create_variable_declaration(variable, True), handler)

    def create_try_block(self, body: CodeBlock) -> TryBlockBuilder:
        return TryBlockBuilder(body)

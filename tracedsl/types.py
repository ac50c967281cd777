from __future__ import annotations

from typing import Literal, NotRequired, TypedDict

from .model import Variable

StatementKind = Literal["declare", "assign", "expr", "try", "scope"]


class VariableSpec(TypedDict):
    name: str
    type: str


class CatchSpec(TypedDict):
    variable: VariableSpec
    body: list["StatementSpec"]


class StatementSpec(TypedDict):
    kind: StatementKind
    variable: NotRequired[VariableSpec]
    final: NotRequired[bool]
    init: NotRequired[str]
    value: NotRequired[str]
    expr: NotRequired[str]
    body: NotRequired[list["StatementSpec"]]
    catch: NotRequired[CatchSpec]


class BlockSpec(TypedDict):
    statements: list[StatementSpec]


def mk_variable(vs: VariableSpec) -> Variable:
    return Variable(name=vs["name"], type_name=vs["type"])

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import TreeSpecError
from .factory import StatementFactory
from .model import CodeBlock, Statement, Variable
from .types import mk_variable

logger = logging.getLogger(__name__)

_KINDS: tuple[str, ...] = ("declare", "assign", "expr", "try", "scope")


def _require_str(data: dict[str, Any], key: str, path: str) -> str:
    value: Any = data.get(key)
    if not isinstance(value, str) or not value:
        raise TreeSpecError(f"{path}.{key}", "missing or not a non-empty string")
    return value


def _variable(data: dict[str, Any], path: str) -> Variable:
    raw: Any = data.get("variable")
    if not isinstance(raw, dict):
        raise TreeSpecError(f"{path}.variable", "missing or not an object")
    _require_str(raw, "name", f"{path}.variable")
    _require_str(raw, "type", f"{path}.variable")
    return mk_variable(raw)  # type: ignore[arg-type]


def _statements(raw: Any, path: str, factory: StatementFactory) -> CodeBlock:
    if not isinstance(raw, list):
        raise TreeSpecError(path, "must be a list of statements")
    block = factory.create_code_block()
    for i, item in enumerate(raw):
        block.add(dict_to_statement(item, f"{path}[{i}]", factory))
    return block


def dict_to_statement(data: Any, path: str = "statement", factory: StatementFactory | None = None) -> Statement:
    factory = factory or StatementFactory()
    if not isinstance(data, dict):
        raise TreeSpecError(path, "statement must be an object")
    kind: Any = data.get("kind")
    if kind not in _KINDS:
        raise TreeSpecError(f"{path}.kind", f"expected one of {_KINDS}, got {kind!r}")

    if kind == "declare":
        init: Any = data.get("init")
        if init is not None and not isinstance(init, str):
            raise TreeSpecError(f"{path}.init", "must be a string")
        final: Any = data.get("final", False)
        if not isinstance(final, bool):
            raise TreeSpecError(f"{path}.final", "must be a boolean")
        return factory.create_variable_declaration(_variable(data, path), final, init)
    if kind == "assign":
        return factory.create_assignment(_variable(data, path), _require_str(data, "value", path))
    if kind == "expr":
        return factory.create_expression_statement(_require_str(data, "expr", path))
    if kind == "scope":
        return _statements(data.get("body"), f"{path}.body", factory)

    body = _statements(data.get("body"), f"{path}.body", factory)
    catch: Any = data.get("catch")
    if not isinstance(catch, dict):
        raise TreeSpecError(f"{path}.catch", "try statement requires a catch object")
    handler = _statements(catch.get("body"), f"{path}.catch.body", factory)
    builder = factory.create_try_block(body)
    builder.attach(factory.create_catch_descriptor(_variable(catch, f"{path}.catch"), handler))
    return builder.build()


def dict_to_block(data: Any, factory: StatementFactory | None = None) -> CodeBlock:
    """Build a ``CodeBlock`` from ``{"statements": [...]}``."""
    if not isinstance(data, dict):
        raise TreeSpecError("<root>", "document must be an object")
    return _statements(data.get("statements"), "statements", factory or StatementFactory())


def loads_block(text: str) -> CodeBlock:
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeSpecError("<root>", f"invalid JSON: {e}") from e
    return dict_to_block(data)


def load_block(path: str | Path) -> CodeBlock:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise TreeSpecError("<root>", f"invalid UTF-8: {e}") from e
    block = loads_block(text)
    logger.debug("Loaded %d top-level statements from %s.", len(block), p)
    return block

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import libcst as cst

from .dialects import PythonDialect
from .model import CodeBlock, TryBlock, iter_statements

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    errors: List[str]


class _TryCounter(cst.CSTVisitor):
    def __init__(self) -> None:
        super().__init__()
        self.tries = 0
        self.handlers = 0

    def visit_Try(self, node: cst.Try) -> None:
        self.tries += 1
        self.handlers += len(node.handlers)


def validate_python(code: str, expected_try_blocks: int | None = None) -> ValidationResult:
    """Syntax-check Python-dialect output; optionally compare its try count."""
    try:
        module = cst.parse_module(code)
    except cst.ParserSyntaxError as e:
        return ValidationResult(False, [f"LibCST parse error: {e}"])

    v = _TryCounter()
    module.visit(v)
    errors: List[str] = []
    if v.handlers != v.tries:
        errors.append(f"Expected one except clause per try, found {v.handlers} for {v.tries}.")
    if expected_try_blocks is not None and v.tries != expected_try_blocks:
        errors.append(f"Expected {expected_try_blocks} try statement(s), found {v.tries}.")
    return ValidationResult(len(errors) == 0, errors)


def validate_rendered(block: CodeBlock, dialect: PythonDialect | None = None) -> ValidationResult:
    """Render ``block`` as Python and check it against the tree's own shape."""
    d = dialect or PythonDialect()
    code = d.render(block)
    expected = sum(1 for st in iter_statements(block) if isinstance(st, TryBlock))
    res = validate_python(code, expected_try_blocks=expected)
    if not res.ok:
        logger.info("Rendered Python failed self-check: %s", "; ".join(res.errors))
    return res

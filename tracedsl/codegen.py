from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_INDENT_UNIT = "  "


def indent_prefix(indent: int, unit: str = DEFAULT_INDENT_UNIT) -> str:
    if indent < 0:
        raise ValueError(f"indent must be >= 0, got {indent}")
    return unit * indent


@dataclass
class CodeBuilder:
    """
    Minimal, explicit indentation-aware line collector.
    Starts at ``level`` and renders every line with a trailing newline, so
    rendered fragments concatenate without separators.
    """
    indent: str = DEFAULT_INDENT_UNIT
    level: int = 0
    lines: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        indent_prefix(self.level, self.indent)

    def write(self, line: str) -> None:
        self.lines.append(f"{self.indent * self.level}{line}")

    def splice(self, rendered: str) -> None:
        # already indented by whoever rendered it; rendered text ends in "\n"
        # and only "\n" separates lines, other line breaks stay inside a line
        if rendered:
            self.lines.extend(rendered.split("\n")[:-1])

    def block(self) -> "_Block":
        return _Block(self)

    def render(self) -> str:
        if not self.lines:
            return ""
        return "\n".join(self.lines) + "\n"


class _Block:
    def __init__(self, cb: CodeBuilder) -> None:
        self.cb = cb

    def __enter__(self) -> None:
        self.cb.level += 1

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cb.level -= 1

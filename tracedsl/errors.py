from __future__ import annotations


class TraceDslError(Exception):
    """Base class for every error raised by tracedsl."""


class MissingCatchDescriptor(TraceDslError):
    """A try block was built or rendered without a catch clause.

    This signals a bug in the code assembling the tree, not a runtime
    condition. It is never caught inside the library.
    """

    def __init__(self, message: str = "catch block must be specified") -> None:
        super().__init__(message)


class UnsupportedNodeError(TraceDslError, TypeError):
    def __init__(self, node: object) -> None:
        super().__init__(f"Unsupported node type '{type(node).__name__}'")
        self.node = node


class UnknownDialectError(TraceDslError, ValueError):
    def __init__(self, name: str, known: tuple[str, ...]) -> None:
        super().__init__(f"Unknown dialect '{name}'. Allowed: {known}")
        self.name = name


class TreeSpecError(TraceDslError, ValueError):
    """Malformed tree description; ``path`` locates the offending entry."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path

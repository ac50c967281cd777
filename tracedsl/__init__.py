from .model import (
    Variable, Expression, VariableDeclaration, ExpressionStatement, Assignment,
    CodeBlock, TryCatchDescriptor, TryBlock, TryBlockBuilder, Statement, iter_statements,
)
from .factory import StatementFactory
from .dialects import (
    Dialect, JavaDialect, KotlinDialect, PythonDialect, DEFAULT_DIALECT,
    available_dialects, get_dialect,
)
from .errors import (
    TraceDslError, MissingCatchDescriptor, UnsupportedNodeError, UnknownDialectError, TreeSpecError,
)
from .loader import dict_to_block, dict_to_statement, load_block, loads_block
from .validation import validate_python, validate_rendered, ValidationResult

__all__ = [
    # model
    "Variable", "Expression", "VariableDeclaration", "ExpressionStatement", "Assignment",
    "CodeBlock", "TryCatchDescriptor", "TryBlock", "TryBlockBuilder", "Statement", "iter_statements",
    # construction & rendering
    "StatementFactory", "Dialect", "JavaDialect", "KotlinDialect", "PythonDialect",
    "DEFAULT_DIALECT", "available_dialects", "get_dialect",
    # errors
    "TraceDslError", "MissingCatchDescriptor", "UnsupportedNodeError", "UnknownDialectError", "TreeSpecError",
    # loading & checks
    "dict_to_block", "dict_to_statement", "load_block", "loads_block",
    "validate_python", "validate_rendered", "ValidationResult",
]

"""DSL executor package.

Provides execution engine for DSL statements and expressions.
"""

from .execution_context import ExecutionContext, Scope
from .expression_evaluator import ExpressionEvaluator
from .flow_control import NORMAL, Completion, CompletionKind
from .function_registry import FunctionRegistry
from .statement_executor import StatementExecutor

__all__ = [
    "Completion",
    "CompletionKind",
    "ExecutionContext",
    "ExpressionEvaluator",
    "FunctionRegistry",
    "NORMAL",
    "Scope",
    "StatementExecutor",
]

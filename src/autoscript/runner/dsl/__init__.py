"""DSL package.

Domain Specific Language for defining automation functions in JSON.
"""

from .automation_function import AutomationFunction
from .errors import (
    ArgumentError,
    DivisionByZeroError,
    DuplicateDeclarationError,
    ExecutionError,
    HostCallError,
    LoadError,
    MethodNotFoundError,
    MissingReturnError,
    StackOverflowError,
    TypeMismatchError,
    UndefinedVariableError,
)
from .instruction_set import InstructionSet
from .model.parameter import Parameter
from .types import TypeTag
from .value import VOID, Value

__all__ = [
    "ArgumentError",
    "AutomationFunction",
    "DivisionByZeroError",
    "DuplicateDeclarationError",
    "ExecutionError",
    "HostCallError",
    "InstructionSet",
    "LoadError",
    "MethodNotFoundError",
    "MissingReturnError",
    "Parameter",
    "StackOverflowError",
    "TypeMismatchError",
    "TypeTag",
    "UndefinedVariableError",
    "VOID",
    "Value",
]

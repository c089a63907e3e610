"""DSL exceptions.

Load-time errors abort loading of a whole document. Run-time errors abort
the current function invocation and propagate to the caller of
``execute``; effects of statements that already ran are kept.
"""

from typing import Any

from ...base_exceptions import AutoscriptException


class LoadError(AutoscriptException):
    """Raised when a document cannot be turned into an InstructionSet.

    Attributes:
        problems: Every problem found, in document order
    """

    code = "LOAD_ERROR"

    def __init__(self, problems: list[str] | str, **kwargs: Any) -> None:
        """Initialize with one or more problem descriptions."""
        if isinstance(problems, str):
            problems = [problems]
        self.problems = list(problems)
        if len(self.problems) == 1:
            message = self.problems[0]
        else:
            message = f"{len(self.problems)} problems: " + "; ".join(self.problems)
        super().__init__(message, context={"problems": self.problems, **kwargs})


class ExecutionError(AutoscriptException):
    """Base exception for errors raised while running a function.

    Attributes:
        function_name: Automation function that was executing, when known
    """

    code = "EXECUTION_ERROR"

    def __init__(self, message: str, function_name: str | None = None, **kwargs: Any) -> None:
        """Initialize with error details."""
        super().__init__(message, context={"function_name": function_name, **kwargs})
        self.function_name = function_name


class UndefinedVariableError(ExecutionError):
    """Raised when a variable is read or assigned but not declared in scope."""

    code = "UNDEFINED_VARIABLE"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(f"Variable '{name}' is not defined", variable=name, **kwargs)
        self.name = name


class DuplicateDeclarationError(ExecutionError):
    """Raised when a name is declared twice in the same scope."""

    code = "DUPLICATE_DECLARATION"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Variable '{name}' is already declared in this scope", variable=name, **kwargs
        )
        self.name = name


class TypeMismatchError(ExecutionError):
    """Raised when a value's type is not acceptable where it is used."""

    code = "TYPE_MISMATCH"


class DivisionByZeroError(ExecutionError):
    """Raised by ``/`` and ``%`` when the right operand is zero."""

    code = "DIVISION_BY_ZERO"


class MethodNotFoundError(ExecutionError):
    """Raised when a call cannot be resolved to a function or host method."""

    code = "METHOD_NOT_FOUND"


class ArgumentError(ExecutionError):
    """Raised when call arguments do not match a function's parameters."""

    code = "ARGUMENT_ERROR"


class MissingReturnError(ExecutionError):
    """Raised when a non-void function finishes without returning a value."""

    code = "MISSING_RETURN"


class StackOverflowError(ExecutionError):
    """Raised when nested function calls exceed the configured depth."""

    code = "STACK_OVERFLOW"


class HostCallError(ExecutionError):
    """Raised when a host-bound callable fails.

    The original exception is chained as ``__cause__``.
    """

    code = "HOST_CALL_ERROR"

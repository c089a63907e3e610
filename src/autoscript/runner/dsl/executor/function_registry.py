"""Function registry and invoker.

Resolves call names to automation functions or host callables and runs
automation functions in their own call frames.
"""

import sys
from collections.abc import Iterator
from contextlib import contextmanager

from ....config import EngineSettings, get_settings
from ....logging import get_logger
from ..automation_function import AutomationFunction
from ..instruction_set import InstructionSet
from ..errors import (
    ArgumentError,
    ExecutionError,
    HostCallError,
    MethodNotFoundError,
    MissingReturnError,
    StackOverflowError,
    TypeMismatchError,
)
from ..host.host_binding import HostBinding, HostCallable
from ..host.standard_binding import StandardHostBinding
from ..types import TypeTag, is_compatible
from ..value import VOID, Value
from .execution_context import ExecutionContext, bind_arguments
from .expression_evaluator import ExpressionEvaluator
from .statement_executor import StatementExecutor

logger = get_logger(__name__)

# Interpreter frames one DSL call may use, nested blocks and expressions included.
FRAMES_PER_CALL = 100


@contextmanager
def _recursion_headroom(max_call_depth: int) -> Iterator[None]:
    """Raise the interpreter recursion limit for the duration of an outermost call."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(previous + max_call_depth * FRAMES_PER_CALL)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class FunctionRegistry:
    """Resolves and invokes functions for one InstructionSet.

    Resolution order for a call:

    1. With a receiver, a host method on the receiver value.
    2. An automation function declared in the InstructionSet.
    3. A global function provided by the host.
    4. Otherwise :class:`MethodNotFoundError`.

    Each automation function call gets a new :class:`ExecutionContext`, so
    recursive calls never share variables. Calls nested deeper than
    ``settings.max_call_depth`` fail with :class:`StackOverflowError`.

    Attributes:
        instruction_set: The loaded functions
        host: Binding used for everything the script does not define
        settings: Engine settings in effect
        evaluator: Expression evaluator bound to this registry
        executor: Statement executor bound to this registry
    """

    def __init__(
        self,
        instruction_set: InstructionSet,
        host: HostBinding | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        """Initialize registry.

        Args:
            instruction_set: Functions that can be called by name
            host: Host binding; an empty StandardHostBinding when not given
            settings: Engine settings; the global settings when not given
        """
        self.instruction_set = instruction_set
        self.host = host if host is not None else StandardHostBinding()
        self.settings = settings or get_settings()
        self._functions = {function.name: function for function in instruction_set}
        self.evaluator = ExpressionEvaluator(self)
        self.executor = StatementExecutor(self.evaluator)

    def get(self, name: str) -> AutomationFunction | None:
        return self._functions.get(name)

    def invoke(
        self,
        name: str,
        args: list[Value],
        receiver: Value | None = None,
        context: ExecutionContext | None = None,
    ) -> Value:
        """Resolve ``name`` and call it.

        Args:
            name: Function or method name
            args: Evaluated arguments
            receiver: Receiver value for method calls
            context: Calling frame; None for a call from the host

        Returns:
            The result, VOID when the callee produced none

        Raises:
            ExecutionError: If resolution or the call fails
        """
        caller = context.function_name if context else None

        if receiver is not None:
            method = self.host.resolve_method(receiver, name)
            if method is None:
                raise MethodNotFoundError(
                    f"No method '{name}' on {receiver.type.value} value", function_name=caller
                )
            return self._call_host(method, name, args, caller)

        function = self._functions.get(name)
        if function is not None:
            depth = context.depth + 1 if context else 1
            return self.call_function(function, args, depth)

        global_function = self.host.resolve_global_function(name)
        if global_function is not None:
            return self._call_host(global_function, name, args, caller)

        raise MethodNotFoundError(f"No function named '{name}'", function_name=caller)

    def call_function(
        self, function: AutomationFunction, args: list[Value], depth: int = 1
    ) -> Value:
        """Run an automation function in a new call frame.

        Args:
            function: Function to run
            args: Arguments, bound to parameters by position
            depth: Call depth of the new frame

        Returns:
            The returned value, or VOID for a void function

        Raises:
            ArgumentError: If the arguments do not match the parameters
            MissingReturnError: If a non-void function returns no value
            StackOverflowError: If ``depth`` exceeds the configured ceiling
        """
        if depth > self.settings.max_call_depth:
            raise StackOverflowError(
                f"Call depth {depth} exceeds the limit of {self.settings.max_call_depth}",
                function_name=function.name,
            )

        self._check_arguments(function, args)
        context = ExecutionContext(
            function.name, depth, widen_integer=self.settings.widen_integer_to_double
        )
        bind_arguments(context, function.parameters, args)

        logger.debug("function_invoked", function=function.name, depth=depth, arity=len(args))
        try:
            if depth == 1:
                with _recursion_headroom(self.settings.max_call_depth):
                    completion = self.executor.execute_statements(function.statements, context)
            else:
                completion = self.executor.execute_statements(function.statements, context)
        except RecursionError:
            raise StackOverflowError(
                f"Interpreter recursion limit reached at call depth {depth}",
                function_name=function.name,
            ) from None

        result = self._function_result(function, completion.value)
        logger.debug(
            "function_completed", function=function.name, depth=depth, result_type=result.type.value
        )
        return result

    def new_builder(self, builder_type: str, context: ExecutionContext | None = None) -> Value:
        """Ask the host for a fresh builder of ``builder_type``."""
        caller = context.function_name if context else None
        try:
            builder = self.host.new_builder(builder_type)
        except ExecutionError:
            raise
        except Exception as e:
            raise HostCallError(
                f"Error creating builder '{builder_type}': {e}", function_name=caller
            ) from e
        return Value(TypeTag.OBJECT, builder)

    def _function_result(self, function: AutomationFunction, value: Value | None) -> Value:
        return_type = function.return_type
        if value is None:
            if return_type is TypeTag.VOID:
                return VOID
            raise MissingReturnError(
                f"Function '{function.name}' must return a {return_type.value}",
                function_name=function.name,
            )

        if return_type is TypeTag.VOID:
            raise TypeMismatchError(
                f"Void function '{function.name}' returned a {value.type.value}",
                function_name=function.name,
            )
        if not is_compatible(return_type, value.type, self.settings.widen_integer_to_double):
            raise TypeMismatchError(
                f"Function '{function.name}' returned {value.type.value}, "
                f"declared {return_type.value}",
                function_name=function.name,
            )
        return value.as_type(return_type)

    def _check_arguments(self, function: AutomationFunction, args: list[Value]) -> None:
        if len(args) != len(function.parameters):
            raise ArgumentError(
                f"Function '{function.name}' expects {len(function.parameters)} "
                f"argument(s), got {len(args)}",
                function_name=function.name,
            )
        for parameter, arg in zip(function.parameters, args):
            if not is_compatible(parameter.type, arg.type, self.settings.widen_integer_to_double):
                raise ArgumentError(
                    f"Argument '{parameter.name}' of '{function.name}' must be "
                    f"{parameter.type.value}, got {arg.type.value}",
                    function_name=function.name,
                )

    @staticmethod
    def _call_host(
        callable_: HostCallable, name: str, args: list[Value], caller: str | None
    ) -> Value:
        try:
            result = callable_(*[arg.value for arg in args])
        except ExecutionError:
            raise
        except Exception as e:
            raise HostCallError(f"Error calling '{name}': {e}", function_name=caller) from e
        return Value.of(result)

    def __repr__(self) -> str:
        return f"FunctionRegistry(functions={list(self._functions)}, host={self.host!r})"

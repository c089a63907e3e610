"""Engine entry points.

``load`` turns a document into an InstructionSet and ``execute`` runs one of
its functions against a host binding. :class:`Engine` keeps an InstructionSet,
host and settings together for repeated calls.

Example:
    >>> instruction_set = load(document)
    >>> engine = Engine(instruction_set, host)
    >>> engine.execute("add", [5, 3])
    Value(type=<TypeTag.INTEGER: 'integer'>, value=8)
    >>> result = engine.run("add", [5])
    >>> result.success
    False
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..config import EngineSettings, get_settings
from .dsl.errors import ExecutionError, MethodNotFoundError
from .dsl.executor.function_registry import FunctionRegistry
from .dsl.host.host_binding import HostBinding
from .dsl.instruction_set import InstructionSet
from .dsl.types import TypeTag
from .dsl.value import Value
from .json.dsl_parser import DSLParser


def load(
    document: str | bytes | dict[str, Any] | Path, settings: EngineSettings | None = None
) -> InstructionSet:
    """Load a document into an InstructionSet.

    Args:
        document: JSON text, an already parsed dict, or a path to a JSON file
        settings: Engine settings used by the static checks

    Returns:
        The loaded InstructionSet

    Raises:
        LoadError: If the document is malformed or fails static validation
    """
    parser = DSLParser(settings)
    if isinstance(document, Path):
        return parser.parse_file(document)
    if isinstance(document, (str, bytes)):
        return parser.parse_json(document)
    return parser.parse_dict(document)


def load_file(path: str | Path, settings: EngineSettings | None = None) -> InstructionSet:
    return DSLParser(settings).parse_file(path)


def execute(
    instruction_set: InstructionSet,
    function_name: str,
    args: Sequence[Any] = (),
    host: HostBinding | None = None,
    settings: EngineSettings | None = None,
) -> Value | None:
    """Run one automation function.

    Args:
        instruction_set: Loaded functions
        function_name: Function to run
        args: Arguments as Values or plain Python values
        host: Host binding for receivers, global functions and builders
        settings: Engine settings

    Returns:
        The returned Value, or None for a void function

    Raises:
        ExecutionError: If the function cannot be found or fails
    """
    return Engine(instruction_set, host, settings).execute(function_name, args)


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of :meth:`Engine.run`.

    Attributes:
        success: Whether the function completed without error
        value: Returned value; None for void functions and failures
        error: The error that stopped execution, if any
        function_name: Function that was run
    """

    success: bool
    value: Value | None = None
    error: ExecutionError | None = None
    function_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form for reports; the value keeps its type tag."""
        result: dict[str, Any] = {"success": self.success, "function_name": self.function_name}
        if self.value is not None:
            result["value"] = {"type": self.value.type.value, "value": self.value.value}
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result


class Engine:
    """Runs the functions of one InstructionSet against a host.

    Each call to :meth:`execute` starts from a fresh call frame; nothing is
    kept between calls except whatever state the host objects hold.

    Attributes:
        instruction_set: Loaded functions
        host: Host binding
        settings: Engine settings in effect
        registry: Function registry used for every call
    """

    def __init__(
        self,
        instruction_set: InstructionSet,
        host: HostBinding | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        self.instruction_set = instruction_set
        self.settings = settings or get_settings()
        self.registry = FunctionRegistry(instruction_set, host, self.settings)
        self.host = self.registry.host

    def execute(self, function_name: str, args: Sequence[Any] = ()) -> Value | None:
        """Run ``function_name`` with positional ``args``.

        Returns:
            The returned Value, or None for a void function

        Raises:
            MethodNotFoundError: If the InstructionSet has no such function
            ExecutionError: If the function fails
        """
        function = self.registry.get(function_name)
        if function is None:
            raise MethodNotFoundError(f"No automation function named '{function_name}'")

        values = [_argument_value(arg) for arg in args]
        result = self.registry.call_function(function, values)
        return None if result.is_void else result

    def run(self, function_name: str, args: Sequence[Any] = ()) -> ExecutionResult:
        """Like :meth:`execute`, but report failure as a result instead of raising."""
        try:
            value = self.execute(function_name, args)
        except ExecutionError as e:
            return ExecutionResult(False, error=e, function_name=function_name)
        return ExecutionResult(True, value=value, function_name=function_name)

    def function_names(self) -> list[str]:
        return self.instruction_set.function_names()

    def signature(self, function_name: str) -> str:
        """Human-readable signature of a function.

        Raises:
            MethodNotFoundError: If the InstructionSet has no such function
        """
        function = self.instruction_set.get_function(function_name)
        if function is None:
            raise MethodNotFoundError(f"No automation function named '{function_name}'")
        return function.signature()

    def __repr__(self) -> str:
        return f"Engine(functions={self.function_names()})"


def _argument_value(arg: Any) -> Value:
    if arg is None:
        return Value(TypeTag.OBJECT, None)
    return Value.of(arg)

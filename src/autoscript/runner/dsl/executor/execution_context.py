"""Variable scopes and call frames for DSL execution.

A :class:`Scope` maps variable names to typed values and is chained to its
enclosing scope. An :class:`ExecutionContext` is the call frame of one
function invocation: the root scope holding the parameters plus the chain of
block scopes currently open inside it.
"""

from dataclasses import dataclass
from typing import Any

from ..errors import DuplicateDeclarationError, TypeMismatchError, UndefinedVariableError
from ..types import TypeTag, is_compatible
from ..value import Value


@dataclass
class Binding:
    """A declared variable: its declared type and current value."""

    type: TypeTag
    value: Value


class Scope:
    """A lexical scope.

    Lookups and assignments search this scope and then its parents, never
    siblings or children. A name may be declared at most once per scope, but
    may shadow a name declared in an enclosing scope.

    Example:
        ```python
        root = Scope()
        root.declare("x", TypeTag.INTEGER, Value.of(10))

        inner = root.child()
        inner.declare("y", TypeTag.INTEGER, Value.of(20))
        inner.assign("x", Value.of(15))   # updates root's x

        root.lookup("x")   # Value(INTEGER, 15)
        root.lookup("y")   # raises UndefinedVariableError
        ```
    """

    def __init__(self, parent: "Scope | None" = None, widen_integer: bool | None = None) -> None:
        """Initialize scope.

        Args:
            parent: Enclosing scope, None for a function's root scope
            widen_integer: Accept integers for double variables; inherited
                from the parent when not given
        """
        self.parent = parent
        if widen_integer is None:
            widen_integer = parent.widen_integer if parent else True
        self.widen_integer = widen_integer
        self._bindings: dict[str, Binding] = {}

    def child(self) -> "Scope":
        """Create a scope nested in this one."""
        return Scope(self)

    def declare(
        self, name: str, type: TypeTag, value: Value, function_name: str | None = None
    ) -> None:
        """Declare a variable in this scope.

        Raises:
            DuplicateDeclarationError: If ``name`` is already declared in this scope
            TypeMismatchError: If ``value`` is not compatible with ``type``
        """
        if name in self._bindings:
            raise DuplicateDeclarationError(name, function_name=function_name)
        self._check_type(name, type, value, function_name)
        self._bindings[name] = Binding(type, value.as_type(type))

    def lookup(self, name: str, function_name: str | None = None) -> Value:
        """Get the value of the nearest variable called ``name``.

        Raises:
            UndefinedVariableError: If no enclosing scope declares ``name``
        """
        return self._find(name, function_name).value

    def assign(self, name: str, value: Value, function_name: str | None = None) -> None:
        """Update the nearest variable called ``name``.

        Raises:
            UndefinedVariableError: If no enclosing scope declares ``name``
            TypeMismatchError: If ``value`` is not compatible with the declared type
        """
        binding = self._find(name, function_name)
        self._check_type(name, binding.type, value, function_name)
        binding.value = value.as_type(binding.type)

    def has(self, name: str) -> bool:
        scope: Scope | None = self
        while scope is not None:
            if name in scope._bindings:
                return True
            scope = scope.parent
        return False

    def declared_type(self, name: str) -> TypeTag:
        return self._find(name).type

    def local_names(self) -> list[str]:
        return list(self._bindings)

    def _find(self, name: str, function_name: str | None = None) -> Binding:
        scope: Scope | None = self
        while scope is not None:
            binding = scope._bindings.get(name)
            if binding is not None:
                return binding
            scope = scope.parent
        raise UndefinedVariableError(name, function_name=function_name)

    def _check_type(
        self, name: str, declared: TypeTag, value: Value, function_name: str | None
    ) -> None:
        if not is_compatible(declared, value.type, self.widen_integer):
            raise TypeMismatchError(
                f"Cannot store {value.type.value} in '{name}' declared as {declared.value}",
                function_name=function_name,
                variable=name,
            )

    def __repr__(self) -> str:
        names = ", ".join(f"{n}: {b.type.value}" for n, b in self._bindings.items())
        return f"Scope({{{names}}}, parent={'yes' if self.parent else 'no'})"


class ExecutionContext:
    """Call frame for one function invocation.

    The context owns a chain of scopes. ``push_scope`` opens a child scope for
    a block (an if-branch or one loop iteration) and ``pop_scope`` discards it,
    together with every binding made in it. Recursive calls get independent
    contexts, so no scope is ever shared between invocations.

    Example:
        ```python
        context = ExecutionContext("calculateSum")
        context.declare("sum", TypeTag.INTEGER, Value.of(0))

        context.push_scope()
        try:
            context.declare("item", TypeTag.INTEGER, Value.of(3))
            context.assign("sum", Value.of(3))
        finally:
            context.pop_scope()

        context.lookup("sum")   # Value(INTEGER, 3)
        ```

    Attributes:
        function_name: Function being executed, used in error messages
        depth: Number of automation function frames below and including this one
        scope: The innermost open scope
    """

    def __init__(
        self,
        function_name: str | None = None,
        depth: int = 1,
        widen_integer: bool = True,
    ) -> None:
        """Initialize execution context.

        Args:
            function_name: Name of the function this frame executes
            depth: Call depth of this frame
            widen_integer: Accept integers for double variables
        """
        self.function_name = function_name
        self.depth = depth
        self.root = Scope(widen_integer=widen_integer)
        self.scope = self.root

    def push_scope(self) -> Scope:
        """Open a new scope nested in the current one.

        Returns:
            The new current scope
        """
        self.scope = self.scope.child()
        return self.scope

    def pop_scope(self) -> Scope:
        """Close the current scope, discarding its bindings.

        Returns:
            The scope that was closed

        Raises:
            RuntimeError: If attempting to pop the frame's root scope
        """
        if self.scope.parent is None:
            raise RuntimeError("Cannot pop the root scope of a call frame")
        closed = self.scope
        self.scope = closed.parent
        return closed

    def declare(self, name: str, type: TypeTag, value: Value) -> None:
        self.scope.declare(name, type, value, self.function_name)

    def lookup(self, name: str) -> Value:
        return self.scope.lookup(name, self.function_name)

    def assign(self, name: str, value: Value) -> None:
        self.scope.assign(name, value, self.function_name)

    def has_variable(self, name: str) -> bool:
        return self.scope.has(name)

    def scope_depth(self) -> int:
        depth = 0
        scope: Scope | None = self.scope
        while scope is not None:
            depth += 1
            scope = scope.parent
        return depth

    def __repr__(self) -> str:
        return (
            f"ExecutionContext(function={self.function_name!r}, depth={self.depth}, "
            f"scopes={self.scope_depth()})"
        )


def bind_arguments(context: ExecutionContext, parameters: list[Any], args: list[Value]) -> None:
    """Bind positional arguments as the initial entries of a frame's root scope."""
    for parameter, arg in zip(parameters, args):
        context.root.declare(parameter.name, parameter.type, arg, context.function_name)

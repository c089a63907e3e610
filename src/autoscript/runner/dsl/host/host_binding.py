"""Host binding interface definition.

The engine never calls into the outside world directly. Every name it does
not define itself (receivers such as ``logger`` or ``browser``, global
functions, builder types) is resolved through a :class:`HostBinding`.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from ..value import Value

HostCallable = Callable[..., Any]
"""A host-provided callable. It receives plain Python argument values and
returns a plain Python value, or None for no result."""


class HostBinding(ABC):
    """Interface for the capabilities a host exposes to automation scripts.

    Calls made through the binding are synchronous; the engine thread is
    blocked until they return and applies no timeout of its own.
    """

    @abstractmethod
    def resolve_object(self, name: str) -> Value | None:
        """Resolve a receiver name that is not a variable in scope.

        Args:
            name: Receiver name used in a method call, e.g. "logger"

        Returns:
            The receiver value, or None if the host does not know the name
        """
        ...

    @abstractmethod
    def resolve_global_function(self, name: str) -> HostCallable | None:
        """Resolve a function called without a receiver.

        Only consulted when no automation function has that name.

        Args:
            name: Function name

        Returns:
            Callable, or None if the host does not provide it
        """
        ...

    @abstractmethod
    def resolve_method(self, receiver: Value, method: str) -> HostCallable | None:
        """Resolve a method on a receiver value.

        Args:
            receiver: The receiver, already evaluated
            method: Method name

        Returns:
            Callable bound to the receiver, or None if there is no such method
        """
        ...

    @abstractmethod
    def new_builder(self, builder_type: str) -> Any:
        """Create a fresh builder instance for a builder expression.

        Args:
            builder_type: Builder type name, e.g. "ObjectCollection.Builder"

        Returns:
            A new builder object

        Raises:
            MethodNotFoundError: If the host has no builder of that type
        """
        ...

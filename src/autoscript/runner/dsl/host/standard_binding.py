"""In-process host binding backed by registries of objects and callables."""

import re
from collections.abc import Callable
from functools import partial
from typing import Any

from ..errors import MethodNotFoundError
from ..types import TypeTag
from ..value import Value
from .host_binding import HostBinding, HostCallable


def _index_of(items: list[Any], item: Any) -> int:
    try:
        return items.index(item)
    except ValueError:
        return -1


def _substring(text: str, start: int, end: int | None = None) -> str:
    return text[start:end]


STRING_METHODS: dict[str, Callable[..., Any]] = {
    "contains": lambda text, part: part in text,
    "startsWith": lambda text, prefix: text.startswith(prefix),
    "endsWith": lambda text, suffix: text.endswith(suffix),
    "length": len,
    "isEmpty": lambda text: not text,
    "toUpperCase": str.upper,
    "toLowerCase": str.lower,
    "trim": str.strip,
    "indexOf": lambda text, part: text.find(part),
    "substring": _substring,
    "equals": lambda text, other: text == other,
    "split": lambda text, separator: text.split(separator),
    "replace": lambda text, old, new: text.replace(old, new),
}
"""Built-in methods available on string values."""

ARRAY_METHODS: dict[str, Callable[..., Any]] = {
    "size": len,
    "isEmpty": lambda items: not items,
    "get": lambda items, index: items[index],
    "contains": lambda items, item: item in items,
    "indexOf": _index_of,
}
"""Built-in methods available on array values."""

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """Convert a camelCase method name to snake_case (``withImages`` -> ``with_images``)."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class StandardHostBinding(HostBinding):
    """Host binding for embedding the engine in a Python process.

    Host objects are registered by name and their public methods become
    callable from scripts. A method name is tried as written and then in
    snake_case, so ``logger.logMessage`` reaches ``Logger.log_message``.
    Strings and arrays get a small set of built-in methods.

    Example:
        ```python
        class Logger:
            def log(self, message):
                print(message)

        host = StandardHostBinding()
        host.register_object("logger", Logger())
        host.register_function("now", time.time)
        host.register_builder("Order.Builder", OrderBuilder)
        ```
    """

    def __init__(
        self,
        objects: dict[str, Any] | None = None,
        functions: dict[str, HostCallable] | None = None,
        builders: dict[str, Callable[[], Any]] | None = None,
    ) -> None:
        """Initialize the binding.

        Args:
            objects: Receiver objects by name
            functions: Global functions by name
            builders: Builder factories by builder type
        """
        self._objects: dict[str, Any] = dict(objects or {})
        self._functions: dict[str, HostCallable] = dict(functions or {})
        self._builders: dict[str, Callable[[], Any]] = dict(builders or {})

    def register_object(self, name: str, obj: Any) -> None:
        """Expose ``obj`` to scripts as receiver ``name``."""
        self._objects[name] = obj

    def register_function(self, name: str, function: HostCallable) -> None:
        """Expose ``function`` as a global function."""
        self._functions[name] = function

    def register_builder(self, builder_type: str, factory: Callable[[], Any]) -> None:
        """Register a zero-argument factory creating builders of ``builder_type``."""
        self._builders[builder_type] = factory

    def resolve_object(self, name: str) -> Value | None:
        if name not in self._objects:
            return None
        return Value.of(self._objects[name])

    def resolve_global_function(self, name: str) -> HostCallable | None:
        return self._functions.get(name)

    def resolve_method(self, receiver: Value, method: str) -> HostCallable | None:
        if receiver.type is TypeTag.STRING:
            builtin = STRING_METHODS.get(method)
            return partial(builtin, receiver.value) if builtin else None
        if receiver.type is TypeTag.ARRAY:
            builtin = ARRAY_METHODS.get(method)
            return partial(builtin, receiver.value) if builtin else None
        if receiver.type is TypeTag.OBJECT and receiver.value is not None:
            return self._resolve_attribute(receiver.value, method)
        return None

    def new_builder(self, builder_type: str) -> Any:
        factory = self._builders.get(builder_type)
        if factory is None:
            raise MethodNotFoundError(f"Unknown builder type '{builder_type}'")
        return factory()

    @staticmethod
    def _resolve_attribute(obj: Any, method: str) -> HostCallable | None:
        for name in dict.fromkeys((method, to_snake_case(method))):
            if name.startswith("_"):
                continue
            attribute = getattr(obj, name, None)
            if callable(attribute):
                return attribute
        return None

    def __repr__(self) -> str:
        return (
            f"StandardHostBinding(objects={sorted(self._objects)}, "
            f"functions={sorted(self._functions)}, builders={sorted(self._builders)})"
        )

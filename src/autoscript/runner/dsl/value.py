"""Tagged runtime values."""

from dataclasses import dataclass
from typing import Any

from .types import TypeTag, type_of

_DEFAULTS: dict[TypeTag, Any] = {
    TypeTag.BOOLEAN: False,
    TypeTag.INTEGER: 0,
    TypeTag.DOUBLE: 0.0,
    TypeTag.STRING: "",
    TypeTag.OBJECT: None,
}


@dataclass(frozen=True)
class Value:
    """A runtime value: a type tag plus its payload.

    Arrays hold a plain Python list of payloads; elements are wrapped into
    Values only when they are read (e.g. by a forEach loop). Objects hold
    whatever the host binding produced (builders, dicts, host objects).

    Example:
        >>> Value.of(5)
        Value(type=<TypeTag.INTEGER: 'integer'>, value=5)
        >>> Value.of([1, 2]).type
        <TypeTag.ARRAY: 'array'>
    """

    type: TypeTag
    value: Any = None

    @classmethod
    def of(cls, payload: Any) -> "Value":
        """Wrap a plain Python value, inferring its tag.

        Values are returned unchanged and tuples become lists.
        """
        if isinstance(payload, Value):
            return payload
        tag = type_of(payload)
        if tag is TypeTag.ARRAY:
            return cls(tag, [item.value if isinstance(item, Value) else item for item in payload])
        return cls(tag, payload)

    @classmethod
    def default_for(cls, tag: TypeTag) -> "Value":
        """Value held by a declaration that has no initial value."""
        if tag is TypeTag.ARRAY:
            return cls(tag, [])
        return cls(tag, _DEFAULTS[tag])

    @property
    def is_void(self) -> bool:
        return self.type is TypeTag.VOID

    def as_type(self, tag: TypeTag) -> "Value":
        """Re-tag this value for storage under a declared type.

        Integers stored as doubles are converted; storing under ``object``
        keeps the original tag so the payload can still be used as itself.
        """
        if tag is TypeTag.DOUBLE and self.type is TypeTag.INTEGER:
            return Value(TypeTag.DOUBLE, float(self.value))
        return self

    def display(self) -> str:
        """Render the value the way string concatenation shows it."""
        return _display(self.value)


VOID = Value(TypeTag.VOID)
"""The absent result of a void function or host call."""


def _display(payload: Any) -> str:
    if payload is None:
        return "null"
    if isinstance(payload, bool):
        return "true" if payload else "false"
    if isinstance(payload, (list, tuple)):
        return "[" + ", ".join(_display(item) for item in payload) + "]"
    if isinstance(payload, dict):
        entries = (f"{_display(key)}: {_display(item)}" for key, item in payload.items())
        return "{" + ", ".join(entries) + "}"
    return str(payload)

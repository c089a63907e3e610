"""Type tags for the DSL.

Every runtime value carries exactly one of these tags. ``void`` only ever
describes the absence of a function result.
"""

from enum import Enum
from typing import Any


class TypeTag(str, Enum):
    """Primitive type tags used by declarations, parameters and values."""

    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER = "integer"
    DOUBLE = "double"
    VOID = "void"
    OBJECT = "object"
    ARRAY = "array"

    @classmethod
    def parse(cls, name: str) -> "TypeTag":
        """Parse a type name from a document.

        Args:
            name: Type name such as "integer" or "array"

        Returns:
            The matching TypeTag

        Raises:
            ValueError: If the name is not a known type tag
        """
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown type '{name}'") from None

    @property
    def is_numeric(self) -> bool:
        return self in (TypeTag.INTEGER, TypeTag.DOUBLE)


VALUE_TYPES = frozenset(tag for tag in TypeTag if tag is not TypeTag.VOID)
"""Tags that may be held by a variable, parameter or literal."""


def type_of(payload: Any) -> TypeTag:
    """Infer the type tag of a plain Python value.

    ``bool`` is checked before ``int`` because it is a subclass of it.
    """
    if payload is None:
        return TypeTag.VOID
    if isinstance(payload, bool):
        return TypeTag.BOOLEAN
    if isinstance(payload, int):
        return TypeTag.INTEGER
    if isinstance(payload, float):
        return TypeTag.DOUBLE
    if isinstance(payload, str):
        return TypeTag.STRING
    if isinstance(payload, (list, tuple)):
        return TypeTag.ARRAY
    return TypeTag.OBJECT


def is_compatible(declared: TypeTag, actual: TypeTag, widen_integer: bool = True) -> bool:
    """Check whether a value of ``actual`` type may be stored as ``declared``.

    Args:
        declared: The declared type of the variable, parameter or return
        actual: The type tag of the value
        widen_integer: Accept integer values for a double declaration

    Returns:
        True if the value is compatible
    """
    if actual is TypeTag.VOID:
        return declared is TypeTag.VOID
    if declared is actual:
        return True
    if declared is TypeTag.OBJECT:
        return True
    return widen_integer and declared is TypeTag.DOUBLE and actual is TypeTag.INTEGER


def are_comparable(left: TypeTag, right: TypeTag) -> bool:
    """Check whether two tags may be ordered with ``<``, ``>``, ``<=``, ``>=``."""
    if left.is_numeric and right.is_numeric:
        return True
    return left is right and left in (TypeTag.STRING, TypeTag.BOOLEAN)


def literal_matches(value_type: TypeTag, value: Any) -> bool:
    """Check that a literal's JSON payload agrees with its declared tag.

    A double literal may be written as a whole number (``100``) in JSON.
    """
    if value_type is TypeTag.DOUBLE:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if value_type is TypeTag.OBJECT:
        return value is None or isinstance(value, dict)
    return type_of(value) is value_type

"""Helpers for reading required fields out of DSL JSON objects."""

from collections.abc import Callable
from typing import Any, TypeVar

from ..errors import LoadError
from ..types import VALUE_TYPES, TypeTag

T = TypeVar("T")

_MISSING = object()


def ensure_object(data: Any, owner: str) -> dict[str, Any]:
    """Check that ``data`` is a JSON object."""
    if not isinstance(data, dict):
        raise LoadError(f"{owner} must be a JSON object, got {type(data).__name__}")
    return data


def require_field(
    data: dict[str, Any], key: str, owner: str, expected: type | tuple[type, ...] = str
) -> Any:
    """Read a required field and check its JSON type.

    Args:
        data: The JSON object
        key: Field name
        owner: Description of the object for error messages, e.g. "if statement"
        expected: Accepted Python type(s) of the field value

    Returns:
        The field value

    Raises:
        LoadError: If the field is missing, has the wrong type, or is an empty string
    """
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise LoadError(f"{owner} is missing required field '{key}'")
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise LoadError(f"{owner} field '{key}' has invalid value {value!r}")
    if isinstance(value, str) and not value:
        raise LoadError(f"{owner} field '{key}' must not be empty")
    return value


def optional_field(
    data: dict[str, Any], key: str, owner: str, expected: type | tuple[type, ...] = str
) -> Any:
    """Read an optional field; ``None`` when absent."""
    if data.get(key) is None:
        return None
    return require_field(data, key, owner, expected)


def parse_type(name: Any, owner: str, allow_void: bool = False) -> TypeTag:
    """Parse a type tag, rejecting ``void`` unless allowed."""
    try:
        tag = TypeTag.parse(name)
    except ValueError as e:
        raise LoadError(f"{owner}: {e}") from None
    if not allow_void and tag not in VALUE_TYPES:
        raise LoadError(f"{owner}: type 'void' is only allowed as a return type")
    return tag


def parse_list(items: list[Any], parse: Callable[[Any], T], label: str) -> list[T]:
    """Parse each element of a JSON array, prefixing errors with its position."""
    result = []
    for index, item in enumerate(items):
        try:
            result.append(parse(item))
        except LoadError as e:
            raise LoadError([f"{label}[{index}]: {problem}" for problem in e.problems]) from None
    return result

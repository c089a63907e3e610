"""Literal expression."""

from dataclasses import dataclass
from typing import Any

from ..errors import LoadError
from ..model.fields import parse_type, require_field
from ..types import TypeTag, literal_matches
from .expression import Expression


@dataclass
class LiteralExpression(Expression, expression_type="literal"):
    """A constant embedded in the document.

    The payload must match ``valueType`` exactly when loading; a double may
    be written as a whole number and is stored as a float.

    Example in JSON:
        {"expressionType": "literal", "valueType": "string", "value": "#login"}
        {"expressionType": "literal", "valueType": "array", "value": [1, 2, 3]}
    """

    value_type: TypeTag = TypeTag.STRING
    value: Any = None

    def __post_init__(self) -> None:
        self.value_type = TypeTag(self.value_type)

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "LiteralExpression":
        value_type = parse_type(require_field(data, "valueType", "literal"), "literal")
        if "value" not in data:
            raise LoadError("literal is missing required field 'value'")

        value = data["value"]
        if not literal_matches(value_type, value):
            raise LoadError(f"literal value {value!r} is not a valid {value_type.value}")
        if value_type is TypeTag.DOUBLE:
            value = float(value)
        return cls(value_type, value)

    def _dump(self) -> dict[str, Any]:
        return {"valueType": self.value_type.value, "value": self.value}

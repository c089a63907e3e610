"""Variable declaration statement."""

from dataclasses import dataclass
from typing import Any

from ..expressions.expression import Expression
from ..model.fields import parse_type, require_field
from ..types import TypeTag
from .statement import Statement


@dataclass
class VariableDeclarationStatement(Statement, statement_type="variableDeclaration"):
    """Declares a typed variable in the current scope.

    Without ``initial_value`` the variable starts at the default of its type
    (``0``, ``""``, ``false``, an empty array, a null object). Declaring a
    name twice in one scope fails at run time.

    Example in JSON:
        {
            "statementType": "variableDeclaration",
            "variableName": "attempts",
            "variableType": "integer",
            "initialValue": {"expressionType": "literal", "valueType": "integer", "value": 0}
        }
    """

    variable_name: str = ""
    variable_type: TypeTag = TypeTag.OBJECT
    initial_value: Expression | None = None

    def __post_init__(self) -> None:
        self.variable_type = TypeTag(self.variable_type)

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "VariableDeclarationStatement":
        owner = "variable declaration"
        variable_name = require_field(data, "variableName", owner)
        variable_type = parse_type(
            require_field(data, "variableType", owner), f"{owner} '{variable_name}'"
        )

        initial_value = None
        if data.get("initialValue") is not None:
            initial_value = Expression.from_dict(data["initialValue"])
        return cls(variable_name, variable_type, initial_value)

    def _dump(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "variableName": self.variable_name,
            "variableType": self.variable_type.value,
        }
        if self.initial_value is not None:
            result["initialValue"] = self.initial_value.to_dict()
        return result

"""Assignment statement."""

from dataclasses import dataclass
from typing import Any

from ..expressions.expression import Expression
from ..model.fields import require_field
from .statement import Statement


@dataclass
class AssignmentStatement(Statement, statement_type="assignment"):
    """Stores a new value in an already declared variable.

    The nearest enclosing scope that declares the name receives the value,
    which must fit the type the variable was declared with.

    Example in JSON:
        {
            "statementType": "assignment",
            "variableName": "total",
            "value": {
                "expressionType": "binaryOperation",
                "operator": "+",
                "left": {"expressionType": "variable", "name": "total"},
                "right": {"expressionType": "variable", "name": "price"}
            }
        }
    """

    variable_name: str = ""
    value: Expression | None = None

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "AssignmentStatement":
        owner = "assignment"
        return cls(
            require_field(data, "variableName", owner),
            Expression.from_dict(require_field(data, "value", owner, dict)),
        )

    def _dump(self) -> dict[str, Any]:
        result: dict[str, Any] = {"variableName": self.variable_name}
        if self.value is not None:
            result["value"] = self.value.to_dict()
        return result

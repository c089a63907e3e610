"""Binary operation expression and its operator sets."""

from dataclasses import dataclass
from typing import Any

from ..errors import LoadError
from ..model.fields import require_field
from .expression import Expression

ARITHMETIC_OPERATORS = frozenset({"+", "-", "*", "/", "%"})
COMPARISON_OPERATORS = frozenset({"==", "!=", "<", ">", "<=", ">="})
LOGICAL_OPERATORS = frozenset({"&&", "||"})
OPERATORS = ARITHMETIC_OPERATORS | COMPARISON_OPERATORS | LOGICAL_OPERATORS


@dataclass
class BinaryOperationExpression(Expression, expression_type="binaryOperation"):
    """Combines two operands with one of :data:`OPERATORS`.

    ``left`` is always evaluated first. ``&&`` and ``||`` skip ``right`` when
    ``left`` already decides the result.

    Example in JSON:
        {
            "expressionType": "binaryOperation",
            "operator": "<",
            "left": {"expressionType": "variable", "name": "attempt"},
            "right": {"expressionType": "literal", "valueType": "integer", "value": 3}
        }
    """

    operator: str = ""
    left: Expression | None = None
    right: Expression | None = None

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "BinaryOperationExpression":
        owner = "binary operation"
        operator = require_field(data, "operator", owner)
        if operator not in OPERATORS:
            raise LoadError(f"Unknown operator: {operator}")
        return cls(
            operator,
            Expression.from_dict(require_field(data, "left", owner, dict)),
            Expression.from_dict(require_field(data, "right", owner, dict)),
        )

    def _dump(self) -> dict[str, Any]:
        result: dict[str, Any] = {"operator": self.operator}
        if self.left is not None:
            result["left"] = self.left.to_dict()
        if self.right is not None:
            result["right"] = self.right.to_dict()
        return result

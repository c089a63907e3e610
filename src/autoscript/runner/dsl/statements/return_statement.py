"""Return statement."""

from dataclasses import dataclass
from typing import Any

from ..expressions.expression import Expression
from .statement import Statement


@dataclass
class ReturnStatement(Statement, statement_type="return"):
    """Ends the current function, optionally with a value.

    Nothing after a return runs, at any nesting depth. ``value`` is None in
    void functions.

    Example in JSON:
        {"statementType": "return", "value": {"expressionType": "variable", "name": "status"}}
        {"statementType": "return"}
    """

    value: Expression | None = None

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "ReturnStatement":
        if data.get("value") is None:
            return cls()
        return cls(Expression.from_dict(data["value"]))

    def _dump(self) -> dict[str, Any]:
        if self.value is None:
            return {}
        return {"value": self.value.to_dict()}

"""Conditional statement."""

from dataclasses import dataclass, field
from typing import Any

from ..expressions.expression import Expression
from ..model.fields import require_field
from .statement import Statement


@dataclass
class IfStatement(Statement, statement_type="if"):
    """Runs one of two blocks depending on a boolean condition.

    The chosen block runs in a child scope that is discarded afterwards,
    so declarations inside a branch are not visible after the statement.
    ``else_statements`` may be empty.

    Example in JSON:
        {
            "statementType": "if",
            "condition": {"expressionType": "variable", "name": "loggedIn"},
            "thenStatements": [
                {"statementType": "methodCall", "object": "page", "method": "openDashboard"}
            ],
            "elseStatements": [
                {"statementType": "methodCall", "method": "login"}
            ]
        }
    """

    condition: Expression | None = None
    then_statements: list[Statement] = field(default_factory=list)
    else_statements: list[Statement] = field(default_factory=list)

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "IfStatement":
        owner = "if statement"
        condition = Expression.from_dict(require_field(data, "condition", owner, dict))
        then_statements = Statement.list_from(data, "thenStatements", owner)
        else_statements = []
        if data.get("elseStatements") is not None:
            else_statements = Statement.list_from(data, "elseStatements", owner)
        return cls(condition, then_statements, else_statements)

    def _dump(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.condition is not None:
            result["condition"] = self.condition.to_dict()
        result["thenStatements"] = [stmt.to_dict() for stmt in self.then_statements]
        if self.else_statements:
            result["elseStatements"] = [stmt.to_dict() for stmt in self.else_statements]
        return result

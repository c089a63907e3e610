"""Loop over the elements of an array."""

from dataclasses import dataclass, field
from typing import Any

from ..expressions.expression import Expression
from ..model.fields import require_field
from .statement import Statement


@dataclass
class ForEachStatement(Statement, statement_type="forEach"):
    """Runs a block once per element of an array.

    Every iteration gets a fresh child scope in which ``variable_name`` is
    bound to the current element. A return inside the body ends the loop
    and the enclosing function.

    Example in JSON:
        {
            "statementType": "forEach",
            "variableName": "row",
            "collection": {"expressionType": "variable", "name": "rows"},
            "statements": [
                {
                    "statementType": "methodCall",
                    "object": "table",
                    "method": "select",
                    "arguments": [{"expressionType": "variable", "name": "row"}]
                }
            ]
        }
    """

    variable_name: str = ""
    collection: Expression | None = None
    statements: list[Statement] = field(default_factory=list)

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "ForEachStatement":
        owner = "forEach statement"
        return cls(
            require_field(data, "variableName", owner),
            Expression.from_dict(require_field(data, "collection", owner, dict)),
            Statement.list_from(data, "statements", owner),
        )

    def _dump(self) -> dict[str, Any]:
        result: dict[str, Any] = {"variableName": self.variable_name}
        if self.collection is not None:
            result["collection"] = self.collection.to_dict()
        result["statements"] = [stmt.to_dict() for stmt in self.statements]
        return result

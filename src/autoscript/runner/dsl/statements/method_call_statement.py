"""Method call statement."""

from dataclasses import dataclass, field
from typing import Any

from ..expressions.expression import Expression
from ..model.fields import optional_field, require_field
from .statement import Statement


@dataclass
class MethodCallStatement(Statement, statement_type="methodCall"):
    """Calls a method or function for its side effects.

    Names resolve as in a method call expression, but any result is
    discarded and void callees are allowed.

    Example in JSON:
        {
            "statementType": "methodCall",
            "object": "logger",
            "method": "log",
            "arguments": [{"expressionType": "literal", "valueType": "string", "value": "done"}]
        }
    """

    object: str | None = None
    method: str = ""
    arguments: list[Expression] = field(default_factory=list)

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "MethodCallStatement":
        owner = "method call statement"
        return cls(
            object=optional_field(data, "object", owner),
            method=require_field(data, "method", owner),
            arguments=Expression.arguments_from(data, owner),
        )

    def _dump(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.object:
            result["object"] = self.object
        result["method"] = self.method
        if self.arguments:
            result["arguments"] = [arg.to_dict() for arg in self.arguments]
        return result

"""Method call expression."""

from dataclasses import dataclass, field
from typing import Any

from ..model.fields import optional_field, require_field
from .expression import Expression


@dataclass
class MethodCallExpression(Expression, expression_type="methodCall"):
    """Calls a method or function and uses its result.

    Without ``object`` the name resolves to an automation function first and
    to a host global second. With ``object`` the receiver is a variable in
    scope or a host object. The callee must return a value.

    Example in JSON:
        {
            "expressionType": "methodCall",
            "object": "page",
            "method": "findText",
            "arguments": [{"expressionType": "literal", "valueType": "string", "value": "Sign in"}]
        }

    Attributes:
        object: Receiver name, or None for a function call
        method: Method or function name
        arguments: Argument expressions, evaluated left to right
    """

    object: str | None = None
    method: str = ""
    arguments: list[Expression] = field(default_factory=list)

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "MethodCallExpression":
        owner = "method call expression"
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

"""Builder expression: fluent construction of host objects."""

from dataclasses import dataclass, field
from typing import Any

from ..errors import LoadError
from ..model.fields import ensure_object, parse_list, require_field
from .expression import Expression


@dataclass
class BuilderMethodCall:
    """One step of a builder chain."""

    method: str = ""
    arguments: list[Expression] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "BuilderMethodCall":
        owner = "builder method call"
        data = ensure_object(data, owner)
        return cls(require_field(data, "method", owner), Expression.arguments_from(data, owner))

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"method": self.method}
        if self.arguments:
            result["arguments"] = [arg.to_dict() for arg in self.arguments]
        return result


@dataclass
class BuilderExpression(Expression, expression_type="builder"):
    """Creates a host builder and threads it through a chain of calls.

    The host binding supplies a fresh builder of ``builder_type``. Each step
    is called on the previous step's result, and the last step's result is
    the value of the expression. No method name is special; ``build`` is a
    convention of the host's builders.

    Example in JSON:
        {
            "expressionType": "builder",
            "builderType": "Request.Builder",
            "methodCalls": [
                {"method": "withUrl", "arguments": [{"expressionType": "variable", "name": "url"}]},
                {"method": "withTimeout", "arguments": [
                    {"expressionType": "literal", "valueType": "integer", "value": 30}
                ]},
                {"method": "build"}
            ]
        }
    """

    builder_type: str = ""
    method_calls: list[BuilderMethodCall] = field(default_factory=list)

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "BuilderExpression":
        owner = "builder expression"
        builder_type = require_field(data, "builderType", owner)
        method_calls = parse_list(
            require_field(data, "methodCalls", owner, list),
            BuilderMethodCall.from_dict,
            "methodCalls",
        )
        if not method_calls:
            raise LoadError(f"{owner} '{builder_type}' has an empty 'methodCalls' chain")
        return cls(builder_type, method_calls)

    def _dump(self) -> dict[str, Any]:
        return {
            "builderType": self.builder_type,
            "methodCalls": [call.to_dict() for call in self.method_calls],
        }

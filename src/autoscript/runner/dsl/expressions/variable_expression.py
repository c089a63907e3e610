"""Variable reference expression."""

from dataclasses import dataclass
from typing import Any

from ..model.fields import require_field
from .expression import Expression


@dataclass
class VariableExpression(Expression, expression_type="variable"):
    """Reads a variable from the innermost scope that declares it.

    Example in JSON:
        {"expressionType": "variable", "name": "retries"}
    """

    name: str = ""

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "VariableExpression":
        return cls(require_field(data, "name", "variable expression"))

    def _dump(self) -> dict[str, Any]:
        return {"name": self.name}

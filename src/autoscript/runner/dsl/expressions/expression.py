"""Expression base class and the ``expressionType`` registry."""

from typing import Any, ClassVar

from ..errors import LoadError
from ..model.fields import ensure_object, parse_list, require_field


class Expression:
    """A value-producing node of a function body.

    Expressions are plain data; they are computed by
    :class:`~autoscript.runner.dsl.executor.expression_evaluator.ExpressionEvaluator`.
    Concrete expressions register under their JSON discriminator with
    ``class LiteralExpression(Expression, expression_type="literal")`` and
    :meth:`from_dict` dispatches on that registry.
    """

    _registry: ClassVar[dict[str, type["Expression"]]] = {}
    EXPRESSION_TYPE: ClassVar[str] = ""

    def __init_subclass__(cls, expression_type: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if expression_type is not None:
            cls.EXPRESSION_TYPE = expression_type
            Expression._registry[expression_type] = cls

    @property
    def expression_type(self) -> str:
        return self.EXPRESSION_TYPE

    @classmethod
    def from_dict(cls, data: Any) -> "Expression":
        """Build the expression variant named by ``data["expressionType"]``.

        Raises:
            LoadError: If the discriminator is missing or unknown, or a
                required field is missing or malformed
        """
        data = ensure_object(data, "expression")
        expression_type = data.get("expressionType")
        if expression_type is None:
            raise LoadError("expression is missing required field 'expressionType'")

        expression_class = Expression._registry.get(expression_type)
        if expression_class is None:
            raise LoadError(f"Unknown expression type: {expression_type}")
        return expression_class._load(data)

    @classmethod
    def arguments_from(cls, data: dict[str, Any], owner: str) -> list["Expression"]:
        """Parse the optional ``arguments`` array of a call; empty when absent."""
        if data.get("arguments") is None:
            return []
        return parse_list(
            require_field(data, "arguments", owner, list), cls.from_dict, "arguments"
        )

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "Expression":
        raise NotImplementedError

    def _dump(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the document form, discriminator first."""
        return {"expressionType": self.expression_type, **self._dump()}

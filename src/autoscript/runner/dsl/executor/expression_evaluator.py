"""Expression evaluator for DSL execution.

Computes a :class:`~autoscript.runner.dsl.value.Value` from an expression tree.
"""

import copy
import math
from typing import TYPE_CHECKING

from ..errors import (
    DivisionByZeroError,
    ExecutionError,
    MethodNotFoundError,
    TypeMismatchError,
)
from ..expressions.binary_operation_expression import (
    ARITHMETIC_OPERATORS,
    LOGICAL_OPERATORS,
    BinaryOperationExpression,
)
from ..expressions.builder_expression import BuilderExpression
from ..expressions.expression import Expression
from ..expressions.literal_expression import LiteralExpression
from ..expressions.method_call_expression import MethodCallExpression
from ..expressions.variable_expression import VariableExpression
from ..types import TypeTag, are_comparable
from ..value import Value
from .execution_context import ExecutionContext

if TYPE_CHECKING:
    from .function_registry import FunctionRegistry

TRUE = Value(TypeTag.BOOLEAN, True)
FALSE = Value(TypeTag.BOOLEAN, False)


def _truncating_divide(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class ExpressionEvaluator:
    """Evaluates DSL expressions within a call frame.

    Evaluation only reads the frame's scopes. Method calls and builders are
    dispatched through the function registry and may have host side effects.

    Example:
        ```python
        registry = FunctionRegistry(instruction_set, host)
        evaluator = registry.evaluator

        context = ExecutionContext("example")
        context.declare("x", TypeTag.INTEGER, Value.of(10))

        expr = BinaryOperationExpression(
            operator="+",
            left=VariableExpression(name="x"),
            right=LiteralExpression(value_type="integer", value=5),
        )
        evaluator.evaluate(expr, context)   # Value(INTEGER, 15)
        ```
    """

    def __init__(self, registry: "FunctionRegistry") -> None:
        """Initialize evaluator.

        Args:
            registry: Registry used to dispatch method calls
        """
        self.registry = registry

    def evaluate(self, expression: Expression, context: ExecutionContext) -> Value:
        """Evaluate an expression.

        Args:
            expression: Expression to evaluate
            context: Call frame providing variables

        Returns:
            The computed value, never void

        Raises:
            ExecutionError: If evaluation fails
        """
        if isinstance(expression, LiteralExpression):
            return self._evaluate_literal(expression)
        elif isinstance(expression, VariableExpression):
            return context.lookup(expression.name)
        elif isinstance(expression, BinaryOperationExpression):
            return self._evaluate_binary_operation(expression, context)
        elif isinstance(expression, MethodCallExpression):
            return self._evaluate_method_call(expression, context)
        elif isinstance(expression, BuilderExpression):
            return self._evaluate_builder(expression, context)
        else:
            raise ExecutionError(
                f"Unknown expression type: {type(expression).__name__}",
                function_name=context.function_name,
            )

    def call(
        self,
        receiver_name: str | None,
        method: str,
        arguments: list[Expression],
        context: ExecutionContext,
    ) -> Value:
        """Evaluate arguments left to right, then dispatch a call.

        Shared by method call expressions and method call statements.

        Returns:
            The callee's result, possibly void
        """
        receiver = None
        if receiver_name is not None:
            receiver = self._resolve_receiver(receiver_name, context)
        args = [self.evaluate(arg, context) for arg in arguments]
        return self.registry.invoke(method, args, receiver=receiver, context=context)

    def _evaluate_literal(self, expression: LiteralExpression) -> Value:
        value = expression.value
        if isinstance(value, (list, dict)):
            # arrays and objects are mutable; never hand out the tree's own copy
            value = copy.deepcopy(value)
        return Value(expression.value_type, value)

    def _evaluate_method_call(
        self, expression: MethodCallExpression, context: ExecutionContext
    ) -> Value:
        result = self.call(expression.object, expression.method, expression.arguments, context)
        if result.is_void:
            raise TypeMismatchError(
                f"'{self._describe(expression.object, expression.method)}' returned no value",
                function_name=context.function_name,
            )
        return result

    def _evaluate_builder(self, expression: BuilderExpression, context: ExecutionContext) -> Value:
        """Create a builder and thread it through the method chain.

        Each call's result becomes the receiver of the next call. A call that
        returns nothing leaves the current receiver in place.
        """
        receiver = self.registry.new_builder(expression.builder_type, context)
        result = receiver
        for method_call in expression.method_calls:
            args = [self.evaluate(arg, context) for arg in method_call.arguments]
            result = self.registry.invoke(
                method_call.method, args, receiver=receiver, context=context
            )
            if not result.is_void:
                receiver = result

        if result.is_void:
            raise TypeMismatchError(
                f"Builder '{expression.builder_type}' chain ended in "
                f"'{expression.method_calls[-1].method}', which returned no value",
                function_name=context.function_name,
            )
        return result

    def _resolve_receiver(self, name: str, context: ExecutionContext) -> Value:
        if context.has_variable(name):
            return context.lookup(name)
        receiver = self.registry.host.resolve_object(name)
        if receiver is None:
            raise MethodNotFoundError(
                f"Unknown receiver '{name}'", function_name=context.function_name
            )
        return receiver

    def _evaluate_binary_operation(
        self, expression: BinaryOperationExpression, context: ExecutionContext
    ) -> Value:
        operator = expression.operator
        left = self.evaluate(expression.left, context)

        if operator in LOGICAL_OPERATORS:
            self._require_boolean(left, operator, context)
            if operator == "&&" and not left.value:
                return FALSE
            if operator == "||" and left.value:
                return TRUE
            right = self.evaluate(expression.right, context)
            self._require_boolean(right, operator, context)
            return TRUE if right.value else FALSE

        right = self.evaluate(expression.right, context)

        if operator in ARITHMETIC_OPERATORS:
            return self._arithmetic(operator, left, right, context)
        return self._compare(operator, left, right, context)

    def _arithmetic(
        self, operator: str, left: Value, right: Value, context: ExecutionContext
    ) -> Value:
        if operator == "+" and TypeTag.STRING in (left.type, right.type):
            return Value(TypeTag.STRING, left.display() + right.display())

        if not (left.type.is_numeric and right.type.is_numeric):
            raise TypeMismatchError(
                f"Operator '{operator}' requires numeric operands, "
                f"got {left.type.value} and {right.type.value}",
                function_name=context.function_name,
            )

        both_integer = left.type is TypeTag.INTEGER and right.type is TypeTag.INTEGER
        a, b = left.value, right.value

        if operator in ("/", "%") and b == 0:
            raise DivisionByZeroError(
                f"Operator '{operator}' with zero divisor", function_name=context.function_name
            )

        if operator == "+":
            result = a + b
        elif operator == "-":
            result = a - b
        elif operator == "*":
            result = a * b
        elif operator == "/":
            result = _truncating_divide(a, b) if both_integer else a / b
        else:
            result = a - b * _truncating_divide(a, b) if both_integer else math.fmod(a, b)

        if both_integer:
            return Value(TypeTag.INTEGER, result)
        return Value(TypeTag.DOUBLE, float(result))

    def _compare(
        self, operator: str, left: Value, right: Value, context: ExecutionContext
    ) -> Value:
        if operator == "==":
            return TRUE if self._equals(left, right) else FALSE
        if operator == "!=":
            return FALSE if self._equals(left, right) else TRUE

        if not are_comparable(left.type, right.type):
            raise TypeMismatchError(
                f"Cannot compare {left.type.value} and {right.type.value} with '{operator}'",
                function_name=context.function_name,
            )

        a, b = left.value, right.value
        if operator == "<":
            result = a < b
        elif operator == ">":
            result = a > b
        elif operator == "<=":
            result = a <= b
        else:
            result = a >= b
        return TRUE if result else FALSE

    @staticmethod
    def _equals(left: Value, right: Value) -> bool:
        if left.type.is_numeric and right.type.is_numeric:
            return left.value == right.value
        return left.type is right.type and left.value == right.value

    @staticmethod
    def _require_boolean(value: Value, operator: str, context: ExecutionContext) -> None:
        if value.type is not TypeTag.BOOLEAN:
            raise TypeMismatchError(
                f"Operator '{operator}' requires boolean operands, got {value.type.value}",
                function_name=context.function_name,
            )

    @staticmethod
    def _describe(receiver: str | None, method: str) -> str:
        return f"{receiver}.{method}" if receiver else method

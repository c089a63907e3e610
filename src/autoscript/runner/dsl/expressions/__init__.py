"""Expression variants.

Importing this package registers every ``expressionType``.
"""

from .expression import Expression
from .binary_operation_expression import BinaryOperationExpression
from .builder_expression import BuilderExpression, BuilderMethodCall
from .literal_expression import LiteralExpression
from .method_call_expression import MethodCallExpression
from .variable_expression import VariableExpression

__all__ = [
    "Expression",
    "BinaryOperationExpression",
    "BuilderExpression",
    "BuilderMethodCall",
    "LiteralExpression",
    "MethodCallExpression",
    "VariableExpression",
]

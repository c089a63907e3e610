"""Pytest fixtures for DSL tests."""

import pytest

from autoscript.runner.dsl.executor import ExecutionContext, FunctionRegistry
from autoscript.runner.dsl.expressions.binary_operation_expression import (
    BinaryOperationExpression,
)
from autoscript.runner.dsl.expressions.builder_expression import (
    BuilderExpression,
    BuilderMethodCall,
)
from autoscript.runner.dsl.expressions.literal_expression import LiteralExpression
from autoscript.runner.dsl.expressions.method_call_expression import MethodCallExpression
from autoscript.runner.dsl.expressions.variable_expression import VariableExpression
from autoscript.runner.dsl.instruction_set import InstructionSet
from autoscript.runner.dsl.statements.assignment_statement import AssignmentStatement
from autoscript.runner.dsl.statements.for_each_statement import ForEachStatement
from autoscript.runner.dsl.statements.if_statement import IfStatement
from autoscript.runner.dsl.types import TypeTag
from autoscript.runner.dsl.value import Value


@pytest.fixture
def registry(host, settings):
    """Provide a registry with no automation functions over the test host."""
    return FunctionRegistry(InstructionSet(), host, settings)


@pytest.fixture
def evaluator(registry):
    """Provide the registry's expression evaluator."""
    return registry.evaluator


@pytest.fixture
def executor(registry):
    """Provide the registry's statement executor."""
    return registry.executor


@pytest.fixture
def context():
    """Provide a call frame holding a few typed variables."""
    ctx = ExecutionContext("test")
    ctx.declare("x", TypeTag.INTEGER, Value.of(10))
    ctx.declare("y", TypeTag.INTEGER, Value.of(5))
    ctx.declare("name", TypeTag.STRING, Value.of("test"))
    ctx.declare("enabled", TypeTag.BOOLEAN, Value.of(True))
    ctx.declare("items", TypeTag.ARRAY, Value.of([1, 2, 3, 4, 5]))
    ctx.declare("count", TypeTag.INTEGER, Value.of(0))
    ctx.declare("result", TypeTag.STRING, Value.of(""))
    return ctx


@pytest.fixture
def literal_int():
    """The integer literal 42."""
    return LiteralExpression(value_type="integer", value=42)


@pytest.fixture
def binary_add_expr():
    """x + 5 over the context variables."""
    return BinaryOperationExpression(
        operator="+",
        left=VariableExpression(name="x"),
        right=LiteralExpression(value_type="integer", value=5),
    )


@pytest.fixture
def method_call_expr():
    """calculator.add(3, 7) on the host calculator."""
    return MethodCallExpression(
        object="calculator",
        method="add",
        arguments=[
            LiteralExpression(value_type="integer", value=3),
            LiteralExpression(value_type="integer", value=7),
        ],
    )


@pytest.fixture
def builder_expr():
    """Order.Builder().withItem("widget").withQuantity(y).build()."""
    return BuilderExpression(
        builder_type="Order.Builder",
        method_calls=[
            BuilderMethodCall(
                method="withItem",
                arguments=[LiteralExpression(value_type="string", value="widget")],
            ),
            BuilderMethodCall(
                method="withQuantity",
                arguments=[VariableExpression(name="y")],
            ),
            BuilderMethodCall(method="build", arguments=[]),
        ],
    )


@pytest.fixture
def if_stmt():
    """if (x > 5) result = "high" else result = "low"."""
    return IfStatement(
        condition=BinaryOperationExpression(
            operator=">",
            left=VariableExpression(name="x"),
            right=LiteralExpression(value_type="integer", value=5),
        ),
        then_statements=[
            AssignmentStatement(
                variable_name="result",
                value=LiteralExpression(value_type="string", value="high"),
            )
        ],
        else_statements=[
            AssignmentStatement(
                variable_name="result",
                value=LiteralExpression(value_type="string", value="low"),
            )
        ],
    )


@pytest.fixture
def for_each_stmt():
    """forEach item in items: count = count + 1."""
    return ForEachStatement(
        variable_name="item",
        collection=VariableExpression(name="items"),
        statements=[
            AssignmentStatement(
                variable_name="count",
                value=BinaryOperationExpression(
                    operator="+",
                    left=VariableExpression(name="count"),
                    right=LiteralExpression(value_type="integer", value=1),
                ),
            )
        ],
    )


@pytest.fixture
def sample_json_binary_expr():
    """A total: price + shipping, both integer literals."""
    return {
        "expressionType": "binaryOperation",
        "operator": "+",
        "left": {"expressionType": "literal", "valueType": "integer", "value": 120},
        "right": {"expressionType": "literal", "valueType": "integer", "value": 15},
    }


@pytest.fixture
def sample_json_if_stmt():
    """if (enabled && x >= 10) logger.log("ready") else count = -1."""
    return {
        "statementType": "if",
        "condition": {
            "expressionType": "binaryOperation",
            "operator": "&&",
            "left": {"expressionType": "variable", "name": "enabled"},
            "right": {
                "expressionType": "binaryOperation",
                "operator": ">=",
                "left": {"expressionType": "variable", "name": "x"},
                "right": {"expressionType": "literal", "valueType": "integer", "value": 10},
            },
        },
        "thenStatements": [
            {
                "statementType": "methodCall",
                "object": "logger",
                "method": "log",
                "arguments": [
                    {"expressionType": "literal", "valueType": "string", "value": "ready"}
                ],
            }
        ],
        "elseStatements": [
            {
                "statementType": "assignment",
                "variableName": "count",
                "value": {"expressionType": "literal", "valueType": "integer", "value": -1},
            }
        ],
    }


@pytest.fixture
def sample_json_for_each_stmt():
    """forEach item in items: logger.log(item)."""
    return {
        "statementType": "forEach",
        "variableName": "item",
        "collection": {"expressionType": "variable", "name": "items"},
        "statements": [
            {
                "statementType": "methodCall",
                "object": "logger",
                "method": "log",
                "arguments": [{"expressionType": "variable", "name": "item"}],
            }
        ],
    }

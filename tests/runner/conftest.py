"""Shared automation documents for loader and engine tests."""

import copy

import pytest


def lit(value_type, value):
    return {"expressionType": "literal", "valueType": value_type, "value": value}


def var(name):
    return {"expressionType": "variable", "name": name}


def op(operator, left, right):
    return {"expressionType": "binaryOperation", "operator": operator, "left": left, "right": right}


def ret(value=None):
    stmt = {"statementType": "return"}
    if value is not None:
        stmt["value"] = value
    return stmt


def assign(name, value):
    return {"statementType": "assignment", "variableName": name, "value": value}


def declare(name, type_name, value=None):
    stmt = {"statementType": "variableDeclaration", "variableName": name, "variableType": type_name}
    if value is not None:
        stmt["initialValue"] = value
    return stmt


def if_(condition, then, otherwise=None):
    stmt = {"statementType": "if", "condition": condition, "thenStatements": then}
    if otherwise is not None:
        stmt["elseStatements"] = otherwise
    return stmt


def for_each(name, collection, body):
    return {
        "statementType": "forEach",
        "variableName": name,
        "collection": collection,
        "statements": body,
    }


def call(method, *arguments, receiver=None, statement=False):
    node = {"statementType" if statement else "expressionType": "methodCall", "method": method}
    if receiver is not None:
        node["object"] = receiver
    if arguments:
        node["arguments"] = list(arguments)
    return node


def function(id_, name, return_type, parameters, statements, description=None):
    result = {
        "id": id_,
        "name": name,
        "return_type": return_type,
        "parameters": [{"name": n, "type": t} for n, t in parameters],
        "statements": statements,
    }
    if description is not None:
        result["description"] = description
    return result


SCENARIO_DOCUMENT = {
    "automation_functions": [
        function(
            1,
            "addThree",
            "integer",
            [("a", "integer"), ("b", "integer"), ("c", "integer")],
            [ret(call("add", call("add", var("a"), var("b")), var("c")))],
            description="Calls add before it is declared",
        ),
        function(
            2,
            "add",
            "integer",
            [("a", "integer"), ("b", "integer")],
            [ret(op("+", var("a"), var("b")))],
        ),
        function(
            3,
            "isValidEmail",
            "boolean",
            [("email", "string")],
            [
                ret(
                    op(
                        "&&",
                        op("!=", var("email"), lit("string", "")),
                        call("contains", lit("string", "@"), receiver="email"),
                    )
                )
            ],
        ),
        function(
            4,
            "calculateSum",
            "integer",
            [("numbers", "array")],
            [
                declare("sum", "integer", lit("integer", 0)),
                for_each(
                    "number",
                    var("numbers"),
                    [assign("sum", op("+", var("sum"), var("number")))],
                ),
                ret(var("sum")),
            ],
        ),
        function(
            5,
            "countPositive",
            "integer",
            [("numbers", "array")],
            [
                declare("count", "integer", lit("integer", 0)),
                for_each(
                    "number",
                    var("numbers"),
                    [
                        if_(
                            op(">", var("number"), lit("integer", 0)),
                            [assign("count", op("+", var("count"), lit("integer", 1)))],
                        )
                    ],
                ),
                ret(var("count")),
            ],
        ),
        function(
            6,
            "calculateGrade",
            "string",
            [("score", "integer")],
            [
                if_(
                    op(">=", var("score"), lit("integer", 90)),
                    [ret(lit("string", "A"))],
                    [
                        if_(
                            op(">=", var("score"), lit("integer", 80)),
                            [ret(lit("string", "B"))],
                            [
                                if_(
                                    op(">=", var("score"), lit("integer", 70)),
                                    [ret(lit("string", "C"))],
                                    [
                                        if_(
                                            op(">=", var("score"), lit("integer", 60)),
                                            [ret(lit("string", "D"))],
                                            [ret(lit("string", "F"))],
                                        )
                                    ],
                                )
                            ],
                        )
                    ],
                )
            ],
        ),
        function(
            7,
            "processOrder",
            "string",
            [("orderAmount", "double"), ("customerType", "string"), ("hasDiscount", "boolean")],
            [
                declare("finalAmount", "double", var("orderAmount")),
                if_(
                    op("==", var("customerType"), lit("string", "premium")),
                    [
                        assign(
                            "finalAmount",
                            op(
                                "-",
                                var("finalAmount"),
                                op("/", var("finalAmount"), lit("double", 5.0)),
                            ),
                        )
                    ],
                ),
                if_(
                    var("hasDiscount"),
                    [assign("finalAmount", op("-", var("finalAmount"), lit("double", 5.0)))],
                ),
                call(
                    "log",
                    op("+", lit("string", "Final amount: "), var("finalAmount")),
                    receiver="logger",
                    statement=True,
                ),
                if_(
                    op(
                        "&&",
                        op(">", var("finalAmount"), lit("integer", 0)),
                        op("<", var("finalAmount"), lit("integer", 1000)),
                    ),
                    [ret(lit("string", "approved"))],
                ),
                ret(lit("string", "review")),
            ],
        ),
        function(
            8,
            "greet",
            "void",
            [("name", "string")],
            [
                call(
                    "log",
                    op("+", lit("string", "Hello, "), var("name")),
                    receiver="logger",
                    statement=True,
                )
            ],
        ),
        function(
            9,
            "makeOrder",
            "object",
            [("item", "string")],
            [
                ret(
                    {
                        "expressionType": "builder",
                        "builderType": "Order.Builder",
                        "methodCalls": [
                            {"method": "withItem", "arguments": [var("item")]},
                            {"method": "withQuantity", "arguments": [lit("integer", 2)]},
                            {"method": "build"},
                        ],
                    }
                )
            ],
        ),
    ]
}


@pytest.fixture
def scenario_document():
    """A document exercising every statement and expression type."""
    return copy.deepcopy(SCENARIO_DOCUMENT)

"""DSL JSON parser.

Handles parsing of DSL JSON into Python objects and the static checks that
run before an InstructionSet is handed to the engine.
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ...config import EngineSettings, get_settings
from ...logging import get_logger
from ..dsl.automation_function import AutomationFunction
from ..dsl.errors import LoadError
from ..dsl.expressions.binary_operation_expression import BinaryOperationExpression
from ..dsl.expressions.builder_expression import BuilderExpression
from ..dsl.expressions.expression import Expression
from ..dsl.expressions.literal_expression import LiteralExpression
from ..dsl.expressions.method_call_expression import MethodCallExpression
from ..dsl.expressions.variable_expression import VariableExpression
from ..dsl.instruction_set import InstructionSet
from ..dsl.model.fields import parse_list, parse_type
from ..dsl.model.parameter import Parameter
from ..dsl.statements.assignment_statement import AssignmentStatement
from ..dsl.statements.for_each_statement import ForEachStatement
from ..dsl.statements.if_statement import IfStatement
from ..dsl.statements.method_call_statement import MethodCallStatement
from ..dsl.statements.return_statement import ReturnStatement
from ..dsl.statements.statement import Statement
from ..dsl.statements.variable_declaration_statement import VariableDeclarationStatement
from ..dsl.types import TypeTag, is_compatible
from .schema import AutomationFunctionSchema, DocumentSchema, ParameterSchema

logger = get_logger(__name__)


class DSLParser:
    """Parses DSL JSON into Python objects.

    This parser handles the conversion of JSON-based DSL definitions into
    executable Python objects. It supports the full DSL including:
    - Automation functions with typed parameters and return types
    - Statements (variable declarations, assignments, control flow, etc.)
    - Expressions (literals, variables, method calls, operations, builders)

    Problems are collected function by function and reported together in a
    single :class:`LoadError`. Nothing is returned unless the whole document
    is valid.
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or get_settings()
        self.validator = DSLValidator(self.settings)

    def parse_json(self, json_string: str | bytes) -> InstructionSet:
        """Parse JSON string into InstructionSet.

        Args:
            json_string: JSON string containing DSL definition

        Returns:
            InstructionSet with parsed automation functions

        Raises:
            LoadError: If the JSON is malformed or the DSL structure is invalid
        """
        try:
            data = json.loads(json_string)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise LoadError(f"Malformed JSON: {e}") from e
        return self.parse_dict(data)

    def parse_file(self, file_path: str | Path) -> InstructionSet:
        """Parse JSON file into InstructionSet.

        Args:
            file_path: Path to JSON file

        Returns:
            InstructionSet with parsed automation functions
        """
        try:
            text = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Cannot read '{file_path}': {e}") from e
        return self.parse_json(text)

    def parse_dict(self, data: Any) -> InstructionSet:
        """Parse dictionary into InstructionSet.

        Args:
            data: Dictionary containing DSL definition

        Returns:
            InstructionSet with parsed automation functions

        Raises:
            LoadError: Listing every problem found in the document
        """
        try:
            document = DocumentSchema.model_validate(data)
        except ValidationError as e:
            raise LoadError(_validation_problems(e)) from None

        problems: list[str] = []
        functions: list[AutomationFunction] = []
        for index, function_schema in enumerate(document.automation_functions):
            try:
                functions.append(self.parse_automation_function(function_schema))
            except LoadError as e:
                label = f"function '{function_schema.name}'"
                problems.extend(f"{label}: {problem}" for problem in e.problems)

        instruction_set = InstructionSet(functions)
        problems.extend(self.validator.validate_instruction_set(instruction_set))
        if problems:
            raise LoadError(problems)

        logger.debug(
            "instruction_set_loaded",
            functions=len(instruction_set),
            names=instruction_set.function_names(),
        )
        return instruction_set

    def parse_automation_function(self, schema: AutomationFunctionSchema) -> AutomationFunction:
        """Build an AutomationFunction from its validated envelope.

        Args:
            schema: Function header and raw statements

        Returns:
            AutomationFunction instance

        Raises:
            LoadError: If a type name, statement or expression is invalid
        """
        return AutomationFunction(
            id=schema.id,
            name=schema.name,
            description=schema.description,
            return_type=parse_type(schema.return_type, "return type", allow_void=True),
            parameters=parse_list(schema.parameters, self.parse_parameter, "parameters"),
            statements=parse_list(schema.statements, Statement.from_dict, "statements"),
        )

    def parse_parameter(self, schema: ParameterSchema) -> Parameter:
        return Parameter(
            name=schema.name,
            type=parse_type(schema.type, f"parameter '{schema.name}'"),
        )


class DSLValidator:
    """Static checks over a parsed InstructionSet.

    Ensures that DSL structures are consistent before any function runs:
    unique function ids and names, unique parameter names, declarations and
    returns whose literal types fit, and variable references that name
    something declared somewhere in the function. References to other
    functions are resolved at call time and are not checked here.
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or get_settings()

    def validate_instruction_set(self, instruction_set: InstructionSet) -> list[str]:
        """Validate an InstructionSet.

        Args:
            instruction_set: InstructionSet to validate

        Returns:
            Problem descriptions; empty if the set is valid
        """
        problems: list[str] = []
        seen_ids: set[int] = set()
        seen_names: set[str] = set()
        for function in instruction_set:
            if function.id in seen_ids:
                problems.append(f"Duplicate function id {function.id}")
            seen_ids.add(function.id)
            if function.name in seen_names:
                problems.append(f"Duplicate function name '{function.name}'")
            seen_names.add(function.name)

        for function in instruction_set:
            problems.extend(
                f"function '{function.name}': {problem}"
                for problem in self.validate_automation_function(function, seen_names)
            )
        return problems

    def validate_automation_function(
        self, function: AutomationFunction, function_names: set[str] | frozenset[str] = frozenset()
    ) -> list[str]:
        """Validate one function.

        Args:
            function: Function to validate
            function_names: Names of every function in the document

        Returns:
            Problem descriptions; empty if the function is valid
        """
        problems: list[str] = []
        widen = self.settings.widen_integer_to_double

        parameter_types: dict[str, TypeTag] = {}
        for parameter in function.parameters:
            if parameter.name in parameter_types:
                problems.append(f"Duplicate parameter name '{parameter.name}'")
            parameter_types[parameter.name] = parameter.type

        statements = list(iter_statements(function.statements))
        declared = set(parameter_types)
        for statement in statements:
            if isinstance(statement, (VariableDeclarationStatement, ForEachStatement)):
                declared.add(statement.variable_name)
        local_names = declared - set(parameter_types)

        for statement in statements:
            if isinstance(statement, VariableDeclarationStatement):
                initial = statement.initial_value
                if isinstance(initial, LiteralExpression) and not is_compatible(
                    statement.variable_type, initial.value_type, widen
                ):
                    problems.append(
                        f"Variable '{statement.variable_name}' declared as "
                        f"{statement.variable_type.value} is initialized with a "
                        f"{initial.value_type.value} literal"
                    )
            elif isinstance(statement, AssignmentStatement):
                if statement.variable_name not in declared:
                    problems.append(
                        f"Assignment to undeclared variable '{statement.variable_name}'"
                    )
            elif isinstance(statement, ReturnStatement):
                problem = self._check_return(function, statement, parameter_types, local_names)
                if problem:
                    problems.append(problem)

            for expression in statement_expressions(statement):
                for node in iter_expressions(expression):
                    if (
                        isinstance(node, VariableExpression)
                        and node.name not in declared
                        and node.name not in function_names
                    ):
                        problems.append(f"Reference to undeclared variable '{node.name}'")

        return problems

    def _check_return(
        self,
        function: AutomationFunction,
        statement: ReturnStatement,
        parameter_types: dict[str, TypeTag],
        local_names: set[str],
    ) -> str | None:
        return_type = function.return_type
        value = statement.value

        if value is None:
            if return_type is not TypeTag.VOID:
                return f"Return without a value in a function returning {return_type.value}"
            return None
        if return_type is TypeTag.VOID:
            return "Return with a value in a void function"

        if isinstance(value, LiteralExpression):
            actual = value.value_type
        elif (
            isinstance(value, VariableExpression)
            and value.name in parameter_types
            and value.name not in local_names
        ):
            actual = parameter_types[value.name]
        else:
            return None

        if not is_compatible(return_type, actual, self.settings.widen_integer_to_double):
            return f"Returns a {actual.value} from a function returning {return_type.value}"
        return None


def iter_statements(statements: list[Statement]) -> Iterator[Statement]:
    """Yield every statement in a body, depth first, including nested blocks."""
    for statement in statements:
        yield statement
        if isinstance(statement, IfStatement):
            yield from iter_statements(statement.then_statements)
            yield from iter_statements(statement.else_statements)
        elif isinstance(statement, ForEachStatement):
            yield from iter_statements(statement.statements)


def statement_expressions(statement: Statement) -> list[Expression]:
    """The expressions held directly by a statement."""
    if isinstance(statement, VariableDeclarationStatement):
        return [statement.initial_value] if statement.initial_value is not None else []
    if isinstance(statement, AssignmentStatement):
        return [statement.value]
    if isinstance(statement, IfStatement):
        return [statement.condition]
    if isinstance(statement, ForEachStatement):
        return [statement.collection]
    if isinstance(statement, ReturnStatement):
        return [statement.value] if statement.value is not None else []
    if isinstance(statement, MethodCallStatement):
        return list(statement.arguments)
    return []


def iter_expressions(expression: Expression) -> Iterator[Expression]:
    """Yield an expression and all of its sub-expressions."""
    yield expression
    if isinstance(expression, BinaryOperationExpression):
        yield from iter_expressions(expression.left)
        yield from iter_expressions(expression.right)
    elif isinstance(expression, MethodCallExpression):
        for argument in expression.arguments:
            yield from iter_expressions(argument)
    elif isinstance(expression, BuilderExpression):
        for method_call in expression.method_calls:
            for argument in method_call.arguments:
                yield from iter_expressions(argument)


def _validation_problems(error: ValidationError) -> list[str]:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        problems.append(f"{location}: {item['msg']}" if location else item["msg"])
    return problems

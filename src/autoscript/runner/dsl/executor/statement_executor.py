"""Statement executor for DSL execution.

Executes DSL statements with proper flow control and scope management.
"""

from typing import TYPE_CHECKING

from ..errors import ExecutionError, TypeMismatchError
from ..statements.assignment_statement import AssignmentStatement
from ..statements.for_each_statement import ForEachStatement
from ..statements.if_statement import IfStatement
from ..statements.method_call_statement import MethodCallStatement
from ..statements.return_statement import ReturnStatement
from ..statements.statement import Statement
from ..statements.variable_declaration_statement import VariableDeclarationStatement
from ..types import TypeTag
from ..value import Value
from .execution_context import ExecutionContext
from .flow_control import NORMAL, Completion

if TYPE_CHECKING:
    from .expression_evaluator import ExpressionEvaluator


def element_value(item: object) -> Value:
    """Wrap an array element for binding to a loop variable; null becomes a null object."""
    if item is None:
        return Value(TypeTag.OBJECT, None)
    return Value.of(item)


class StatementExecutor:
    """Executes DSL statements within a call frame.

    The StatementExecutor is the runtime engine for the DSL. It takes DSL statements
    and executes them within an execution context, handling variable scoping, control
    flow (if, forEach, return), and expression evaluation.

    Every statement yields a :class:`Completion`. A return completion stops the
    block it occurs in and is passed outward through enclosing if-branches and
    loops until the call frame receives it. Block scopes are closed on the way
    out, including when an error is raised.

    Example:
        ```python
        executor = registry.executor
        context = ExecutionContext("example")

        completion = executor.execute_statements(
            [
                VariableDeclarationStatement(
                    variable_name="count",
                    variable_type="integer",
                    initial_value=LiteralExpression(value_type="integer", value=42),
                ),
                ReturnStatement(value=VariableExpression(name="count")),
            ],
            context,
        )
        completion.value   # Value(INTEGER, 42)
        ```
    """

    def __init__(self, evaluator: "ExpressionEvaluator") -> None:
        """Initialize statement executor.

        Args:
            evaluator: Evaluator used for every expression
        """
        self.evaluator = evaluator

    def execute(self, statement: Statement, context: ExecutionContext) -> Completion:
        """Execute a statement.

        Dispatches to the appropriate execution method based on statement type.

        Args:
            statement: Statement to execute
            context: Call frame to execute in

        Returns:
            The statement's completion

        Raises:
            ExecutionError: If statement execution fails
        """
        if isinstance(statement, VariableDeclarationStatement):
            return self._execute_variable_declaration(statement, context)
        elif isinstance(statement, AssignmentStatement):
            return self._execute_assignment(statement, context)
        elif isinstance(statement, IfStatement):
            return self._execute_if(statement, context)
        elif isinstance(statement, ForEachStatement):
            return self._execute_for_each(statement, context)
        elif isinstance(statement, ReturnStatement):
            return self._execute_return(statement, context)
        elif isinstance(statement, MethodCallStatement):
            return self._execute_method_call(statement, context)
        else:
            raise ExecutionError(
                f"Unknown statement type: {type(statement).__name__}",
                function_name=context.function_name,
                statement_type=getattr(statement, "statement_type", None),
            )

    def execute_statements(
        self, statements: list[Statement], context: ExecutionContext
    ) -> Completion:
        """Execute a list of statements in the current scope.

        Executes statements sequentially until completion or until one of
        them returns.

        Args:
            statements: List of statements to execute
            context: Call frame to execute in

        Returns:
            The return completion that stopped the block, or NORMAL
        """
        for statement in statements:
            completion = self.execute(statement, context)
            if completion.is_return:
                return completion
        return NORMAL

    def execute_block(self, statements: list[Statement], context: ExecutionContext) -> Completion:
        """Execute statements in a fresh child scope that is closed afterwards."""
        context.push_scope()
        try:
            return self.execute_statements(statements, context)
        finally:
            context.pop_scope()

    def _execute_variable_declaration(
        self, statement: VariableDeclarationStatement, context: ExecutionContext
    ) -> Completion:
        """Declare a variable in the current scope.

        Without an initial value the variable holds its type's default.
        """
        if statement.initial_value is not None:
            value = self.evaluator.evaluate(statement.initial_value, context)
        else:
            value = Value.default_for(statement.variable_type)

        context.declare(statement.variable_name, statement.variable_type, value)
        return NORMAL

    def _execute_assignment(
        self, statement: AssignmentStatement, context: ExecutionContext
    ) -> Completion:
        """Assign to the nearest enclosing variable of that name."""
        value = self.evaluator.evaluate(statement.value, context)
        context.assign(statement.variable_name, value)
        return NORMAL

    def _execute_if(self, statement: IfStatement, context: ExecutionContext) -> Completion:
        """Evaluate the condition and run one branch in its own scope."""
        condition = self.evaluator.evaluate(statement.condition, context)
        if condition.type is not TypeTag.BOOLEAN:
            raise TypeMismatchError(
                f"If condition must be boolean, got {condition.type.value}",
                function_name=context.function_name,
            )

        if condition.value:
            return self.execute_block(statement.then_statements, context)
        if statement.else_statements:
            return self.execute_block(statement.else_statements, context)
        return NORMAL

    def _execute_for_each(
        self, statement: ForEachStatement, context: ExecutionContext
    ) -> Completion:
        """Run the loop body once per array element.

        Each iteration gets a new scope holding the loop variable. A return
        from the body stops the loop; later elements are not visited.
        """
        collection = self.evaluator.evaluate(statement.collection, context)
        if collection.type is not TypeTag.ARRAY:
            raise TypeMismatchError(
                f"ForEach collection must be an array, got {collection.type.value}",
                function_name=context.function_name,
            )

        for item in list(collection.value):
            element = element_value(item)
            context.push_scope()
            try:
                context.declare(statement.variable_name, element.type, element)
                completion = self.execute_statements(statement.statements, context)
            finally:
                context.pop_scope()
            if completion.is_return:
                return completion

        return NORMAL

    def _execute_return(self, statement: ReturnStatement, context: ExecutionContext) -> Completion:
        value = None
        if statement.value is not None:
            value = self.evaluator.evaluate(statement.value, context)
        return Completion.returned(value)

    def _execute_method_call(
        self, statement: MethodCallStatement, context: ExecutionContext
    ) -> Completion:
        """Call a method for its side effects; the result is discarded."""
        self.evaluator.call(statement.object, statement.method, statement.arguments, context)
        return NORMAL

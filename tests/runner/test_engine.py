"""End-to-end tests for the engine entry points."""

import json

import pytest

from autoscript import (
    Engine,
    ExecutionResult,
    LoadError,
    StandardHostBinding,
    TypeTag,
    Value,
    execute,
    load,
    load_file,
)
from autoscript.config import EngineSettings, reset_settings
from autoscript.runner.dsl.errors import (
    ArgumentError,
    DivisionByZeroError,
    MethodNotFoundError,
)


@pytest.fixture
def instruction_set(scenario_document):
    return load(scenario_document)


@pytest.fixture
def engine(instruction_set, host):
    return Engine(instruction_set, host)


class TestLoad:
    """Test the load entry points."""

    def test_load_text(self, scenario_document):
        """Test loading JSON text and bytes."""
        text = json.dumps(scenario_document)

        assert load(text) == load(text.encode("utf-8"))

    def test_load_path(self, scenario_document, tmp_path):
        """Test loading from a pathlib.Path and load_file."""
        path = tmp_path / "doc.json"
        path.write_text(json.dumps(scenario_document), encoding="utf-8")

        assert load(path) == load_file(str(path))

    def test_load_failure_returns_nothing(self, scenario_document):
        """Test that no partial InstructionSet escapes a failed load."""
        scenario_document["automation_functions"][1]["statements"].append({"statementType": "??"})

        with pytest.raises(LoadError):
            load(scenario_document)


class TestScenarios:
    """The reference automation scenarios."""

    def test_add(self, engine):
        """add(5, 3) -> 8."""
        assert engine.execute("add", [5, 3]) == Value(TypeTag.INTEGER, 8)

    @pytest.mark.parametrize(
        "email,expected", [("user@example.com", True), ("invalid", False), ("", False)]
    )
    def test_is_valid_email(self, engine, email, expected):
        """isValidEmail checks for a non-empty address containing @."""
        assert engine.execute("isValidEmail", [email]) == Value(TypeTag.BOOLEAN, expected)

    def test_calculate_sum(self, engine):
        """calculateSum([1..5]) -> 15."""
        assert engine.execute("calculateSum", [[1, 2, 3, 4, 5]]) == Value.of(15)

    def test_count_positive(self, engine):
        """countPositive([-3, 5, -1, 8, 0, 2]) -> 3."""
        assert engine.execute("countPositive", [[-3, 5, -1, 8, 0, 2]]) == Value.of(3)

    @pytest.mark.parametrize(
        "score,grade", [(95, "A"), (90, "A"), (85, "B"), (70, "C"), (65, "D"), (12, "F")]
    )
    def test_calculate_grade(self, engine, score, grade):
        """calculateGrade uses thresholds 90/80/70/60."""
        assert engine.execute("calculateGrade", [score]) == Value.of(grade)

    def test_process_order(self, engine, recording_logger):
        """processOrder(150.0, "premium", true) -> "approved" at 115.0."""
        result = engine.execute("processOrder", [150.0, "premium", True])

        assert result == Value.of("approved")
        assert recording_logger.messages == ["Final amount: 115.0"]

    def test_process_order_regular_customer(self, engine, recording_logger):
        """A regular customer without discount pays the full amount."""
        result = engine.execute("processOrder", [Value.of(2000.0), Value.of("regular"), False])

        assert result == Value.of("review")
        assert recording_logger.messages == ["Final amount: 2000.0"]

    def test_process_order_integer_amount(self, engine, recording_logger):
        """An integer amount is accepted for the double parameter."""
        engine.execute("processOrder", [100, "regular", True])

        assert recording_logger.messages == ["Final amount: 95.0"]

    def test_forward_reference(self, engine):
        """addThree calls add, which is declared after it."""
        assert engine.execute("addThree", [1, 2, 3]) == Value.of(6)

    def test_builder(self, engine):
        """makeOrder builds an object through a host builder."""
        result = engine.execute("makeOrder", ["widget"])

        assert result == Value(TypeTag.OBJECT, {"item": "widget", "quantity": 2})


class TestVoidFunctions:
    """Test functions that return nothing."""

    def test_void_function_yields_no_value(self, engine, recording_logger):
        """A void function without return yields None and no error."""
        assert engine.execute("greet", ["Ada"]) is None
        assert recording_logger.messages == ["Hello, Ada"]

    def test_run_void_function(self, engine):
        """run reports success with no value."""
        result = engine.run("greet", ["Ada"])

        assert result == ExecutionResult(True, value=None, error=None, function_name="greet")


class TestFailures:
    """Test run-time failures surfacing to the caller."""

    def test_unknown_function(self, engine):
        """Only automation functions can be executed by name."""
        with pytest.raises(MethodNotFoundError, match="nope"):
            engine.execute("nope")

    def test_argument_error(self, engine):
        """Wrong arity is reported as ArgumentError."""
        with pytest.raises(ArgumentError):
            engine.execute("add", [1])

    def test_run_returns_failure(self, engine):
        """run turns errors into a failed result."""
        result = engine.run("add", [1, "two"])

        assert not result.success
        assert isinstance(result.error, ArgumentError)
        assert result.value is None
        assert result.function_name == "add"

    def test_result_to_dict(self, engine):
        """Test that failed and successful results describe themselves as plain data."""
        failed = engine.run("add", [1])
        succeeded = engine.run("add", [1, 2])

        report = failed.to_dict()
        assert report["success"] is False
        assert report["error"]["error"] == "ArgumentError"
        assert report["error"]["error_code"] == "ARGUMENT_ERROR"
        assert report["error"]["context"] == {"function_name": "add"}
        assert succeeded.to_dict() == {
            "success": True,
            "function_name": "add",
            "value": {"type": "integer", "value": 3},
        }

    def test_missing_host_object(self, instruction_set):
        """Without a logger the host call fails after earlier statements ran."""
        with pytest.raises(MethodNotFoundError, match="logger"):
            execute(instruction_set, "greet", ["Ada"], host=StandardHostBinding())

    def test_errors_are_not_logged(self, engine, capsys):
        """The engine leaves error reporting to its caller."""
        engine.run("add", [1])

        captured = capsys.readouterr()
        assert "ARGUMENT_ERROR" not in captured.err

    def test_run_time_error_in_nested_call(self, host):
        """Errors from a callee propagate through the caller unchanged."""
        instruction_set = load(
            {
                "automation_functions": [
                    {
                        "id": 1,
                        "name": "outer",
                        "return_type": "integer",
                        "parameters": [],
                        "statements": [
                            {
                                "statementType": "return",
                                "value": {"expressionType": "methodCall", "method": "inner"},
                            }
                        ],
                    },
                    {
                        "id": 2,
                        "name": "inner",
                        "return_type": "integer",
                        "parameters": [],
                        "statements": [
                            {
                                "statementType": "return",
                                "value": {
                                    "expressionType": "binaryOperation",
                                    "operator": "/",
                                    "left": {
                                        "expressionType": "literal",
                                        "valueType": "integer",
                                        "value": 1,
                                    },
                                    "right": {
                                        "expressionType": "literal",
                                        "valueType": "integer",
                                        "value": 0,
                                    },
                                },
                            }
                        ],
                    },
                ]
            }
        )

        result = Engine(instruction_set, host).run("outer")

        assert isinstance(result.error, DivisionByZeroError)
        assert result.error.function_name == "inner"


class TestEngineFacade:
    """Test the module-level helpers and introspection."""

    def test_execute_function(self, instruction_set, host):
        """The module-level execute matches Engine.execute."""
        assert execute(instruction_set, "add", [Value.of(2), Value.of(2)], host=host) == Value.of(4)

    def test_function_names(self, engine):
        """function_names lists functions in document order."""
        assert engine.function_names()[0] == "addThree"
        assert len(engine.function_names()) == 9

    def test_signature(self, engine):
        """signature renders the function header."""
        assert engine.signature("add") == "add(a: integer, b: integer): integer"

        with pytest.raises(MethodNotFoundError):
            engine.signature("nope")

    def test_settings_are_applied(self, instruction_set, host):
        """Explicit settings reach the registry."""
        engine = Engine(instruction_set, host, EngineSettings(widen_integer_to_double=False))

        with pytest.raises(ArgumentError):
            engine.execute("processOrder", [100, "regular", True])

    def test_environment_settings(self, instruction_set, host, monkeypatch):
        """Settings are read from AUTOSCRIPT_* variables."""
        monkeypatch.setenv("AUTOSCRIPT_MAX_CALL_DEPTH", "1")
        reset_settings()

        engine = Engine(instruction_set, host)

        assert engine.settings.max_call_depth == 1
        assert engine.run("addThree", [1, 2, 3]).success is False

    def test_engines_share_instruction_set(self, instruction_set, host):
        """One InstructionSet can back several engines."""
        first = Engine(instruction_set, host)
        second = Engine(instruction_set, StandardHostBinding())

        assert first.execute("add", [1, 1]) == second.execute("add", [1, 1])

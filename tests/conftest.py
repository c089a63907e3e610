"""Pytest configuration and fixtures."""

import pytest

from autoscript.config import EngineSettings, reset_settings
from autoscript.runner.dsl.host import StandardHostBinding


class RecordingLogger:
    """Host object that records every message logged by a script."""

    def __init__(self):
        self.messages = []

    def log(self, message):
        self.messages.append(message)

    def log_count(self):
        return len(self.messages)


class Calculator:
    """Host object with methods that return values."""

    def __init__(self):
        self.calls = []

    def add(self, a, b):
        self.calls.append(("add", a, b))
        return a + b

    def fail(self):
        raise RuntimeError("calculator exploded")


class OrderBuilder:
    """Fluent builder whose setters return the builder."""

    def __init__(self):
        self.fields = {}

    def with_item(self, item):
        self.fields["item"] = item
        return self

    def with_quantity(self, quantity):
        self.fields["quantity"] = quantity
        return self

    def build(self):
        return dict(self.fields)


class SetterBuilder:
    """Builder whose setters return nothing."""

    def __init__(self):
        self.name = None

    def set_name(self, name):
        self.name = name

    def build(self):
        return {"name": self.name}


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from AUTOSCRIPT_* variables and the settings singleton."""
    for key in ("MAX_CALL_DEPTH", "WIDEN_INTEGER_TO_DOUBLE", "LOG_LEVEL", "STRUCTURED_LOGGING"):
        monkeypatch.delenv(f"AUTOSCRIPT_{key}", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings():
    """Default engine settings."""
    return EngineSettings()


@pytest.fixture
def recording_logger():
    """Provide a logger host object that records messages."""
    return RecordingLogger()


@pytest.fixture
def calculator():
    """Provide a calculator host object."""
    return Calculator()


@pytest.fixture
def host(recording_logger, calculator):
    """Provide a host binding with a logger, a calculator and two builders."""
    binding = StandardHostBinding()
    binding.register_object("logger", recording_logger)
    binding.register_object("calculator", calculator)
    binding.register_builder("Order.Builder", OrderBuilder)
    binding.register_builder("Setter.Builder", SetterBuilder)
    return binding

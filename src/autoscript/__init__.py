"""Autoscript: an execution engine for JSON-encoded automation functions.

Usage:
    from autoscript import StandardHostBinding, execute, load

    instruction_set = load(document)
    result = execute(instruction_set, "add", [5, 3])
"""

from .base_exceptions import AutoscriptException
from .config import EngineSettings, get_settings
from .runner import (
    AutomationFunction,
    Engine,
    ExecutionResult,
    HostBinding,
    InstructionSet,
    Parameter,
    StandardHostBinding,
    TypeTag,
    Value,
    execute,
    load,
    load_file,
)
from .runner.dsl.errors import ExecutionError, LoadError

__version__ = "0.1.0"

__all__ = [
    "AutomationFunction",
    "AutoscriptException",
    "Engine",
    "EngineSettings",
    "ExecutionError",
    "ExecutionResult",
    "HostBinding",
    "InstructionSet",
    "LoadError",
    "Parameter",
    "StandardHostBinding",
    "TypeTag",
    "Value",
    "execute",
    "get_settings",
    "load",
    "load_file",
]

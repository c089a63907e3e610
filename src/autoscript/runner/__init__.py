"""Runner package.

The runner package provides the Domain Specific Language (DSL), its JSON
loader and the engine that executes automation functions.

Key components:
- DSL: Data model, type system and executor for automation functions
- JSON: Parsing and static validation of JSON automation documents
- Engine: ``load`` / ``execute`` entry points for host applications
"""

from .dsl import AutomationFunction, InstructionSet, Parameter, TypeTag, Value
from .dsl.host import HostBinding, StandardHostBinding
from .engine import Engine, ExecutionResult, execute, load, load_file

__all__ = [
    "AutomationFunction",
    "Engine",
    "ExecutionResult",
    "HostBinding",
    "InstructionSet",
    "Parameter",
    "StandardHostBinding",
    "TypeTag",
    "Value",
    "execute",
    "load",
    "load_file",
]

"""JSON infrastructure package.

Handles JSON parsing, serialization, and validation for the DSL.
"""

from .dsl_parser import DSLParser, DSLValidator
from .schema import AutomationFunctionSchema, DocumentSchema, ParameterSchema

__all__ = [
    "AutomationFunctionSchema",
    "DocumentSchema",
    "DSLParser",
    "DSLValidator",
    "ParameterSchema",
]

"""
Pydantic models for the automation document envelope.

These models validate the outer structure of a document: the function list,
function headers and parameters. Statement and expression trees are parsed by
the DSL classes themselves, which know their discriminator fields.
"""

from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr


class ParameterSchema(BaseModel):
    """A function parameter as written in a document."""

    name: StrictStr = Field(min_length=1)
    type: StrictStr


class AutomationFunctionSchema(BaseModel):
    """An automation function header plus its raw statement list."""

    id: StrictInt
    name: StrictStr = Field(min_length=1)
    description: StrictStr = ""
    return_type: StrictStr = Field(alias="returnType")
    parameters: list[ParameterSchema]
    statements: list[dict[str, Any]]

    model_config = {"populate_by_name": True}


class DocumentSchema(BaseModel):
    """Root of an automation document."""

    automation_functions: list[AutomationFunctionSchema] = Field(alias="automationFunctions")

    model_config = {"populate_by_name": True}

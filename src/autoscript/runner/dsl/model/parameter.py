"""Parameter model.

Represents a parameter definition for automation functions in the DSL.
"""

from dataclasses import dataclass
from typing import Any

from ..types import TypeTag


@dataclass
class Parameter:
    """Represents a parameter definition for automation functions.

    Parameters allow functions to accept input values, making them reusable
    and configurable. When a function is invoked, arguments are matched to
    parameters by position and checked against the declared type.

    Example in JSON (as part of a function definition):
        "parameters": [
            {"name": "elementId", "type": "string"},
            {"name": "timeout", "type": "integer"},
            {"name": "retry", "type": "boolean"}
        ]
    """

    name: str = ""
    """The name of the parameter, bound as a variable in the function body."""

    type: TypeTag = TypeTag.OBJECT
    """The declared type of the parameter. Never ``void``."""

    def __post_init__(self) -> None:
        self.type = TypeTag(self.type)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type.value}

    def __str__(self) -> str:
        return f"{self.name}: {self.type.value}"

"""Automation function.

Represents a single named, typed, callable unit in the DSL.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .types import TypeTag

if TYPE_CHECKING:
    from .model.parameter import Parameter
    from .statements.statement import Statement


@dataclass
class AutomationFunction:
    """Represents a single automation function in the DSL.

    An automation function is a reusable unit of automation logic that can:
    - Accept parameters for customization
    - Execute a series of statements to perform automation tasks
    - Return a value to the caller
    - Call other automation functions, including itself

    Functions are created once when a document is loaded and are not
    modified afterwards.
    """

    id: int = 0
    """Unique identifier for this function within its InstructionSet."""

    name: str = ""
    """The name of this function, used when calling it from other functions
    or from the host."""

    description: str = ""
    """Human-readable description of what this function does."""

    return_type: TypeTag = TypeTag.VOID
    """The type this function returns, ``void`` when it returns nothing."""

    parameters: list[Parameter] = field(default_factory=list)
    """Ordered parameters; arguments bind to them by position."""

    statements: list[Statement] = field(default_factory=list)
    """The function body, executed sequentially when the function is called."""

    def __post_init__(self) -> None:
        self.return_type = TypeTag(self.return_type)

    def signature(self) -> str:
        """Human-readable signature, e.g. ``add(a: integer, b: integer): integer``."""
        params = ", ".join(str(param) for param in self.parameters)
        return f"{self.name}({params}): {self.return_type.value}"

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.description:
            result["description"] = self.description
        result["return_type"] = self.return_type.value
        result["parameters"] = [param.to_dict() for param in self.parameters]
        result["statements"] = [stmt.to_dict() for stmt in self.statements]
        return result

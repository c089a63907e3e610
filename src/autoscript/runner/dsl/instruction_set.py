"""Instruction set.

Root data structure for a loaded automation document.
"""

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .automation_function import AutomationFunction


@dataclass
class InstructionSet:
    """Root data structure for DSL automation definitions.

    This class serves as the top-level container for the automation functions
    of one JSON document. Functions are kept in document order and looked up
    by name. An InstructionSet is read-only once loaded, so it can be shared by
    several engines without locking.
    """

    automation_functions: list[AutomationFunction] = field(default_factory=list)
    """Functions defined in this document. Each may call any other."""

    def get_function(self, name: str) -> AutomationFunction | None:
        """Find a function by name.

        Args:
            name: Function name

        Returns:
            The function, or None if no function has that name
        """
        for function in self.automation_functions:
            if function.name == name:
                return function
        return None

    def function_names(self) -> list[str]:
        return [function.name for function in self.automation_functions]

    def __contains__(self, name: object) -> bool:
        return any(function.name == name for function in self.automation_functions)

    def __iter__(self) -> Iterator[AutomationFunction]:
        return iter(self.automation_functions)

    def __len__(self) -> int:
        return len(self.automation_functions)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the canonical document representation."""
        return {
            "automation_functions": [function.to_dict() for function in self.automation_functions]
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

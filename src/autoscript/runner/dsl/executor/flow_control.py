"""Statement completions.

Executing a block of statements yields a :class:`Completion`: either normal
fall-through or an early return carrying an optional value. Completions are
returned, not raised, so a return inside nested blocks is passed outward one
block at a time until it reaches the call frame.
"""

from dataclasses import dataclass
from enum import Enum

from ..value import Value


class CompletionKind(Enum):
    """How a block of statements finished."""

    NORMAL = "normal"
    RETURNED = "returned"


@dataclass(frozen=True)
class Completion:
    """Outcome of executing a statement or block.

    Attributes:
        kind: NORMAL when execution fell off the end, RETURNED after a return
        value: The returned value; None for a bare ``return``
    """

    kind: CompletionKind
    value: Value | None = None

    @classmethod
    def returned(cls, value: Value | None = None) -> "Completion":
        return cls(CompletionKind.RETURNED, value)

    @property
    def is_return(self) -> bool:
        return self.kind is CompletionKind.RETURNED


NORMAL = Completion(CompletionKind.NORMAL)
"""Completion of a block that ran to its end."""

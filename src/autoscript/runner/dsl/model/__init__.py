"""DSL model package.

Model classes for the Domain Specific Language.
"""

from .parameter import Parameter

__all__ = [
    "Parameter",
]

"""Host binding package.

Connects automation scripts to the objects and functions of the host
application.
"""

from .host_binding import HostBinding, HostCallable
from .standard_binding import ARRAY_METHODS, STRING_METHODS, StandardHostBinding

__all__ = [
    "HostBinding",
    "HostCallable",
    "StandardHostBinding",
    "STRING_METHODS",
    "ARRAY_METHODS",
]

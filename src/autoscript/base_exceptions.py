"""Root of the autoscript exception hierarchy."""

from typing import Any


class AutoscriptException(Exception):
    """Base exception for every error the engine raises.

    Subclasses set ``code``; an explicit ``error_code`` overrides it for a
    single instance.

    Attributes:
        message: Human-readable error message
        error_code: Stable identifier for programmatic handling
        context: Structured details, e.g. the failing function or variable
    """

    code: str | None = None

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.code
        self.context = {key: value for key, value in (context or {}).items() if value is not None}

    def to_dict(self) -> dict[str, Any]:
        """Describe the error as plain data for reports and logs."""
        return {
            "error": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": dict(self.context),
        }

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

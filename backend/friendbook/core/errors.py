from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION_ERROR"
    INTERNAL = "INTERNAL_SERVER_ERROR"

    @property
    def status_code(self) -> int:
        return 400 if self is ErrorKind.VALIDATION else 500

    @property
    def message(self) -> str:
        return "Validation Error" if self is ErrorKind.VALIDATION else "Internal Server Error"

    def envelope(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "code": self.status_code,
            "errorCode": self.value,
            "message": self.message,
        }
        # Validation details are logged server-side, never returned.
        if self is ErrorKind.VALIDATION:
            body["errors"] = []
        return body


NOT_FOUND_MESSAGE = "Friend not found"


class DiagnosticError(Exception):
    """Synthetic failure raised on purpose to exercise error reporting."""

"""InvalidFormat — the single error kind raised by the parsers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

MISSING_FIELD = "MISSING_FIELD"
BAD_FIELD = "BAD_FIELD"
UNPARSEABLE = "UNPARSEABLE"


class FormatError(BaseModel):
    """Structured error payload for a rejected date string."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class InvalidFormat(ValueError):
    """Raised when a date string cannot be turned into an instant.

    Attributes:
        error: The structured payload describing which field failed.
    """

    def __init__(self, error: FormatError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> str:
        return self.error.code

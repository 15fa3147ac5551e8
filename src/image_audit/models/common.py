"""Models shared across modules."""

from typing import Any

from pydantic import BaseModel, Field


class AuditError(BaseModel):
    """A fatal error as reported in machine-readable output.

    Emitted in place of an audit document when the run cannot produce
    one, e.g. because the catalog could not be listed.
    """

    model_config = {"frozen": True}

    code: str = Field(description="Stable error code, e.g. RETRIEVAL_ERROR")
    message: str = Field(description="Human-readable message")
    details: dict[str, Any] = Field(default_factory=dict, description="Error context such as the failing source")

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

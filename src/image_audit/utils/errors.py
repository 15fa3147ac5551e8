"""Error types for image-audit."""

from __future__ import annotations

from typing import Any

from image_audit.models.common import AuditError


class ImageAuditError(Exception):
    """Base exception for image-audit."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_audit_error(self) -> AuditError:
        """Convert to AuditError model."""
        return AuditError(code=self.code, message=self.message, details=self.details)


class SchemaCompilationError(ImageAuditError):
    """A schema definition could not be compiled.

    Fatal to an audit run: nothing can be validated without a schema.
    """

    def __init__(self, message: str, version: str | None = None):
        details = {"version": version} if version else {}
        super().__init__(message, code="SCHEMA_ERROR", details=details)


class ImageRetrievalError(ImageAuditError):
    """The image catalog could not be listed (auth, transport or decode)."""

    def __init__(self, message: str, source: str | None = None):
        details = {"source": source} if source else {}
        super().__init__(message, code="RETRIEVAL_ERROR", details=details)


class ConfigurationError(ImageAuditError):
    """Configuration error."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)

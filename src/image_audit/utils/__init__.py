"""Utility functions for image-audit."""

from image_audit.utils.logging import configure_logging, get_logger, get_logger_with_context
from image_audit.utils.errors import (
    ImageAuditError,
    SchemaCompilationError,
    ImageRetrievalError,
    ConfigurationError,
)
from image_audit.utils.config import (
    AuditConfig,
    CatalogConfig,
    ValidationConfig,
    OutputConfig,
    load_config,
    save_config,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "ImageAuditError",
    "SchemaCompilationError",
    "ImageRetrievalError",
    "ConfigurationError",
    # Config
    "AuditConfig",
    "CatalogConfig",
    "ValidationConfig",
    "OutputConfig",
    "load_config",
    "save_config",
]

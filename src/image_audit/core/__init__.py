"""Core audit engine."""

from image_audit.core.registry import SchemaRegistry, compile_schema, default_registry
from image_audit.core.classifier import Classifier, is_eligible
from image_audit.core.audit import ImageAuditor, summarize

__all__ = [
    "SchemaRegistry",
    "compile_schema",
    "default_registry",
    "Classifier",
    "is_eligible",
    "ImageAuditor",
    "summarize",
]

"""Data models for image-audit.

All models are Pydantic BaseModel with frozen=True for immutability.
"""

from image_audit.models.common import AuditError
from image_audit.models.image import ImageRecord
from image_audit.models.schema import KeyConstraint, Schema
from image_audit.models.outcome import (
    AuditReport,
    AuditSummary,
    Conforming,
    Defect,
    DefectCategory,
    ExtractedFields,
    GpuFields,
    NonConforming,
    OsFields,
    PackageFields,
    PlatformFields,
    ValidationOutcome,
)

__all__ = [
    # Common
    "AuditError",
    # Image
    "ImageRecord",
    # Schema
    "KeyConstraint",
    "Schema",
    # Outcome
    "AuditReport",
    "AuditSummary",
    "Conforming",
    "Defect",
    "DefectCategory",
    "ExtractedFields",
    "GpuFields",
    "NonConforming",
    "OsFields",
    "PackageFields",
    "PlatformFields",
    "ValidationOutcome",
]

"""image-audit: Audit cloud image metadata against the Unikorn image schema.

Operators publishing images into a shared catalog attach free-form
``unikorn:`` properties describing the operating system, packages, GPU
and virtualization support. This package checks those properties:

- **Schema Registry**: compiles versioned schemas once, at startup
- **Classifier**: decides conformance for one property bag and explains failures
- **Catalogs**: list images from OpenStack (openstacksdk or Glance over HTTP) or a file

Usage:
    from image_audit import Classifier, default_registry

    schema = default_registry().get("v2")
    outcome = Classifier(schema).classify(image_properties)

    if outcome.conforming:
        print(outcome.fields.os.distro)
    else:
        for defect in outcome.defects:
            print(defect.message, defect.keys)

CLI:
    image-audit audit --cloud <cloud>
    image-audit check <properties.yaml>
    image-audit schema
"""

__version__ = "0.1.0"

# Core
from image_audit.core.registry import SchemaRegistry, compile_schema, default_registry
from image_audit.core.classifier import Classifier, is_eligible
from image_audit.core.audit import ImageAuditor, summarize

# Models
from image_audit.models.image import ImageRecord
from image_audit.models.schema import KeyConstraint, Schema
from image_audit.models.outcome import (
    AuditReport,
    AuditSummary,
    Conforming,
    Defect,
    DefectCategory,
    ExtractedFields,
    NonConforming,
    ValidationOutcome,
)

# Catalogs
from image_audit.catalog.base import ImageCatalog

# Errors
from image_audit.utils.errors import (
    ImageAuditError,
    ImageRetrievalError,
    SchemaCompilationError,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "SchemaRegistry",
    "compile_schema",
    "default_registry",
    "Classifier",
    "is_eligible",
    "ImageAuditor",
    "summarize",
    # Models
    "ImageRecord",
    "KeyConstraint",
    "Schema",
    "AuditReport",
    "AuditSummary",
    "Conforming",
    "Defect",
    "DefectCategory",
    "ExtractedFields",
    "NonConforming",
    "ValidationOutcome",
    # Catalogs
    "ImageCatalog",
    # Errors
    "ImageAuditError",
    "ImageRetrievalError",
    "SchemaCompilationError",
]

"""Validation outcome models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, Field, computed_field

from image_audit.models.image import ImageRecord


class DefectCategory(str, Enum):
    """Violation group a defect belongs to.

    Values match the JSON Schema keyword the violations are grouped by.
    """

    MISSING = "required"
    INVALID = "properties"


DEFECT_MESSAGES = {
    DefectCategory.MISSING: "Required properties do not exist",
    DefectCategory.INVALID: "Object properties failed validation or do not exist",
}


class Defect(BaseModel):
    """One violation category together with every offending key."""

    model_config = {"frozen": True}

    category: DefectCategory = Field(description="Violation category")
    keys: tuple[str, ...] = Field(description="Offending property keys")

    @computed_field
    @property
    def message(self) -> str:
        return DEFECT_MESSAGES[self.category]


class FieldGroup(BaseModel):
    """Base for a group of extracted fields.

    ``KEYS`` maps each field name to its property key suffix; the
    namespace prefix is prepended at extraction time.
    """

    model_config = {"frozen": True}

    KEYS: ClassVar[dict[str, str]] = {}

    @classmethod
    def extract(cls, properties: dict[str, Any], prefix: str) -> "FieldGroup":
        return cls(**{name: properties.get(prefix + suffix) for name, suffix in cls.KEYS.items()})


class OsFields(FieldGroup):
    KEYS: ClassVar[dict[str, str]] = {
        "kernel": "os:kernel",
        "family": "os:family",
        "distro": "os:distro",
        "variant": "os:variant",
        "codename": "os:codename",
        "version": "os:version",
    }

    kernel: str | None = None
    family: str | None = None
    distro: str | None = None
    variant: str | None = None
    codename: str | None = None
    version: str | None = None


class PackageFields(FieldGroup):
    KEYS: ClassVar[dict[str, str]] = {
        "kubernetes": "package:kubernetes",
        "slurmd": "package:slurmd",
    }

    kubernetes: str | None = None
    slurmd: str | None = None


class GpuFields(FieldGroup):
    KEYS: ClassVar[dict[str, str]] = {
        "vendor": "gpu_vendor",
        "models": "gpu_models",
        "driver": "gpu_driver",
    }

    vendor: str | None = None
    models: str | None = None
    driver: str | None = None


class PlatformFields(FieldGroup):
    KEYS: ClassVar[dict[str, str]] = {
        "virtualization": "virtualization",
        "digest": "digest",
    }

    virtualization: str | None = None
    digest: str | None = None


class ExtractedFields(BaseModel):
    """Grouped view of a conforming property bag.

    Every member is always present; ``None`` marks an optional key the
    image does not carry.
    """

    model_config = {"frozen": True}

    os: OsFields = Field(default_factory=OsFields)
    package: PackageFields = Field(default_factory=PackageFields)
    gpu: GpuFields = Field(default_factory=GpuFields)
    platform: PlatformFields = Field(default_factory=PlatformFields)

    @classmethod
    def from_properties(cls, properties: dict[str, Any], prefix: str) -> "ExtractedFields":
        """Copy recognized values verbatim out of a property bag."""
        return cls(
            os=OsFields.extract(properties, prefix),
            package=PackageFields.extract(properties, prefix),
            gpu=GpuFields.extract(properties, prefix),
            platform=PlatformFields.extract(properties, prefix),
        )


class Conforming(BaseModel):
    """All required keys are present and every recognized value is valid."""

    model_config = {"frozen": True}

    status: Literal["conforming"] = "conforming"
    fields: ExtractedFields = Field(description="Extracted field groups")

    @property
    def conforming(self) -> bool:
        return True


class NonConforming(BaseModel):
    """One or more property defects were found."""

    model_config = {"frozen": True}

    status: Literal["non_conforming"] = "non_conforming"
    defects: tuple[Defect, ...] = Field(description="Defects in report order")

    @property
    def conforming(self) -> bool:
        return False

    def keys_for(self, category: DefectCategory) -> tuple[str, ...]:
        """Get offending keys for a category (empty if none)."""
        for defect in self.defects:
            if defect.category == category:
                return defect.keys
        return ()


ValidationOutcome = Annotated[Union[Conforming, NonConforming], Field(discriminator="status")]


class AuditReport(BaseModel):
    """The audit result for a single eligible image."""

    model_config = {"frozen": True}

    image: ImageRecord = Field(description="The audited image")
    schema_version: str = Field(description="Schema version used")
    outcome: ValidationOutcome = Field(description="Classification outcome")

    @property
    def size_gib(self) -> int:
        return self.image.size_gib

    @property
    def conforming(self) -> bool:
        return self.outcome.conforming


class AuditSummary(BaseModel):
    """Counts over an audit run."""

    model_config = {"frozen": True}

    total: int = 0
    conforming: int = 0
    non_conforming: int = 0
    skipped: int = 0

    @property
    def passed(self) -> bool:
        return self.non_conforming == 0

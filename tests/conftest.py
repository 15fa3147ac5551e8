"""Shared test fixtures for image-audit tests."""

from datetime import datetime, timezone
from typing import Any

import pytest

from image_audit.core.classifier import Classifier
from image_audit.core.registry import SchemaRegistry
from image_audit.models.image import ImageRecord
from image_audit.models.schema import Schema


@pytest.fixture
def schema_v2() -> Schema:
    """Compile the built-in v2 schema."""
    return SchemaRegistry().get("v2")


@pytest.fixture
def classifier(schema_v2: Schema) -> Classifier:
    """Create a classifier for schema v2."""
    return Classifier(schema_v2)


@pytest.fixture
def minimal_properties() -> dict[str, str]:
    """Only the required v2 properties."""
    return {
        "unikorn:os:kernel": "linux",
        "unikorn:os:family": "debian",
        "unikorn:os:distro": "ubuntu",
        "unikorn:os:version": "22.04",
        "unikorn:virtualization": "any",
    }


@pytest.fixture
def full_properties(minimal_properties: dict[str, str]) -> dict[str, str]:
    """Every v2 property, plus some the schema does not know."""
    return {
        **minimal_properties,
        "unikorn:os:variant": "server",
        "unikorn:os:codename": "jammy",
        "unikorn:package:kubernetes": "v1.30.2",
        "unikorn:package:slurmd": "23.11.4",
        "unikorn:gpu_vendor": "NVIDIA",
        "unikorn:gpu_models": "H100,A100",
        "unikorn:gpu_driver": "550.54.15",
        "unikorn:digest": "sha256:9f86d081884c7d659a2feaa0c55ad015",
        "hw_disk_bus": "scsi",
        "os_distro": "ubuntu",
    }


@pytest.fixture
def make_record():
    """Factory for image records."""

    def _make(
        properties: dict[str, Any],
        image_id: str = "0d6e4cb6-5c1d-4b8e-9c59-5e8f1f9a7c11",
        name: str = "ubuntu-22.04",
        size_bytes: int = 3221225472,
    ) -> ImageRecord:
        return ImageRecord(
            id=image_id,
            name=name,
            created_at=datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc),
            size_bytes=size_bytes,
            properties=properties,
        )

    return _make


@pytest.fixture
def images_file(tmp_path, minimal_properties):
    """Write a saved Glance listing with one good, one bad and one foreign image."""
    content = """
images:
  - id: img-good
    name: ubuntu-22.04
    created_at: "2024-06-01T12:00:00Z"
    size: 3221225472
    status: active
    visibility: public
    unikorn:os:kernel: linux
    unikorn:os:family: debian
    unikorn:os:distro: ubuntu
    unikorn:os:version: "22.04"
    unikorn:virtualization: any
  - id: img-bad
    name: broken
    created_at: "2024-06-02T12:00:00Z"
    size: 3400000000
    unikorn:os:kernel: linux
  - id: img-foreign
    name: cirros
    size: 16338944
    hw_disk_bus: virtio
"""
    path = tmp_path / "images.yaml"
    path.write_text(content)
    return path

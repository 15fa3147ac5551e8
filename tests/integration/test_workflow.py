"""Integration tests for end-to-end workflows."""

import json

import httpx
import pytest

from image_audit.catalog.file import FileCatalog
from image_audit.catalog.glance import GlanceCatalog
from image_audit.core.audit import ImageAuditor, summarize
from image_audit.core.registry import SchemaRegistry
from image_audit.models.outcome import DefectCategory
from image_audit.renderers import JSONRenderer, RenderContext, TerminalRenderer, audit_document
from image_audit.renderers.base import OutputFormat


class TestFileWorkflow:
    """Audit a saved listing from file to rendered report."""

    @pytest.fixture
    def reports(self, images_file):
        schema = SchemaRegistry().get("v2")
        auditor = ImageAuditor(schema)
        reports = list(auditor.audit(FileCatalog(images_file).list_images()))
        return reports, summarize(reports, skipped=auditor.skipped)

    def test_outcomes(self, reports):
        reports, summary = reports

        assert [report.image.id for report in reports] == ["img-good", "img-bad"]
        good, bad = reports

        assert good.conforming
        assert good.outcome.fields.os.version == "22.04"
        assert good.outcome.fields.os.variant is None
        assert good.outcome.fields.gpu.vendor is None

        assert not bad.conforming
        assert bad.outcome.keys_for(DefectCategory.MISSING) == (
            "unikorn:os:family",
            "unikorn:os:distro",
            "unikorn:os:version",
            "unikorn:virtualization",
        )
        assert bad.outcome.keys_for(DefectCategory.INVALID) == ()

        assert summary.total == 2
        assert summary.skipped == 1
        assert not summary.passed

    def test_sizes(self, reports):
        reports, _ = reports
        assert [report.size_gib for report in reports] == [3, 3]

    def test_terminal_file(self, reports, tmp_path):
        reports, summary = reports
        output = tmp_path / "report.txt"
        context = RenderContext(format=OutputFormat.TERMINAL, output_path=output, color=False)

        TerminalRenderer().render_to_file(reports + [summary], context)

        text = output.read_text()
        assert text.count("---") == 2
        assert "createdAt: 2024-06-01T12:00:00+00:00" in text
        assert "  - message: Required properties do not exist" in text
        assert (
            "    properties: [unikorn:os:family unikorn:os:distro "
            "unikorn:os:version unikorn:virtualization]"
        ) in text
        assert "\x1b[" not in text


class TestGlanceWorkflow:
    """Audit a paginated Glance listing into a JSON document."""

    def test_paginated_audit(self, minimal_properties):
        pages = {
            "/v2/images": {
                "images": [
                    {"id": "a", "name": "ubuntu", "size": 3221225472, **minimal_properties},
                    {"id": "b", "name": "cirros", "size": 16338944},
                ],
                "next": "/v2/images?marker=b",
            },
            "/v2/images?marker=b": {
                "images": [
                    {
                        "id": "c",
                        "name": "windows",
                        "size": 3400000000,
                        **minimal_properties,
                        "unikorn:os:kernel": "windows",
                    },
                ],
            },
        }

        def handler(request: httpx.Request) -> httpx.Response:
            key = request.url.path
            if "marker" in request.url.params:
                key += f"?marker={request.url.params['marker']}"
            return httpx.Response(200, json=pages[key])

        catalog = GlanceCatalog(
            "https://image.example.com/v2/",
            token="secret",
            transport=httpx.MockTransport(handler),
        )
        schema = SchemaRegistry().get("v2")
        auditor = ImageAuditor(schema)

        reports = list(auditor.audit(catalog.list_images()))
        summary = summarize(reports, skipped=auditor.skipped)
        document = audit_document(reports, summary, schema.version)
        data = json.loads(JSONRenderer().render(document, RenderContext(format=OutputFormat.JSON)))

        assert [image["image"]["id"] for image in data["images"]] == ["a", "c"]
        assert data["images"][0]["outcome"]["status"] == "conforming"
        assert data["images"][1]["outcome"]["defects"] == [
            {
                "category": "properties",
                "keys": ["unikorn:os:kernel"],
                "message": "Object properties failed validation or do not exist",
            }
        ]
        assert data["summary"] == {"total": 2, "conforming": 1, "non_conforming": 1, "skipped": 1}

"""Unit tests for the ImageAuditor."""

from image_audit.core.audit import ImageAuditor, summarize
from image_audit.models.outcome import Conforming, NonConforming


class TestImageAuditor:
    """Tests for ImageAuditor."""

    def test_skips_ineligible(self, schema_v2, make_record, minimal_properties):
        """Test images without namespaced keys produce no report."""
        records = [
            make_record(minimal_properties, image_id="a"),
            make_record({"os_distro": "cirros"}, image_id="b"),
            make_record({}, image_id="c"),
        ]
        auditor = ImageAuditor(schema_v2)

        reports = list(auditor.audit(records))

        assert [r.image.id for r in reports] == ["a"]
        assert auditor.skipped == 2

    def test_non_conforming_does_not_stop_run(self, schema_v2, make_record, minimal_properties):
        """Test every eligible image is reported, in order."""
        records = [
            make_record({"unikorn:os:kernel": "linux"}, image_id="bad-1"),
            make_record(minimal_properties, image_id="good"),
            make_record({"unikorn:os:kernel": "windows"}, image_id="bad-2"),
        ]

        reports = list(ImageAuditor(schema_v2).audit(records))

        assert [r.image.id for r in reports] == ["bad-1", "good", "bad-2"]
        assert isinstance(reports[0].outcome, NonConforming)
        assert isinstance(reports[1].outcome, Conforming)
        assert isinstance(reports[2].outcome, NonConforming)

    def test_report_fields(self, schema_v2, make_record, minimal_properties):
        record = make_record(minimal_properties, size_bytes=3400000000)

        report = ImageAuditor(schema_v2).audit_one(record)

        assert report.schema_version == "v2"
        assert report.size_gib == 3
        assert report.conforming

    def test_audit_is_lazy(self, schema_v2, make_record, minimal_properties):
        """Test reports stream one image at a time."""
        seen = []

        def records():
            for image_id in ("a", "b"):
                seen.append(image_id)
                yield make_record(minimal_properties, image_id=image_id)

        stream = ImageAuditor(schema_v2).audit(records())
        first = next(stream)

        assert first.image.id == "a"
        assert seen == ["a"]


class TestSummarize:
    """Tests for summarize."""

    def test_counts(self, schema_v2, make_record, minimal_properties):
        auditor = ImageAuditor(schema_v2)
        reports = list(
            auditor.audit(
                [
                    make_record(minimal_properties),
                    make_record({"unikorn:os:kernel": "linux"}),
                    make_record({"other": "x"}),
                ]
            )
        )

        summary = summarize(reports, skipped=auditor.skipped)

        assert summary.total == 2
        assert summary.conforming == 1
        assert summary.non_conforming == 1
        assert summary.skipped == 1
        assert not summary.passed

    def test_empty(self):
        summary = summarize([])
        assert summary.total == 0
        assert summary.passed

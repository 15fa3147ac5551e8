"""Audit driver: filter, classify and report one image at a time."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from image_audit.core.classifier import Classifier, is_eligible
from image_audit.models.image import ImageRecord
from image_audit.models.outcome import AuditReport, AuditSummary
from image_audit.models.schema import Schema
from image_audit.schemas import NAMESPACE_PREFIX
from image_audit.utils.logging import get_logger, get_logger_with_context

logger = get_logger("audit")


class ImageAuditor:
    """Streams audit reports for a sequence of image records.

    Images are processed sequentially in catalog order. A non-conforming
    image never stops the run.

    Example:
        auditor = ImageAuditor(default_registry().get("v2"))

        for report in auditor.audit(catalog.list_images()):
            renderer.render(report, context)
    """

    def __init__(self, schema: Schema, prefix: str = NAMESPACE_PREFIX) -> None:
        self._classifier = Classifier(schema, prefix=prefix)
        self._prefix = prefix
        self._skipped = 0

    @property
    def schema(self) -> Schema:
        return self._classifier.schema

    @property
    def skipped(self) -> int:
        """Number of ineligible images seen by the last audit."""
        return self._skipped

    def audit(self, records: Iterable[ImageRecord]) -> Iterator[AuditReport]:
        """Yield one report per eligible record."""
        self._skipped = 0

        for record in records:
            if not is_eligible(record.properties, self._prefix):
                self._skipped += 1
                logger.debug(f"Skipping image {record.id}: no {self._prefix} properties")
                continue

            yield self.audit_one(record)

    def audit_one(self, record: ImageRecord) -> AuditReport:
        """Classify a single record, regardless of eligibility."""
        outcome = self._classifier.classify(record.properties)

        log = get_logger_with_context("audit", image=record.id)
        if outcome.conforming:
            log.debug("Image conforms")
        else:
            log.info(
                "Image does not conform: "
                + "; ".join(f"{d.category.value}={','.join(d.keys)}" for d in outcome.defects)
            )

        return AuditReport(image=record, schema_version=self.schema.version, outcome=outcome)


def summarize(reports: Iterable[AuditReport], skipped: int = 0) -> AuditSummary:
    """Count conforming and non-conforming reports."""
    total = 0
    conforming = 0
    for report in reports:
        total += 1
        if report.conforming:
            conforming += 1

    return AuditSummary(
        total=total,
        conforming=conforming,
        non_conforming=total - conforming,
        skipped=skipped,
    )

"""Classifier for image property bags."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from image_audit.models.outcome import (
    Conforming,
    Defect,
    DefectCategory,
    ExtractedFields,
    NonConforming,
    ValidationOutcome,
)
from image_audit.models.schema import Schema
from image_audit.schemas import NAMESPACE_PREFIX

# JSON Schema keywords that report a bad value under a single property.
_VALUE_KEYWORDS = frozenset({"enum", "type"})


def is_eligible(properties: Mapping[str, Any], prefix: str = NAMESPACE_PREFIX) -> bool:
    """Check whether a property bag is subject to the schema at all.

    Bags without a single key under the namespace prefix are skipped,
    not failed.
    """
    return any(key.startswith(prefix) for key in properties)


class Classifier:
    """Classifies property bags against a compiled schema.

    Classification is a pure function of the bag and the schema: it
    never raises for a string-keyed bag and never mutates it.

    Example:
        classifier = Classifier(default_registry().get("v2"))
        outcome = classifier.classify(image.properties)

        if not outcome.conforming:
            for defect in outcome.defects:
                print(defect.message, defect.keys)
    """

    def __init__(self, schema: Schema, prefix: str = NAMESPACE_PREFIX) -> None:
        """Initialize the classifier.

        Args:
            schema: The compiled schema to validate against
            prefix: Namespace prefix used to locate extracted fields
        """
        self._schema = schema
        self._prefix = prefix

    @property
    def schema(self) -> Schema:
        return self._schema

    def classify(self, properties: Mapping[str, Any]) -> ValidationOutcome:
        """Classify one property bag.

        Args:
            properties: The image's key/value metadata

        Returns:
            Conforming with the extracted fields, or NonConforming with
            one defect per violation category
        """
        bag = dict(properties)
        defects = self._find_defects(bag)

        if defects:
            return NonConforming(defects=tuple(defects))

        return Conforming(fields=ExtractedFields.from_properties(bag, self._prefix))

    def _find_defects(self, bag: dict[str, Any]) -> list[Defect]:
        """Run the validator and coalesce its violations by category."""
        missing_reported = False
        invalid: set[str] = set()

        for violation in self._schema.iter_violations(bag):
            if violation.validator == "required" and not violation.path:
                missing_reported = True
            elif violation.validator in _VALUE_KEYWORDS and violation.path:
                invalid.add(str(violation.path[0]))

        defects: list[Defect] = []

        if missing_reported:
            missing = tuple(key for key in self._schema.required if key not in bag)
            defects.append(Defect(category=DefectCategory.MISSING, keys=missing))

        if invalid:
            order = {key: index for index, key in enumerate(self._schema.recognized_keys)}
            keys = tuple(sorted(invalid, key=lambda key: (order.get(key, len(order)), key)))
            defects.append(Defect(category=DefectCategory.INVALID, keys=keys))

        return defects

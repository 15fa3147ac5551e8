"""Compiled schema models."""

from __future__ import annotations

from typing import Any, Iterator

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as JSONSchemaViolation
from pydantic import BaseModel, Field, PrivateAttr, field_serializer


class KeyConstraint(BaseModel):
    """Value constraint for one recognized property key."""

    model_config = {"frozen": True}

    key: str = Field(description="Property key")
    enum: frozenset[str] | None = Field(
        default=None,
        description="Allowed values, or None for any string",
    )

    @field_serializer("enum")
    def _serialize_enum(self, enum: frozenset[str] | None) -> list[str] | None:
        return sorted(enum) if enum is not None else None

    @property
    def is_enumerated(self) -> bool:
        return self.enum is not None

    def describe(self) -> str:
        """Human-readable form of the constraint."""
        if self.enum is None:
            return "string"
        return "one of " + ", ".join(sorted(self.enum))


class Schema(BaseModel):
    """An immutable, compiled conformance schema.

    Keys are kept in declaration order so that diagnostics list
    offending properties in a stable order.
    """

    model_config = {"frozen": True}

    version: str = Field(description="Schema version, e.g. v2")
    required: tuple[str, ...] = Field(description="Keys that must be present")
    constraints: dict[str, KeyConstraint] = Field(description="Constraint per recognized key")
    definition: dict[str, Any] = Field(description="Source JSON Schema document", repr=False, exclude=True)

    _validator: Draft202012Validator = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._validator = Draft202012Validator(self.definition)

    @property
    def recognized_keys(self) -> tuple[str, ...]:
        return tuple(self.constraints)

    def is_recognized(self, key: str) -> bool:
        return key in self.constraints

    def is_required(self, key: str) -> bool:
        return key in self.required

    def constraint_for(self, key: str) -> KeyConstraint | None:
        """Get the constraint for a key, or None if the key is not recognized."""
        return self.constraints.get(key)

    def iter_violations(self, properties: dict[str, Any]) -> Iterator[JSONSchemaViolation]:
        """Run the underlying JSON Schema validator over a property bag."""
        return self._validator.iter_errors(properties)

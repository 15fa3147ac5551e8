"""Schema registry and compiler."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from image_audit.models.schema import KeyConstraint, Schema
from image_audit.schemas import DEFAULT_VERSION, DEFINITIONS
from image_audit.utils.errors import SchemaCompilationError
from image_audit.utils.logging import get_logger

logger = get_logger("registry")


def compile_schema(definition: str | Mapping[str, Any], version: str = DEFAULT_VERSION) -> Schema:
    """Compile a schema definition into its immutable, queryable form.

    Args:
        definition: JSON Schema document, as JSON text or an already parsed mapping
        version: Version label for the compiled schema

    Returns:
        The compiled Schema

    Raises:
        SchemaCompilationError: If the definition is malformed or uses
            constraints a property bag cannot satisfy (non-string types)
    """
    if isinstance(definition, str):
        try:
            document = json.loads(definition)
        except json.JSONDecodeError as e:
            raise SchemaCompilationError(f"Schema {version} is not valid JSON: {e}", version=version) from e
    else:
        document = definition

    if not isinstance(document, Mapping):
        raise SchemaCompilationError(f"Schema {version} must be a JSON object", version=version)
    document = dict(document)

    try:
        Draft202012Validator.check_schema(document)
    except SchemaError as e:
        raise SchemaCompilationError(f"Schema {version} is invalid: {e.message}", version=version) from e

    if document.get("type") != "object":
        raise SchemaCompilationError(f"Schema {version} must describe an object", version=version)

    constraints: dict[str, KeyConstraint] = {}
    for key, declared in document.get("properties", {}).items():
        if not isinstance(declared, Mapping) or declared.get("type") != "string":
            raise SchemaCompilationError(
                f"Schema {version}: property {key} must be constrained to type string",
                version=version,
            )

        enum = declared.get("enum")
        if enum is not None and not all(isinstance(value, str) for value in enum):
            raise SchemaCompilationError(
                f"Schema {version}: property {key} enumerates non-string values",
                version=version,
            )

        constraints[key] = KeyConstraint(key=key, enum=frozenset(enum) if enum is not None else None)

    required = tuple(document.get("required", ()))
    undeclared = [key for key in required if key not in constraints]
    if undeclared:
        raise SchemaCompilationError(
            f"Schema {version}: required keys are not declared properties: {', '.join(undeclared)}",
            version=version,
        )

    logger.debug(f"Compiled schema {version} with {len(constraints)} keys, {len(required)} required")

    return Schema(
        version=version,
        required=required,
        constraints=constraints,
        definition=document,
    )


class SchemaRegistry:
    """Holds schema definitions by version and compiles each once.

    Compiled schemas are immutable and can be shared freely between
    classifiers.

    Example:
        registry = SchemaRegistry()
        schema = registry.get("v2")
        schema.is_required("unikorn:os:kernel")  # True
    """

    def __init__(self, definitions: Mapping[str, str | Mapping[str, Any]] | None = None) -> None:
        """Initialize the registry.

        Args:
            definitions: Definitions by version. Defaults to the built-in schemas.
        """
        self._definitions: dict[str, str | Mapping[str, Any]] = dict(
            DEFINITIONS if definitions is None else definitions
        )
        self._compiled: dict[str, Schema] = {}

    def register(self, version: str, definition: str | Mapping[str, Any]) -> Schema:
        """Add a definition and compile it immediately.

        Raises:
            SchemaCompilationError: If the definition does not compile
        """
        schema = compile_schema(definition, version)
        self._definitions[version] = definition
        self._compiled[version] = schema
        return schema

    def get(self, version: str = DEFAULT_VERSION) -> Schema:
        """Get the compiled schema for a version.

        Raises:
            SchemaCompilationError: If the version is unknown or does not compile
        """
        if version in self._compiled:
            return self._compiled[version]

        if version not in self._definitions:
            raise SchemaCompilationError(
                f"Unknown schema version: {version} (available: {', '.join(self.versions())})",
                version=version,
            )

        schema = compile_schema(self._definitions[version], version)
        self._compiled[version] = schema
        return schema

    def versions(self) -> list[str]:
        return sorted(self._definitions)

    def __contains__(self, version: object) -> bool:
        return version in self._definitions


_registry: SchemaRegistry | None = None


def default_registry() -> SchemaRegistry:
    """Get the process-wide registry of built-in schemas."""
    global _registry
    if _registry is None:
        _registry = SchemaRegistry()
    return _registry

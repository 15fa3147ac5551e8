"""Built-in schema definitions, keyed by version."""

from image_audit.schemas.v2 import DOCUMENTATION_URL, NAMESPACE_PREFIX, SCHEMA_V2

DEFINITIONS = {
    "v2": SCHEMA_V2,
}

DEFAULT_VERSION = "v2"

__all__ = [
    "DEFINITIONS",
    "DEFAULT_VERSION",
    "DOCUMENTATION_URL",
    "NAMESPACE_PREFIX",
    "SCHEMA_V2",
]

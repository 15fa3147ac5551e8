"""Image catalog loaded from a YAML or JSON export."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from image_audit.catalog.glance import parse_glance_image
from image_audit.models.image import ImageRecord
from image_audit.utils.errors import ImageRetrievalError


class FileCatalog:
    """Lists image records stored in a file.

    Accepts a saved Glance listing: either a bare list of image documents
    or an object with an ``images`` list. YAML is a superset of JSON, so
    one loader handles both. Quote version-like values in YAML, otherwise
    they load as numbers and fail the string constraint.

    Example:
        catalog = FileCatalog("images.yaml")
        images = catalog.list_images()
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def list_images(self) -> list[ImageRecord]:
        """Load all image records from the file.

        Raises:
            ImageRetrievalError: If the file is missing or malformed
        """
        data = load_document(self._path)

        if isinstance(data, dict):
            data = data.get("images")
        if not isinstance(data, list):
            raise ImageRetrievalError(
                "Image file must contain a list of images or an 'images' list",
                source=str(self._path),
            )

        return [parse_glance_image(item) for item in data]


def load_document(path: Path) -> Any:
    """Read and parse a YAML/JSON document.

    Raises:
        ImageRetrievalError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ImageRetrievalError(f"Cannot read {path}: {e}", source=str(path)) from e

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ImageRetrievalError(f"Invalid YAML/JSON in {path}: {e}", source=str(path)) from e

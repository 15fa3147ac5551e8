"""Base catalog protocol."""

from typing import Protocol, runtime_checkable

from image_audit.models.image import ImageRecord
from image_audit.utils.errors import ImageRetrievalError


@runtime_checkable
class ImageCatalog(Protocol):
    """Protocol for image catalog sources.

    A catalog lists every image record visible to the audit, fully
    materialized. Authentication, endpoint discovery and pagination are
    the catalog's concern.

    To implement a custom catalog:
    1. Create a class that implements this protocol
    2. Raise ImageRetrievalError for any failure; the audit run aborts

    Example:
        class StaticCatalog:
            def __init__(self, records: list[ImageRecord]):
                self._records = records

            def list_images(self) -> list[ImageRecord]:
                return list(self._records)
    """

    def list_images(self) -> list[ImageRecord]:
        """List image records.

        Returns:
            All image records, in catalog order

        Raises:
            ImageRetrievalError: On authentication, transport or decode failure
        """
        ...


__all__ = ["ImageCatalog", "ImageRetrievalError"]

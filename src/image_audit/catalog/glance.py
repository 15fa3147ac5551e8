"""Glance v2 image API client."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from image_audit.models.image import ImageRecord
from image_audit.utils.errors import ImageRetrievalError
from image_audit.utils.logging import get_logger

logger = get_logger("catalog.glance")

# Attributes Glance defines itself; everything else on an image is a
# user-supplied property.
GLANCE_CORE_FIELDS = frozenset({
    "id",
    "name",
    "status",
    "visibility",
    "protected",
    "os_hidden",
    "checksum",
    "os_hash_algo",
    "os_hash_value",
    "owner",
    "size",
    "virtual_size",
    "min_ram",
    "min_disk",
    "created_at",
    "updated_at",
    "tags",
    "self",
    "file",
    "schema",
    "disk_format",
    "container_format",
    "locations",
    "direct_url",
    "stores",
})


def parse_glance_image(data: dict[str, Any]) -> ImageRecord:
    """Build an ImageRecord from a Glance image document.

    A document may carry its properties either flattened at the top
    level (the Glance wire format) or under an explicit ``properties``
    mapping.

    Raises:
        ImageRetrievalError: If the document cannot be decoded
    """
    if not isinstance(data, dict):
        raise ImageRetrievalError(f"Image document must be an object, got {type(data).__name__}")

    properties = {k: v for k, v in data.items() if k not in GLANCE_CORE_FIELDS and k != "properties"}
    explicit = data.get("properties")
    if isinstance(explicit, dict):
        properties.update(explicit)

    try:
        return ImageRecord(
            id=str(data["id"]),
            name=data.get("name") or "",
            created_at=data.get("created_at"),
            size_bytes=data.get("size") or 0,
            properties=properties,
        )
    except KeyError as e:
        raise ImageRetrievalError("Image document has no id") from e
    except ValidationError as e:
        raise ImageRetrievalError(f"Invalid image document {data.get('id')}: {e}") from e


class GlanceCatalog:
    """Lists images straight from a Glance v2 endpoint.

    Follows ``next`` links until the listing is exhausted.

    Example:
        catalog = GlanceCatalog("https://image.example.com", token=token)
        images = catalog.list_images()
    """

    PAGE_SIZE = 100

    def __init__(
        self,
        endpoint: str,
        token: str | None = None,
        visibility: str = "public",
        timeout: float = 60.0,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the Glance client.

        Args:
            endpoint: Image service endpoint, with or without the /v2 suffix
            token: Keystone token sent as X-Auth-Token
            visibility: Visibility filter for the listing
            timeout: Request timeout in seconds
            max_retries: Connection retry attempts
            transport: Custom transport (mainly for tests)
        """
        base = endpoint.rstrip("/")
        if base.endswith("/v2"):
            base = base[: -len("/v2")]

        self._base_url = base
        self._token = token
        self._visibility = visibility
        self._timeout = timeout
        self._max_retries = max_retries
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        """Create an HTTP client with retry support."""
        transport = self._transport or httpx.HTTPTransport(retries=self._max_retries)
        headers = {"Accept": "application/json"}
        if self._token:
            headers["X-Auth-Token"] = self._token

        return httpx.Client(
            timeout=self._timeout,
            transport=transport,
            headers=headers,
            follow_redirects=True,
        )

    def list_images(self) -> list[ImageRecord]:
        """List all images with the configured visibility.

        Raises:
            ImageRetrievalError: On any HTTP, transport or decode failure
        """
        records: list[ImageRecord] = []
        url: str | None = f"{self._base_url}/v2/images"
        params: dict[str, Any] | None = {"visibility": self._visibility, "limit": self.PAGE_SIZE}
        seen: set[str] = set()

        with self._get_client() as client:
            while url:
                if url in seen:
                    raise ImageRetrievalError(f"Pagination loop detected at {url}", source=self._base_url)
                seen.add(url)

                page = self._get_page(client, url, params)
                images = page.get("images")
                if not isinstance(images, list):
                    raise ImageRetrievalError("Image listing has no images array", source=url)

                records.extend(parse_glance_image(image) for image in images)
                logger.debug(f"Fetched {len(images)} images from {url}")

                next_link = page.get("next")
                url = f"{self._base_url}{next_link}" if next_link else None
                params = None

        return records

    def _get_page(self, client: httpx.Client, url: str, params: dict[str, Any] | None) -> dict[str, Any]:
        try:
            response = client.get(url, params=params)
        except httpx.HTTPError as e:
            raise ImageRetrievalError(f"Failed to list images: {e}", source=url) from e

        if response.status_code in (401, 403):
            raise ImageRetrievalError(
                f"Image service rejected credentials ({response.status_code})",
                source=url,
            )
        if response.status_code != 200:
            raise ImageRetrievalError(
                f"Image listing failed: {response.status_code}",
                source=url,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ImageRetrievalError(f"Image listing is not valid JSON: {e}", source=url) from e

        if not isinstance(data, dict):
            raise ImageRetrievalError("Image listing must be a JSON object", source=url)
        return data

"""OpenStack image catalog backed by openstacksdk."""

from __future__ import annotations

from typing import Any

import openstack
from keystoneauth1 import exceptions as ksa_exceptions
from openstack import exceptions as sdk_exceptions

from image_audit.catalog.glance import parse_glance_image
from image_audit.models.image import ImageRecord
from image_audit.utils.errors import ImageRetrievalError
from image_audit.utils.logging import get_logger

logger = get_logger("catalog.openstack")


class OpenStackCatalog:
    """Lists images through openstacksdk.

    Credentials and endpoints come from clouds.yaml or the usual OS_*
    environment variables; the SDK handles authentication, service
    discovery and pagination.

    Example:
        catalog = OpenStackCatalog(cloud="production")
        images = catalog.list_images()
    """

    def __init__(
        self,
        cloud: str | None = None,
        visibility: str = "public",
        timeout: float = 60.0,
        connection: Any | None = None,
    ) -> None:
        """Initialize the catalog.

        Args:
            cloud: Cloud name in clouds.yaml (None uses OS_CLOUD or the environment)
            visibility: Visibility filter for the listing
            timeout: API timeout in seconds
            connection: Existing openstack Connection to reuse
        """
        self._cloud = cloud
        self._visibility = visibility
        self._timeout = timeout
        self._connection = connection

    def _connect(self) -> Any:
        if self._connection is None:
            self._connection = openstack.connect(cloud=self._cloud, api_timeout=self._timeout)
        return self._connection

    def list_images(self) -> list[ImageRecord]:
        """List all images with the configured visibility.

        Raises:
            ImageRetrievalError: On configuration, authentication or API failure
        """
        source = self._cloud or "environment"

        try:
            conn = self._connect()
            images = list(conn.image.images(visibility=self._visibility))
        except (sdk_exceptions.SDKException, ksa_exceptions.ClientException) as e:
            raise ImageRetrievalError(f"Failed to list images: {e}", source=source) from e

        logger.debug(f"Listed {len(images)} {self._visibility} images from {source}")

        return [self._to_record(image) for image in images]

    @staticmethod
    def _to_record(image: Any) -> ImageRecord:
        return parse_glance_image(
            {
                "id": image.id,
                "name": image.name,
                "created_at": image.created_at,
                "size": image.size,
                "properties": dict(image.properties or {}),
            }
        )

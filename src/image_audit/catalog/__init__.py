"""Image catalog sources."""

from image_audit.catalog.base import ImageCatalog, ImageRetrievalError
from image_audit.catalog.glance import GlanceCatalog, parse_glance_image
from image_audit.catalog.openstack import OpenStackCatalog
from image_audit.catalog.file import FileCatalog

__all__ = [
    "ImageCatalog",
    "ImageRetrievalError",
    "GlanceCatalog",
    "parse_glance_image",
    "OpenStackCatalog",
    "FileCatalog",
]

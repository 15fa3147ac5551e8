"""Image record models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, computed_field


class ImageRecord(BaseModel):
    """One image as listed by an image catalog."""

    model_config = {"frozen": True}

    id: str = Field(description="Image identifier")
    name: str = Field(default="", description="Display name")
    created_at: datetime | None = Field(default=None, description="Creation timestamp")
    size_bytes: int = Field(default=0, ge=0, description="Image size in bytes")
    properties: dict[str, Any] = Field(
        default_factory=dict,
        description="Free-form key/value metadata attached to the image",
    )

    @computed_field
    @property
    def size_gib(self) -> int:
        """Size in whole gibibytes, truncated."""
        return self.size_bytes >> 30


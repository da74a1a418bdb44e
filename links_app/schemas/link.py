from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field, computed_field, field_validator

from links_app.config import settings
from links_app.schemas.base import CamelModel


class LinkBase(CamelModel):
    """
    Fields a client may send for a link.

    Validators run in field order and the first failure is reported.
    """
    url: str
    slug: Optional[str] = None
    title: Optional[str] = Field(default=None, max_length=255)
    expires_at: Optional[datetime] = None

    @field_validator("url", mode="before")
    @classmethod
    def validate_url(cls, value: Any) -> str:
        """Any non-blank string, stored exactly as sent"""
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("URL is required")
        if not isinstance(value, str):
            raise ValueError("URL must be a string")
        return value

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, value: Optional[str]) -> Optional[str]:
        # An empty slug means "no slug requested"
        if not value:
            return None
        if value in settings.reserved_slugs:
            raise ValueError(f"Slug '{value}' is reserved")
        return value


class LinkCreate(LinkBase):
    pass


class LinkUpdate(LinkBase):
    """Partial update: every field optional, absent fields stay untouched"""
    url: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        """
        Fields explicitly sent by the client.

        An explicit null or empty slug is ignored since the column is not nullable
        (a null url never gets here, its validator rejects it). title and
        expiresAt may be cleared with null.
        """
        data = self.model_dump(exclude_unset=True)
        if "slug" in data and not data["slug"]:
            del data["slug"]
        return data


class LinkResponse(CamelModel):
    id: str
    created_at: datetime
    updated_at: datetime
    url: str
    slug: str
    title: Optional[str] = None
    expires_at: Optional[datetime] = None

    @computed_field(alias="shortUrl")
    @property
    def short_url(self) -> str:
        return f"{settings.base_url.rstrip('/')}/{self.slug}"

    model_config = ConfigDict(from_attributes=True)

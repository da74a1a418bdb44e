import secrets
import string
from datetime import datetime, timezone

from sqlalchemy import Column, String

from links_app.config import settings

# nanoid alphabet: URL-safe without percent-encoding
URL_SAFE_ALPHABET = string.ascii_letters + string.digits + "_-"


def generate_id(size: int = None) -> str:
    """Random opaque identifier for primary keys"""
    size = size or settings.id_length
    return "".join(secrets.choice(URL_SAFE_ALPHABET) for _ in range(size))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def to_iso(value: datetime) -> str:
    """Serialize a timestamp for storage, naive values are taken as UTC"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def from_iso(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class TimestampMixin:
    """
    Base fields shared by every table.

    Timestamps are stored as ISO-8601 text. createdAt and updatedAt default
    to the insertion time, updatedAt is refreshed by the service layer.
    """

    id = Column(String, primary_key=True, default=lambda: generate_id())
    created_at = Column("createdAt", String, nullable=False, default=utc_now_iso)
    updated_at = Column("updatedAt", String, nullable=False, default=utc_now_iso)

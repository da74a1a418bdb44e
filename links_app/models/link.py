from sqlalchemy import Column, String

from links_app.database.connection import Base
from links_app.models.base import TimestampMixin


class Link(TimestampMixin, Base):
    """
    A slug -> URL mapping.

    The slug carries a UNIQUE constraint so concurrent creations with the
    same slug cannot both succeed; the loser gets an IntegrityError.
    Several links may share one url.
    """
    __tablename__ = "links"

    url = Column(String, nullable=False, index=True)
    slug = Column(String, nullable=False, unique=True, index=True)
    title = Column(String, nullable=True)
    expires_at = Column("expiresAt", String, nullable=True)

from sqlalchemy import Column, String

from links_app.database.connection import Base
from links_app.models.base import TimestampMixin


class Tag(TimestampMixin, Base):
    """Reserved for grouping links, no route uses it yet"""
    __tablename__ = "tags"

    name = Column(String, nullable=False)

from sqlalchemy import Column, String

from links_app.database.connection import Base
from links_app.models.base import TimestampMixin


class Visit(TimestampMixin, Base):
    """
    One redirect resolution.

    link_id is a plain reference, not a foreign key: deleting a link
    leaves its visits in place.
    """
    __tablename__ = "visits"

    link_id = Column("linkId", String, nullable=False, index=True)
    city = Column(String, nullable=True)
    country = Column(String, nullable=True)

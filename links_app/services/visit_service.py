import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from links_app.exceptions import NotFoundError, PersistenceError
from links_app.models.link import Link
from links_app.models.visit import Visit

logger = logging.getLogger(__name__)


class VisitService:
    """Records and reads visit rows for links"""

    def __init__(self, db: Session):
        self.db = db

    def record_visit(self, link: Link) -> Visit:
        """
        Insert one visit for a resolved link.

        city and country are left empty. A failure here is raised so the
        caller does not redirect an untracked visit.
        """
        visit = Visit(link_id=link.id)
        self.db.add(visit)
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to track visit for link %s", link.id)
            raise PersistenceError("Failed to track visit", details=str(exc))

        logger.info("Recorded visit %s for link %s", visit.id, link.id)
        return visit

    def list_visits(self, link_id: str) -> List[Visit]:
        self._require_link(link_id)
        return self.db.query(Visit).filter(Visit.link_id == link_id).all()

    def get_visit(self, link_id: str, visit_id: str) -> Visit:
        """
        Fetch a visit by its own id.

        The link must exist, but the visit's linkId is not compared with it.
        """
        self._require_link(link_id)
        visit = self.db.get(Visit, visit_id)
        if visit is None:
            raise NotFoundError("Visit not found")
        return visit

    def _require_link(self, link_id: str) -> None:
        if self.db.get(Link, link_id) is None:
            raise NotFoundError("Link not found")

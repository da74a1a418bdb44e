import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from links_app.config import settings
from links_app.exceptions import (
    ConflictError,
    ExpiredError,
    NotFoundError,
    PersistenceError,
)
from links_app.models.base import from_iso, to_iso, utc_now, utc_now_iso
from links_app.models.link import Link
from links_app.schemas.link import LinkCreate, LinkUpdate
from links_app.services.slug_factory import SlugFactory
from links_app.services.slug_strategies import SlugStrategy

logger = logging.getLogger(__name__)

SLUG_EXISTS = "Slug already exists"
LINK_NOT_FOUND = "Link not found"


class LinkService:
    """
    Link CRUD and slug resolution over an injected database session.

    Every failure is raised as a LinkServiceError subclass; the caller
    never sees a raw SQLAlchemy exception.
    """

    def __init__(self, db: Session, slug_strategy: Optional[SlugStrategy] = None):
        """
        Args:
            db: Database session (one per request)
            slug_strategy: Strategy for generated slugs, defaults to the
                           one configured in settings
        """
        self.db = db
        self.slug_strategy = slug_strategy or SlugFactory.create_strategy()

    def create_link(self, data: LinkCreate) -> Tuple[Link, bool]:
        """
        Create a link, or reuse one pointing at the same url.

        Reuse only happens when the client did not ask for a slug.

        Returns:
            (link, created) where created is False for a reused link
        """
        if not data.slug:
            existing = self.get_link_by_url(data.url)
            if existing:
                logger.info("Reusing link %s for %s", existing.id, data.url)
                return existing, False
            return self._insert_with_generated_slug(data), True

        return self._insert(data, data.slug), True

    def _insert_with_generated_slug(self, data: LinkCreate) -> Link:
        """Retry with a fresh slug while generated ones collide"""
        for attempt in range(settings.max_retries):
            slug = self.slug_strategy.generate()
            if slug in settings.reserved_slugs:
                continue
            try:
                return self._insert(data, slug)
            except ConflictError:
                logger.warning(
                    "Generated slug %s collided (attempt %d/%d)",
                    slug, attempt + 1, settings.max_retries
                )

        raise ConflictError(
            f"Could not generate a unique slug after {settings.max_retries} attempts"
        )

    def _insert(self, data: LinkCreate, slug: str) -> Link:
        """
        Single insert attempt.

        The UNIQUE constraint on links.slug decides conflicts, so two
        concurrent requests for the same slug cannot both win.
        """
        link = Link(
            url=data.url,
            slug=slug,
            title=data.title,
            expires_at=to_iso(data.expires_at) if data.expires_at else None,
        )
        self.db.add(link)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if self.slug_exists(slug):
                raise ConflictError(SLUG_EXISTS)
            logger.exception("Failed to create link for %s", data.url)
            raise PersistenceError("Failed to create link", details=str(exc.orig))
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to create link for %s", data.url)
            raise PersistenceError("Failed to create link", details=str(exc))

        self.db.refresh(link)
        logger.info("Created link %s (%s -> %s)", link.id, link.slug, link.url)
        return link

    def update_link(self, link_id: str, data: LinkUpdate) -> Link:
        """
        Apply a partial update and refresh updatedAt.

        A requested slug is checked against every row, the link's own
        current slug included.
        """
        link = self.get_link(link_id)
        changes = data.changes()

        if "slug" in changes and self.slug_exists(changes["slug"]):
            logger.warning("Slug %s already taken, update of %s rejected",
                           changes["slug"], link_id)
            raise ConflictError(SLUG_EXISTS)

        if "expires_at" in changes and changes["expires_at"] is not None:
            changes["expires_at"] = to_iso(changes["expires_at"])

        for field, value in changes.items():
            setattr(link, field, value)
        link.updated_at = utc_now_iso()

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(SLUG_EXISTS)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to update link %s", link_id)
            raise PersistenceError("Failed to update link", details=str(exc))

        self.db.refresh(link)
        logger.info("Updated link %s (%s)", link.id, ", ".join(sorted(changes)) or "touch")
        return link

    def get_link(self, link_id: str) -> Link:
        link = self.db.get(Link, link_id)
        if link is None:
            raise NotFoundError(LINK_NOT_FOUND)
        return link

    def get_link_by_url(self, url: str) -> Optional[Link]:
        return self.db.query(Link).filter(Link.url == url).first()

    def slug_exists(self, slug: str) -> bool:
        return self.db.query(Link.id).filter(Link.slug == slug).first() is not None

    def list_links(self) -> List[Link]:
        return self.db.query(Link).all()

    def find_link_by_slug(self, slug: str) -> Link:
        """
        Look up exactly one link by slug.

        More than one match can only happen on a store created without the
        UNIQUE constraint; it is reported as not found rather than picking one.
        """
        links = self.db.query(Link).filter(Link.slug == slug).limit(2).all()
        if not links:
            raise NotFoundError(LINK_NOT_FOUND)
        if len(links) > 1:
            logger.error("Slug %s matches several links", slug)
            raise NotFoundError("Multiple links found")
        return links[0]

    def delete_link(self, link_id: str) -> None:
        """Delete a link. Its visits are kept."""
        link = self.get_link(link_id)
        self.db.delete(link)
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to delete link %s", link_id)
            raise PersistenceError("Failed to delete link", details=str(exc))
        logger.info("Deleted link %s", link_id)

    def resolve_slug(self, slug: str) -> Link:
        """
        Find the link a redirect should follow.

        Raises:
            NotFoundError: no link has this slug
            ExpiredError: the link's expiry is in the past
        """
        link = self.db.query(Link).filter(Link.slug == slug).first()
        if link is None:
            raise NotFoundError(LINK_NOT_FOUND)

        if link.expires_at and from_iso(link.expires_at) < utc_now():
            logger.warning("Link %s expired at %s", link.slug, link.expires_at)
            raise ExpiredError("Link has expired")

        return link

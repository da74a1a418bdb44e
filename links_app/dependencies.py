"""
FastAPI dependencies for dependency injection.

Services receive the request's database session explicitly instead of
reaching for a module-level handle, so tests can override get_db and
point every route at an isolated database.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from links_app.database.connection import get_db
from links_app.services.link_service import LinkService
from links_app.services.visit_service import VisitService


def get_link_service(db: Session = Depends(get_db)) -> LinkService:
    return LinkService(db=db)


def get_visit_service(db: Session = Depends(get_db)) -> VisitService:
    """Shares the request's session with get_link_service (FastAPI caches get_db per request)"""
    return VisitService(db=db)

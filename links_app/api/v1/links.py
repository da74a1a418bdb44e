from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Response, status

from links_app.dependencies import get_link_service, get_visit_service
from links_app.schemas.link import LinkCreate, LinkResponse, LinkUpdate
from links_app.schemas.visit import VisitResponse
from links_app.services.link_service import LinkService
from links_app.services.visit_service import VisitService

router = APIRouter(prefix="/links", tags=["links"])


@router.post("", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
def create_link(
    link_data: LinkCreate,
    response: Response,
    link_service: LinkService = Depends(get_link_service)
):
    """Create a link, or return the existing one for the same url (200)"""
    link, created = link_service.create_link(link_data)
    if not created:
        response.status_code = status.HTTP_200_OK
    return link


@router.patch("/{link_id}", response_model=LinkResponse)
def update_link(
    link_id: str,
    link_data: LinkUpdate,
    link_service: LinkService = Depends(get_link_service)
):
    return link_service.update_link(link_id, link_data)


@router.get("", response_model=Union[List[LinkResponse], LinkResponse])
def list_links(
    slug: Optional[str] = None,
    link_service: LinkService = Depends(get_link_service)
):
    """All links, or the single link matching ?slug="""
    if slug:
        return link_service.find_link_by_slug(slug)
    return link_service.list_links()


@router.get("/{link_id}", response_model=LinkResponse)
def get_link(
    link_id: str,
    link_service: LinkService = Depends(get_link_service)
):
    return link_service.get_link(link_id)


@router.delete("/{link_id}")
def delete_link(
    link_id: str,
    link_service: LinkService = Depends(get_link_service)
):
    link_service.delete_link(link_id)
    return {"message": "Link deleted"}


@router.get("/{link_id}/visits", response_model=List[VisitResponse])
def list_visits(
    link_id: str,
    visit_service: VisitService = Depends(get_visit_service)
):
    return visit_service.list_visits(link_id)


@router.get("/{link_id}/visits/{visit_id}", response_model=VisitResponse)
def get_visit(
    link_id: str,
    visit_id: str,
    visit_service: VisitService = Depends(get_visit_service)
):
    return visit_service.get_visit(link_id, visit_id)

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from links_app.dependencies import get_link_service, get_visit_service
from links_app.services.link_service import LinkService
from links_app.services.visit_service import VisitService

router = APIRouter(tags=["redirect"])


@router.get("/{slug}", response_class=RedirectResponse, status_code=status.HTTP_302_FOUND)
def redirect_to_url(
    slug: str,
    link_service: LinkService = Depends(get_link_service),
    visit_service: VisitService = Depends(get_visit_service)
):
    """
    Redirect to the link's url.

    Flow:
    1. Resolve the slug (404 if unknown, 410 if expired)
    2. Record the visit synchronously
    3. Redirect

    If step 2 fails the client gets a 500 instead of the redirect.
    """
    link = link_service.resolve_slug(slug)
    visit_service.record_visit(link)
    return RedirectResponse(url=link.url, status_code=status.HTTP_302_FOUND)

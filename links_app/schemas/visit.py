from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from links_app.schemas.base import CamelModel


class VisitResponse(CamelModel):
    id: str
    created_at: datetime
    updated_at: datetime
    link_id: str
    city: Optional[str] = None
    country: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

from datetime import datetime

from pydantic import ConfigDict, Field

from links_app.schemas.base import CamelModel


class TagCreate(CamelModel):
    name: str = Field(..., min_length=1)


class TagResponse(CamelModel):
    id: str
    created_at: datetime
    updated_at: datetime
    name: str

    model_config = ConfigDict(from_attributes=True)

"""Template request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class TemplateCreate(BaseModel):
    """Body of POST /templates."""

    name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)
    content: str = Field(min_length=1)


class TemplateResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    description: str
    content: str
    created_at: datetime
    updated_at: datetime

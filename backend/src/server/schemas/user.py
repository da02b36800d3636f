"""User request/response schemas.

The email is a plain string here; format checks belong to the user
service so a bad address is reported through the standard error envelope.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    email: str = Field(min_length=1, max_length=254)
    name: str = Field(min_length=1, max_length=100)


class UserResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    email: str
    name: str
    created_at: datetime

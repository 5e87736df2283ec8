"""
User DTO
========

Pydantic models for user API requests and responses.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CreateUserRequest(BaseModel):
    """DTO for creating a user."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Leanne Graham",
                "username": "Bret",
                "email": "Sincere@april.biz",
            }
        },
    )
    
    name: str
    username: str
    email: str


class UpdateUserRequest(CreateUserRequest):
    """DTO for replacing every mutable field of a user."""


class UserResponse(BaseModel):
    """DTO for user data."""
    id: Optional[int] = None
    name: str
    username: str
    email: str


class UserSummaryResponse(BaseModel):
    """DTO combining a user with post statistics."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Leanne Graham",
                "email": "Sincere@april.biz",
                "totalPosts": 10,
            }
        },
    )
    
    id: Optional[int] = None
    name: str
    email: str
    total_posts: int = Field(..., alias="totalPosts")

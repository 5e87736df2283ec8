"""
Post DTO
========

Pydantic models for post API requests and responses.
JSON field names are camelCase; Python attributes are snake_case.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CreatePostRequest(BaseModel):
    """DTO for creating a post."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "My first post",
                "content": "Hello from the frontend",
                "userId": 1,
            }
        },
    )
    
    title: str = Field(..., description="Post title, passed through verbatim")
    content: str = Field(..., description="Post body, passed through verbatim")
    user_id: int = Field(..., alias="userId", description="Author identifier")


class UpdatePostRequest(BaseModel):
    """DTO for replacing title and content of a post. The author never changes."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Edited title",
                "content": "Edited body",
            }
        },
    )
    
    title: str
    content: str


class PostResponse(BaseModel):
    """DTO for an enriched post."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "sunt aut facere repellat provident",
                "content": "quia et suscipit suscipit recusandae",
                "authorName": "Leanne Graham",
                "wordCount": 6,
            }
        },
    )
    
    id: Optional[int] = None
    title: str
    content: str
    author_name: str = Field(..., alias="authorName")
    word_count: int = Field(..., alias="wordCount")

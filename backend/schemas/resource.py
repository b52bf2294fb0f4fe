# backend/schemas/resource.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from models.resource import ResourceType
from schemas.base import ORMBase, reject_null


# Shared attributes for blog posts, news, portfolio items and case studies
class ResourceBase(ORMBase):
    type: ResourceType
    title: str
    description: str
    content: str
    image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    featured: bool = False


class ResourceCreate(ResourceBase):
    pass


# Schema for partial resource updates
class ResourceUpdate(ORMBase):
    type: Optional[ResourceType] = None
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None
    tags: Optional[List[str]] = None
    featured: Optional[bool] = None

    @field_validator("type", "title", "description", "content", "tags", "featured")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class ResourceOut(ResourceBase):
    id: int
    tags: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Rows written outside the API may hold NULL tags
    @field_validator("tags", mode="before")
    @classmethod
    def tags_default(cls, value):
        return value or []

# backend/schemas/catalog.py
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from schemas.base import ORMBase, reject_null


# Shared attributes of services and solutions
class CatalogItemBase(ORMBase):
    title: str
    description: str
    content: str
    image_url: Optional[str] = None


# Schema for creating a service or a solution
class CatalogItemCreate(CatalogItemBase):
    pass


# Schema for partial updates - all fields optional
class CatalogItemUpdate(ORMBase):
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("title", "description", "content")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class CatalogItemOut(CatalogItemBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Services and solutions share one shape
ServiceCreate = SolutionCreate = CatalogItemCreate
ServiceUpdate = SolutionUpdate = CatalogItemUpdate
ServiceOut = SolutionOut = CatalogItemOut

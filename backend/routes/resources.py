# backend/routes/resources.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from database import get_db
from models.resource import Resource, ResourceType
from models.users import User
from schemas.resource import ResourceCreate, ResourceOut, ResourceUpdate
from utils.crud import create_item, delete_item, get_or_404, list_newest_first, update_item
from utils.session_auth import admin_required

router = APIRouter(prefix="/api/resources", tags=["Resources"])

# Homepage preview size
FEATURED_LIMIT = 4


# List resources, optionally only one kind (blog, news, portfolio, case-study)
@router.get("", response_model=List[ResourceOut])
def list_resources(
    type: Optional[ResourceType] = Query(None, description="Filter by resource type"),
    db: Session = Depends(get_db),
):
    filters = [Resource.type == type] if type else []
    return list_newest_first(db, Resource, *filters)


# Declared before /{resource_id} so "featured" is not parsed as an id
@router.get("/featured", response_model=List[ResourceOut])
def get_featured_resources(db: Session = Depends(get_db)):
    return (
        db.query(Resource)
        .filter(Resource.featured.is_(True))
        .order_by(Resource.created_at.desc(), Resource.id.desc())
        .limit(FEATURED_LIMIT)
        .all()
    )


@router.get("/{resource_id}", response_model=ResourceOut)
def get_resource(resource_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Resource, resource_id, "Resource")


@router.post("", response_model=ResourceOut, status_code=status.HTTP_201_CREATED)
def create_resource(
    payload: ResourceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    return create_item(db, Resource, payload)


@router.put("/{resource_id}", response_model=ResourceOut)
def update_resource(
    resource_id: int,
    payload: ResourceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    resource = get_or_404(db, Resource, resource_id, "Resource")
    return update_item(db, resource, payload)


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_resource(
    resource_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    delete_item(db, get_or_404(db, Resource, resource_id, "Resource"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

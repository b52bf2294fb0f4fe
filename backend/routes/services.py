# backend/routes/services.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from database import get_db
from models.service import Service
from models.users import User
from schemas.catalog import ServiceCreate, ServiceOut, ServiceUpdate
from utils import analytics
from utils.crud import create_item, delete_item, get_or_404, list_newest_first, update_item
from utils.session_auth import admin_required

router = APIRouter(prefix="/api/services", tags=["Services"])


@router.get("", response_model=List[ServiceOut])
def list_services(db: Session = Depends(get_db)):
    return list_newest_first(db, Service)


# Fetch one service; counts as a service click
@router.get("/{service_id}", response_model=ServiceOut)
def get_service(service_id: int, db: Session = Depends(get_db)):
    service = get_or_404(db, Service, service_id, "Service")
    result = ServiceOut.model_validate(service)
    analytics.track(db, analytics.SERVICE_CLICKS)
    return result


@router.post("", response_model=ServiceOut, status_code=status.HTTP_201_CREATED)
def create_service(
    payload: ServiceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    return create_item(db, Service, payload)


@router.put("/{service_id}", response_model=ServiceOut)
def update_service(
    service_id: int,
    payload: ServiceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    service = get_or_404(db, Service, service_id, "Service")
    return update_item(db, service, payload)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(
    service_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    delete_item(db, get_or_404(db, Service, service_id, "Service"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

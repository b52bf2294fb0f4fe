# backend/utils/crud.py
from datetime import datetime, timezone

from fastapi import HTTPException, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

# Shared create/read/update/delete steps used by the catalog routers


def list_newest_first(db: Session, model, *filters):
    return (
        db.query(model)
        .filter(*filters)
        .order_by(model.created_at.desc(), model.id.desc())
        .all()
    )


def get_or_404(db: Session, model, item_id: int, label: str):
    item = db.query(model).filter(model.id == item_id).first()
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
    return item


def create_item(db: Session, model, payload: BaseModel):
    item = model(**payload.model_dump())
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


# Merge only the fields present in the request body
def update_item(db: Session, item, payload: BaseModel):
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(item, field, value)
    if hasattr(item, "updated_at"):
        item.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(item)
    return item


def delete_item(db: Session, item) -> None:
    db.delete(item)
    db.commit()

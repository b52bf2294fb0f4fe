# backend/routes/company_info.py
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from models.company_info import CompanyInfo
from models.users import User
from schemas.company_info import CompanyInfoOut, CompanyInfoType, CompanyInfoUpdate
from utils.session_auth import admin_required

router = APIRouter(prefix="/api/company-info", tags=["Company Info"])

# Handles the "about" and "contact" text blocks shown on the public site


# Retrieve a block; a missing block reads as empty content
@router.get("/{info_type}", response_model=CompanyInfoOut)
def get_company_info(info_type: CompanyInfoType, db: Session = Depends(get_db)):
    info = db.query(CompanyInfo).filter(CompanyInfo.type == info_type).first()
    if not info:
        return CompanyInfoOut(type=info_type, content="")
    return info


# Create or replace a block (Admin only)
@router.put("/{info_type}", response_model=CompanyInfoOut)
def update_company_info(
    info_type: CompanyInfoType,
    payload: CompanyInfoUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    info = db.query(CompanyInfo).filter(CompanyInfo.type == info_type).first()
    if not info:
        info = CompanyInfo(type=info_type)
        db.add(info)

    info.content = payload.content
    info.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(info)
    return info

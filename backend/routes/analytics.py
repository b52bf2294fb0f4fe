# backend/routes/analytics.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models.users import User
from schemas.analytics import AnalyticsOut
from utils.analytics import get_daily_analytics
from utils.session_auth import admin_required

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])


# Most recent daily counters for the dashboard chart (Admin only)
@router.get("", response_model=List[AnalyticsOut])
def read_analytics(
    days: int = Query(7, ge=1, le=365),
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    return get_daily_analytics(db, days)

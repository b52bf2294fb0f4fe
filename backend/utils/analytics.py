# backend/utils/analytics.py
import logging
from datetime import date
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from models.analytics import Analytics

logger = logging.getLogger(__name__)

PAGE_VIEWS = "page_views"
VISITORS = "visitors"
SERVICE_CLICKS = "service_clicks"
INQUIRIES = "inquiries"

COUNTERS = (PAGE_VIEWS, VISITORS, SERVICE_CLICKS, INQUIRIES)


def _today() -> date:
    return date.today()


def _bump(db: Session, day: date, counters) -> int:
    column_values = {getattr(Analytics, c): getattr(Analytics, c) + 1 for c in counters}
    return db.query(Analytics).filter(Analytics.date == day).update(column_values, synchronize_session=False)


# Add one to each named counter of today's row, creating the row when missing
def increment(db: Session, *counters: str) -> None:
    unknown = [c for c in counters if c not in COUNTERS]
    if unknown:
        raise ValueError(f"Unknown analytics counter(s): {', '.join(unknown)}")

    day = _today()
    if _bump(db, day, counters):
        db.commit()
        return

    db.add(Analytics(date=day, **{c: 1 for c in counters}))
    try:
        db.commit()
    except IntegrityError:
        # Another request created today's row first
        db.rollback()
        _bump(db, day, counters)
        db.commit()


# Best-effort increment: never lets a counter failure break the caller
def track(db: Session, *counters: str) -> None:
    try:
        increment(db, *counters)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error tracking analytics (%s)", ", ".join(counters))


def get_daily_analytics(db: Session, days: int) -> List[Analytics]:
    return (
        db.query(Analytics)
        .order_by(Analytics.date.desc())
        .limit(days)
        .all()
    )

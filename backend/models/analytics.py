# backend/models/analytics.py
from sqlalchemy import Column, Integer, Date
from database import Base

# Daily traffic counters, one row per calendar day
class Analytics(Base):
    __tablename__ = "analytics"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, unique=True, nullable=False, index=True)
    page_views = Column(Integer, nullable=False, default=0)
    visitors = Column(Integer, nullable=False, default=0)
    service_clicks = Column(Integer, nullable=False, default=0)
    inquiries = Column(Integer, nullable=False, default=0)

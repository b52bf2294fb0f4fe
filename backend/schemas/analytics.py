import datetime as dt

from schemas.base import ORMBase


# One day of traffic counters
class AnalyticsOut(ORMBase):
    id: int
    date: dt.date
    page_views: int = 0
    visitors: int = 0
    service_clicks: int = 0
    inquiries: int = 0

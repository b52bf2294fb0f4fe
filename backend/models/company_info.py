from sqlalchemy import Column, Integer, String, Text, DateTime, func
from database import Base

# One rich-text block per page section ("about", "contact")
class CompanyInfo(Base):
    __tablename__ = "company_info"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(20), unique=True, nullable=False)
    content = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

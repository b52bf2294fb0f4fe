# backend/models/resource.py
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, JSON, Enum, func
from database import Base
import enum

# Kinds of content items sharing the resources table
class ResourceType(str, enum.Enum):
    BLOG = "blog"
    NEWS = "news"
    PORTFOLIO = "portfolio"
    CASE_STUDY = "case-study"

# Blog post, news item, portfolio entry or case study
class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(
        Enum(
            ResourceType,
            name="resourcetype",
            values_callable=lambda e: [m.value for m in e],
            create_constraint=True,
        ),
        nullable=False,
        index=True,
    )
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    content = Column(Text, nullable=False)  # rich text
    image_url = Column(String, nullable=True)

    # Ordered list of tag strings
    tags = Column(JSON, nullable=False, default=list)
    featured = Column(Boolean, nullable=False, default=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

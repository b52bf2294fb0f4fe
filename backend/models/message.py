from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, func
from database import Base

# Inquiry submitted through the public contact / "let's discuss" form
class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    company = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    service = Column(String, nullable=True)  # service the visitor is interested in
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

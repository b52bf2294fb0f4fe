from datetime import datetime
from typing import Optional

from pydantic import EmailStr

from schemas.base import ORMBase


# Schema for the public contact form
class MessageCreate(ORMBase):
    name: str
    email: EmailStr
    company: Optional[str] = None
    phone: Optional[str] = None
    service: Optional[str] = None
    message: str


class MessageOut(ORMBase):
    id: int
    name: str
    email: str
    company: Optional[str] = None
    phone: Optional[str] = None
    service: Optional[str] = None
    message: str
    read: bool = False
    created_at: Optional[datetime] = None

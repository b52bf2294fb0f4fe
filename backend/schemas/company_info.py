from datetime import datetime
from typing import Literal, Optional

from schemas.base import ORMBase

CompanyInfoType = Literal["about", "contact"]


# Schema for displaying a company info block
class CompanyInfoOut(ORMBase):
    id: Optional[int] = None
    type: CompanyInfoType
    content: str = ""
    updated_at: Optional[datetime] = None


# Schema for replacing a company info block
class CompanyInfoUpdate(ORMBase):
    content: str

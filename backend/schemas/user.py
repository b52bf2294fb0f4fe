from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from schemas.base import ORMBase, reject_null


# Schema for login credentials; "username" may also hold the email address
class UserLogin(BaseModel):
    username: str
    password: str


# Schema for self-registration
class UserCreate(ORMBase):
    username: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


# Output schema for user details, never includes the password hash
class UserResponse(ORMBase):
    id: int
    username: str
    email: str
    is_admin: bool = False
    created_at: Optional[datetime] = None


# Schema for a user editing their own profile
class ProfileUpdate(ORMBase):
    username: str = Field(min_length=3)
    email: Optional[EmailStr] = None

    # An empty email field means "keep the current address"
    @field_validator("email", mode="before")
    @classmethod
    def blank_email_as_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PasswordChange(ORMBase):
    current_password: str
    new_password: str


# Schema for creating accounts from the admin panel
class AdminUserCreate(UserCreate):
    is_admin: bool = False


# Schema for administrative user edits
class AdminUserUpdate(ORMBase):
    username: Optional[str] = Field(default=None, min_length=3)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=8)
    is_admin: Optional[bool] = None

    @field_validator("username", "email", "password", "is_admin")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)

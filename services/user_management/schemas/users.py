from pydantic import BaseModel, EmailStr, Field
from datetime import datetime

from services.user_management.models.users import UserRole


class UserCreate(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1)
    role: UserRole = UserRole.USER


class UserOut(BaseModel):
    id: int
    email: EmailStr
    name: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

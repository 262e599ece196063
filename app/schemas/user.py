from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    password: str = Field(..., min_length=6)
    avatar: Optional[str] = None


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserRead(BaseModel):
    user_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    avatar: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class UserWithTokens(UserRead):
    token: Optional[str] = None
    refresh_token: Optional[str] = None

"""
Administrator schemas
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date


class UserBase(BaseModel):
    """Base administrator schema"""
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255)
    phone_no: Optional[str] = Field(None, max_length=30)
    dob: Optional[date] = None
    joining_date: date
    department: Optional[int] = None


class UserCreate(UserBase):
    """Schema for creating administrator"""
    password: str = Field(..., min_length=1)


class UserUpdate(UserBase):
    """Schema for replacing administrator; an omitted password is kept"""
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Schema for administrator response (never carries the password)"""
    user_id: int
    name: Optional[str] = None
    email: Optional[str] = None
    phone_no: Optional[str] = None
    dob: Optional[date] = None
    joining_date: Optional[date] = None
    department: Optional[int] = None
    department_name: Optional[str] = None

    class Config:
        from_attributes = True


class UserLogin(BaseModel):
    """Schema for login; presence is checked by the route"""
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    """Schema for successful login"""
    user: UserResponse
    access_token: str
    token_type: str = "bearer"


class TokenData(BaseModel):
    """Schema for token data"""
    user_id: Optional[int] = None
    email: Optional[str] = None

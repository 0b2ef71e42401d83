"""
Employee schemas
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date


class EmployeeBase(BaseModel):
    """Base employee schema"""
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255)
    phone: Optional[str] = Field(None, max_length=30)
    dob: Optional[date] = None
    joining_date: date
    department: Optional[int] = None
    manager_id: Optional[int] = None
    rating_overall: float = Field(default=0, ge=0, le=5)


class EmployeeCreate(EmployeeBase):
    """Schema for creating employee"""


class EmployeeUpdate(EmployeeBase):
    """Schema for replacing employee"""


class EmployeeResponse(BaseModel):
    """Schema for employee response; stored rows are returned as-is"""
    employee_id: int
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    dob: Optional[date] = None
    joining_date: Optional[date] = None
    department: Optional[int] = None
    manager_id: Optional[int] = None
    rating_overall: Optional[float] = None

    # Joined at read time
    department_name: Optional[str] = None
    manager_name: Optional[str] = None

    class Config:
        from_attributes = True

"""
Department schemas
"""
from pydantic import BaseModel, Field
from typing import Optional


class DepartmentBase(BaseModel):
    """Base department schema"""
    department_name: str = Field(..., min_length=1, max_length=100)
    respective_manager: Optional[str] = Field(None, max_length=100)
    no_of_ongoing_projects: int = Field(default=0, ge=0)
    no_of_finished_projects: int = Field(default=0, ge=0)
    no_of_people_in_department: int = Field(default=0, ge=0)


class DepartmentCreate(DepartmentBase):
    """Schema for creating department"""


class DepartmentUpdate(DepartmentBase):
    """Schema for replacing department (omitted counts reset to 0)"""


class DepartmentResponse(BaseModel):
    """Schema for department response; stored rows are returned as-is"""
    id: int
    department_name: Optional[str] = None
    respective_manager: Optional[str] = None
    no_of_ongoing_projects: Optional[int] = None
    no_of_finished_projects: Optional[int] = None
    no_of_people_in_department: Optional[int] = None

    class Config:
        from_attributes = True

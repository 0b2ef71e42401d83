"""
Project schemas
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from vendor_console.models.project import PROJECT_STATUSES

STATUS_PATTERN = "^(" + "|".join(PROJECT_STATUSES) + ")$"


class ProjectBase(BaseModel):
    """Base project schema"""
    project_name: str = Field(..., min_length=1, max_length=200)
    department_id: Optional[int] = None
    starting_date: date
    project_manager: Optional[int] = None
    co_manager: Optional[int] = None
    deadline: Optional[date] = None
    status: str = Field(default="Not Started", pattern=STATUS_PATTERN)
    no_of_people_working: int = Field(default=0, ge=0)
    remarks: str = ""


class ProjectCreate(ProjectBase):
    """Schema for creating project"""


class ProjectUpdate(ProjectBase):
    """Schema for replacing project"""


class ProjectResponse(BaseModel):
    """Schema for project response; stored rows are returned as-is"""
    project_id: int
    project_name: Optional[str] = None
    department_id: Optional[int] = None
    starting_date: Optional[date] = None
    project_manager: Optional[int] = None
    co_manager: Optional[int] = None
    deadline: Optional[date] = None
    status: Optional[str] = None
    no_of_people_working: Optional[int] = None
    remarks: Optional[str] = None

    # Joined at read time
    department_name: Optional[str] = None
    manager_name: Optional[str] = None
    co_manager_name: Optional[str] = None

    class Config:
        from_attributes = True

"""
Pydantic schemas
"""
from vendor_console.schemas.common import MessageResponse, CreatedResponse
from vendor_console.schemas.department import (
    DepartmentBase, DepartmentCreate, DepartmentUpdate, DepartmentResponse
)
from vendor_console.schemas.employee import (
    EmployeeBase, EmployeeCreate, EmployeeUpdate, EmployeeResponse
)
from vendor_console.schemas.project import (
    ProjectBase, ProjectCreate, ProjectUpdate, ProjectResponse
)
from vendor_console.schemas.user import (
    UserBase, UserCreate, UserUpdate, UserResponse,
    UserLogin, LoginResponse, TokenData
)

__all__ = [
    "MessageResponse", "CreatedResponse",
    # Department
    "DepartmentBase", "DepartmentCreate", "DepartmentUpdate", "DepartmentResponse",
    # Employee
    "EmployeeBase", "EmployeeCreate", "EmployeeUpdate", "EmployeeResponse",
    # Project
    "ProjectBase", "ProjectCreate", "ProjectUpdate", "ProjectResponse",
    # User
    "UserBase", "UserCreate", "UserUpdate", "UserResponse",
    "UserLogin", "LoginResponse", "TokenData",
]

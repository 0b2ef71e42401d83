"""
Database models
"""
from vendor_console.models.department import Department
from vendor_console.models.employee import Employee, EmployeeProject
from vendor_console.models.project import Project, PROJECT_STATUSES
from vendor_console.models.user import User

__all__ = [
    "Department",
    "Employee",
    "EmployeeProject",
    "Project",
    "PROJECT_STATUSES",
    "User",
]

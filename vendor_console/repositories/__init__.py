"""
Repositories - data access layer
================================
Each repository holds the fixed statements for one entity and runs them
through the Database handle it was constructed with.
"""
from vendor_console.repositories.departments import DepartmentRepository
from vendor_console.repositories.employees import EmployeeRepository
from vendor_console.repositories.employee_projects import EmployeeProjectRepository
from vendor_console.repositories.projects import ProjectRepository
from vendor_console.repositories.users import UserRepository
from vendor_console.repositories.dashboard import DashboardRepository

__all__ = [
    "DepartmentRepository",
    "EmployeeRepository",
    "EmployeeProjectRepository",
    "ProjectRepository",
    "UserRepository",
    "DashboardRepository",
]

"""
Data access for the employees table.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import bindparam, delete, insert, select, update

from vendor_console.database import Database
from vendor_console.models.department import Department
from vendor_console.models.employee import Employee
from vendor_console.models.user import User
from vendor_console.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)

employees = Employee.__table__
departments = Department.__table__
managers = User.__table__.alias("manager")

# Related names are joined at read time only
_SELECT = select(
    employees,
    departments.c.department_name,
    managers.c.name.label("manager_name"),
).select_from(
    employees
    .outerjoin(departments, employees.c.department == departments.c.id)
    .outerjoin(managers, employees.c.manager_id == managers.c.user_id)
)

_LIST = _SELECT.order_by(employees.c.name, employees.c.employee_id)
_GET = _SELECT.where(employees.c.employee_id == bindparam("target_id"))
_INSERT = insert(employees)
_UPDATE = update(employees).where(employees.c.employee_id == bindparam("target_id"))
_DELETE = delete(employees).where(employees.c.employee_id == bindparam("target_id"))


class EmployeeRepository:
    """Repository for CRUD operations on the employees table."""

    def __init__(self, db: Database):
        self.db = db

    def list_all(self) -> List[Dict[str, Any]]:
        """All employees ordered by name, with department and manager names."""
        return [dict(row) for row in self.db.execute(_LIST)]

    def get_by_id(self, employee_id: int) -> Optional[Dict[str, Any]]:
        rows = self.db.execute(_GET, {"target_id": employee_id})
        return dict(rows[0]) if rows else None

    def create(self, data: EmployeeCreate) -> int:
        new_id = self.db.insert(_INSERT, data.model_dump())
        logger.info(f"Created employee #{new_id}")
        return new_id

    def update(self, employee_id: int, data: EmployeeUpdate) -> int:
        return self.db.execute(_UPDATE, {"target_id": employee_id, **data.model_dump()})

    def delete(self, employee_id: int) -> int:
        return self.db.execute(_DELETE, {"target_id": employee_id})

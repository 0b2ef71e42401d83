"""
Data access for employee/project assignments.
"""
import logging
from typing import Any, Dict, List

from sqlalchemy import and_, bindparam, delete, insert, select

from vendor_console.database import Database
from vendor_console.models.employee import EmployeeProject
from vendor_console.repositories.projects import PROJECT_ORDER, PROJECT_SELECT, projects

logger = logging.getLogger(__name__)

assignments = EmployeeProject.__table__

_LIST_FOR_EMPLOYEE = (
    PROJECT_SELECT
    .where(
        projects.c.project_id.in_(
            select(assignments.c.list_project_id)
            .where(assignments.c.employee_id == bindparam("target_employee"))
        )
    )
    .order_by(*PROJECT_ORDER)
)
_ASSIGN = insert(assignments)
_UNASSIGN = delete(assignments).where(
    and_(
        assignments.c.employee_id == bindparam("target_employee"),
        assignments.c.list_project_id == bindparam("target_project"),
    )
)


class EmployeeProjectRepository:
    """Repository for the employee_projects join table."""

    def __init__(self, db: Database):
        self.db = db

    def list_for_employee(self, employee_id: int) -> List[Dict[str, Any]]:
        """Projects assigned to an employee."""
        rows = self.db.execute(_LIST_FOR_EMPLOYEE, {"target_employee": employee_id})
        return [dict(row) for row in rows]

    def assign(self, employee_id: int, project_id: int) -> None:
        self.db.execute(_ASSIGN, {"employee_id": employee_id, "list_project_id": project_id})
        logger.info(f"Assigned project #{project_id} to employee #{employee_id}")

    def unassign(self, employee_id: int, project_id: int) -> int:
        return self.db.execute(
            _UNASSIGN, {"target_employee": employee_id, "target_project": project_id}
        )

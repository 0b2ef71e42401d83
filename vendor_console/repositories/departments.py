"""
Data access for the departments table.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import bindparam, delete, insert, select, update

from vendor_console.database import Database
from vendor_console.models.department import Department
from vendor_console.schemas.department import DepartmentCreate, DepartmentUpdate

logger = logging.getLogger(__name__)

departments = Department.__table__

_LIST = select(departments).order_by(departments.c.department_name, departments.c.id)
_GET = select(departments).where(departments.c.id == bindparam("target_id"))
_INSERT = insert(departments)
_UPDATE = update(departments).where(departments.c.id == bindparam("target_id"))
_DELETE = delete(departments).where(departments.c.id == bindparam("target_id"))


class DepartmentRepository:
    """Repository for CRUD operations on the departments table."""

    def __init__(self, db: Database):
        self.db = db

    def list_all(self) -> List[Dict[str, Any]]:
        """All departments ordered by name."""
        return [dict(row) for row in self.db.execute(_LIST)]

    def get_by_id(self, department_id: int) -> Optional[Dict[str, Any]]:
        rows = self.db.execute(_GET, {"target_id": department_id})
        return dict(rows[0]) if rows else None

    def create(self, data: DepartmentCreate) -> int:
        new_id = self.db.insert(_INSERT, data.model_dump())
        logger.info(f"Created department #{new_id}")
        return new_id

    def update(self, department_id: int, data: DepartmentUpdate) -> int:
        """Replace every column; omitted counts were defaulted to 0 by the schema."""
        return self.db.execute(_UPDATE, {"target_id": department_id, **data.model_dump()})

    def delete(self, department_id: int) -> int:
        return self.db.execute(_DELETE, {"target_id": department_id})

"""
Data access for the projects table.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import bindparam, delete, insert, select, update

from vendor_console.database import Database
from vendor_console.models.department import Department
from vendor_console.models.project import Project
from vendor_console.models.user import User
from vendor_console.schemas.project import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)

projects = Project.__table__
departments = Department.__table__
managers = User.__table__.alias("manager")
co_managers = User.__table__.alias("co_manager_user")

PROJECT_SELECT = select(
    projects,
    departments.c.department_name,
    managers.c.name.label("manager_name"),
    co_managers.c.name.label("co_manager_name"),
).select_from(
    projects
    .outerjoin(departments, projects.c.department_id == departments.c.id)
    .outerjoin(managers, projects.c.project_manager == managers.c.user_id)
    .outerjoin(co_managers, projects.c.co_manager == co_managers.c.user_id)
)

# Newest first; id breaks ties between projects starting the same day
PROJECT_ORDER = (projects.c.starting_date.desc(), projects.c.project_id.desc())

_LIST = PROJECT_SELECT.order_by(*PROJECT_ORDER)
_GET = PROJECT_SELECT.where(projects.c.project_id == bindparam("target_id"))
_INSERT = insert(projects)
_UPDATE = update(projects).where(projects.c.project_id == bindparam("target_id"))
_DELETE = delete(projects).where(projects.c.project_id == bindparam("target_id"))


class ProjectRepository:
    """Repository for CRUD operations on the projects table."""

    def __init__(self, db: Database):
        self.db = db

    def list_all(self) -> List[Dict[str, Any]]:
        """All projects, most recent starting date first."""
        return [dict(row) for row in self.db.execute(_LIST)]

    def get_by_id(self, project_id: int) -> Optional[Dict[str, Any]]:
        rows = self.db.execute(_GET, {"target_id": project_id})
        return dict(rows[0]) if rows else None

    def create(self, data: ProjectCreate) -> int:
        new_id = self.db.insert(_INSERT, data.model_dump())
        logger.info(f"Created project #{new_id} ({data.status})")
        return new_id

    def update(self, project_id: int, data: ProjectUpdate) -> int:
        return self.db.execute(_UPDATE, {"target_id": project_id, **data.model_dump()})

    def delete(self, project_id: int) -> int:
        return self.db.execute(_DELETE, {"target_id": project_id})

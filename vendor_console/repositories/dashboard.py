"""
Aggregate queries backing the dashboard.
"""
from typing import Any, Dict

from sqlalchemy import func, select

from vendor_console.database import Database
from vendor_console.models.department import Department
from vendor_console.models.employee import Employee
from vendor_console.repositories.projects import PROJECT_ORDER, PROJECT_SELECT, projects

RECENT_PROJECTS_LIMIT = 5

_COUNTS = select(
    select(func.count()).select_from(Department.__table__).scalar_subquery().label("departments"),
    select(func.count()).select_from(Employee.__table__).scalar_subquery().label("employees"),
    select(func.count()).select_from(projects).scalar_subquery().label("projects"),
    select(func.count())
    .select_from(projects)
    .where(projects.c.status == "In Progress")
    .scalar_subquery()
    .label("active_projects"),
)
_BY_STATUS = (
    select(projects.c.status, func.count().label("count"))
    .group_by(projects.c.status)
    .order_by(func.count().desc(), projects.c.status)
)
_RECENT = PROJECT_SELECT.order_by(*PROJECT_ORDER).limit(RECENT_PROJECTS_LIMIT)


class DashboardRepository:
    """Read-only statistics over departments, employees and projects."""

    def __init__(self, db: Database):
        self.db = db

    def stats(self) -> Dict[str, Any]:
        """
        Get dashboard statistics

        Returns:
            Dictionary with entity counts, project counts per status and
            the most recently started projects
        """
        counts = dict(self.db.execute(_COUNTS)[0])
        by_status = [dict(row) for row in self.db.execute(_BY_STATUS)]
        recent = [dict(row) for row in self.db.execute(_RECENT)]

        return {
            "counts": counts,
            "projectsByStatus": by_status,
            "recentProjects": recent,
        }

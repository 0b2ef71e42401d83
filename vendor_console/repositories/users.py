"""
Data access for the administrators (users) table.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import bindparam, delete, func, insert, select, update

from vendor_console.database import Database
from vendor_console.models.department import Department
from vendor_console.models.user import User
from vendor_console.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

users = User.__table__
departments = Department.__table__

# Safe fields only, the password column is never selected here
_SELECT = select(
    users.c.user_id,
    users.c.name,
    users.c.email,
    users.c.phone_no,
    users.c.dob,
    users.c.joining_date,
    users.c.department,
    departments.c.department_name,
).select_from(
    users.outerjoin(departments, users.c.department == departments.c.id)
)

_LIST = _SELECT.order_by(users.c.name, users.c.user_id)
_GET = _SELECT.where(users.c.user_id == bindparam("target_id"))
_GET_CREDENTIALS = (
    select(users.c.user_id, users.c.password)
    .where(users.c.email == bindparam("target_email"))
    .order_by(users.c.user_id)
)
_COUNT = select(func.count().label("count")).select_from(users)
_INSERT = insert(users)
_UPDATE = update(users).where(users.c.user_id == bindparam("target_id"))
_DELETE = delete(users).where(users.c.user_id == bindparam("target_id"))


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def __init__(self, db: Database):
        self.db = db

    def list_all(self) -> List[Dict[str, Any]]:
        """All administrators ordered by name, without passwords."""
        return [dict(row) for row in self.db.execute(_LIST)]

    def get_by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        rows = self.db.execute(_GET, {"target_id": user_id})
        return dict(rows[0]) if rows else None

    def get_credentials_by_email(self, email: str) -> List[Dict[str, Any]]:
        """
        Id and password hash of every administrator registered under an email.

        Email is not unique at the storage layer, so the caller checks each
        candidate in id order.
        """
        return [dict(row) for row in self.db.execute(_GET_CREDENTIALS, {"target_email": email})]

    def count(self) -> int:
        rows = self.db.execute(_COUNT)
        return rows[0]["count"] if rows else 0

    def create(self, data: UserCreate, password_hash: str) -> int:
        values = data.model_dump(exclude={"password"})
        values["password"] = password_hash
        new_id = self.db.insert(_INSERT, values)
        logger.info(f"Created administrator #{new_id}")
        return new_id

    def update(self, user_id: int, data: UserUpdate, password_hash: Optional[str] = None) -> int:
        """
        Replace an administrator.

        Every field is overwritten except the password, which is only
        changed when a new hash is supplied.
        """
        values = data.model_dump(exclude={"password"})
        if password_hash:
            values["password"] = password_hash
        return self.db.execute(_UPDATE, {"target_id": user_id, **values})

    def delete(self, user_id: int) -> int:
        return self.db.execute(_DELETE, {"target_id": user_id})

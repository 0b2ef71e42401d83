"""
Initialize database with default data
"""
import logging
from datetime import date

from vendor_console.config import Settings
from vendor_console.database import Database
from vendor_console.repositories.users import UserRepository
from vendor_console.schemas.user import UserCreate
from vendor_console.services.auth import get_password_hash

logger = logging.getLogger(__name__)


def init_default_data(db: Database, settings: Settings) -> bool:
    """
    Create the bootstrap administrator when no administrator exists.

    Returns:
        True if an administrator was created
    """
    repo = UserRepository(db)
    if repo.count() > 0:
        return False

    admin = UserCreate(
        name=settings.default_admin_name,
        email=settings.default_admin_email,
        joining_date=date.today(),
        password=settings.default_admin_password,
    )
    repo.create(admin, get_password_hash(admin.password))
    logger.info(f"Default administrator created (email: {settings.default_admin_email})")
    return True

"""
Dashboard router
"""
from typing import Dict, Any
from fastapi import APIRouter, Depends
from vendor_console.database import Database, get_db
from vendor_console.repositories.dashboard import DashboardRepository

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=Dict[str, Any])
def get_dashboard_stats(db: Database = Depends(get_db)):
    """
    Get dashboard statistics

    Entity counts, project count per status and the five most recent projects
    """
    return DashboardRepository(db).stats()

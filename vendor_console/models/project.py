"""
Project model
"""
from sqlalchemy import Column, Integer, String, Date, Text, ForeignKey
from vendor_console.database import Base

PROJECT_STATUSES = ("Not Started", "In Progress", "Completed")


class Project(Base):
    """Project model"""
    __tablename__ = "projects"

    project_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    project_name = Column(String(200), nullable=False)
    department_id = Column(Integer, ForeignKey("departments.id"), nullable=True)
    starting_date = Column(Date, index=True)
    project_manager = Column(Integer, ForeignKey("users.user_id"), nullable=True)
    co_manager = Column(Integer, ForeignKey("users.user_id"), nullable=True)
    deadline = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default="Not Started")  # see PROJECT_STATUSES
    no_of_people_working = Column(Integer, nullable=False, default=0)
    remarks = Column(Text, default="")

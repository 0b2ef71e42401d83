"""
Department model
"""
from sqlalchemy import Column, Integer, String
from vendor_console.database import Base


class Department(Base):
    """Department model"""
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    department_name = Column(String(100), nullable=False, index=True)
    respective_manager = Column(String(100))  # free text, not a reference
    no_of_ongoing_projects = Column(Integer, nullable=False, default=0)
    no_of_finished_projects = Column(Integer, nullable=False, default=0)
    no_of_people_in_department = Column(Integer, nullable=False, default=0)

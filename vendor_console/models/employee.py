"""
Employee models
"""
from sqlalchemy import Column, Integer, String, Date, Float, ForeignKey
from vendor_console.database import Base


class Employee(Base):
    """Employee model"""
    __tablename__ = "employees"

    employee_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    phone = Column(String(30))
    dob = Column(Date)
    joining_date = Column(Date)
    department = Column(Integer, ForeignKey("departments.id"), nullable=True)
    manager_id = Column(Integer, ForeignKey("users.user_id"), nullable=True)
    rating_overall = Column(Float, nullable=False, default=0)


class EmployeeProject(Base):
    """Employee <-> project assignment"""
    __tablename__ = "employee_projects"

    employee_id = Column(Integer, ForeignKey("employees.employee_id"), primary_key=True)
    list_project_id = Column(Integer, ForeignKey("projects.project_id"), primary_key=True)

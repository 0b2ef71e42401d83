"""
Employees management router
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from vendor_console.database import Database, get_db
from vendor_console.repositories.employees import EmployeeRepository
from vendor_console.repositories.employee_projects import EmployeeProjectRepository
from vendor_console.schemas.common import CreatedResponse, MessageResponse
from vendor_console.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeResponse
from vendor_console.schemas.project import ProjectResponse

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get("", response_model=List[EmployeeResponse])
def list_employees(db: Database = Depends(get_db)):
    """
    List all employees ordered by name
    """
    return EmployeeRepository(db).list_all()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_employee(employee_data: EmployeeCreate, db: Database = Depends(get_db)):
    """
    Create new employee
    """
    new_id = EmployeeRepository(db).create(employee_data)
    return {"message": "Employee created successfully", "id": new_id}


@router.get("/{employee_id:int}", response_model=EmployeeResponse)
def get_employee(employee_id: int, db: Database = Depends(get_db)):
    """
    Get employee by ID
    """
    employee = EmployeeRepository(db).get_by_id(employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found"
        )
    return employee


@router.put("/{employee_id:int}", response_model=MessageResponse)
def update_employee(
    employee_id: int,
    employee_data: EmployeeUpdate,
    db: Database = Depends(get_db)
):
    """
    Replace employee
    """
    EmployeeRepository(db).update(employee_id, employee_data)
    return {"message": "Employee updated successfully"}


@router.delete("/{employee_id:int}", response_model=MessageResponse)
def delete_employee(employee_id: int, db: Database = Depends(get_db)):
    """
    Delete employee
    """
    EmployeeRepository(db).delete(employee_id)
    return {"message": "Employee deleted successfully"}


# Project assignments

@router.get("/{employee_id:int}/projects", response_model=List[ProjectResponse])
def list_employee_projects(employee_id: int, db: Database = Depends(get_db)):
    """
    List projects assigned to an employee
    """
    return EmployeeProjectRepository(db).list_for_employee(employee_id)


@router.post("/{employee_id:int}/projects/{project_id:int}", response_model=MessageResponse)
def assign_project(employee_id: int, project_id: int, db: Database = Depends(get_db)):
    """
    Assign a project to an employee
    """
    EmployeeProjectRepository(db).assign(employee_id, project_id)
    return {"message": "Project assigned successfully"}


@router.delete("/{employee_id:int}/projects/{project_id:int}", response_model=MessageResponse)
def unassign_project(employee_id: int, project_id: int, db: Database = Depends(get_db)):
    """
    Remove a project assignment from an employee
    """
    EmployeeProjectRepository(db).unassign(employee_id, project_id)
    return {"message": "Project unassigned successfully"}

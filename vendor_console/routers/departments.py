"""
Departments management router
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from vendor_console.database import Database, get_db
from vendor_console.repositories.departments import DepartmentRepository
from vendor_console.schemas.common import CreatedResponse, MessageResponse
from vendor_console.schemas.department import DepartmentCreate, DepartmentUpdate, DepartmentResponse

router = APIRouter(prefix="/departments", tags=["Departments"])


@router.get("", response_model=List[DepartmentResponse])
def list_departments(db: Database = Depends(get_db)):
    """
    List all departments ordered by name
    """
    return DepartmentRepository(db).list_all()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_department(dept_data: DepartmentCreate, db: Database = Depends(get_db)):
    """
    Create new department
    """
    new_id = DepartmentRepository(db).create(dept_data)
    return {"message": "Department created successfully", "id": new_id}


@router.get("/{department_id:int}", response_model=DepartmentResponse)
def get_department(department_id: int, db: Database = Depends(get_db)):
    """
    Get department by ID
    """
    dept = DepartmentRepository(db).get_by_id(department_id)
    if not dept:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Department not found"
        )
    return dept


@router.put("/{department_id:int}", response_model=MessageResponse)
def update_department(
    department_id: int,
    dept_data: DepartmentUpdate,
    db: Database = Depends(get_db)
):
    """
    Replace department; counts left out of the body reset to 0
    """
    DepartmentRepository(db).update(department_id, dept_data)
    return {"message": "Department updated successfully"}


@router.delete("/{department_id:int}", response_model=MessageResponse)
def delete_department(department_id: int, db: Database = Depends(get_db)):
    """
    Delete department

    Employees, administrators and projects pointing at it are not checked.
    """
    DepartmentRepository(db).delete(department_id)
    return {"message": "Department deleted successfully"}

"""
Projects management router
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from vendor_console.database import Database, get_db
from vendor_console.repositories.projects import ProjectRepository
from vendor_console.schemas.common import CreatedResponse, MessageResponse
from vendor_console.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=List[ProjectResponse])
def list_projects(db: Database = Depends(get_db)):
    """
    List all projects, latest starting date first
    """
    return ProjectRepository(db).list_all()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_project(project_data: ProjectCreate, db: Database = Depends(get_db)):
    new_id = ProjectRepository(db).create(project_data)
    return {"message": "Project created successfully", "id": new_id}


@router.get("/{project_id:int}", response_model=ProjectResponse)
def get_project(project_id: int, db: Database = Depends(get_db)):
    project = ProjectRepository(db).get_by_id(project_id)
    if not project:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    return project


@router.put("/{project_id:int}", response_model=MessageResponse)
def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    db: Database = Depends(get_db)
):
    """
    Replace project; a missing status goes back to "Not Started"
    """
    ProjectRepository(db).update(project_id, project_data)
    return {"message": "Project updated successfully"}


@router.delete("/{project_id:int}", response_model=MessageResponse)
def delete_project(project_id: int, db: Database = Depends(get_db)):
    ProjectRepository(db).delete(project_id)
    return {"message": "Project deleted successfully"}

"""
Administrators management router
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from vendor_console.database import Database, get_db
from vendor_console.repositories.users import UserRepository
from vendor_console.schemas.common import CreatedResponse, MessageResponse
from vendor_console.schemas.user import UserCreate, UserUpdate, UserResponse
from vendor_console.services.auth import get_password_hash

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserResponse])
def list_users(db: Database = Depends(get_db)):
    """
    List all administrators ordered by name
    """
    return UserRepository(db).list_all()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_user(user_data: UserCreate, db: Database = Depends(get_db)):
    """
    Create new administrator
    """
    new_id = UserRepository(db).create(user_data, get_password_hash(user_data.password))
    return {"message": "User created successfully", "id": new_id}


@router.get("/{user_id:int}", response_model=UserResponse)
def get_user(user_id: int, db: Database = Depends(get_db)):
    """
    Get administrator by ID
    """
    user = UserRepository(db).get_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.put("/{user_id:int}", response_model=MessageResponse)
def update_user(user_id: int, user_data: UserUpdate, db: Database = Depends(get_db)):
    """
    Replace administrator

    The stored password is only changed when the body carries a new one.
    """
    password_hash = get_password_hash(user_data.password) if user_data.password else None
    UserRepository(db).update(user_id, user_data, password_hash)
    return {"message": "User updated successfully"}


@router.delete("/{user_id:int}", response_model=MessageResponse)
def delete_user(user_id: int, db: Database = Depends(get_db)):
    """
    Delete administrator
    """
    UserRepository(db).delete(user_id)
    return {"message": "User deleted successfully"}

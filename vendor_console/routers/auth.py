"""
Authentication router
"""
import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from vendor_console.config import Settings
from vendor_console.database import Database, get_db
from vendor_console.repositories.users import UserRepository
from vendor_console.schemas.user import LoginResponse, UserLogin, UserResponse
from vendor_console.services.auth import (
    authenticate_user, create_access_token, get_app_settings, get_current_user
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
def login(
    response: Response,
    login_data: Optional[UserLogin] = None,
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Login endpoint

    Returns the administrator's safe fields and a JWT access token,
    which is also set as a cookie
    """
    if login_data is None or not login_data.email or not login_data.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required"
        )

    logger.info(f"Login attempt: {login_data.email}")
    user = authenticate_user(UserRepository(db), login_data.email, login_data.password)
    if not user:
        logger.info(f"Login failed: {login_data.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={"sub": str(user["user_id"]), "email": user["email"]},
        settings=settings,
    )
    response.set_cookie(
        key="access_token",
        value=access_token,
        httponly=True,
        max_age=settings.access_token_expire_minutes * 60,
        samesite="lax"
    )

    return {"user": user, "access_token": access_token, "token_type": "bearer"}


@router.post("/logout")
def logout(response: Response):
    """
    Logout endpoint - clears the token cookie
    """
    response.delete_cookie(key="access_token")
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
def get_current_user_info(current_user: Dict[str, Any] = Depends(get_current_user)):
    """
    Get current administrator information
    """
    return current_user

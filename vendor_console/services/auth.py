"""
Authentication service
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from vendor_console.config import Settings
from vendor_console.database import Database, get_db
from vendor_console.repositories.users import UserRepository
from vendor_console.schemas.user import TokenData

logger = logging.getLogger(__name__)

# OAuth2 scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password"""
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def get_password_hash(password: str) -> str:
    """Hash password"""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings the application was built with"""
    return request.app.state.settings


def authenticate_user(repo: UserRepository, email: str, password: str) -> Optional[Dict[str, Any]]:
    """
    Authenticate administrator with email and password

    Args:
        repo: Administrator repository
        email: Login email
        password: Plain text password

    Returns:
        Safe administrator fields if authenticated, None otherwise
    """
    for candidate in repo.get_credentials_by_email(email):
        if verify_password(password, candidate["password"]):
            return repo.get_by_id(candidate["user_id"])
    return None


def create_access_token(
    data: dict, settings: Settings, expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create JWT access token

    Args:
        data: Data to encode in token
        settings: Application settings holding the signing key
        expires_delta: Token expiration time

    Returns:
        JWT token string
    """
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str, settings: Settings) -> TokenData:
    """
    Decode JWT token

    Raises:
        HTTPException: If token is invalid
    """
    credentials_error = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        raise credentials_error
    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise credentials_error
    return TokenData(user_id=int(subject), email=payload.get("email"))


def get_current_user(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    """
    Get current authenticated administrator

    The token is read from the Authorization header first, then from the
    ``access_token`` cookie.

    Raises:
        HTTPException: If no valid token is presented or the user is gone
    """
    if not token:
        token = request.cookies.get("access_token")

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token_data = decode_token(token, settings)
    user = UserRepository(db).get_by_id(token_data.user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user

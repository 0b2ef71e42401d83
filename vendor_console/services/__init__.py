"""
Service layer
"""
from vendor_console.services.auth import (
    verify_password, get_password_hash, authenticate_user,
    create_access_token, decode_token, get_current_user
)

__all__ = [
    "verify_password", "get_password_hash", "authenticate_user",
    "create_access_token", "decode_token", "get_current_user",
]

"""
Shared response envelopes
"""
from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Envelope for mutations and errors"""
    message: str


class CreatedResponse(MessageResponse):
    """Envelope for successful creation"""
    id: int

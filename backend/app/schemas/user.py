"""
Pydantic schemas for User entity.

Request schemas keep every field optional so that presence checks happen in
the handlers and all missing-field errors share one 400 response.
"""
from pydantic import BaseModel, StrictBool
from typing import List, Optional


class UserCreate(BaseModel):
    """Schema for user creation."""
    username: Optional[str] = None
    password: Optional[str] = None
    roles: Optional[List[str]] = None


class UserUpdate(BaseModel):
    """Schema for user update. Password is only changed when supplied."""
    id: Optional[int] = None
    username: Optional[str] = None
    roles: Optional[List[str]] = None
    active: Optional[StrictBool] = None
    password: Optional[str] = None


class UserDelete(BaseModel):
    """Schema for user deletion."""
    id: Optional[int] = None


class UserResponse(BaseModel):
    """Schema for user response. Never includes the password."""
    id: int
    username: str
    roles: List[str]
    active: bool
    
    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str

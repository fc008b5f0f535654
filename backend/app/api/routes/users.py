"""
User management routes: list, create, update and delete users.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.core.security import get_password_hash
from app.db.session import get_db
from app.schemas.user import (
    MessageResponse, UserCreate, UserDelete, UserResponse, UserUpdate
)
from app.services import note_service, user_service

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def _has_roles(roles) -> bool:
    return isinstance(roles, list) and len(roles) > 0


@router.get("", response_model=List[UserResponse])
async def get_all_users(db: Session = Depends(get_db)):
    """Get all users. The password field is never returned."""
    users = user_service.list_users(db)
    if not users:
        raise NotFoundError("No users found")
    return users


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_new_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """Create a user with a unique username and at least one role."""
    if not user_data.username or not user_data.password or not _has_roles(user_data.roles):
        raise ValidationError()
    
    # Early exit; the unique index on username has the final say
    if user_service.find_user_by_username(user_data.username, db):
        logger.warning(f"Rejected duplicate username '{user_data.username}'")
        raise ConflictError("Username already exists")
    
    hashed_password = await run_in_threadpool(get_password_hash, user_data.password)
    user_service.create_user(user_data.username, hashed_password, user_data.roles, db)
    
    return {"message": f"User {user_data.username} created successfully"}


@router.patch("", response_model=MessageResponse)
async def update_user(user_data: UserUpdate, db: Session = Depends(get_db)):
    """
    Update username, roles and active flag of a user.

    The password is only replaced when a non-empty one is supplied.
    """
    if (
        not user_data.id
        or not user_data.username
        or not _has_roles(user_data.roles)
        or not isinstance(user_data.active, bool)
    ):
        raise ValidationError()
    
    user = user_service.get_user(user_data.id, db)
    if not user:
        raise NotFoundError("User not found")
    
    # Keeping the same username on the same user is allowed
    duplicate = user_service.find_user_by_username(user_data.username, db)
    if duplicate and duplicate.id != user.id:
        logger.warning(f"Rejected rename of user {user.id} to taken username '{user_data.username}'")
        raise ConflictError("Username already exists")
    
    user.username = user_data.username
    user.roles = list(user_data.roles)
    user.active = user_data.active
    
    if user_data.password:
        user.password = await run_in_threadpool(get_password_hash, user_data.password)
    
    updated_user = user_service.save_user(user, db)
    
    return {"message": f"User {updated_user.username} updated successfully"}


@router.delete("", response_model=MessageResponse)
async def delete_user(user_data: UserDelete, db: Session = Depends(get_db)):
    """Delete a user that owns no notes."""
    if not user_data.id:
        raise ValidationError()
    
    if note_service.find_note_for_user(user_data.id, db):
        raise ConflictError("User has notes")
    
    user = user_service.get_user(user_data.id, db)
    if not user:
        raise NotFoundError("User not found")
    
    username = user.username
    user_service.remove_user(user, db)
    
    return {"message": f"User {username} deleted successfully"}

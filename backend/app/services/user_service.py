"""
User service: read and write access to stored users.

Read helpers return plain snapshots (column rows or response schemas) and
never the password hash. Write helpers work on mapped User instances and
commit them, translating store failures into UserManagementError subclasses.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, PersistenceError
from app.models.user import User
from app.schemas.user import UserResponse

logger = logging.getLogger(__name__)


def list_users(db: Session) -> List[UserResponse]:
    """Get all users without their password field."""
    rows = db.query(
        User.id, User.username, User.roles, User.active
    ).order_by(User.id).all()
    
    return [UserResponse.model_validate(row) for row in rows]


def find_user_by_username(username: str, db: Session):
    """Get a (id, username) row for a username, or None."""
    return db.query(User.id, User.username).filter(
        User.username == username
    ).first()


def get_user(user_id: int, db: Session) -> Optional[User]:
    """Get a user instance that can be modified and saved."""
    return db.get(User, user_id)


def _commit(db: Session, action: str, username: str) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Unique constraint rejected {action} of user '{username}'")
        raise ConflictError()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to {action} user '{username}': {e}")
        raise PersistenceError()


def create_user(username: str, password_hash: str, roles: List[str], db: Session) -> User:
    """Create and store a new user. The password must already be hashed."""
    user = User(username=username, password=password_hash, roles=list(roles))
    db.add(user)
    _commit(db, "create", username)
    db.refresh(user)
    
    logger.info(f"Created user {user.id} '{user.username}'")
    return user


def save_user(user: User, db: Session) -> User:
    """Persist changes made to a user instance."""
    _commit(db, "update", user.username)
    db.refresh(user)
    
    logger.info(f"Updated user {user.id} '{user.username}'")
    return user


def remove_user(user: User, db: Session) -> None:
    """Delete a user."""
    user_id, username = user.id, user.username
    db.delete(user)
    try:
        db.commit()
    except IntegrityError:
        # A note was attached after the note check ran
        db.rollback()
        logger.warning(f"User {user_id} '{username}' gained notes before removal")
        raise ConflictError("User has notes")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete user {user_id} '{username}': {e}")
        raise PersistenceError()
    
    logger.info(f"Deleted user {user_id} '{username}'")

"""
User model for user management.
"""
from sqlalchemy import Column, String, Boolean, JSON
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


def _default_roles():
    return ["Employee"]


class User(BaseModel):
    """User with a unique username, bcrypt password hash and role list."""
    __tablename__ = "users"
    
    username = Column(String(50), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    roles = Column(JSON, nullable=False, default=_default_roles)
    active = Column(Boolean, default=True, nullable=False)
    
    # Relationships
    notes = relationship("Note", back_populates="user")

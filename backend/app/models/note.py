"""
Note model. Notes are owned by a user and block that user's deletion.
"""
from sqlalchemy import Column, String, Text, Boolean, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Note(BaseModel):
    __tablename__ = "notes"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    text = Column(Text, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
    
    # Relationships
    user = relationship("User", back_populates="notes")

"""
Note service for note lookups needed by user management.
"""
from sqlalchemy.orm import Session
from app.models.note import Note


def find_note_for_user(user_id: int, db: Session):
    """Get the id row of any note owned by the user, or None."""
    return db.query(Note.id).filter(Note.user_id == user_id).first()

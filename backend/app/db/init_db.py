"""
Database initialization script.
"""
import logging

from app.core.logging_config import configure_logging
from app.db.session import init_db

# Import all models so SQLAlchemy can register them
from app.models import User, Note  # noqa: F401

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    configure_logging()
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully!")

"""
Utility functions for the application.
"""
from typing import Any, Dict


def format_message(message: str) -> Dict[str, Any]:
    """Format a message-only API response."""
    return {"message": message}

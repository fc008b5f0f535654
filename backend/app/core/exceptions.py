"""
Errors raised by user management handlers.

Each error carries the HTTP status and the message returned to the client.
They are turned into `{"message": ...}` JSON responses by the exception
handlers registered in app.main.
"""


class UserManagementError(Exception):
    """Base class for errors reported back to the client."""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(UserManagementError):
    """Required fields are missing or malformed."""
    status_code = 400
    default_message = "Please provide all required fields"


class NotFoundError(UserManagementError):
    status_code = 404
    default_message = "User not found"


class ConflictError(UserManagementError):
    """Duplicate username, or the user still owns notes."""
    status_code = 409
    default_message = "Username already exists"


class PersistenceError(UserManagementError):
    """The store rejected a create, save or remove."""
    status_code = 400
    default_message = "Invalid user data"

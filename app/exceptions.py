"""Domain errors raised by the CRUD layer.

Each error carries the HTTP status it is reported with. The application
renders all of them as ``{"erro": message}``.
"""


class LibraryError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LibraryError):
    """A required field is missing or has an invalid value."""


class ConflictError(LibraryError):
    """A unique key (user email) is already taken."""


class AuthError(LibraryError):
    """No user matches the given credentials."""
    status_code = 401


class BusinessRuleError(LibraryError):
    """A checkout precondition failed."""


class NotFoundError(LibraryError):
    """Unknown id or dangling reference."""


class StoreError(LibraryError):
    """Unclassified persistence failure."""

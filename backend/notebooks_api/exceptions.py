"""
Notebooks API — Exception Hierarchy
====================================

What:  Application errors raised by service implementations and the
       service loader, discriminated by the controllers.
How:   Every error carries a client-safe `message` and a `context` dict that
       is logged but never returned to the client.

Hierarchy:
    NotebooksApiError (base)
    ├── UserError                    closed set, one HTTP mapping per operation
    │   ├── UserDuplicateError       create_user  → 409
    │   ├── UserNotFoundError        login_user   → 409
    │   ├── UserWrongPasswordError   login_user   → 401
    │   └── UserTokenError           get_user     → 401
    ├── NotebookValidationError      create_notebook → 400
    ├── NotebookPersistError         create_notebook → 500
    └── ServiceConfigurationError    raised at startup, never per request
"""

from typing import Any, Dict, Optional


class NotebooksApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Description safe to return in an API response.
        context:  Debug details for the server log only.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


# ══════════════════════════════════════════════════════════════════════════
# User errors
# ══════════════════════════════════════════════════════════════════════════


class UserError(NotebooksApiError):
    """
    Root of the user error variants.

    Service implementations raise only the four subclasses below. The user
    controller keeps one table per operation from subclass to response, so
    a variant that an operation does not list is answered with 500.
    """


class UserDuplicateError(UserError):
    """A user with the same username or email already exists."""

    def __init__(self, message: str = "User already exists", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class UserNotFoundError(UserError):
    """No user matches the submitted login."""

    def __init__(self, message: str = "User not found", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class UserWrongPasswordError(UserError):
    """The login exists but the password does not match."""

    def __init__(self, message: str = "Wrong password", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class UserTokenError(UserError):
    """The bearer token is unknown, expired or malformed."""

    def __init__(self, message: str = "Invalid token", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


# ══════════════════════════════════════════════════════════════════════════
# Notebook errors
# ══════════════════════════════════════════════════════════════════════════


class NotebookValidationError(NotebooksApiError):
    """
    Raised by a notebook service that rejects the submitted notebook.

    The message is returned to the client as `{"msg": message}` with 400.
    """

    def __init__(
        self,
        message: str = "Invalid notebook",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotebookPersistError(NotebooksApiError):
    """The repository refused to store the notebook."""

    def __init__(
        self,
        notebook_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if notebook_id:
            ctx["notebook_id"] = notebook_id
        super().__init__(message="Notebook could not be stored", context=ctx)
        self.notebook_id = notebook_id


# ══════════════════════════════════════════════════════════════════════════
# Wiring errors
# ══════════════════════════════════════════════════════════════════════════


class ServiceConfigurationError(NotebooksApiError):
    """A configured service import path cannot be turned into a service."""

    def __init__(self, path: str, reason: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["path"] = path
        super().__init__(message=f"Cannot load service '{path}': {reason}", context=ctx)
        self.path = path
        self.reason = reason

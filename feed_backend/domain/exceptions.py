"""
Domain exception hierarchy for the feed backend.

Every failure an auth or post use case can report inherits from FeedError and
carries a ``kind`` plus an optional list of field-level violations. Adapters
translate the kind into their own status convention; the domain never knows
about HTTP.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Dict, List, Optional


FieldError = Dict[str, str]


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class FeedError(Exception):
    """Base exception for all feed domain errors."""

    kind = "error"

    def __init__(self, message: str, errors: Optional[List[FieldError]] = None):
        super().__init__(message)
        self.message = message
        self.errors: List[FieldError] = errors or []


# -----------------------------------------------------------------------------
# Input
# -----------------------------------------------------------------------------


class ValidationError(FeedError):
    """Raised with every field violation found, not only the first one."""

    kind = "validation"

    def __init__(self, errors: List[FieldError], message: str = "Validation failed."):
        super().__init__(message, errors)


class ConflictError(FeedError):
    """Raised when a unique key (user email) is already taken."""

    kind = "conflict"


class NotFoundError(FeedError):
    """Raised when a user or post does not exist."""

    kind = "not_found"


# -----------------------------------------------------------------------------
# Identity and authorization
# -----------------------------------------------------------------------------


class UnauthenticatedError(FeedError):
    """Raised when the caller has no valid identity."""

    kind = "unauthenticated"

    def __init__(self, message: str = "Not authenticated."):
        super().__init__(message)


class ForbiddenError(FeedError):
    """Raised when the caller is authenticated but does not own the resource."""

    kind = "forbidden"

    def __init__(self, message: str = "Not authorized."):
        super().__init__(message)


class InvalidCredentialsError(FeedError):
    """Raised when a login password does not match the stored hash."""

    kind = "invalid_credentials"

    def __init__(self, message: str = "Wrong password."):
        super().__init__(message)


# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------


class StoreError(FeedError):
    """Raised when the underlying store fails. Always surfaced to the caller."""

    kind = "store"

"""Domain errors raised by the registry core.

Each error carries the HTTP status it is answered with; ``app.main``
registers a single handler that renders them as ``{"detail": message}``.
"""

from fastapi import status


class RegistryError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class AuthError(RegistryError):
    """The bearer credential is absent or cannot be verified."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authenticated."

    MISSING = "missing"
    INVALID = "invalid"

    def __init__(self, reason: str = INVALID, message: str | None = None):
        super().__init__(message)
        self.reason = reason

    @classmethod
    def missing(cls) -> "AuthError":
        return cls(cls.MISSING, "Missing bearer token.")

    @classmethod
    def invalid(cls) -> "AuthError":
        return cls(cls.INVALID, "Invalid or expired token.")


class NotFound(RegistryError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found."


class Forbidden(RegistryError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Unauthorized."


class Conflict(RegistryError):
    message = "Already exists."


class InvalidCredentials(RegistryError):
    message = "Invalid credentials."


class InvalidTransition(RegistryError):
    message = "Gift is not available."

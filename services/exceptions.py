"""
Error taxonomy for the service layer.

Each error carries a stable ``kind`` and the HTTP status the API error
handler maps it to. Identity and not-found errors use fixed, generic
messages.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for expected, classified failures."""

    kind = "ServiceError"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request failed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ============ MISSING INPUT ============

class MissingFields(ServiceError):
    kind = "MissingFields"
    default_message = "All account fields are required."


class MissingEmail(ServiceError):
    kind = "MissingEmail"
    default_message = "Email is required."


class MissingPassword(ServiceError):
    kind = "MissingPassword"
    default_message = "Password is required."


class MissingTitle(ServiceError):
    kind = "MissingTitle"
    default_message = "Title is required."


class MissingContent(ServiceError):
    kind = "MissingContent"
    default_message = "Content is required."


class NothingToUpdate(ServiceError):
    kind = "NothingToUpdate"
    default_message = "Provide a title or content to update."


# ============ VALIDATION ============

class InvalidEmailFormat(ServiceError):
    kind = "InvalidEmailFormat"
    default_message = "Email format is invalid."


class PasswordTooShort(ServiceError):
    kind = "PasswordTooShort"
    default_message = "Password must be at least 6 characters."


class PasswordTooLong(ServiceError):
    kind = "PasswordTooLong"
    default_message = "Password must be at most 72 bytes."


class PasswordMismatch(ServiceError):
    kind = "PasswordMismatch"
    default_message = "Password and password confirmation do not match."


class ContentTooShort(ServiceError):
    kind = "ContentTooShort"
    default_message = "Content must be at least 10 characters."


# ============ CONFLICT / IDENTITY / LOOKUP ============

class EmailAlreadyExists(ServiceError):
    kind = "EmailAlreadyExists"
    status_code = status.HTTP_409_CONFLICT
    default_message = "Email is already registered."


class InvalidCredentials(ServiceError):
    kind = "InvalidCredentials"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password."


class Unauthenticated(ServiceError):
    kind = "Unauthenticated"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required."


class NotFound(ServiceError):
    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found."

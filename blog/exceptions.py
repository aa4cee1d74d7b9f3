"""
Custom Exception Classes for the Blog API

This module defines the domain exceptions raised by the service layer.
Each carries an HTTP status code and a machine-readable error code so the
global handlers can render a consistent error response.
"""

import enum
from typing import Any

from fastapi import status


class ErrorCode(str, enum.Enum):
    """Machine-readable error codes returned in error responses."""

    # Authentication
    AUTH_FAILED = "AUTH_FAILED"
    AUTH_INVALID_TOKEN = "AUTH_INVALID_TOKEN"

    # Resources
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RESOURCE_POST_NOT_FOUND = "RESOURCE_POST_NOT_FOUND"
    RESOURCE_TRANSLATION_NOT_FOUND = "RESOURCE_TRANSLATION_NOT_FOUND"
    RESOURCE_CATEGORY_NOT_FOUND = "RESOURCE_CATEGORY_NOT_FOUND"

    # Validation & conflicts
    VALIDATION_FAILED = "VALIDATION_FAILED"
    CONFLICT = "CONFLICT"
    CONFLICT_SLUG = "CONFLICT_SLUG"
    CONFLICT_LOCALE = "CONFLICT_LOCALE"

    # Server
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class BlogError(Exception):
    """Base exception class for all blog domain errors"""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
        error_code: ErrorCode | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        if error_code is not None:
            self.error_code = error_code
        super().__init__(self.message)


# ============================================================================
# Authentication Exceptions
# ============================================================================


class AuthenticationError(BlogError):
    """Raised when authentication fails"""

    error_code = ErrorCode.AUTH_FAILED

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message=message, status_code=status.HTTP_401_UNAUTHORIZED)


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class ResourceNotFoundError(BlogError):
    """Base class for resource not found errors"""

    error_code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(self, resource_type: str, resource_id: Any | None = None, message: str | None = None):
        if message is None:
            message = f"{resource_type} not found"
            if resource_id is not None:
                message = f"{resource_type} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class PostNotFoundError(ResourceNotFoundError):
    """Raised when a post is not found"""

    error_code = ErrorCode.RESOURCE_POST_NOT_FOUND

    def __init__(self, post_id: Any | None = None):
        super().__init__(resource_type="Post", resource_id=post_id)


class TranslationNotFoundError(ResourceNotFoundError):
    """Raised when no translation matches a post/locale or slug/locale pair"""

    error_code = ErrorCode.RESOURCE_TRANSLATION_NOT_FOUND

    def __init__(self, locale: str, post_id: int | None = None, slug: str | None = None):
        if slug is not None:
            message = f"Translation with slug '{slug}' and locale '{locale}' not found"
        else:
            message = f"Translation for post '{post_id}' and locale '{locale}' not found"
        super().__init__(resource_type="Translation", message=message)
        self.details.update({"locale": locale, "post_id": post_id, "slug": slug})


class CategoryNotFoundError(ResourceNotFoundError):
    """Raised when a category is not found"""

    error_code = ErrorCode.RESOURCE_CATEGORY_NOT_FOUND

    def __init__(self, category_id: Any | None = None):
        super().__init__(resource_type="Category", resource_id=category_id)


# ============================================================================
# Conflict Exceptions
# ============================================================================


class ConflictError(BlogError):
    """Raised when a write would break a uniqueness rule"""

    error_code = ErrorCode.CONFLICT

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=details or {})


class SlugConflictError(ConflictError):
    """Raised when a slug is already taken"""

    error_code = ErrorCode.CONFLICT_SLUG

    def __init__(self, resource_type: str, slug: str):
        super().__init__(
            message=f"{resource_type} with slug '{slug}' already exists",
            details={"resource_type": resource_type, "field": "slug", "value": slug},
        )


class LocaleConflictError(ConflictError):
    """Raised when a post already has a translation for the locale"""

    error_code = ErrorCode.CONFLICT_LOCALE

    def __init__(self, post_id: int, locale: str):
        super().__init__(
            message=f"Translation for locale '{locale}' already exists",
            details={"post_id": post_id, "locale": locale},
        )


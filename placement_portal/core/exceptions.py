"""
Custom exceptions for the portal.
All errors surfaced to callers inherit from APIException for consistent handling.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all caller-facing errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


class ValidationException(APIException):
    """422 Validation Error"""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(422, code, message, details)


class FixtureLoadError(Exception):
    """
    Seed data could not be read or parsed.

    Never reaches callers: the fixture loader logs it and substitutes
    an empty collection.
    """

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to load fixture '{name}': {reason}")


# Resource specific exceptions
class JobNotFoundException(NotFoundException):
    """Job not found"""

    def __init__(self):
        super().__init__(message="Job not found", code="JOB_NOT_FOUND")


class ApplicationNotFoundException(NotFoundException):
    """Application not found"""

    def __init__(self):
        super().__init__(message="Application not found", code="APPLICATION_NOT_FOUND")


class CompanyNotFoundException(NotFoundException):
    """Company not found"""

    def __init__(self):
        super().__init__(message="Company not found", code="COMPANY_NOT_FOUND")


class UserNotFoundException(NotFoundException):
    """User not found"""

    def __init__(self):
        super().__init__(message="User not found", code="USER_NOT_FOUND")


class MentorshipNotFoundException(NotFoundException):
    """Mentorship not found"""

    def __init__(self):
        super().__init__(message="Mentorship not found", code="MENTORSHIP_NOT_FOUND")


class ReferralNotFoundException(NotFoundException):
    """Referral not found"""

    def __init__(self):
        super().__init__(message="Referral not found", code="REFERRAL_NOT_FOUND")


class DuplicateApplicationException(ConflictException):
    """Student already applied to this job"""

    def __init__(self):
        super().__init__(
            message="Student has already applied to this job",
            code="DUPLICATE_APPLICATION",
        )


class ReferralClosedException(ConflictException):
    """Referral no longer accepts applications"""

    def __init__(self):
        super().__init__(
            message="Referral is closed",
            code="REFERRAL_CLOSED",
        )


class EmailAlreadyExistsException(ConflictException):
    """Email already registered"""

    def __init__(self):
        super().__init__(
            message="Email already registered",
            code="EMAIL_EXISTS",
        )

class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class ConflictError(DomainError):
    """Duplicate username, email, title or friendship"""


class PermissionDeniedError(DomainError):
    pass


class AuthenticationError(DomainError):
    pass


class RateLimitExceededError(DomainError):
    """Too many failed logins from one client inside the window"""


class InvalidPageError(DomainError):
    """Page number or size outside the valid range for a listing"""


class DataUnavailableError(DomainError):
    """Recommendation inputs could not be loaded; nothing was scored"""

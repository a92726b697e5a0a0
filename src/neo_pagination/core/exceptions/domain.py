"""Domain-specific exceptions for neo-pagination.

Configuration errors describe a paginator that cannot run at all;
validation errors describe a bad value handed to a running paginator.
"""

from .base import NeoPaginationError


# Configuration Errors
class ConfigurationError(NeoPaginationError):
    """Raised when there's a configuration issue."""
    pass


class ProviderNotFoundError(ConfigurationError):
    """Raised when the count or slice provider is not configured."""
    pass


class InvalidPaginatorConfigError(ConfigurationError):
    """Raised when items per page or pages in range is out of bounds."""
    pass


# Validation Errors
class ValidationError(NeoPaginationError):
    """Base class for validation errors."""
    pass


class InvalidPageNumberError(ValidationError):
    """Raised when the requested page number is not a positive integer."""
    pass


class InvalidItemCountError(ValidationError):
    """Raised when the count provider returns something other than a non-negative integer."""
    pass

"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class DjSetError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(DjSetError):
    """Raised for issues related to configuration loading or validation."""


class LibraryFullError(DjSetError):
    """Raised when a track is added to a set library that has no free slots."""


class InvalidTrackError(DjSetError):
    """
    Raised when a track record is built with bad field values, or handed to a
    collection that cannot take ownership of it.
    """

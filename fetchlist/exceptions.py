"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class FetchlistError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(FetchlistError):
    """Raised for issues related to configuration loading or validation."""


class FatalRunError(FetchlistError):
    """Base class for conditions that abort a whole download run."""


class DirectoryCreateError(FatalRunError):
    """Raised when the output directory is missing and cannot be created."""


class LinksFileNotFoundError(FatalRunError):
    """Raised when the links file does not exist."""


class LinksFileReadError(FatalRunError):
    """Raised when the links file exists but its content cannot be read."""

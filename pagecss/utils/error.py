"""Error utility for pagecss."""

class PageCSSError(Exception):
    """Base exception for pagecss."""
    pass

class ValidationError(PageCSSError):
    """Raised when an identifier or argument is invalid."""
    pass

class FileOperationError(PageCSSError):
    """Raised when file operations fail."""
    pass

class StorageError(PageCSSError):
    """Raised when a metadata or fragment store cannot persist data."""
    pass

class ConfigurationError(PageCSSError):
    """Raised when configuration is invalid."""
    pass

# Exported exceptions
__all__ = [
    'PageCSSError',
    'ValidationError',
    'FileOperationError',
    'StorageError',
    'ConfigurationError',
]

"""Common utilities for pagecss."""

import hashlib
import os
from .error import FileOperationError

def ensure_directory(path: str) -> bool:
    """Ensure directory exists.

    Args:
        path: Directory path

    Returns:
        True if directory exists or was created

    Raises:
        FileOperationError: If directory creation fails
    """
    try:
        if path and not os.path.exists(path):
            os.makedirs(path)
        return True
    except Exception as e:
        raise FileOperationError(f"Failed to create directory {path}: {e}")

def md5_hex(text: str) -> str:
    """Return the hex md5 digest of a string, used for filesystem-safe names."""
    return hashlib.md5(text.encode('utf-8')).hexdigest()

# Exported functions
__all__ = [
    'ensure_directory',
    'md5_hex',
]

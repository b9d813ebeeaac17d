"""File utility for pagecss."""

import os
from pathlib import Path
from typing import Union
from .common import ensure_directory
from .error import FileOperationError

def safe_write_file(file_path: Union[str, Path], content: Union[str, bytes], encoding: str = 'utf-8') -> bool:
    """Atomically write content to a file.

    Content goes to a sibling temp file first and is then renamed over the
    target, so concurrent readers see either the old or the new file.

    Args:
        file_path: Path to the file
        content: Text or bytes to write
        encoding: File encoding for text content

    Returns:
        True if successful

    Raises:
        FileOperationError: If file write fails
    """
    file_path = Path(file_path)
    temp_file = file_path.with_name(f"{file_path.name}.{os.getpid()}.tmp")
    try:
        ensure_directory(str(file_path.parent))
        if isinstance(content, bytes):
            temp_file.write_bytes(content)
        else:
            temp_file.write_text(content, encoding=encoding)
        os.replace(temp_file, file_path)
        return True
    except Exception as e:
        if temp_file.exists():
            temp_file.unlink()
        raise FileOperationError(f"Failed to write file {file_path}: {e}")

def safe_read_file(file_path: Union[str, Path], encoding: str = 'utf-8') -> str:
    """Safely read content from a file.

    Args:
        file_path: Path to the file
        encoding: File encoding

    Returns:
        File content

    Raises:
        FileOperationError: If file read fails
    """
    try:
        with open(file_path, 'r', encoding=encoding) as f:
            return f.read()
    except Exception as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")

def safe_read_bytes(file_path: Union[str, Path]) -> bytes:
    """Read raw bytes from a file.

    Raises:
        FileOperationError: If file read fails
    """
    try:
        return Path(file_path).read_bytes()
    except Exception as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")

def safe_remove_file(file_path: Union[str, Path]) -> bool:
    """Remove a file if it exists.

    Returns:
        True if a file was removed

    Raises:
        FileOperationError: If removal fails
    """
    try:
        path = Path(file_path)
        if path.exists():
            path.unlink()
            return True
        return False
    except Exception as e:
        raise FileOperationError(f"Failed to remove file {file_path}: {e}")

# Exported functions
__all__ = ['safe_write_file', 'safe_read_file', 'safe_read_bytes', 'safe_remove_file']

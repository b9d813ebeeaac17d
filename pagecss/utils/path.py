"""Page id and namespace path handling."""

import re
from pathlib import Path
from typing import List, Union
from .config import NAMESPACE_SEPARATOR
from .error import ValidationError

_SEPARATOR_CHARS = re.compile(r'[/;]')
_WHITESPACE = re.compile(r'\s+')
_REPEATED_SEPARATORS = re.compile(r':{2,}')
_REPEATED_UNDERSCORES = re.compile(r'_{2,}')

def clean_id(page_id: str) -> str:
    """Normalize a raw page id.

    Lowercases, converts '/' and ';' to ':', replaces whitespace with '_',
    collapses repeated separators and trims separators from both ends.

    Args:
        page_id: Raw page id

    Returns:
        Cleaned page id (may be empty)
    """
    if page_id is None:
        return ''
    cleaned = page_id.strip().lower()
    cleaned = _SEPARATOR_CHARS.sub(NAMESPACE_SEPARATOR, cleaned)
    cleaned = _WHITESPACE.sub('_', cleaned)
    cleaned = _REPEATED_SEPARATORS.sub(NAMESPACE_SEPARATOR, cleaned)
    cleaned = _REPEATED_UNDERSCORES.sub('_', cleaned)
    return cleaned.strip(':_')

def get_ns(page_id: str) -> str:
    """Return the namespace of a page id, '' for the root namespace.

    Args:
        page_id: Cleaned page id

    Returns:
        Namespace path without the page name
    """
    if NAMESPACE_SEPARATOR not in page_id:
        return ''
    return page_id.rsplit(NAMESPACE_SEPARATOR, 1)[0]

def split_namespace(namespace: str) -> List[str]:
    """Split a namespace path into its non-empty parts."""
    return [part for part in namespace.split(NAMESPACE_SEPARATOR) if part]

def page_file_path(pages_dir: Union[str, Path], page_id: str) -> Path:
    """Map a page id to its source file below pages_dir.

    Args:
        pages_dir: Root directory of page sources
        page_id: Page id such as 'wiki:syntax'

    Returns:
        Path such as pages_dir/wiki/syntax.txt

    Raises:
        ValidationError: If the id is empty or escapes pages_dir
    """
    page_id = clean_id(page_id)
    parts = split_namespace(page_id)
    if not parts:
        raise ValidationError("Empty page id")
    if any(part in ('.', '..') for part in parts):
        raise ValidationError(f"Invalid page id: {page_id}")
    return Path(pages_dir).joinpath(*parts[:-1], f"{parts[-1]}.txt")

# Exported functions
__all__ = ['clean_id', 'get_ns', 'split_namespace', 'page_file_path']

"""Page sources the pipeline reads raw wiki text from."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from ..utils.error import FileOperationError, ValidationError
from ..utils.file import safe_read_file
from ..utils.path import clean_id, get_ns, page_file_path

logger = logging.getLogger(__name__)


class WikiHost(ABC):
    """Narrow view of the wiki engine hosting the pipeline."""

    @abstractmethod
    def get_raw_text(self, page_id: str) -> str:
        """Current unrendered source of a page, '' if it does not exist."""

    def get_namespace_of(self, page_id: str) -> str:
        """Namespace path of a page, '' for the root namespace."""
        return get_ns(clean_id(page_id))


class DirectoryHost(WikiHost):
    """Pages stored as text files, a:b:page at pages_dir/a/b/page.txt."""

    def __init__(self, pages_dir: Union[str, Path]):
        self.pages_dir = Path(pages_dir)

    def get_raw_text(self, page_id: str) -> str:
        try:
            path = page_file_path(self.pages_dir, page_id)
        except ValidationError as e:
            logger.warning(f"Cannot read page {page_id!r}: {e}")
            return ''
        if not path.exists():
            return ''
        try:
            return safe_read_file(path)
        except FileOperationError as e:
            logger.error(f"Error reading page {page_id}: {e}")
            return ''


class MemoryHost(WikiHost):
    """Pages held in a dict keyed by cleaned page id."""

    def __init__(self, pages: Optional[Dict[str, str]] = None):
        self.pages = {clean_id(k): v for k, v in (pages or {}).items()}

    def set_page(self, page_id: str, text: str) -> None:
        self.pages[clean_id(page_id)] = text

    def get_raw_text(self, page_id: str) -> str:
        return self.pages.get(clean_id(page_id), '')


__all__ = ['WikiHost', 'DirectoryHost', 'MemoryHost']

"""File-backed per-page metadata store."""

from pathlib import Path
from typing import Any, Dict, Union

import orjson

from ..utils.common import md5_hex
from ..utils.error import FileOperationError
from ..utils.file import safe_read_bytes, safe_remove_file, safe_write_file
from .base import MetadataBackend

class MetadataStore(MetadataBackend):
    """Store each page's metadata as one JSON document.

    Files are named after the md5 of the page id so arbitrary ids map to
    safe file names. Writes are atomic; the last writer wins.
    """

    def __init__(self, meta_dir: Union[str, Path]):
        """Initialize metadata store.

        Args:
            meta_dir: Directory holding the .meta files
        """
        super().__init__()
        self.meta_dir = Path(meta_dir)
        self.meta_dir.mkdir(parents=True, exist_ok=True)

    def meta_file(self, page_id: str) -> Path:
        return self.meta_dir / f"{md5_hex(page_id)}.meta"

    def get_metadata(self, page_id: str) -> Dict[str, Any]:
        """Load the whole metadata document of a page.

        Unreadable or corrupt files are logged and read as empty.
        """
        path = self.meta_file(page_id)
        self.stats.increment('reads')
        if not path.exists():
            self.stats.increment('misses')
            return {}
        try:
            data = orjson.loads(safe_read_bytes(path))
        except (FileOperationError, orjson.JSONDecodeError) as e:
            self.log_error(f"Error loading metadata for {page_id}", e)
            return {}
        if not isinstance(data, dict):
            self.log_warning(f"Ignoring malformed metadata for {page_id}")
            return {}
        return data

    def get(self, page_id: str, key: str, default: Any = None) -> Any:
        return self.get_metadata(page_id).get(key, default)

    def set(self, page_id: str, key: str, value: Any) -> None:
        data = self.get_metadata(page_id)
        data[key] = value
        try:
            safe_write_file(self.meta_file(page_id), orjson.dumps(data))
        except (FileOperationError, TypeError) as e:
            self.handle_error(e, f"Failed to save metadata for {page_id}")
        self.stats.increment('writes')
        self.log_debug(f"Saved metadata key {key} for {page_id}")

    def remove(self, page_id: str) -> bool:
        """Delete all metadata of a page."""
        try:
            return safe_remove_file(self.meta_file(page_id))
        except FileOperationError as e:
            self.log_error(f"Error removing metadata for {page_id}", e)
            return False

# Exported class
__all__ = ['MetadataStore']

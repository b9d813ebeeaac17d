"""File cache of namespace CSS fragments."""

from pathlib import Path
from typing import Optional, Union

from ..utils.common import md5_hex
from ..utils.config import ROOT_NAMESPACE_KEY
from ..utils.error import FileOperationError
from ..utils.file import safe_read_file, safe_remove_file, safe_write_file
from .base import FragmentStore

class NamespaceFragmentStore(FragmentStore):
    """Keep one nscss_<hash>.css file per namespace in the cache directory."""

    def __init__(self, cache_dir: Union[str, Path]):
        """Initialize fragment store.

        Args:
            cache_dir: Directory for fragment files
        """
        super().__init__()
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def cache_file(self, key: str) -> Path:
        """Path of the fragment file for a canonical namespace key.

        The key is hashed as is, so `a:b`, `a_b` and `a/b` never share a file.
        """
        return self.cache_dir / f"nscss_{md5_hex(key or ROOT_NAMESPACE_KEY)}.css"

    def read_fragment(self, key: str) -> Optional[str]:
        path = self.cache_file(key)
        self.stats.increment('reads')
        if not path.exists():
            self.stats.increment('misses')
            return None
        try:
            return safe_read_file(path)
        except FileOperationError as e:
            self.log_error(f"Error reading namespace CSS for {key}", e)
            return None

    def write_fragment(self, key: str, css: str) -> None:
        try:
            safe_write_file(self.cache_file(key), css)
        except FileOperationError as e:
            self.handle_error(e, f"Failed to cache namespace CSS for {key}")
        self.stats.increment('writes')

    def delete_fragment(self, key: str) -> bool:
        try:
            return safe_remove_file(self.cache_file(key))
        except FileOperationError as e:
            self.log_error(f"Error removing namespace CSS for {key}", e)
            return False

    def clear_cache(self) -> None:
        """Remove every cached fragment."""
        for path in self.cache_dir.glob('nscss_*.css'):
            try:
                safe_remove_file(path)
            except FileOperationError as e:
                self.log_error(f"Error clearing {path}", e)

# Exported class
__all__ = ['NamespaceFragmentStore']

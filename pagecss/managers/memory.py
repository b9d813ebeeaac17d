"""In-process stores for hosts without a data directory, and for tests."""

import copy
from typing import Any, Optional

from ..utils.concurrency import ThreadSafeDict
from .base import FragmentStore, MetadataBackend

class MemoryMetadataStore(MetadataBackend):
    """Metadata kept in a lock-protected dict for the life of the process."""

    def __init__(self):
        super().__init__()
        self._pages = ThreadSafeDict()

    def get(self, page_id: str, key: str, default: Any = None) -> Any:
        self.stats.increment('reads')
        data = self._pages.get(page_id)
        if data is None or key not in data:
            self.stats.increment('misses')
            return default
        return copy.deepcopy(data[key])

    def set(self, page_id: str, key: str, value: Any) -> None:
        data = dict(self._pages.get(page_id) or {})
        data[key] = copy.deepcopy(value)
        self._pages[page_id] = data
        self.stats.increment('writes')

    def cleanup(self) -> None:
        self._pages.clear()


class MemoryFragmentStore(FragmentStore):
    """Namespace fragments kept in a lock-protected dict."""

    def __init__(self):
        super().__init__()
        self._fragments = ThreadSafeDict()

    def read_fragment(self, key: str) -> Optional[str]:
        self.stats.increment('reads')
        css = self._fragments.get(key)
        if css is None:
            self.stats.increment('misses')
        return css

    def write_fragment(self, key: str, css: str) -> None:
        self._fragments[key] = css
        self.stats.increment('writes')

    def delete_fragment(self, key: str) -> bool:
        return self._fragments.pop(key) is not None

    def cleanup(self) -> None:
        self._fragments.clear()

# Exported classes
__all__ = ['MemoryMetadataStore', 'MemoryFragmentStore']

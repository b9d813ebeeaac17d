"""Manager factory for pagecss."""

import logging
import os
from typing import Any, Dict, Optional
from ..utils.config import CACHE_DIR_NAME, META_DIR_NAME
from .base import BaseManager, FragmentStore, MetadataBackend
from .cache import NamespaceFragmentStore
from .memory import MemoryFragmentStore, MemoryMetadataStore
from .metadata import MetadataStore

class ManagerFactory:
    """Create and hold the stores for one data directory.

    Without a data directory the stores live in memory.
    """

    def __init__(self, data_dir: Optional[str] = None):
        """Initialize manager factory.

        Args:
            data_dir: Root data directory, or None for in-memory stores
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.data_dir = data_dir
        self._managers = {}

    def create_metadata_store(self) -> MetadataBackend:
        """Create metadata store.

        Returns:
            MetadataBackend: Metadata store instance
        """
        if 'metadata' not in self._managers:
            if self.data_dir:
                store = MetadataStore(os.path.join(self.data_dir, META_DIR_NAME))
            else:
                store = MemoryMetadataStore()
            self._managers['metadata'] = store
        return self._managers['metadata']

    def create_fragment_store(self) -> FragmentStore:
        """Create namespace fragment store.

        Returns:
            FragmentStore: Fragment store instance
        """
        if 'fragments' not in self._managers:
            if self.data_dir:
                store = NamespaceFragmentStore(os.path.join(self.data_dir, CACHE_DIR_NAME))
            else:
                store = MemoryFragmentStore()
            self._managers['fragments'] = store
        return self._managers['fragments']

    def get_manager(self, name: str) -> Optional[Any]:
        return self._managers.get(name)

    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics for all managers.

        Returns:
            Dict[str, Dict[str, Any]]: Dictionary of statistics for each manager
        """
        return {name: manager.get_stats() for name, manager in self._managers.items()}

    def cleanup_all(self) -> None:
        """Clean up all managers."""
        for name, manager in self._managers.items():
            try:
                manager.cleanup()
            except Exception as e:
                self.logger.error(f"Failed to cleanup {name} manager: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup_all()

# Exported class
__all__ = ['ManagerFactory']

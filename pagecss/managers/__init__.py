"""Persistence managers for pagecss."""

from .base import BaseManager, FragmentStore, MetadataBackend
from .cache import NamespaceFragmentStore
from .memory import MemoryFragmentStore, MemoryMetadataStore
from .metadata import MetadataStore
from .factory import ManagerFactory

# Exported classes
__all__ = [
    'BaseManager',
    'FragmentStore',
    'MetadataBackend',
    'MetadataStore',
    'NamespaceFragmentStore',
    'MemoryMetadataStore',
    'MemoryFragmentStore',
    'ManagerFactory'
]

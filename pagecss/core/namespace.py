"""Namespace-scoped CSS: key canonicalization, persistence and inheritance."""

import logging
from typing import List, Optional

from ..managers.base import FragmentStore
from ..utils.config import NAMESPACE_SEPARATOR, ROOT_NAMESPACE_KEY
from ..utils.error import StorageError
from ..utils.path import split_namespace
from .models import NamespaceFragment, StyleSheet

logger = logging.getLogger(__name__)

def namespace_key(namespace: str) -> str:
    """Canonical storage key for a namespace; the root is ':' rather than ''."""
    namespace = (namespace or '').strip(NAMESPACE_SEPARATOR)
    return namespace or ROOT_NAMESPACE_KEY

def namespace_chain(namespace: str) -> List[str]:
    """Keys from the root down to namespace, inclusive.

    >>> namespace_chain('a:b')
    [':', 'a', 'a:b']
    """
    chain = [ROOT_NAMESPACE_KEY]
    parts = split_namespace(namespace or '')
    for i in range(1, len(parts) + 1):
        chain.append(NAMESPACE_SEPARATOR.join(parts[:i]))
    return chain


class NamespaceAggregator:
    """Persist namespace fragments and resolve them in inheritance order."""

    def __init__(self, store: FragmentStore):
        self.store = store

    def record_fragment(self, key: str, css: str) -> None:
        """Replace the fragment stored for key.

        Raises:
            StorageError: If the fragment cannot be written
        """
        key = namespace_key(key)
        self.store.write_fragment(key, css)
        logger.info(f"Recorded namespace CSS for {key} ({len(css)} characters)")

    def load_fragment(self, key: str) -> Optional[NamespaceFragment]:
        key = namespace_key(key)
        css = self.store.read_fragment(key)
        if css is None:
            return None
        return NamespaceFragment(key, css)

    def remove_fragment(self, key: str) -> bool:
        """Delete the fragment for key; returns True if one existed."""
        key = namespace_key(key)
        removed = self.store.delete_fragment(key)
        if removed:
            logger.info(f"Removed namespace CSS for {key}")
        return removed

    def resolve(self, namespace: str) -> List[StyleSheet]:
        """Stylesheets of namespace and its ancestors, root first.

        Missing or unreadable fragments are skipped.
        """
        sheets = []
        for key in namespace_chain(namespace):
            try:
                fragment = self.load_fragment(key)
            except StorageError as e:
                logger.error(f"Error loading namespace CSS for {key}: {e}")
                continue
            if fragment is not None and fragment.raw_css:
                sheets.append(StyleSheet(fragment.raw_css, key))
        return sheets

    def combine(self, namespace: str) -> str:
        return "\n".join(sheet.css for sheet in self.resolve(namespace))


__all__ = ['namespace_key', 'namespace_chain', 'NamespaceAggregator']

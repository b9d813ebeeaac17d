"""Concurrency utilities for pagecss."""

from threading import RLock
from typing import Any, Dict, List

class ThreadSafeDict(dict):
    """Thread-safe dictionary implementation."""

    def __init__(self):
        """Initialize thread-safe dictionary."""
        super().__init__()
        self._lock = RLock()

    def __getitem__(self, key: str) -> Any:
        with self._lock:
            return super().__getitem__(key)

    def __setitem__(self, key: str, value: Any) -> None:
        with self._lock:
            super().__setitem__(key, value)

    def __delitem__(self, key: str) -> None:
        with self._lock:
            super().__delitem__(key)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return super().__contains__(key)

    def get(self, key: str, default: Any = None) -> Any:
        """Get item from dictionary with default.

        Args:
            key: Key to get
            default: Default value if key not found

        Returns:
            Value for key or default
        """
        with self._lock:
            return super().get(key, default)

    def pop(self, key: str, default: Any = None) -> Any:
        """Remove key and return its value, or default if absent."""
        with self._lock:
            return super().pop(key, default)

    def items(self) -> List[tuple]:
        """Get a snapshot of all (key, value) pairs."""
        with self._lock:
            return list(super().items())

    def keys(self) -> List[str]:
        """Get a snapshot of all keys."""
        with self._lock:
            return list(super().keys())

    def values(self) -> List[Any]:
        """Get a snapshot of all values."""
        with self._lock:
            return list(super().values())

    def clear(self) -> None:
        """Clear dictionary."""
        with self._lock:
            super().clear()

    def update(self, other: Dict[str, Any]) -> None:
        """Update dictionary with other dictionary.

        Args:
            other: Dictionary to update with
        """
        with self._lock:
            super().update(other)

    def increment(self, key: str, amount: int = 1) -> None:
        """Atomically add amount to a numeric counter."""
        with self._lock:
            super().__setitem__(key, super().get(key, 0) + amount)

    def __len__(self):
        with self._lock:
            return super().__len__()

    def __eq__(self, other):
        with self._lock:
            if isinstance(other, dict):
                return dict(self.items()) == other
            return super().__eq__(other)

    __hash__ = None

# Exported classes
__all__ = ['ThreadSafeDict']

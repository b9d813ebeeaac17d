"""Base manager classes for pagecss stores."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from ..utils.concurrency import ThreadSafeDict
from ..utils.error import StorageError

class BaseManager(ABC):
    """Base class for all persistence managers."""

    def __init__(self):
        """Initialize base manager."""
        self.logger = logging.getLogger(self.__class__.__name__)
        self.stats = ThreadSafeDict()
        self.reset_stats()

    def get_stats(self) -> Dict[str, Any]:
        """Get usage statistics."""
        return dict(self.stats.items())

    def reset_stats(self) -> None:
        """Reset usage statistics."""
        self.stats.update({
            'reads': 0,
            'writes': 0,
            'misses': 0,
            'errors': 0,
        })

    def log_error(self, message: str, error: Optional[Exception] = None) -> None:
        """Log error message.

        Args:
            message: Error message
            error: Optional exception
        """
        self.stats.increment('errors')
        if error:
            self.logger.error(f"{message}: {error}")
        else:
            self.logger.error(message)

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)

    def handle_error(self, error: Exception, message: str) -> None:
        """Log a write failure and re-raise it as StorageError.

        Args:
            error: Exception to handle
            message: Error message

        Raises:
            StorageError: Always
        """
        self.log_error(message, error)
        raise StorageError(f"{message}: {error}")

    def cleanup(self) -> None:
        """Release resources held by the manager."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()


class MetadataBackend(BaseManager):
    """Per-page key/value blob store."""

    @abstractmethod
    def get(self, page_id: str, key: str, default: Any = None) -> Any:
        """Read one metadata value; default on miss or read failure."""

    @abstractmethod
    def set(self, page_id: str, key: str, value: Any) -> None:
        """Write one metadata value.

        Raises:
            StorageError: If the value cannot be persisted
        """


class FragmentStore(BaseManager):
    """Namespace CSS fragment store keyed by canonical namespace key."""

    @abstractmethod
    def read_fragment(self, key: str) -> Optional[str]:
        """Return the stored CSS or None when absent."""

    @abstractmethod
    def write_fragment(self, key: str, css: str) -> None:
        """Overwrite the stored CSS.

        Raises:
            StorageError: If the fragment cannot be persisted
        """

    @abstractmethod
    def delete_fragment(self, key: str) -> bool:
        """Remove the stored CSS; True if it existed."""


# Exported classes
__all__ = ['BaseManager', 'MetadataBackend', 'FragmentStore']

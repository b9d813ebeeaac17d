"""Page and namespace CSS embedded in wiki markup."""

from .core import (
    DirectoryHost,
    MemoryHost,
    PageCSSPipeline,
    WikiHost,
    expand,
    extract_blocks,
    minify,
    sanitize,
)
from .managers import ManagerFactory
from .utils.config import VERSION, Settings

__version__ = VERSION

__all__ = [
    'DirectoryHost',
    'MemoryHost',
    'PageCSSPipeline',
    'WikiHost',
    'ManagerFactory',
    'Settings',
    'expand',
    'extract_blocks',
    'minify',
    'sanitize',
]

"""Configuration utility for pagecss."""

import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .error import ConfigurationError

# Project version
VERSION = "1.0.0"

# Default directories
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(BASE_DIR, 'data')
PAGES_DIR = os.path.join(DATA_DIR, 'pages')
META_DIR_NAME = 'meta'
CACHE_DIR_NAME = os.path.join('cache', 'plugin_pagecss')

# Sanitizer limits
MAX_OPEN_BRACES = 100
MAX_CSS_LENGTH = 5000

# Markup tags
PAGE_TAGS = ('pagecss', 'css')
NAMESPACE_TAG = 'nscss'

# Metadata
METADATA_KEY = 'pagecss'
ROOT_NAMESPACE_KEY = ':'
NAMESPACE_SEPARATOR = ':'

# Head output
STYLE_CONTENT_TYPE = 'text/css'
STYLE_MEDIA = 'screen'

# Logging
LOG_FILE = os.path.join(BASE_DIR, 'pagecss.log')

_FLAG_VALUES = {
    '1': True, 'true': True, 'on': True, 'yes': True,
    '0': False, 'false': False, 'off': False, 'no': False, '': False,
}


@dataclass
class Settings:
    """Plugin settings supplied by the host's configuration mechanism."""
    minify_css: bool = False
    disable_raw_div_styling: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Settings':
        """Build settings from a host config mapping, ignoring unknown keys.

        Args:
            data: Mapping of setting names to on/off values

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If a known setting has a value that is not on/off
        """
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: _as_flag(k, v) for k, v in data.items() if k in known})


def _as_flag(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in _FLAG_VALUES:
        return _FLAG_VALUES[value.strip().lower()]
    raise ConfigurationError(f"Setting {name} must be on or off, got {value!r}")


# Exported config
__all__ = [
    'VERSION', 'BASE_DIR', 'DATA_DIR', 'PAGES_DIR', 'META_DIR_NAME', 'CACHE_DIR_NAME',
    'MAX_OPEN_BRACES', 'MAX_CSS_LENGTH',
    'PAGE_TAGS', 'NAMESPACE_TAG',
    'METADATA_KEY', 'ROOT_NAMESPACE_KEY', 'NAMESPACE_SEPARATOR',
    'STYLE_CONTENT_TYPE', 'STYLE_MEDIA',
    'LOG_FILE',
    'Settings',
]

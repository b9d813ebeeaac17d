"""Value types passed between the pipeline stages."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from ..utils.config import STYLE_CONTENT_TYPE, STYLE_MEDIA


class BlockKind(Enum):
    PAGE = 'page'
    NAMESPACE = 'namespace'


@dataclass(frozen=True)
class RawBlock:
    """One occurrence of a CSS block found in page source."""
    kind: BlockKind
    source_id: str
    text: str


@dataclass(frozen=True)
class StyleSheet:
    """Sanitized and expanded CSS attributed to a page or namespace."""
    css: str
    source_id: str


@dataclass(frozen=True)
class NamespaceFragment:
    namespace_key: str
    raw_css: str


@dataclass(frozen=True)
class PageStyleCache:
    page_id: str
    styles: str = ''


@dataclass(frozen=True)
class StyleDescriptor:
    """Entry appended to the host's head-output style list."""
    content: str
    content_type: str = STYLE_CONTENT_TYPE
    media: str = STYLE_MEDIA

    def as_dict(self) -> Dict[str, str]:
        return {
            'type': self.content_type,
            'media': self.media,
            '_data': self.content,
        }


__all__ = [
    'BlockKind',
    'RawBlock',
    'StyleSheet',
    'NamespaceFragment',
    'PageStyleCache',
    'StyleDescriptor',
]

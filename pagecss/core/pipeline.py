"""Extract, sanitize, expand and cache page and namespace CSS."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..managers.base import FragmentStore, MetadataBackend
from ..managers.factory import ManagerFactory
from ..utils.config import METADATA_KEY, Settings
from ..utils.error import StorageError
from ..utils.path import clean_id
from .expander import expand
from .extractor import extract_raw_blocks, join_namespace_blocks, join_page_blocks
from .host import WikiHost
from .minifier import minify
from .models import PageStyleCache, RawBlock, StyleDescriptor
from .namespace import NamespaceAggregator, namespace_key
from .sanitizer import sanitize

logger = logging.getLogger(__name__)


@dataclass
class RenderContext:
    """Buffers accumulated while processing one page."""
    page_id: str
    namespace: str
    blocks: List[RawBlock] = field(default_factory=list)
    page_css: str = ''
    namespace_raw: Dict[str, str] = field(default_factory=dict)
    namespace_css: str = ''

    @property
    def namespace_key(self) -> str:
        return namespace_key(self.namespace)


class PageCSSPipeline:
    """Entry points called by the host when page content changes and on render.

    None of the entry points raise; failures are logged and the page simply
    gets no extra CSS.
    """

    def __init__(self, host: WikiHost, metadata: MetadataBackend,
                 fragments: FragmentStore, settings: Optional[Settings] = None):
        self.host = host
        self.metadata = metadata
        self.aggregator = NamespaceAggregator(fragments)
        self.settings = settings or Settings()

    @classmethod
    def from_factory(cls, host: WikiHost, factory: ManagerFactory,
                     settings: Optional[Settings] = None) -> 'PageCSSPipeline':
        return cls(host, factory.create_metadata_store(), factory.create_fragment_store(), settings)

    def transform(self, raw: str, source_id: str = '') -> str:
        """Sanitize then expand one joined CSS buffer."""
        css = sanitize(raw, source_id)
        if not css:
            return ''
        return expand(css, self.settings.disable_raw_div_styling)

    def process_page_css(self, text: str, page_id: str) -> RenderContext:
        """Run extraction and transformation over a page's raw text."""
        page_id = clean_id(page_id)
        context = RenderContext(page_id, self.host.get_namespace_of(page_id))
        context.blocks = extract_raw_blocks(text, page_id)

        context.page_css = self.transform(join_page_blocks(context.blocks), page_id)

        namespace_raw = join_namespace_blocks(context.blocks)
        if namespace_raw:
            context.namespace_raw[context.namespace_key] = namespace_raw
            context.namespace_css = self.transform(namespace_raw, context.namespace_key)
        return context

    def on_content_change(self, page_id: str, text: Optional[str] = None) -> str:
        """Recompute and cache the page's CSS.

        The cache is always overwritten, with '' when the page has no usable
        CSS. Namespace CSS found on the page replaces the stored fragment of
        the page's own namespace.

        Args:
            page_id: Page whose content changed
            text: New raw text; read from the host when None

        Returns:
            The page styles now cached
        """
        page_id = clean_id(page_id)
        try:
            if text is None:
                text = self.host.get_raw_text(page_id)
            context = self.process_page_css(text, page_id)
        except Exception as e:
            logger.error(f"Error processing CSS for {page_id}: {e}")
            self._store_styles(PageStyleCache(page_id, ''))
            return ''

        self._store_styles(PageStyleCache(page_id, context.page_css))
        if context.namespace_css:
            try:
                self.aggregator.record_fragment(context.namespace_key, context.namespace_css)
            except StorageError as e:
                logger.error(f"Error saving namespace CSS from {page_id}: {e}")
        elif context.namespace_raw:
            logger.warning(f"Namespace CSS on {page_id} was rejected; "
                           f"keeping the stored CSS of namespace {context.namespace_key}")
        return context.page_css

    def on_page_write(self, page_id: str, text: str) -> str:
        """Host hook for a page save with its new text."""
        return self.on_content_change(page_id, text)

    def get_styles(self, page_id: str) -> str:
        """Cached page styles, '' when none are cached."""
        styles = self._cached_styles(clean_id(page_id))
        return styles or ''

    def build_stylesheet(self, page_id: str) -> str:
        """Namespace CSS from root to leaf followed by the page's own CSS."""
        page_id = clean_id(page_id)
        styles = self._cached_styles(page_id)
        if styles is None:
            styles = self.on_content_change(page_id)

        namespace_css = self.aggregator.combine(self.host.get_namespace_of(page_id))
        css = "\n".join(part for part in (namespace_css, styles) if part)
        if css and self.settings.minify_css:
            css = minify(css)
        return css

    def on_render(self, page_id: str, head: Optional[List[Dict[str, Any]]] = None) -> List[Dict[str, Any]]:
        """Append the page's style descriptor to the head-output list.

        Args:
            page_id: Page being rendered
            head: Host's list of style entries; a new list when None

        Returns:
            The head list
        """
        if head is None:
            head = []
        try:
            css = self.build_stylesheet(page_id)
        except Exception as e:
            logger.error(f"Error injecting CSS for {page_id}: {e}")
            return head
        if css:
            head.append(StyleDescriptor(css).as_dict())
        return head

    def _cached_styles(self, page_id: str) -> Optional[str]:
        try:
            data = self.metadata.get(page_id, METADATA_KEY)
        except Exception as e:
            logger.error(f"Error reading cached CSS for {page_id}: {e}")
            return None
        if not isinstance(data, dict):
            return None
        styles = data.get('styles')
        return styles if isinstance(styles, str) else None

    def _store_styles(self, cache: PageStyleCache) -> None:
        try:
            self.metadata.set(cache.page_id, METADATA_KEY, {'styles': cache.styles})
        except StorageError as e:
            logger.error(f"Error caching CSS for {cache.page_id}: {e}")


__all__ = ['RenderContext', 'PageCSSPipeline']

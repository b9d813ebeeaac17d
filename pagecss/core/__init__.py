"""Core CSS extraction and processing."""

from .extractor import extract_blocks, extract_raw_blocks
from .sanitizer import sanitize, tidy
from .expander import expand
from .minifier import minify
from .namespace import NamespaceAggregator, namespace_chain, namespace_key
from .host import DirectoryHost, MemoryHost, WikiHost
from .pipeline import PageCSSPipeline, RenderContext

__all__ = [
    'extract_blocks',
    'extract_raw_blocks',
    'sanitize',
    'tidy',
    'expand',
    'minify',
    'NamespaceAggregator',
    'namespace_chain',
    'namespace_key',
    'WikiHost',
    'DirectoryHost',
    'MemoryHost',
    'PageCSSPipeline',
    'RenderContext',
]

"""Extraction of CSS blocks from raw page markup."""

import logging
import re
from functools import lru_cache
from typing import Iterable, List

from ..utils.config import NAMESPACE_TAG, PAGE_TAGS
from .models import BlockKind, RawBlock

logger = logging.getLogger(__name__)

@lru_cache(maxsize=None)
def _block_pattern(tag_name: str) -> re.Pattern:
    tag = re.escape(tag_name)
    return re.compile(rf'<{tag}>(.*?)</{tag}>', re.DOTALL)

def extract_blocks(text: str, tag_name: str) -> List[str]:
    """Return the trimmed inner text of every <tag_name>...</tag_name> block.

    Matching is case-sensitive and non-greedy, so blocks never overlap and an
    unterminated opening tag yields nothing.

    Args:
        text: Raw page source
        tag_name: Tag literal without angle brackets

    Returns:
        Inner texts in document order
    """
    if not text:
        return []
    return [match.strip() for match in _block_pattern(tag_name).findall(text)]

def extract_raw_blocks(text: str, source_id: str) -> List[RawBlock]:
    """Find all page and namespace CSS blocks in document order.

    Args:
        text: Raw page source
        source_id: Id of the page the text belongs to

    Returns:
        RawBlock list ordered by position in the text; empty blocks skipped
    """
    if not text:
        return []

    found = []
    tags = [(tag, BlockKind.PAGE) for tag in PAGE_TAGS] + [(NAMESPACE_TAG, BlockKind.NAMESPACE)]
    for tag, kind in tags:
        for match in _block_pattern(tag).finditer(text):
            content = match.group(1).strip()
            if content:
                found.append((match.start(), RawBlock(kind, source_id, content)))

    found.sort(key=lambda item: item[0])
    blocks = [block for _, block in found]
    logger.debug(f"Found {len(blocks)} CSS block(s) in {source_id or '<text>'}")
    return blocks

def join_page_blocks(blocks: Iterable[RawBlock]) -> str:
    """Space-join the page-scope blocks."""
    return " ".join(b.text for b in blocks if b.kind is BlockKind.PAGE)

def join_namespace_blocks(blocks: Iterable[RawBlock]) -> str:
    """Newline-join the namespace-scope blocks."""
    return "\n".join(b.text for b in blocks if b.kind is BlockKind.NAMESPACE)

__all__ = [
    'extract_blocks',
    'extract_raw_blocks',
    'join_page_blocks',
    'join_namespace_blocks',
]

"""Tolerant CSS tidy pass and denylist sanitizer for author-supplied CSS."""

import logging
import re
from typing import Optional

import cssutils

from ..utils.config import MAX_CSS_LENGTH, MAX_OPEN_BRACES

logger = logging.getLogger(__name__)

# Disable cssutils logging
cssutils.log.setLevel(logging.CRITICAL)
# Compact output so the length limit measures the tidied text
cssutils.ser.prefs.useMinified()
cssutils.ser.prefs.keepUnknownAtRules = True

# Checked case-insensitively; a single hit voids the whole block
DENIED_PATTERNS = (
    ('expression()', re.compile(r'expression\s*\(', re.IGNORECASE)),
    ('javascript url', re.compile(r'url\s*\(\s*[\'"]?\s*javascript\s*:', re.IGNORECASE)),
    ('behavior', re.compile(r'behavior\s*:', re.IGNORECASE)),
    ('-moz-binding', re.compile(r'-moz-binding\s*:', re.IGNORECASE)),
    ('html data url', re.compile(r'url\s*\(\s*[\'"]?\s*data\s*:\s*text/html', re.IGNORECASE)),
    ('@import', re.compile(r'@import', re.IGNORECASE)),
    ('unicode-range', re.compile(r'unicode-range', re.IGNORECASE)),
)

CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')

_ESCAPE = re.compile(r'\\([0-9a-fA-F]{1,6})[ \t\r\n\f]?|\\([^0-9a-fA-F\r\n\f])')
_IDENT_CHAR = re.compile(r'[A-Za-z0-9_-]')
_FONT_WEIGHT = re.compile(r'(font-weight\s*:\s*)(normal|bold)\b', re.IGNORECASE)
_FONT_WEIGHTS = {'normal': '400', 'bold': '700'}


def _no_fetch(url):
    """cssutils fetcher that never loads anything."""
    logger.debug(f"Refusing to fetch {url}")
    return None


def _make_parser() -> cssutils.CSSParser:
    return cssutils.CSSParser(
        raiseExceptions=False,
        validate=False,
        fetcher=_no_fetch,
        loglevel=logging.CRITICAL,
    )


def decode_escapes(css: str) -> str:
    """Collapse backslash escapes that stand for plain identifier characters."""
    def replace(match):
        if match.group(1):
            try:
                char = chr(int(match.group(1), 16))
            except (ValueError, OverflowError):
                return match.group(0)
        else:
            char = match.group(2)
        return char if _IDENT_CHAR.match(char) else match.group(0)

    return _ESCAPE.sub(replace, css)


def tidy(raw: str) -> str:
    """Normalize CSS text without validating it.

    Unparseable parts are dropped by cssutils rather than raising. Returns ''
    if the text cannot be processed at all.
    """
    if not raw or not raw.strip():
        return ''
    try:
        sheet = _make_parser().parseString(decode_escapes(raw))
        css = sheet.cssText
        if isinstance(css, bytes):
            css = css.decode('utf-8', errors='replace')
        return _FONT_WEIGHT.sub(lambda m: m.group(1) + _FONT_WEIGHTS[m.group(2).lower()], css).strip()
    except Exception as e:
        logger.error(f"Error tidying CSS: {e}")
        return ''


def find_denied_pattern(css: str) -> Optional[str]:
    """Return the name of the first denylisted construct found, or None."""
    for name, pattern in DENIED_PATTERNS:
        if pattern.search(css):
            return name
    return None


def strip_control_chars(css: str) -> str:
    return CONTROL_CHARS.sub('', css)


def sanitize(raw: str, source_id: str = '') -> str:
    """Tidy and filter raw CSS.

    Args:
        raw: Author-supplied CSS
        source_id: Page or namespace the CSS belongs to, for log messages

    Returns:
        Sanitized CSS, or '' when the block is rejected
    """
    if not raw or not raw.strip():
        return ''
    where = f" in {source_id}" if source_id else ''

    brace_count = raw.count('{')
    if brace_count > MAX_OPEN_BRACES:
        logger.warning(f"Rejected CSS{where}: {brace_count} rules exceed limit of {MAX_OPEN_BRACES}")
        return ''

    # Screen before parsing so the tidy pass never sees an @import
    denied = find_denied_pattern(decode_escapes(raw))
    if denied:
        logger.warning(f"Rejected CSS{where}: contains {denied}")
        return ''

    css = tidy(raw)
    if not css:
        logger.info(f"CSS{where} produced no usable rules")
        return ''

    if len(css) > MAX_CSS_LENGTH:
        logger.warning(f"Rejected CSS{where}: {len(css)} characters exceed limit of {MAX_CSS_LENGTH}")
        return ''

    denied = find_denied_pattern(css)
    if denied:
        logger.warning(f"Rejected CSS{where}: contains {denied}")
        return ''

    css = strip_control_chars(css)

    # Keep the stylesheet from closing its own <style> element
    return css.replace('</', '<\\/')


__all__ = [
    'DENIED_PATTERNS',
    'decode_escapes',
    'tidy',
    'find_denied_pattern',
    'strip_control_chars',
    'sanitize',
]

"""Rule splitting and .wrap_<class> expansion."""

import logging
import re
from typing import List, NamedTuple, Optional

logger = logging.getLogger(__name__)

WRAP_PREFIX = 'wrap_'

_COMMENT = re.compile(r'/\*.*?\*/', re.DOTALL)
# Quoted strings and attribute selectors are matched first so class-like text inside them is left alone
_CLASS_TOKEN = re.compile(
    r'("(?:[^"\\]|\\.)*"|\'(?:[^\'\\]|\\.)*\'|\[[^\]]*\])'
    r'|\.([a-zA-Z_][a-zA-Z0-9_-]*)'
)


class CSSRule(NamedTuple):
    """A top-level rule found by split_css_rules.

    body is None for statement at-rules such as @charset; nested is True when
    the body holds its own braces (@media and friends).
    """
    selector: str
    body: Optional[str]
    nested: bool = False

    @property
    def text(self) -> str:
        if self.body is None:
            return self.selector
        return f"{self.selector}{{{self.body}}}"

    @property
    def is_at_rule(self) -> bool:
        return self.selector.startswith('@')


def _skip_string(css: str, i: int) -> int:
    quote = css[i]
    i += 1
    while i < len(css):
        if css[i] == '\\':
            i += 2
            continue
        if css[i] == quote:
            return i + 1
        i += 1
    return len(css)


def split_css_rules(css: str) -> List[CSSRule]:
    """Split CSS into top-level rules with a brace-balanced scan.

    Text after the last closing brace and stray closing braces are dropped.

    Args:
        css: CSS text

    Returns:
        Rules in source order
    """
    rules = []
    start = 0
    depth = 0
    brace_open = -1
    nested = False
    i = 0
    n = len(css)

    while i < n:
        ch = css[i]
        if ch in '"\'':
            i = _skip_string(css, i)
            continue
        if css.startswith('/*', i):
            end = css.find('*/', i + 2)
            i = n if end == -1 else end + 2
            continue

        if ch == '{':
            if depth == 0:
                brace_open = i
                nested = False
            else:
                nested = True
            depth += 1
        elif ch == '}':
            if depth == 0:
                logger.debug(f"Skipping stray closing brace at offset {i}")
                start = i + 1
            else:
                depth -= 1
                if depth == 0:
                    selector = _COMMENT.sub('', css[start:brace_open]).strip()
                    if selector:
                        rules.append(CSSRule(selector, css[brace_open + 1:i], nested))
                    start = i + 1
        elif ch == ';' and depth == 0:
            statement = _COMMENT.sub('', css[start:i + 1]).strip()
            if statement.startswith('@'):
                rules.append(CSSRule(statement, None))
            start = i + 1
        i += 1

    return rules


def split_selectors(selector_text: str) -> List[str]:
    """Split a selector list on top-level commas."""
    selectors = []
    depth = 0
    current = ''
    quote = None
    for ch in selector_text:
        if quote:
            if ch == quote:
                quote = None
        elif ch in '"\'':
            quote = ch
        elif ch in '([':
            depth += 1
        elif ch in ')]':
            depth = max(depth - 1, 0)
        elif ch == ',' and depth == 0:
            selectors.append(current.strip())
            current = ''
            continue
        current += ch
    selectors.append(current.strip())
    return [s for s in selectors if s]


def wrap_selector(selector: str) -> str:
    """Replace each class token with its wrap_ counterpart.

    Classes that already are wrap_ classes, or whose wrap_ variant is already
    present in the selector, are kept.
    """
    def replace(match):
        classname = match.group(2)
        if classname is None or classname.startswith(WRAP_PREFIX):
            return match.group(0)
        if f'.{WRAP_PREFIX}{classname}' in selector:
            return match.group(0)
        return f'.{WRAP_PREFIX}{classname}'

    return _CLASS_TOKEN.sub(replace, selector)


def is_bare_div_rule(selectors: List[str]) -> bool:
    """True when every selector is an unqualified div element selector."""
    return bool(selectors) and all(s.strip().lower() == 'div' for s in selectors)


def expand(css: str, suppress_bare_element_rules: bool = False) -> str:
    """Emit the original rules followed by their .wrap_<class> variants.

    Args:
        css: Sanitized CSS
        suppress_bare_element_rules: Drop rules that only style bare div elements

    Returns:
        Expanded CSS, one rule per line
    """
    if not css or not css.strip():
        return ''

    originals = []
    wrapped = []
    for rule in split_css_rules(css):
        if rule.body is None or rule.nested or rule.is_at_rule:
            originals.append(rule.text)
            continue

        selectors = split_selectors(rule.selector)
        if suppress_bare_element_rules and is_bare_div_rule(selectors):
            logger.debug(f"Dropping bare div rule: {rule.selector}")
            continue

        originals.append(rule.text)
        variants = [wrap_selector(s) for s in selectors]
        if variants != selectors:
            wrapped.append(f"{', '.join(variants)}{{{rule.body}}}")

    return "\n".join(originals + wrapped)


__all__ = [
    'CSSRule',
    'split_css_rules',
    'split_selectors',
    'wrap_selector',
    'is_bare_div_rule',
    'expand',
]

"""Aggressive whitespace and comment stripping for final CSS output."""

import re

_COMMENT = re.compile(r'/\*.*?\*/', re.DOTALL)
_WHITESPACE = re.compile(r'\s+')
_TRAILING_SEMICOLONS = re.compile(r';+}')

def minify(css: str) -> str:
    """Minify CSS.

    Every whitespace run is removed outright, not collapsed to a space, so
    descendant combinators and multi-value declarations are merged. Only use
    on declaration-style CSS.
    """
    if not css:
        return ''
    # Stripping can splice a new comment together, so run to a fixed point
    while True:
        result = _COMMENT.sub('', css)
        result = _WHITESPACE.sub('', result)
        result = _TRAILING_SEMICOLONS.sub('}', result)
        if result == css:
            return result
        css = result

__all__ = ['minify']

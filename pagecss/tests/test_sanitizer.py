"""Tests for the CSS sanitizer."""

import logging

from ..core.minifier import minify
from ..core.sanitizer import (
    decode_escapes,
    find_denied_pattern,
    sanitize,
    strip_control_chars,
    tidy,
)

class TestTidy:
    """Tests for the tolerant tidy pass."""

    def test_empty_input(self):
        assert tidy("") == ""
        assert tidy("   \n") == ""

    def test_keeps_declarations(self):
        assert minify(tidy(".a{color:red}")) == ".a{color:red}"

    def test_font_weight_keywords_are_compressed(self):
        css = tidy("p{font-weight:bold} h1{font-weight:normal}")
        assert "font-weight:700" in css
        assert "font-weight:400" in css

    def test_comments_are_dropped(self):
        assert "secret" not in tidy("/* secret */ .a{color:red}")

    def test_malformed_input_does_not_raise(self):
        """Broken CSS is repaired or dropped, never an exception."""
        for css in ["{{{", ".a{color:red", "}}} .b{", "@media {", "\x00\x01"]:
            assert isinstance(tidy(css), str)

    def test_decode_escapes(self):
        assert decode_escapes(r"expr\65ssion") == "expression"
        assert decode_escapes(r"\62 ehavior") == "behavior"
        assert decode_escapes(r"a\-b") == "a-b"
        # structural characters stay escaped
        assert decode_escapes(r"a\7b") == r"a\7b"
        assert decode_escapes(r'a\"b') == r'a\"b'

class TestSanitize:
    """Tests for sanitize."""

    def test_safe_css_is_kept(self):
        css = sanitize(".note{color:#333;margin:0}")
        assert ".note" in css
        assert "margin:0" in css

    def test_idempotent(self):
        for raw in [".a{color:red}", "p, .b > span{margin:0 auto;padding:1px}"]:
            once = sanitize(raw)
            assert once
            assert sanitize(once) == once

    def test_behavior_is_rejected(self):
        assert sanitize("div{behavior:url(x.htc)}") == ""

    def test_denylist(self, dangerous_css):
        for css in dangerous_css:
            assert sanitize(css) == "", css

    def test_one_bad_rule_voids_block(self):
        assert sanitize(".ok{color:red} .bad{behavior:url(x.htc)} .ok2{color:blue}") == ""

    def test_brace_limit(self):
        assert sanitize("p{color:red}" * 101) == ""
        assert sanitize("p{color:red}" * 100) != ""

    def test_brace_limit_ignores_content(self):
        assert sanitize("{" * 101) == ""

    def test_length_limit(self):
        assert sanitize("p{font-family:" + "a" * 6000 + "}") == ""

    def test_length_limit_measures_compact_output(self):
        """A compact sheet under the limit is not inflated past it by tidying."""
        raw = "".join(f".c{i}{{color:red;margin:0;padding:0;border:0}}" for i in range(75))
        assert 3000 < len(raw) < 5000
        css = sanitize(raw)
        assert css
        assert len(css) <= len(raw)
        assert "\n" not in css

    def test_style_tag_cannot_be_closed(self):
        css = sanitize('p:after{content:"</style><script>"}')
        assert css
        assert "</" not in css
        assert "<\\/style>" in css

    def test_empty_input(self):
        assert sanitize("") == ""
        assert sanitize("  \n ") == ""

    def test_rejection_is_logged(self, caplog):
        caplog.set_level(logging.WARNING, logger='pagecss.core.sanitizer')
        assert sanitize("div{behavior:url(x.htc)}", "wiki:start") == ""
        assert "Rejected CSS in wiki:start" in caplog.text
        assert "behavior" in caplog.text

class TestFilters:
    """Tests for the individual filters."""

    def test_find_denied_pattern(self):
        assert find_denied_pattern("p{color:red}") is None
        assert find_denied_pattern("P{BEHAVIOR : url(x)}") == "behavior"
        assert find_denied_pattern("@IMPORT 'x.css';") == "@import"
        assert find_denied_pattern("a{b:url( 'data:text/html,x')}") == "html data url"
        assert find_denied_pattern("a{b:url(data:image/png;base64,x)}") is None

    def test_strip_control_chars(self):
        assert strip_control_chars("a\x00b\x08c\x0bd\x0ce\x1ff\x7fg") == "abcdefg"
        assert strip_control_chars("a\tb\nc\rd") == "a\tb\nc\rd"

"""Tests for the minifier."""

from ..core.minifier import minify

class TestMinify:
    """Tests for minify."""

    def test_comments_and_whitespace(self):
        css = "/* header */\n.a {\n    color: red;\n}\n\n/* multi\nline */ .b\t{ margin: 0 }"
        assert minify(css) == ".a{color:red}.b{margin:0}"

    def test_trailing_semicolons(self):
        assert minify("a{b:c;}") == "a{b:c}"
        assert minify("a{b:c;;}") == "a{b:c}"

    def test_whitespace_is_removed_not_collapsed(self):
        assert minify(".a{margin:0 auto}") == ".a{margin:0auto}"

    def test_empty(self):
        assert minify("") == ""
        assert minify(" \n\t ") == ""

    def test_idempotent(self):
        samples = [
            ".a {\n  color: red;\n}",
            "/* a */ p { x: y ; } /* b */",
            "/ *x* / p{a:b}",
            "p{a:b ;\n}\n; }",
        ]
        for css in samples:
            once = minify(css)
            assert minify(once) == once

"""Tests for rule splitting and wrap-class expansion."""

from ..core.expander import (
    CSSRule,
    expand,
    is_bare_div_rule,
    split_css_rules,
    split_selectors,
    wrap_selector,
)

class TestSplitRules:
    """Tests for the brace-balanced rule scanner."""

    def test_flat_rules(self):
        rules = split_css_rules(".a{color:red} p { margin: 0 }")
        assert rules == [CSSRule(".a", "color:red"), CSSRule("p", " margin: 0 ")]

    def test_trailing_text_is_dropped(self):
        assert split_css_rules("a{b:c} dangling") == [CSSRule("a", "b:c")]

    def test_stray_closing_brace(self):
        assert split_css_rules("} a{b:c}") == [CSSRule("a", "b:c")]

    def test_nested_block(self):
        rules = split_css_rules("@media print{.a{color:red}} .b{color:blue}")
        assert rules[0] == CSSRule("@media print", ".a{color:red}", True)
        assert rules[1] == CSSRule(".b", "color:blue")

    def test_statement_at_rule(self):
        rules = split_css_rules('@charset "utf-8"; a{b:c}')
        assert rules[0] == CSSRule('@charset "utf-8";', None)
        assert rules[0].text == '@charset "utf-8";'
        assert rules[1].selector == "a"

    def test_braces_in_strings(self):
        rules = split_css_rules('a:after{content:"}{"} b{c:d}')
        assert [r.selector for r in rules] == ["a:after", "b"]

    def test_comments_are_skipped(self):
        rules = split_css_rules("/* x{y} */ .a /* c */ {color:red}")
        assert rules == [CSSRule(".a", "color:red")]

class TestSelectors:
    """Tests for selector helpers."""

    def test_split_selectors(self):
        assert split_selectors(".a, p > .b ,div") == [".a", "p > .b", "div"]
        assert split_selectors(":is(.a, .b), .c") == [":is(.a, .b)", ".c"]
        assert split_selectors('[title="a,b"], .c') == ['[title="a,b"]', ".c"]

    def test_wrap_selector(self):
        assert wrap_selector(".foo") == ".wrap_foo"
        assert wrap_selector("div.foo") == "div.wrap_foo"
        assert wrap_selector(".a .b") == ".wrap_a .wrap_b"
        assert wrap_selector("#id > .x:hover") == "#id > .wrap_x:hover"
        assert wrap_selector("p") == "p"

    def test_wrap_selector_keeps_existing_wrap_classes(self):
        assert wrap_selector(".wrap_foo") == ".wrap_foo"
        assert wrap_selector(".foo.wrap_foo") == ".foo.wrap_foo"

    def test_wrap_selector_ignores_attribute_values(self):
        assert wrap_selector('a[href$=".pdf"]') == 'a[href$=".pdf"]'
        assert wrap_selector('[class~=x].y') == '[class~=x].wrap_y'

    def test_class_token_must_start_with_letter(self):
        assert wrap_selector(".1a") == ".1a"
        assert wrap_selector("._a-1") == ".wrap__a-1"

    def test_is_bare_div_rule(self):
        assert is_bare_div_rule(["div"])
        assert is_bare_div_rule(["div", " DIV "])
        assert not is_bare_div_rule(["div", "p"])
        assert not is_bare_div_rule(["div.foo"])
        assert not is_bare_div_rule(["div:hover"])
        assert not is_bare_div_rule([])

class TestExpand:
    """Tests for expand."""

    def test_wrap_rule_is_appended(self):
        assert expand(".foo{color:red}", False) == ".foo{color:red}\n.wrap_foo{color:red}"

    def test_bare_div_is_suppressed(self):
        assert expand("div{margin:0}", True) == ""

    def test_bare_div_kept_without_suppression(self):
        assert expand("div{margin:0}", False) == "div{margin:0}"

    def test_qualified_div_is_kept(self):
        assert expand("div.foo{margin:0}", True) == "div.foo{margin:0}\ndiv.wrap_foo{margin:0}"

    def test_mixed_selector_list_is_kept(self):
        assert expand("div, p{margin:0}", True) == "div, p{margin:0}"

    def test_ordering(self):
        css = ".a{x:1} p{y:2} .b{z:3}"
        assert expand(css) == "\n".join([
            ".a{x:1}", "p{y:2}", ".b{z:3}",
            ".wrap_a{x:1}", ".wrap_b{z:3}",
        ])

    def test_partial_selector_list(self):
        assert expand(".a, p{color:red}") == ".a, p{color:red}\n.wrap_a, p{color:red}"

    def test_already_wrapped(self):
        assert expand(".wrap_foo{color:red}") == ".wrap_foo{color:red}"

    def test_at_rule_passes_through(self):
        css = "@media screen{.a{color:red}}"
        assert expand(css) == css

    def test_declaration_body_is_preserved(self):
        css = ".a {\n    color: red;\n    margin: 0\n    }"
        assert expand(css) == ".a{\n    color: red;\n    margin: 0\n    }\n.wrap_a{\n    color: red;\n    margin: 0\n    }"

    def test_empty(self):
        assert expand("") == ""
        assert expand("no rules here") == ""

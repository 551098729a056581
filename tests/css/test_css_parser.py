"""Tests for css.parser — parse_stylesheet statement splitting."""

import pytest

from ruler.css.nodes import AtRule, Comment, Declaration, Root, Rule
from ruler.css.parser import parse_stylesheet
from ruler.errors import CssSyntaxError


class TestParseStylesheet:
    def test_rule_with_declarations(self):
        root = parse_stylesheet(".element {\n  font-size: 20px;\n  padding: 1rem 2rem\n}")
        assert isinstance(root, Root)
        (rule,) = root.nodes
        assert isinstance(rule, Rule)
        assert rule.selector == ".element"
        assert [(d.prop, d.value) for d in rule.nodes] == [
            ("font-size", "20px"),
            ("padding", "1rem 2rem"),
        ]

    def test_declaration_value_keeps_inline_call(self):
        root = parse_stylesheet(".a { margin: ruler.fluid(16,16) ruler.fluid(16, 24); }")
        assert root.nodes[0].nodes[0].value == "ruler.fluid(16,16) ruler.fluid(16, 24)"

    def test_statement_at_rule(self):
        root = parse_stylesheet("@ruler scale({ pairs: { \"xs\": [8, 16] } });")
        (at_rule,) = root.nodes
        assert isinstance(at_rule, AtRule)
        assert at_rule.name == "ruler"
        assert at_rule.params.startswith("scale(")
        assert at_rule.has_block is False

    def test_block_at_rule(self):
        root = parse_stylesheet("@media (min-width: 40em) { .a { color: red; } }")
        (media,) = root.nodes
        assert media.name == "media"
        assert media.params == "(min-width: 40em)"
        assert media.has_block is True
        assert isinstance(media.nodes[0], Rule)

    def test_nested_rules_and_directives(self):
        root = parse_stylesheet(".card { gap: 1rem; &:hover { gap: 2rem; } @ruler utility({}); }")
        card = root.nodes[0]
        assert [type(n) for n in card.nodes] == [Declaration, Rule, AtRule]
        assert card.nodes[1].selector == "&:hover"
        assert card.nodes[1].parent is card

    def test_root_level_declaration(self):
        root = parse_stylesheet("--space-xs: 0.5rem;")
        assert isinstance(root.nodes[0], Declaration)
        assert root.nodes[0].prop == "--space-xs"

    def test_comments_between_statements(self):
        root = parse_stylesheet("/* header */\n.a { color: red; }")
        assert isinstance(root.nodes[0], Comment)
        assert root.nodes[0].text == " header "

    def test_empty_source(self):
        assert parse_stylesheet("   \n").nodes == []

    def test_values_keep_source_quoting(self):
        root = parse_stylesheet(".a { content: 'x'; font-family: 'Foo Bar',  serif }")
        assert [d.value for d in root.nodes[0].nodes] == ["'x'", "'Foo Bar',  serif"]

    def test_selector_and_params_keep_source_text(self):
        root = parse_stylesheet("@supports  (content: 'a') { a[data-x='y'] { color: red } }")
        supports = root.nodes[0]
        assert supports.params == "(content: 'a')"
        assert supports.nodes[0].selector == "a[data-x='y']"

    def test_values_without_surrounding_whitespace(self):
        root = parse_stylesheet(".a{b:'x'}.c{d:'y'}")
        assert [rule.nodes[0].value for rule in root.nodes] == ["'x'", "'y'"]

    def test_nested_block_offsets(self):
        root = parse_stylesheet("@media screen{.a{content:'a'}.b{content:'b' }}")
        first, second = root.nodes[0].nodes
        assert first.nodes[0].value == "'a'"
        assert second.nodes[0].value == "'b'"

    def test_crlf_line_endings(self):
        root = parse_stylesheet(".a {\r\n  content: 'x';\r\n  gap: 1rem\r\n}")
        assert [(d.prop, d.value) for d in root.nodes[0].nodes] == [
            ("content", "'x'"),
            ("gap", "1rem"),
        ]

    def test_block_left_open_at_end_of_input(self):
        root = parse_stylesheet(".a { content: 'x'")
        assert root.nodes[0].nodes[0].value == "'x'"

    def test_declaration_without_colon(self):
        with pytest.raises(CssSyntaxError, match="Expected a declaration or rule"):
            parse_stylesheet(".a { color }")

    def test_unmatched_bracket(self):
        with pytest.raises(CssSyntaxError, match="Unmatched"):
            parse_stylesheet(".a { color: red; } }")

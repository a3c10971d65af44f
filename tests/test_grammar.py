"""Tests for the reaction network grammar and typed parse tree."""

import pytest

from marlea_parser.errors import NetworkSyntaxError, ParseFailed
from marlea_parser.parsers.grammar import parse
from marlea_parser.parsers.nodes import (
    CoefficientNode,
    ReactionNode,
    SeparatorNode,
    Span,
    SpeciesCountNode,
)


class TestParseTree:
    """The grammar produces typed nodes with positions."""

    def test_reaction_node(self):
        tree = parse("2 a + b => c,7,")
        assert len(tree) == 1

        (node,) = tree
        assert isinstance(node, ReactionNode)
        assert node.span == Span(1, 1)
        assert [t.name.text for t in node.reactants] == ["a", "b"]
        assert node.reactants[0].coefficient.text == "2"
        assert node.reactants[1].coefficient is None
        assert [t.name.text for t in node.products] == ["c"]
        assert node.rate.text == "7"

    def test_species_count_node(self):
        (node,) = parse("c,10,")
        assert isinstance(node, SpeciesCountNode)
        assert node.name.text == "c"
        assert isinstance(node.count, CoefficientNode)
        assert node.count.text == "10"

    def test_line_numbers(self):
        tree = parse("a => b,1,\n,,\nc,3,\n")
        kinds = [type(node) for node in tree]
        assert kinds == [ReactionNode, SeparatorNode, SpeciesCountNode]
        assert [node.span.line for node in tree] == [1, 2, 3]

    def test_dotted_names(self):
        (node,) = parse("destruct.done.partial.0 => x.y_1,3,")
        assert node.reactants[0].name.text == "destruct.done.partial.0"
        assert node.products[0].name.text == "x.y_1"

    def test_empty_source(self):
        assert len(parse("")) == 0
        assert len(parse("\n\n")) == 0

    @pytest.mark.parametrize("row", [",", ",,", "  , ,  "])
    def test_separator_rows(self, row):
        (node,) = parse(row + "\n")
        assert isinstance(node, SeparatorNode)

    def test_comments_are_dropped(self):
        tree = parse("# header\na => b,1, # trailing\n#,,\n")
        assert len(tree) == 1

    def test_whitespace_is_insignificant(self):
        (node,) = parse("   2   a   =>   b  +  c ,  4 ,   ")
        assert node.reactants[0].coefficient.text == "2"
        assert node.rate.text == "4"

    def test_crlf_and_bom(self):
        tree = parse("\ufeffa => b,1,\r\nc,2,\r\n")
        assert [type(node) for node in tree] == [ReactionNode, SpeciesCountNode]

    def test_last_line_without_newline(self):
        assert len(parse("a => b,1,\nc,2,")) == 2


class TestSyntaxErrors:
    """Syntax errors carry position and the rule being matched."""

    def test_empty_products(self):
        with pytest.raises(NetworkSyntaxError) as excinfo:
            parse("a => ,1,")
        err = excinfo.value
        assert err.line == 1
        assert err.column == 6
        assert err.expected_rule == "products"
        assert "line 1" in str(err)
        assert "products" in str(err)

    def test_error_line_in_longer_source(self):
        with pytest.raises(NetworkSyntaxError) as excinfo:
            parse("a => b,1,\n\nc => ,2,\n")
        assert excinfo.value.line == 3
        assert excinfo.value.expected_rule == "products"

    def test_empty_reactants(self):
        with pytest.raises(NetworkSyntaxError) as excinfo:
            parse("a + => b,1,")
        assert excinfo.value.expected_rule == "reactants"

    def test_missing_rate(self):
        with pytest.raises(NetworkSyntaxError) as excinfo:
            parse("a => b,,")
        assert excinfo.value.expected_rule == "reaction_rate"

    def test_missing_trailing_comma(self):
        with pytest.raises(NetworkSyntaxError) as excinfo:
            parse("a => b,1\n")
        assert excinfo.value.line == 1
        assert excinfo.value.expected_rule == "reaction_rate"

    def test_non_numeric_count(self):
        with pytest.raises(NetworkSyntaxError) as excinfo:
            parse("a,ten,")
        assert excinfo.value.expected_rule == "coefficient"

    @pytest.mark.parametrize(
        "source",
        [
            "a => b,-1,",
            "a,-3,",
            "a => b,1.5,",
            "2a => b,1,",
            "a => b",
            "a => b,1,2,",
            ",,,",
            "a b => c,1,",
        ],
    )
    def test_rejected_lines(self, source):
        with pytest.raises(NetworkSyntaxError) as excinfo:
            parse(source)
        assert excinfo.value.line == 1
        assert excinfo.value.column >= 1

    @pytest.mark.parametrize("source", ["a => b,1,,", "a,1,,", "a => b,1,2,"])
    def test_extra_field_after_line(self, source):
        with pytest.raises(NetworkSyntaxError) as excinfo:
            parse(source)
        assert excinfo.value.expected_rule == "end of line"

    def test_error_is_parse_failed(self):
        with pytest.raises(ParseFailed):
            parse("=> b,1,")

    def test_context_points_at_line(self):
        with pytest.raises(NetworkSyntaxError) as excinfo:
            parse("a => b,1,\nc => ,2,\n")
        assert "c => ,2," in excinfo.value.context
        assert "^" in excinfo.value.context

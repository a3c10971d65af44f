"""Grammar for the comma-delimited reaction network notation.

``parse`` turns source text into a :class:`ParseTree` of typed nodes. Syntax
errors are reported as :class:`NetworkSyntaxError` with the line, column and
the rule that was being matched.
"""

from functools import lru_cache
from pathlib import Path

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken
from lark.lexer import PatternStr

from ..errors import NetworkSyntaxError
from ..logging import get_logger
from .nodes import (
    CoefficientNode,
    NameNode,
    ParseTree,
    RateNode,
    ReactionNode,
    SeparatorNode,
    Span,
    SpeciesCountNode,
    TermNode,
)

GRAMMAR_FILE = Path(__file__).parent / "grammars" / "csv.lark"

# Single malformed lines labelled with the rule the parser was in when it
# failed. Matched by parser state, so the token in each example is arbitrary.
ERROR_EXAMPLES = {
    "products": [
        "a => ,1,",
        "a => b + ,1,",
        "a => b c,1,",
        "a => 2 b 3,1,",
    ],
    "reactants": [
        "a + => b,1,",
        "a + ,1,",
        "2 a 3 => b,1,",
    ],
    "reaction_rate": [
        "a => b,,",
        "a => b,x,",
        "a => b,1",
        "a => b,1 2,",
    ],
    "coefficient": [
        "a,,",
        "a,x,",
        "a,1",
        "a,1 2,",
    ],
    "name": [
        "2 ,1,",
        "a => 2 ,1,",
        "a + 2 => b,1,",
    ],
    "reaction or species_count": [
        "=> b,1,",
        "+ a => b,1,",
        "a b => c,1,",
        "2a => b,1,",
    ],
    "separator": [
        ",,,",
        ", x",
    ],
    "end of line": [
        "a => b,1,,",
        "a,1,,",
    ],
}

log = get_logger(__name__)


@lru_cache(maxsize=None)
def get_parser() -> Lark:
    """Build the LALR parser once per process."""
    log.debug("Building reaction network grammar from %s", GRAMMAR_FILE)
    return Lark(
        GRAMMAR_FILE.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="contextual",
        propagate_positions=True,
        maybe_placeholders=True,
    )


def _span(meta) -> Span:
    if getattr(meta, "empty", True):
        return Span(0, 0)
    return Span(meta.line, meta.column)


@v_args(meta=True)
class ParseTreeBuilder(Transformer):
    """Converts lark's generic tree into typed nodes."""

    def start(self, meta, children):
        return ParseTree(tuple(children))

    def reaction(self, meta, children):
        reactants, products, rate = children
        return ReactionNode(reactants, products, rate, _span(meta))

    def species_count(self, meta, children):
        name, count = children
        return SpeciesCountNode(name, count, _span(meta))

    def separator(self, meta, children):
        return SeparatorNode(_span(meta))

    def reactants(self, meta, children):
        return tuple(children)

    def products(self, meta, children):
        return tuple(children)

    def term(self, meta, children):
        coefficient, name = children
        return TermNode(coefficient, name, _span(meta))

    def name(self, meta, children):
        (token,) = children
        return NameNode(str(token), _span(meta))

    def term_coefficient(self, meta, children):
        (token,) = children
        return CoefficientNode(str(token).strip(), _span(meta))

    def coefficient(self, meta, children):
        (token,) = children
        return CoefficientNode(str(token), _span(meta))

    def reaction_rate(self, meta, children):
        (token,) = children
        return RateNode(str(token), _span(meta))


def _describe_terminal(name: str) -> str:
    if name == "$END":
        return "end of input"
    if name == "_NL":
        return "newline"
    try:
        terminal = get_parser().get_terminal(name)
    except KeyError:
        return name
    if isinstance(terminal.pattern, PatternStr):
        return repr(terminal.pattern.value)
    return name


def _expected_rule(line_text: str) -> str | None:
    """Name the rule a single failing line was being matched against."""
    parser = get_parser()
    try:
        parser.parse(line_text)
    except UnexpectedInput as e:
        if getattr(e, "state", None) is None:
            return None
        return e.match_examples(parser.parse, ERROR_EXAMPLES, use_accepts=False)
    return None


def _syntax_error(e: UnexpectedInput, source: str) -> NetworkSyntaxError:
    lines = source.splitlines()
    # lark uses -1 or "?" when the error has no position (empty input)
    located = isinstance(e.line, int) and e.line > 0
    line = e.line if located else max(len(lines), 1)
    line_text = lines[line - 1] if 1 <= line <= len(lines) else ""
    column = e.column if located and isinstance(e.column, int) else len(line_text) + 1
    context = e.get_context(source).rstrip("\n") if located else ""

    if isinstance(e, UnexpectedToken):
        found = "end of input" if e.token.type == "$END" else str(e.token)
        expected = e.expected
    elif isinstance(e, UnexpectedCharacters):
        found = e.char
        expected = e.allowed or set()
    else:
        found = None
        expected = getattr(e, "expected", None) or set()

    return NetworkSyntaxError(
        line=line,
        column=column,
        expected_rule=_expected_rule(line_text),
        found=found,
        expected=frozenset(_describe_terminal(name) for name in expected),
        context=context,
    )


def parse(source: str) -> ParseTree:
    """Parse reaction network source text into a typed parse tree."""
    if source.startswith("\ufeff"):
        source = source[1:]
    try:
        tree = get_parser().parse(source)
    except UnexpectedInput as e:
        raise _syntax_error(e, source) from None
    return ParseTreeBuilder().transform(tree)

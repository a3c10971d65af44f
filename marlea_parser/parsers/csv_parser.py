"""Parser for the comma-delimited reaction network notation."""

from ..network import ReactionNetwork
from .base_parser import BaseParser
from .grammar import parse
from .transform import lower


def parse_source(source: str) -> ReactionNetwork:
    """Parse source text straight into a ReactionNetwork.

    Raises :class:`NetworkSyntaxError` if the text does not match the grammar
    and a :class:`LoweringError` if the parse tree is malformed. Both are
    :class:`ParseFailed`.

    Example
    -------
    >>> network = parse_source("a => b,1,\\nc,10,\\n")
    >>> network.solution
    {'a': 0, 'b': 0, 'c': 10}
    """
    return lower(parse(source))


class CSVParser(BaseParser):
    """Parser for ``.csv`` reaction network files.

    Each line is a reaction (``2 a + b => c,10,``), a species count
    (``c,100,``), a comment (``# ...``) or a separator row of commas.
    """

    extensions = (".csv",)

    def __init__(self):  # noqa
        super().__init__("csv")

    def parse_source(self, source: str) -> ReactionNetwork:
        return parse_source(source)

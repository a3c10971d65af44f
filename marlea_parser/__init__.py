"""
Top-level public API for the Marlea reaction network parser.

The intent is to expose a small, stable surface for typical users:

- ``parse_source``: turn reaction network text into a ``ReactionNetwork``.
- ``parse_reaction_network``: the same for a file, picking the parser from its
  extension.
- ``ReactionNetwork``, ``Reaction``, ``Term``: the parsed model.
- ``ParserError`` and its subclasses: everything the parser raises.

Example
-------
>>> from marlea_parser import parse_source
>>> network = parse_source("a => b,1,\\n2 a => b + b,5,\\nc,10,\\n")
>>> sorted(network.solution.items())
[('a', 0), ('b', 0), ('c', 10)]
"""

from .config import ParserConfig
from .errors import (
    IncompleteDeclaration,
    IncompleteReaction,
    InvalidFile,
    LoweringError,
    Malformed,
    NetworkSyntaxError,
    ParseFailed,
    ParserError,
    UnparsableNumber,
    UnsupportedExt,
)
from .main import run_parser
from .network import ReactionNetwork
from .parsers import parse_reaction_network, parse_source
from .reactions import Reaction, Term
from .species import Species

__all__ = [
    "ParserConfig",
    "run_parser",
    "parse_source",
    "parse_reaction_network",
    "ReactionNetwork",
    "Reaction",
    "Term",
    "Species",
    "ParserError",
    "ParseFailed",
    "UnsupportedExt",
    "InvalidFile",
    "NetworkSyntaxError",
    "LoweringError",
    "Malformed",
    "UnparsableNumber",
    "IncompleteReaction",
    "IncompleteDeclaration",
]

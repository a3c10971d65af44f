"""Imports from all parsers."""

from .base_parser import BaseParser
from .csv_parser import CSVParser, parse_source
from .grammar import parse
from .transform import lower
from .unified_parser import UnifiedReactionParser, parse_reaction_network

__all__ = [
    "BaseParser",
    "CSVParser",
    "UnifiedReactionParser",
    "lower",
    "parse",
    "parse_reaction_network",
    "parse_source",
]

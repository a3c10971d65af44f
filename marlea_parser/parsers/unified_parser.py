from pathlib import Path
from typing import Dict, Optional, Type

from ..errors import InvalidFile, UnsupportedExt
from ..logging import get_logger
from ..network import ReactionNetwork
from .base_parser import BaseParser
from .csv_parser import CSVParser

log = get_logger(__name__)


class UnifiedReactionParser:
    """
    Unified interface for parsing reaction network files.

    Picks a parser from the file extension unless a format is given.

    Supports:
    - CSV (``.csv``, comma-delimited reactions and species counts)
    """

    def __init__(self):
        self.parsers: Dict[str, Type[BaseParser]] = {
            "csv": CSVParser,
        }

    def parse(
        self, filepath, format_type: Optional[str] = None
    ) -> ReactionNetwork:
        """
        Parse a reaction network file using the appropriate parser.

        Args:
            filepath: Path to the network file
            format_type: Format type ('csv'). If None, detect from the extension.

        Returns:
            ReactionNetwork: Parsed reaction network

        Raises:
            InvalidFile: the path does not exist, is not a file, or has no
                extension to detect a format from
            UnsupportedExt: no parser is registered for the format
            ParseFailed: the file contents could not be parsed
        """
        path = Path(filepath)
        if not path.exists():
            raise InvalidFile(f"File not found: {path}")
        if not path.is_file():
            raise InvalidFile(f"Not a file: {path}")

        if format_type is None:
            format_type = self._detect_format(path)

        if format_type not in self.parsers:
            raise UnsupportedExt(
                f"Unsupported format: {format_type}. "
                f"Supported formats: {self.list_supported_formats()}"
            )

        log.debug("Parsing %s as %s", path, format_type)
        parser = self.parsers[format_type]()
        return parser.parse_network(path)

    def _detect_format(self, path: Path) -> str:
        """Detect the file format from the extension."""
        suffix = path.suffix.lower()
        if not suffix:
            raise InvalidFile(f"Cannot detect format without a file extension: {path}")

        for format_type, parser_class in self.parsers.items():
            if suffix in parser_class.extensions:
                return format_type

        raise UnsupportedExt(
            f"Unsupported format: no parser for extension '{suffix}'. "
            f"Supported formats: {self.list_supported_formats()}"
        )

    def register_parser(self, format_type: str, parser_class: Type[BaseParser]):
        """Register a new parser for a specific format"""
        self.parsers[format_type] = parser_class

    def list_supported_formats(self) -> list:
        """List all supported reaction network formats"""
        return list(self.parsers.keys())


# Convenience function for direct parsing
def parse_reaction_network(
    filepath, format_type: Optional[str] = None
) -> ReactionNetwork:
    """
    Convenience function to parse a reaction network file.

    Args:
        filepath: Path to the network file
        format_type: Format type ('csv'). If None, detect from the extension.

    Returns:
        ReactionNetwork: Parsed reaction network
    """
    parser = UnifiedReactionParser()
    return parser.parse(filepath, format_type)

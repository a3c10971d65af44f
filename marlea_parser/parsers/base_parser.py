"""Base class parser for reaction network source files."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..errors import InvalidFile, ParseFailed
from ..network import ReactionNetwork


class BaseParser(ABC):
    """Abstract base class for reaction network parsers.

    Subclasses turn source text into a network; reading the file is shared.
    """

    extensions: tuple[str, ...] = ()

    def __init__(self, format_type: str):  # noqa
        self.format_type = format_type

    @abstractmethod
    def parse_source(self, source: str) -> ReactionNetwork:
        """Parse source text and return a ReactionNetwork."""

    def parse_network(self, filepath) -> ReactionNetwork:
        """Read a UTF-8 source file and parse it."""
        path = Path(filepath)
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise InvalidFile(f"File not found: {path}") from None
        except UnicodeDecodeError as e:
            raise ParseFailed(f"{path}: not valid UTF-8 ({e.reason})") from None
        except OSError as e:
            raise InvalidFile(f"Cannot read {path}: {e.strerror}") from None

        try:
            return self.parse_source(source)
        except ParseFailed as e:
            # Keep the error type, put the file in front of the message
            e.detail = f"{path}: {e.detail}"
            e.args = (e.detail,)
            raise

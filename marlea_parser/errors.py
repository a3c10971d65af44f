"""Error types raised while reading a reaction network.

``ParserError`` is the single type callers need to catch. ``ParseFailed``
covers anything wrong with the source text itself; ``UnsupportedExt`` and
``InvalidFile`` come from the file dispatch layer.
"""

from __future__ import annotations


class ParserError(Exception):
    """Base class for all reaction network parser errors."""

    def __init__(self, detail: str):  # noqa
        super().__init__(detail)
        self.detail = detail


class ParseFailed(ParserError):
    """Raised when the source text could not be turned into a network."""


class UnsupportedExt(ParserError, ValueError):
    """Raised when no grammar is registered for a file extension or format."""


class InvalidFile(ParserError):
    """Raised when no source could be obtained (missing path, no extension)."""


class NetworkSyntaxError(ParseFailed):
    """Raised when the grammar could not match the source text."""

    def __init__(
        self,
        line: int,
        column: int,
        expected_rule: str | None = None,
        found: str | None = None,
        expected: frozenset = frozenset(),
        context: str = "",
    ):  # noqa
        self.line = line
        self.column = column
        self.expected_rule = expected_rule
        self.found = found
        self.expected = expected
        self.context = context

        detail = f"Syntax error at line {line}, column {column}"
        if expected_rule is not None:
            detail += f": expected {expected_rule}"
        if found is not None:
            detail += f", found {found!r}"
        if expected:
            detail += f" (expected one of: {', '.join(sorted(expected))})"
        if context:
            detail += f"\n{context}"
        super().__init__(detail)


class LoweringError(ParseFailed):
    """Raised when a parse tree violates a rule the grammar cannot express.

    A correct grammar never produces these; they guard the transform against
    malformed trees.
    """

    def __init__(self, line: int, message: str):  # noqa
        self.line = line
        super().__init__(f"Line {line}: {message}")


class Malformed(LoweringError):
    """A node is missing a required subcomponent or has an unexpected kind."""


class UnparsableNumber(LoweringError):
    """A coefficient or rate is not a non-negative integer literal."""

    def __init__(self, line: int, text: str):  # noqa
        self.text = text
        super().__init__(line, f"cannot parse {text!r} as a non-negative integer")


class IncompleteReaction(LoweringError):
    """A reaction is missing its reactants, products or rate."""


class IncompleteDeclaration(LoweringError):
    """A species-count declaration is missing its name or count."""

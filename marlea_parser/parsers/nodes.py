"""Typed parse tree nodes produced by the grammar.

Every node records the line and column it started at. Child fields are
optional because the transform checks them rather than trusting the grammar.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Span:
    line: int
    column: int

    def __str__(self):
        return f"line {self.line}, column {self.column}"


@dataclass(frozen=True)
class NameNode:
    text: str
    span: Span


@dataclass(frozen=True)
class CoefficientNode:
    """Digits of a term multiplier or a declared species count."""

    text: str
    span: Span


@dataclass(frozen=True)
class RateNode:
    text: str
    span: Span


@dataclass(frozen=True)
class TermNode:
    coefficient: Optional[CoefficientNode]
    name: Optional[NameNode]
    span: Span


@dataclass(frozen=True)
class ReactionNode:
    reactants: Optional[tuple[TermNode, ...]]
    products: Optional[tuple[TermNode, ...]]
    rate: Optional[RateNode]
    span: Span


@dataclass(frozen=True)
class SpeciesCountNode:
    name: Optional[NameNode]
    count: Optional[CoefficientNode]
    span: Span


@dataclass(frozen=True)
class SeparatorNode:
    """A row of only commas."""

    span: Span


LineNode = Union[ReactionNode, SpeciesCountNode, SeparatorNode]


@dataclass(frozen=True)
class ParseTree:
    """Top-level nodes in source order."""

    nodes: tuple[LineNode, ...] = ()

    def __iter__(self):
        return iter(self.nodes)

    def __len__(self):
        return len(self.nodes)

"""Defines schemas for reactions."""

from collections import Counter
from dataclasses import dataclass

from .species import Count, Name


@dataclass(frozen=True)
class Term:
    """``count`` copies of species ``name`` on one side of a reaction."""

    name: Name
    count: Count = 1

    def __str__(self):
        return self.name if self.count == 1 else f"{self.count} {self.name}"


def merge_terms(terms) -> tuple[Term, ...]:
    """Merge repeated species on one side, so ``b + b`` becomes ``2 b``.

    Species keep the order of their first appearance.
    """
    counts = {}
    for term in terms:
        counts[term.name] = counts.get(term.name, 0) + term.count
    return tuple(Term(name, count) for name, count in counts.items())


@dataclass(frozen=True)
class Reaction:
    """Dataclass for individual reactions.

    Equality is by content and order-sensitive: ``a + b => c`` and
    ``b + a => c`` are different reactions.
    """

    reactants: tuple[Term, ...]
    products: tuple[Term, ...]
    rate: Count

    def __post_init__(self):
        object.__setattr__(self, "reactants", merge_terms(self.reactants))
        object.__setattr__(self, "products", merge_terms(self.products))

    @property
    def species(self) -> set[Name]:
        """Names of every species on either side."""
        return {t.name for t in self.reactants} | {t.name for t in self.products}

    @property
    def molecularity(self) -> int:
        return sum(t.count for t in self.reactants)

    def stoichiometry(self) -> dict[Name, int]:
        """Net change in count of each species when the reaction fires once."""
        change = Counter()
        for term in self.reactants:
            change[term.name] -= term.count
        for term in self.products:
            change[term.name] += term.count
        return dict(change)

    def sort_key(self):
        return (
            tuple((t.name, t.count) for t in self.reactants),
            tuple((t.name, t.count) for t in self.products),
            self.rate,
        )

    def __str__(self):
        reactants = " + ".join(str(t) for t in self.reactants)
        products = " + ".join(str(t) for t in self.products)
        return f"{reactants} => {products},{self.rate},"

    def __repr__(self):
        return f"Reaction({list(self.reactants)}, {list(self.products)}, {self.rate})"

"""Lowers a typed parse tree into a :class:`ReactionNetwork`.

A single pass over the top-level nodes in source order. Reactions go into a
set, so repeated lines collapse. Every species a reaction mentions gets a
zero entry in the solution unless it already has one; a species-count line
always overwrites, so the last declaration in the file wins.

The grammar already rules out most of the errors checked here. The checks
stay so a malformed tree fails loudly instead of producing a partial network.
"""

import re

from ..errors import (
    IncompleteDeclaration,
    IncompleteReaction,
    Malformed,
    UnparsableNumber,
)
from ..logging import get_logger
from ..network import ReactionNetwork
from ..reactions import Reaction, Term
from ..species import Count, Name
from .nodes import (
    CoefficientNode,
    NameNode,
    ParseTree,
    RateNode,
    ReactionNode,
    SeparatorNode,
    SpeciesCountNode,
    TermNode,
)

DECIMAL = re.compile(r"[0-9]+")

log = get_logger(__name__)


def lower_name(node: NameNode) -> Name:
    return node.text


def lower_count(node: CoefficientNode | RateNode) -> Count:
    """Parse a coefficient or rate literal as a non-negative integer."""
    text = node.text.strip()
    if not DECIMAL.fullmatch(text):
        raise UnparsableNumber(node.span.line, node.text)
    return int(text)


def lower_term(node: TermNode) -> Term:
    if node.name is None:
        raise Malformed(node.span.line, "term has no species name")
    count = 1 if node.coefficient is None else lower_count(node.coefficient)
    return Term(lower_name(node.name), count)


def lower_reaction(node: ReactionNode) -> Reaction:
    line = node.span.line
    if not node.reactants:
        raise IncompleteReaction(line, "reaction has no reactants")
    if not node.products:
        raise IncompleteReaction(line, "reaction has no products")
    if node.rate is None:
        raise IncompleteReaction(line, "reaction has no reaction_rate")

    reactants = [lower_term(term) for term in node.reactants]
    products = [lower_term(term) for term in node.products]
    return Reaction(reactants, products, lower_count(node.rate))


def lower_species_count(node: SpeciesCountNode) -> tuple[Name, Count]:
    if node.name is None:
        raise IncompleteDeclaration(node.span.line, "species count has no name")
    if node.count is None:
        raise IncompleteDeclaration(node.span.line, "species count has no count")
    return lower_name(node.name), lower_count(node.count)


def lower(tree: ParseTree) -> ReactionNetwork:
    """Build a reaction network from a parse tree.

    Raises the first :class:`LoweringError` encountered; nothing is returned
    for a tree with any bad node.
    """
    reactions = set()
    solution = {}

    for node in tree:
        if isinstance(node, ReactionNode):
            reaction = lower_reaction(node)
            reactions.add(reaction)
            for term in reaction.reactants + reaction.products:
                solution.setdefault(term.name, 0)
        elif isinstance(node, SpeciesCountNode):
            name, count = lower_species_count(node)
            if name in solution:
                log.debug("Line %d: %s set to %d", node.span.line, name, count)
            solution[name] = count
        elif isinstance(node, SeparatorNode):
            continue
        else:
            line = getattr(getattr(node, "span", None), "line", 0)
            raise Malformed(line, f"unexpected node {type(node).__name__}")

    log.debug(
        "Lowered %d nodes into %d reactions and %d species",
        len(tree),
        len(reactions),
        len(solution),
    )
    return ReactionNetwork(reactions, solution)

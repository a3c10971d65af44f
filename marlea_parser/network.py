"""Defines the reaction network composed of reactions and the initial solution."""

from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from .reactions import Reaction
from .species import Count, Name, Species


@dataclass
class ReactionNetwork:
    """A full reaction network: a set of reactions and the initial species counts.

    ``solution`` holds an entry for every species referenced by a reaction
    (zero unless declared) plus any standalone declarations. Equality is by
    content, so two parses of the same source compare equal.
    """

    reactions: set[Reaction] = field(default_factory=set)
    solution: dict[Name, Count] = field(default_factory=dict)

    @property
    def species(self) -> list[Species]:
        """Species sorted by name, with their initial counts."""
        return [Species(name, self.solution[name]) for name in self.species_names()]

    def species_names(self) -> list[Name]:
        return sorted(self.solution)

    def sorted_reactions(self) -> list[Reaction]:
        """Reactions in a deterministic order, independent of set iteration."""
        return sorted(self.reactions, key=Reaction.sort_key)

    def species_count(self):
        """Get the number of species in the network."""
        return len(self.solution)

    def reaction_count(self):
        """Get the number of reactions in the network."""
        return len(self.reactions)

    def incidence(self) -> np.ndarray:
        """Net stoichiometry matrix (S species, R reactions).

        Rows follow ``species_names()``, columns follow ``sorted_reactions()``.
        """
        index = {name: idx for idx, name in enumerate(self.species_names())}
        reactions = self.sorted_reactions()
        incidence = np.zeros((len(index), len(reactions)), dtype=np.int64)  # S, R
        for j, reaction in enumerate(reactions):
            for name, change in reaction.stoichiometry().items():
                incidence[index[name], j] += change
        return incidence

    def reactant_matrix(self) -> np.ndarray:
        """Reactant multiplicities (S species, R reactions), used for propensities."""
        index = {name: idx for idx, name in enumerate(self.species_names())}
        reactions = self.sorted_reactions()
        multipliers = np.zeros((len(index), len(reactions)), dtype=np.int64)
        for j, reaction in enumerate(reactions):
            for term in reaction.reactants:
                multipliers[index[term.name], j] += term.count
        return multipliers

    def reactions_dataframe(self) -> pd.DataFrame:
        """One row per reaction in ``sorted_reactions()`` order."""
        rows = [
            {
                "reactants": " + ".join(str(t) for t in reaction.reactants),
                "products": " + ".join(str(t) for t in reaction.products),
                "rate": reaction.rate,
            }
            for reaction in self.sorted_reactions()
        ]
        return pd.DataFrame(rows, columns=["reactants", "products", "rate"])

    def solution_dataframe(self) -> pd.DataFrame:
        names = self.species_names()
        return pd.DataFrame(
            {"species": names, "count": [self.solution[n] for n in names]},
            columns=["species", "count"],
        )

    def __str__(self):
        return (
            f"ReactionNetwork({self.species_count()} species, "
            f"{self.reaction_count()} reactions)"
        )

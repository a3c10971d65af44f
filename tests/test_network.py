"""Tests for the ReactionNetwork, Reaction and Species helpers."""

import numpy as np
import pytest

from marlea_parser import ReactionNetwork, Reaction, Species, Term, parse_source


@pytest.fixture
def network():
    return parse_source("a => b,1,\n2 a => b + b,5,\nc,10,\n")


class TestReaction:
    def test_terms_are_tuples(self):
        reaction = Reaction([Term("a")], [Term("b")], 1)
        assert reaction.reactants == (Term("a", 1),)
        assert hash(reaction) == hash(Reaction((Term("a"),), (Term("b"),), 1))

    def test_repeated_species_merge_in_first_order(self):
        reaction = Reaction([Term("b"), Term("a"), Term("b", 2)], [Term("c")], 1)
        assert reaction.reactants == (Term("b", 3), Term("a", 1))

    def test_stoichiometry_and_molecularity(self):
        reaction = Reaction([Term("a"), Term("b")], [Term("a"), Term("c", 2)], 3)
        assert reaction.stoichiometry() == {"a": 0, "b": -1, "c": 2}
        assert reaction.molecularity == 2
        assert reaction.species == {"a", "b", "c"}

    def test_str_uses_source_notation(self):
        reaction = Reaction([Term("a", 2)], [Term("b", 2), Term("c")], 5)
        assert str(reaction) == "2 a => 2 b + c,5,"
        assert parse_source(str(reaction)).reactions == {reaction}


class TestReactionNetwork:
    def test_species_sorted_with_counts(self, network):
        assert network.species_names() == ["a", "b", "c"]
        assert [s.count for s in network.species] == [0, 0, 10]
        assert network.species[2] == "c"
        assert network.species_count() == 3
        assert network.reaction_count() == 2

    def test_sorted_reactions(self, network):
        rates = [r.rate for r in network.sorted_reactions()]
        assert rates == [1, 5]

    def test_incidence(self, network):
        expected = np.array([[-1, -2], [1, 2], [0, 0]])
        np.testing.assert_array_equal(network.incidence(), expected)

    def test_reactant_matrix(self, network):
        expected = np.array([[1, 2], [0, 0], [0, 0]])
        np.testing.assert_array_equal(network.reactant_matrix(), expected)

    def test_dataframes(self, network):
        reactions = network.reactions_dataframe()
        assert list(reactions.columns) == ["reactants", "products", "rate"]
        assert reactions["reactants"].tolist() == ["a", "2 a"]
        assert reactions["products"].tolist() == ["b", "2 b"]

        solution = network.solution_dataframe()
        assert solution["species"].tolist() == ["a", "b", "c"]
        assert solution["count"].tolist() == [0, 0, 10]

    def test_empty_network(self):
        network = ReactionNetwork()
        assert network.incidence().shape == (0, 0)
        assert network.reactions_dataframe().empty
        assert str(network) == "ReactionNetwork(0 species, 0 reactions)"

    def test_equality_is_by_content(self, network):
        other = ReactionNetwork(set(network.reactions), dict(network.solution))
        assert other == network
        other.solution["c"] = 11
        assert other != network


class TestSpecies:
    def test_equality_by_name(self):
        assert Species("a", 1) == Species("a", 2)
        assert Species("a") == "a"
        assert Species("a") != 1
        assert len({Species("a", 1), Species("a", 2)}) == 1

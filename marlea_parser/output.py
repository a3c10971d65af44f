"""Output management for parsed reaction networks.

Handles saving of reaction tables, initial counts, the stoichiometry matrix
and metadata.
"""

import json
from datetime import datetime
from pathlib import Path

import pandas as pd

from .config import ParserConfig
from .network import ReactionNetwork


def prepare_output_directory(config: ParserConfig) -> Path:
    """Create output directory if it doesn't exist.

    Parameters
    ----------
    config : ParserConfig
        Configuration with output_dir

    Returns:
    -------
    output_path : Path
        Path to output directory
    """
    output_path = Path(config.output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def save_reactions(network: ReactionNetwork, config: ParserConfig) -> Path:
    """Save the reaction table to CSV.

    Columns are ``reactants``, ``products`` and ``rate``, one row per
    reaction in ``network.sorted_reactions()`` order.
    """
    output_path = prepare_output_directory(config)
    filepath = output_path / f"{config.run_name}_reactions.csv"
    network.reactions_dataframe().to_csv(filepath, index=False)
    return filepath


def save_solution(network: ReactionNetwork, config: ParserConfig) -> Path:
    """Save the initial species counts to CSV (``species``, ``count``)."""
    output_path = prepare_output_directory(config)
    filepath = output_path / f"{config.run_name}_solution.csv"
    network.solution_dataframe().to_csv(filepath, index=False)
    return filepath


def save_incidence(network: ReactionNetwork, config: ParserConfig) -> Path:
    """Save the stoichiometry matrix to CSV.

    Rows are species, columns are reactions written in source notation.
    """
    output_path = prepare_output_directory(config)
    filepath = output_path / f"{config.run_name}_incidence.csv"

    df = pd.DataFrame(
        network.incidence(),
        index=pd.Index(network.species_names(), name="species"),
        columns=[str(r) for r in network.sorted_reactions()],
    )
    df.to_csv(filepath)
    return filepath


def save_metadata(
    config: ParserConfig,
    network: ReactionNetwork,
    network_file: str,
    computation_time: float,
) -> Path:
    """Save run metadata to JSON."""
    output_path = prepare_output_directory(config)
    filepath = output_path / f"{config.run_name}_metadata.json"

    metadata = {
        "run_name": config.run_name,
        "timestamp": datetime.now().isoformat(),
        "network_file": str(network_file),
        "format_type": config.format_type,
        "n_species": network.species_count(),
        "n_reactions": network.reaction_count(),
        "computation_time_s": computation_time,
    }

    with open(filepath, "w") as f:
        json.dump(metadata, f, indent=2)
    return filepath


def save_summary_report(network: ReactionNetwork, config: ParserConfig) -> Path:
    """Write a human-readable summary of the parsed network."""
    output_path = prepare_output_directory(config)
    filepath = output_path / f"{config.run_name}_summary.txt"

    declared = {name: count for name, count in network.solution.items() if count}
    unused = set(network.solution)
    for reaction in network.reactions:
        unused -= reaction.species

    with open(filepath, "w") as f:
        f.write("=" * 60 + "\n")
        f.write(f"Reaction network summary: {config.run_name}\n")
        f.write("=" * 60 + "\n\n")
        f.write(f"Species:   {network.species_count()}\n")
        f.write(f"Reactions: {network.reaction_count()}\n\n")

        f.write("Non-zero initial counts:\n")
        for name in sorted(declared):
            f.write(f"  {name:30s} {declared[name]}\n")
        f.write("\n")

        if unused:
            f.write("Species not used by any reaction:\n")
            for name in sorted(unused):
                f.write(f"  {name}\n")
            f.write("\n")

        f.write("Reactions:\n")
        for reaction in network.sorted_reactions():
            f.write(f"  {reaction}\n")

    return filepath

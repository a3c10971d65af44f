"""marlea_parser: reaction network parser for the Marlea stochastic simulator.

Main entry point for parsing a network file and writing its tables.

Usage
-----
From Python:
    from marlea_parser.main import run_parser
    from marlea_parser.config import ParserConfig

    config = ParserConfig(output_dir="results", run_name="gates")
    run_parser("networks/gates.csv", config)

From command line:
    python -m marlea_parser.main --input networks/gates.csv --config config.yaml
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

from .config import ParserConfig
from .errors import ParserError
from .logging import setup_logger
from .output import (
    save_incidence,
    save_metadata,
    save_reactions,
    save_solution,
    save_summary_report,
)
from .parsers import parse_reaction_network


def run_parser(
    network_file: str,
    config: ParserConfig,
    verbose: bool = True,
) -> dict:
    """Parse a reaction network file and save the requested outputs.

    Workflow:
    1. Validate configuration
    2. Load network from file
    3. Save results

    Parameters
    ----------
    network_file : str
        Path to reaction network file
    config : ParserConfig
        Run configuration
    verbose : bool
        Print progress messages

    Returns:
    -------
    results : dict
        Dictionary containing:
        - 'network': Parsed ReactionNetwork
        - 'config': Configuration used
        - 'outputs': Paths of the files written
        - 'computation_time': Wall-clock time [s]
    """
    start_time = datetime.now()

    if verbose:
        print("=" * 60)
        print("Marlea Reaction Network Parser")
        print("=" * 60)
        print(f"Network file: {network_file}")
        print(f"Run name: {config.run_name}")
        print()

    config.validate()

    if verbose:
        print(f"Loading reaction network from {network_file}...")
    network = parse_reaction_network(network_file, config.format_type)
    if verbose:
        print(f"  Loaded {network.species_count()} species")
        print(f"  Loaded {network.reaction_count()} reactions")
        print()

    computation_time = (datetime.now() - start_time).total_seconds()

    if verbose:
        print("Saving results...")
    outputs = []
    if config.save_reactions:
        outputs.append(save_reactions(network, config))
    if config.save_solution:
        outputs.append(save_solution(network, config))
    if config.save_incidence:
        outputs.append(save_incidence(network, config))
    if config.save_metadata:
        outputs.append(
            save_metadata(config, network, network_file, computation_time)
        )
        outputs.append(save_summary_report(network, config))

    if verbose:
        for path in outputs:
            print(f"  Wrote {path}")
        print()
        print("=" * 60)
        print(f"Parsing complete! Total time: {computation_time:.2f} seconds")
        print("=" * 60)

    return {
        "network": network,
        "config": config,
        "outputs": outputs,
        "computation_time": computation_time,
    }


def main(argv=None):
    """Command-line interface for marlea_parser."""
    parser = argparse.ArgumentParser(
        description="Marlea: parse a reaction network file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse with default settings
  python -m marlea_parser.main --input networks/gates.csv

  # Use configuration file
  python -m marlea_parser.main --input networks/gates.csv --config my_config.yaml

  # Custom output directory and run name, also save the stoichiometry matrix
  python -m marlea_parser.main -i networks/gates.csv -o results/ -n gates --incidence
        """,
    )

    parser.add_argument(
        "--input", "-i", required=True, help="Path to reaction network file"
    )
    parser.add_argument("--config", "-c", help="Path to YAML/JSON configuration file")
    parser.add_argument(
        "--format",
        "-f",
        choices=["csv", "auto"],
        default=None,
        help="Network file format (default: from config, else auto-detect)",
    )
    parser.add_argument("--output", "-o", help="Output directory (overrides config)")
    parser.add_argument("--name", "-n", help="Run name (overrides config)")
    parser.add_argument(
        "--incidence",
        action="store_true",
        help="Also save the stoichiometry matrix (overrides config)",
    )
    parser.add_argument("--log-level", help="Log level name (overrides config)")
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Suppress output messages"
    )

    args = parser.parse_args(argv)

    # Load configuration
    if args.config:
        config_path = Path(args.config)
        if config_path.suffix in [".yaml", ".yml"]:
            config = ParserConfig.from_yaml(args.config)
        elif config_path.suffix == ".json":
            config = ParserConfig.from_json(args.config)
        else:
            print(f"Error: Unknown config format: {config_path.suffix}", file=sys.stderr)
            sys.exit(1)
    else:
        config = ParserConfig()

    # Override with command-line args
    if args.output:
        config.output_dir = args.output
    if args.name:
        config.run_name = args.name
    if args.incidence:
        config.save_incidence = True
    if args.log_level:
        config.log_level = args.log_level
    if args.format is not None:
        config.format_type = None if args.format == "auto" else args.format

    try:
        config.validate()
        setup_logger(config.log_level)
        run_parser(args.input, config, verbose=not args.quiet)
    except (ParserError, ValueError, AssertionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

"""
Configuration management for marlea_parser runs.

Simple dataclass-based config for parsing a network and writing its tables.
Supports loading from YAML/JSON and programmatic setup.
"""

import json
from dataclasses import asdict, dataclass
from typing import Optional

import yaml

from .logging import NAMED_LOG_LEVELS


@dataclass
class ParserConfig:
    """Configuration for parsing a reaction network file.

    Attributes
    ----------
    Input:
        format_type : str, optional
            Network format ('csv'). None detects it from the file extension.

    Output Settings:
        output_dir : str
            Directory for output files
        run_name : str
            Identifier for this run, used as the output file prefix
        save_reactions : bool
            Save the reaction table
        save_solution : bool
            Save the initial species counts
        save_incidence : bool
            Save the species x reaction stoichiometry matrix
        save_metadata : bool
            Save run metadata (JSON) and a text summary

    Logging:
        log_level : str
            Level name for the ``marlea_parser`` logger
    """

    # Input
    format_type: Optional[str] = None

    # Output settings
    output_dir: str = "output"
    run_name: str = "marlea_run"
    save_reactions: bool = True
    save_solution: bool = True
    save_incidence: bool = False
    save_metadata: bool = True

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_yaml(cls, filepath: str) -> "ParserConfig":
        """Load configuration from YAML file."""
        with open(filepath, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def from_json(cls, filepath: str) -> "ParserConfig":
        """Load configuration from JSON file."""
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls(**data)

    def to_yaml(self, filepath: str):
        """Save configuration to YAML file."""
        with open(filepath, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    def to_json(self, filepath: str):
        """Save configuration to JSON file."""
        with open(filepath, "w") as f:
            json.dump(asdict(self), f, indent=2)

    def validate(self):
        """Basic validation of settings."""
        assert self.run_name, "run_name must not be empty"
        assert self.output_dir, "output_dir must not be empty"
        assert self.log_level in NAMED_LOG_LEVELS, (
            f"Unknown log_level: {self.log_level}"
        )

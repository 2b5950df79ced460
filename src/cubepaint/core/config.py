"""
Configuration management for cubepaint.

This module handles loading and validation of configuration files and
environment variables, and provides typed configuration objects.
"""

import os
import yaml
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from pathlib import Path


SEED_ENV_VAR = "CUBEPAINT_SEED"


@dataclass
class PuzzleConfig:
    """Configuration for generated puzzles."""
    side: int = 4
    seed: Optional[int] = None
    paint_probability: float = 0.5

    def __post_init__(self):
        # Load from environment variables if not provided
        if self.seed is None:
            env_seed = os.getenv(SEED_ENV_VAR)
            if env_seed:
                try:
                    self.seed = int(env_seed)
                except ValueError:
                    raise ValueError(f"{SEED_ENV_VAR} must be an integer, got '{env_seed}'")
        if not isinstance(self.side, int) or self.side <= 2:
            raise ValueError("side must be an integer greater than 2")
        if self.seed is not None and (not isinstance(self.seed, int) or self.seed < 0):
            raise ValueError("seed must be a non-negative integer")
        if not isinstance(self.paint_probability, (float, int)) or not 0 <= self.paint_probability <= 1:
            raise ValueError("paint_probability must be a number between 0 and 1")


@dataclass
class SessionConfig:
    """Configuration for a play session."""
    session_name: str = "cubepaint"
    log_dir: str = "logs"
    save_logs: bool = False
    verbose: bool = True

    def __post_init__(self):
        # Directory creation is deferred to the session logger to avoid side effects on import
        if not isinstance(self.session_name, str) or not self.session_name:
            raise ValueError("session_name must be a non-empty string")
        if not isinstance(self.log_dir, str) or not self.log_dir:
            raise ValueError("log_dir must be a non-empty string")


@dataclass
class Config:
    """Main configuration object."""
    puzzle: PuzzleConfig = field(default_factory=PuzzleConfig)
    session: SessionConfig = field(default_factory=SessionConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        puzzle_data = data.get("puzzle") or {}
        puzzle = PuzzleConfig(**puzzle_data)

        session_data = data.get("session") or {}
        session = SessionConfig(**session_data)

        return cls(puzzle=puzzle, session=session)

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            "puzzle": {
                **{k: v for k, v in self.puzzle.__dict__.items()}
            },
            "session": {
                **{k: v for k, v in self.session.__dict__.items()}
            },
        }


def load_config(config_path: str) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is malformed
        ValueError: If the file is empty or holds invalid values
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML config: {e}")

    if not data:
        raise ValueError("Configuration file is empty")

    try:
        return Config.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Error creating config from data: {e}")


def create_default_config(output_path: str = "config.yaml") -> Config:
    """
    Create a default configuration file.

    Args:
        output_path: Path where to save the default config

    Returns:
        Default Config object
    """
    config = Config()
    # the default file never pins the seed from CUBEPAINT_SEED
    config.puzzle.seed = None

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, indent=2)

    return config


def validate_config(config: Config) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration to validate

    Returns:
        List of validation messages
    """
    issues = []

    if config.puzzle.side <= 2:
        issues.append("ERROR: puzzle side must be greater than 2")

    if config.puzzle.seed is not None and config.puzzle.seed < 0:
        issues.append("ERROR: puzzle seed must be a non-negative integer")

    if config.puzzle.side > 20:
        issues.append("WARNING: puzzle side above 20 is hard to display in a terminal")

    if config.puzzle.paint_probability in (0, 1):
        issues.append("WARNING: paint_probability of 0 or 1 makes every puzzle trivial or unsolvable")

    if config.session.save_logs and not os.path.isdir(config.session.log_dir):
        issues.append(f"WARNING: log directory does not exist and will be created: {config.session.log_dir}")

    return issues

"""Utilities: logging, seeding, configuration."""

from .logging import setup_logging
from .seed import set_seed, derive_seed
from .config import ConfigError, load_config, build_mcts_config, get_iterations

__all__ = [
    "setup_logging",
    "set_seed",
    "derive_seed",
    "ConfigError",
    "load_config",
    "build_mcts_config",
    "get_iterations",
]

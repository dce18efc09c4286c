"""YAML configuration for searches and experiments.

Example file:

    mcts:
      iterations: 1000
      exploration_constant: 1.41
      evaluation: rollout
      backup: negamax
      seed: 42
    logging:
      level: INFO
"""

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..mcts.search import MCTSConfig

# Keys under "mcts" that are not MCTSConfig fields
SEARCH_KEYS = ("iterations",)


class ConfigError(ValueError):
    """Raised for malformed configuration files."""


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a YAML config file.

    An empty file loads as an empty dict.

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping
    """
    with open(path, 'r') as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config root must be a mapping, got {type(config).__name__}")
    return config


def build_mcts_config(config: Optional[Dict[str, Any]] = None, **overrides) -> MCTSConfig:
    """Build MCTSConfig from the "mcts" section plus explicit overrides.

    Overrides set to None are ignored so argparse defaults can be passed
    straight through.

    Raises:
        ConfigError: On unknown keys or invalid values
    """
    section = dict((config or {}).get('mcts', {}) or {})
    section.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(MCTSConfig)}
    unknown = set(section) - known - set(SEARCH_KEYS)
    if unknown:
        raise ConfigError(f"Unknown mcts config keys: {sorted(unknown)}")

    try:
        return MCTSConfig(**{k: v for k, v in section.items() if k in known})
    except (TypeError, ValueError) as e:
        raise ConfigError(str(e)) from e


def get_iterations(config: Optional[Dict[str, Any]], default: int = 1000) -> int:
    """Search budget from the "mcts" section."""
    section = (config or {}).get('mcts', {}) or {}
    iterations = section.get('iterations', default)
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations <= 0:
        raise ConfigError(f"mcts.iterations must be a positive int, got {iterations!r}")
    return iterations

"""
Run configuration and logging setup.

Configuration lives in a YAML file (config/default.yaml by default).
Sections present in the file override the built-in defaults key by key.
"""

import copy
import logging
from pathlib import Path

import numpy as np
import yaml

from .nth_prime import DEFAULT_FLOOR, DEFAULT_GROWTH

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path('config/default.yaml')

DEFAULTS = {
    'nth_prime': {
        'floor': DEFAULT_FLOOR,
        'growth': DEFAULT_GROWTH,
        'max_rounds': None,
    },
    'output': {
        'dtype': 'int64',
    },
    'logging': {
        'level': 'INFO',
    },
}


def load_config(path=DEFAULT_CONFIG_PATH) -> dict:
    """
    Load a YAML config and merge it over DEFAULTS.

    A missing file is not an error: a warning is logged and the defaults
    are returned. A file that is not valid YAML raises yaml.YAMLError.
    """
    config = copy.deepcopy(DEFAULTS)
    path = Path(path)

    if not path.exists():
        logger.warning("Config file %s not found, using defaults", path)
        return config

    with open(path) as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: top level must be a mapping")

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


def resolve_dtype(name: str) -> np.dtype:
    """Map a dtype name from the config ('int64', 'uint32', ...) to a numpy dtype."""
    try:
        dtype = np.dtype(name)
    except TypeError:
        raise ValueError(f"Unknown dtype: {name!r}") from None
    if dtype.kind not in "iu":
        raise ValueError(f"dtype must be an integer type, got {name!r}")
    return dtype


def setup_logging(level='INFO'):
    """Set up logging configuration."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

"""
deck_odds/config.py

Configuration loaded from config.yaml - import 'config' directly from this module
"""
import copy
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
import yaml

load_dotenv()

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', 'config.yaml')

DEFAULTS: Dict[str, Any] = {
    'logging': {
        'level': 'INFO',
        'log_to_file': False,
        'log_dir': 'logs',
    },
    'flush': {
        'size': 5,
        'draw_threshold': 4,
        'preferred_suit': None,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read a YAML config file and merge it over DEFAULTS.

    Resolution order for the path: explicit argument, DECK_ODDS_CONFIG,
    then config.yaml at the project root. A missing file yields the defaults.
    DECK_ODDS_LOG_LEVEL overrides logging.level.
    """
    config_path = path or os.getenv('DECK_ODDS_CONFIG') or DEFAULT_CONFIG_PATH

    loaded: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")

    merged = _merge(DEFAULTS, loaded)

    env_level = os.getenv('DECK_ODDS_LOG_LEVEL')
    if env_level:
        merged['logging']['level'] = env_level.upper()

    return merged


config = load_config()

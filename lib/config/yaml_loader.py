"""Safe YAML loader."""
from pathlib import Path

import yaml


def load_yaml(path: str) -> dict:
    with open(path) as fh:
        return yaml.safe_load(fh) or {}


def load_yaml_if_exists(path: str) -> dict:
    """Like :func:`load_yaml` but an absent file yields an empty mapping."""
    if not Path(path).exists():
        return {}
    return load_yaml(path)

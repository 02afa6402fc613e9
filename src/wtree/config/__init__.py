"""Loading and validation of ``.wtree.yaml`` configuration files."""

from __future__ import annotations

from wtree.config.loader import load_config
from wtree.config.validator import _suggest_key, validate_config_file

__all__ = [
    "_suggest_key",
    "load_config",
    "validate_config_file",
]

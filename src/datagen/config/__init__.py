"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable named by ``vocabulary.special_symbols_env``
"""

from .schema import (
    ConfigModel,
    get_default_config,
    load_config,
    reset_default_config,
    set_default_config,
)

__all__ = [
    "ConfigModel",
    "get_default_config",
    "load_config",
    "reset_default_config",
    "set_default_config",
]

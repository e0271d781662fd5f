"""Typed configuration schema and loader for the datagen package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, constr, model_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class VocabularySettings(BaseModel):
    """Configurable vocabularies."""

    special_symbols: constr(min_length=1)
    special_symbols_env: str

    model_config = ConfigDict(extra="forbid")


class RangeSettings(BaseModel):
    """Inclusive ``[min, max]`` range of non-negative integers."""

    min: conint(ge=0)
    max: conint(ge=0)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_order(self) -> "RangeSettings":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


class ModifierSettings(BaseModel):
    """Behaviour of randomized modifiers."""

    occasional_probability: confloat(ge=0.0, le=1.0) = 0.5

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Level applied by :func:`datagen.utils.logging.configure_logging`."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    vocabulary: VocabularySettings
    lengths: RangeSettings
    batch: RangeSettings
    modifiers: ModifierSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable for the special-symbol set.
    """

    with (
        importlib_resources.files("datagen.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    vocab = merged.get("vocabulary")
    if isinstance(vocab, dict):
        symbols_env = vocab.get("special_symbols_env")
        if symbols_env and environ.get(symbols_env):
            merged = deep_merge_dicts(
                merged, {"vocabulary": {"special_symbols": environ[symbols_env]}}
            )

    return ConfigModel.model_validate(merged)


# ---------------------------------------------------------------------------
# Process default
# ---------------------------------------------------------------------------

_default_config: ConfigModel | None = None


def get_default_config() -> ConfigModel:
    """Return the process-wide default configuration, loading it on first use."""

    global _default_config
    if _default_config is None:
        _default_config = load_config()
    return _default_config


def set_default_config(cfg: ConfigModel) -> None:
    """Replace the process-wide default used when no config is passed explicitly."""

    global _default_config
    _default_config = cfg


def reset_default_config() -> None:
    """Forget the process default; the next lookup reloads it from disk and env."""

    global _default_config
    _default_config = None


__all__ = [
    "ConfigModel",
    "VocabularySettings",
    "RangeSettings",
    "ModifierSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "get_default_config",
    "load_config",
    "reset_default_config",
    "set_default_config",
]

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml


class AppConfig(Protocol):
    def __getitem__(self, key: str) -> object: ...


_DEFAULTS: dict[str, object] = {
    "api": {
        "base_url": "https://mmolb.com/api",
        "timeout_seconds": 10.0,
    },
    "cache": {
        "db_path": "~/.cache/mmolb-parsing/cache.db",
        "ttl_seconds": 86400,
    },
    "parsing": {
        "default_season": "S1",
    },
}


@dataclass(frozen=True)
class FetchSettings:
    base_url: str
    timeout_seconds: float
    ttl_seconds: int


def create_config(
    yaml_path: str = "config.yaml",
    env_prefix: str = "MMOLB",
    defaults: dict[str, object] | None = None,
    *,
    base_url: str | None = None,
    default_season: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.
    Environment variables use ``__`` between levels, e.g. ``MMOLB__API__BASE_URL``.

    Args:
        yaml_path: Path to the YAML config file; a missing file is skipped.
        env_prefix: Prefix for environment variables.
        defaults: Default configuration values.
        base_url: Override ``api.base_url``.
        default_season: Override ``parsing.default_season``.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    overrides = _build_overrides(base_url, default_season)
    if overrides:
        layers.insert(0, config_from_dict(overrides))
    return ConfigurationSet(*layers)


def _build_overrides(base_url: str | None, default_season: str | None) -> dict[str, object]:
    overrides: dict[str, object] = {}
    if base_url is not None:
        overrides["api"] = {"base_url": base_url}
    if default_season is not None:
        overrides["parsing"] = {"default_season": default_season}
    return overrides


def load_fetch_settings(cfg: AppConfig | None = None) -> FetchSettings:
    if cfg is None:
        cfg = create_config()
    return FetchSettings(
        base_url=str(cfg["api.base_url"]).rstrip("/"),
        timeout_seconds=float(str(cfg["api.timeout_seconds"])),
        ttl_seconds=int(str(cfg["cache.ttl_seconds"])),
    )


def default_season(cfg: AppConfig | None = None) -> str:
    if cfg is None:
        cfg = create_config()
    return str(cfg["parsing.default_season"])

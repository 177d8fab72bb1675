#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML files, CLI overrides, env vars
#  - Caches composed config
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from cdepgraph.helpers.dto.render_dto import RenderOptions
from cdepgraph.helpers.exceptions import ConfigError

# Repo-local config file, relative to the working directory
LOCAL_CONFIG_PATH = os.path.join("config", "cdepgraph.yaml")

CONFIG_PATH_ENV = "CDEPGRAPH_CONFIG_PATH"
ENV_PREFIX = "CDEPGRAPH_"

# Keys that may be overridden from the environment
ALLOWED_ENV_KEYS = {
    "output_path",
    "graph_template",
    "subgraph_template",
    "include_modules",
    "private_modules",
    "recursive",
    "log_level",
}

LIST_KEYS = {"include_modules", "private_modules"}

DEFAULT_OUTPUT_PATH = "out.dot"

TRUE_STRINGS = {"true", "1", "yes", "on"}
FALSE_STRINGS = {"false", "0", "no", "off", ""}


class ConfigService:
    """
    Service for loading and caching cdepgraph configuration.

    Sources, lowest to highest priority:
      1) Built-in defaults
      2) ./config/cdepgraph.yaml (if present)
      3) $CDEPGRAPH_CONFIG_PATH (if set)
      4) overrides dict passed in (command-line flags)
      5) Environment variables (CDEPGRAPH_*)
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        self._overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose(self._overrides)
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("output_path")
            'out.dot'
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """
        Get a flag, accepting true/false, yes/no, on/off and 1/0 spellings.

        Raises:
            ConfigError: If the value cannot be read as a flag
        """
        value = self.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return value != 0
        if isinstance(value, str):
            text = value.strip().lower()
            if text in TRUE_STRINGS:
                return True
            if text in FALSE_STRINGS:
                return False
        raise ConfigError(f"{key} must be true or false, got {value!r}")

    def get_output_path(self) -> str:
        """
        Get the output file path; an empty or null value means the default.

        Raises:
            ConfigError: If the value is not a string
        """
        value = self.get("output_path")
        if value is None or (isinstance(value, str) and not value.strip()):
            self._logger.warning(f"output_path is empty, writing to {DEFAULT_OUTPUT_PATH}")
            return DEFAULT_OUTPUT_PATH
        if not isinstance(value, str):
            raise ConfigError(f"output_path must be a file path, got {type(value).__name__}")
        return value

    def make_render_options(self) -> RenderOptions:
        """
        Build RenderOptions from the current configuration.

        Raises:
            ConfigError: If a module filter is neither a list nor a comma-separated string
        """
        graph_template = self.get("graph_template")
        subgraph_template = self.get("subgraph_template")
        return RenderOptions(
            include_modules=self._as_prefix_list("include_modules"),
            private_modules=self._as_prefix_list("private_modules"),
            graph_template_path=Path(graph_template) if graph_template else None,
            subgraph_template_path=Path(subgraph_template) if subgraph_template else None,
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), LOCAL_CONFIG_PATH)))

        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if overrides:
            self._deep_merge(cfg, overrides)

        self._apply_env_overrides(cfg)

        with contextlib.suppress(Exception):
            self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))

        return cfg

    def _default_config(self) -> dict[str, Any]:
        return {
            "output_path": DEFAULT_OUTPUT_PATH,
            "graph_template": None,  # None = packaged template
            "subgraph_template": None,
            "include_modules": [],  # Empty = render every module
            "private_modules": [],
            "recursive": False,
            "log_level": "warning",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge dict b into dict a (mutates a, returns it)."""
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """Load a YAML mapping; returns {} if the file is missing or invalid."""
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"Ignoring config file {path}: top level is not a mapping")
            return {}
        self._logger.debug(f"Loaded config file {path}")
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Apply CDEPGRAPH_* environment overrides for whitelisted keys.

        Supported formats:
          CDEPGRAPH_OUTPUT_PATH=build/deps.dot
          CDEPGRAPH_INCLUDE_MODULES=BMS,CONT,DIAG
          CDEPGRAPH_RECURSIVE=true
          CDEPGRAPH_LOG_LEVEL=info
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == CONFIG_PATH_ENV:
                continue

            key = k[len(ENV_PREFIX) :].lower()
            if key not in ALLOWED_ENV_KEYS:
                self._logger.debug(f"Ignoring environment override for unknown key: {key}")
                continue

            val: Any
            if key in LIST_KEYS:
                val = _split_prefixes(v)
            elif v.lower() in ("true", "false"):
                val = v.lower() == "true"
            else:
                val = v

            cfg[key] = val

    def _as_prefix_list(self, key: str) -> list[str]:
        value = self.get(key)
        if value is None:
            return []
        if isinstance(value, str):
            return _split_prefixes(value)
        if isinstance(value, list | tuple):
            return [str(v).strip() for v in value if str(v).strip()]
        raise ConfigError(f"{key} must be a list of module prefixes, got {type(value).__name__}")


def _split_prefixes(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]

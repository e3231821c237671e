"""Configuration management for semv."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError
from .parser import DEFAULT_PREFIX


logger = logging.getLogger(__name__)

GLOBAL_CONFIG_PATH = Path.home() / ".semv.yaml"
TOKEN_ENV_VAR = "GITHUB_TOKEN"


class Config:
    """Manages semv configuration with hierarchical lookup.

    Config hierarchy (higher priority first):
    1. Local repo config (<repo>/.semv.yaml)
    2. Global config (~/.semv.yaml)

    When reading, local values override global.
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        enable_hierarchy: bool = True,
        global_config_path: Optional[Path] = None,
    ):
        """Initialize config.

        Args:
            config_path: Specific config file to use. If None, uses global config.
            enable_hierarchy: If True, uses hierarchical lookup (local + global).
                             If False, only uses the specified config_path.
            global_config_path: Override for the global config location.
        """
        self.global_config_path = global_config_path or GLOBAL_CONFIG_PATH
        self.config_path = config_path or self.global_config_path
        self.enable_hierarchy = enable_hierarchy
        self._data: dict[str, Any] = {}
        self._global_data: dict[str, Any] = {}
        self.load()

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config from {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return data

    def load(self) -> None:
        """Load configuration from file(s)."""
        self._data = self._read(self.config_path) if self.config_path.exists() else {}

        if self.enable_hierarchy and self.config_path != self.global_config_path:
            if self.global_config_path.exists():
                try:
                    self._global_data = self._read(self.global_config_path)
                except ConfigError as e:
                    logger.warning(f"Ignoring global config: {e}")
                    self._global_data = {}
            else:
                self._global_data = {}
        else:
            self._global_data = {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value, local first, then global, then default."""
        if key in self._data:
            return self._data[key]
        if key in self._global_data:
            return self._global_data[key]
        return default

    @property
    def repository(self) -> Optional[str]:
        """Repository identifier on the host (owner/name)."""
        return self.get("repository")

    @property
    def prefix(self) -> str:
        value = self.get("prefix")
        return DEFAULT_PREFIX if value is None else str(value)

    @property
    def api_url(self) -> Optional[str]:
        return self.get("api_url")

    @property
    def github_token(self) -> Optional[str]:
        """Configured API token, or $GITHUB_TOKEN."""
        return self.get("github_token") or os.getenv(TOKEN_ENV_VAR)

    @property
    def pre_name(self) -> str:
        return str(self.get("pre_name") or "")

    @property
    def build_name(self) -> str:
        return str(self.get("build_name") or "")

    @classmethod
    def load_with_repo_context(cls, start_path: Optional[Path] = None) -> Config:
        """Load config with repo context if available.

        Uses <repo>/.semv.yaml with global fallback inside a git repository,
        the global config only outside one.
        """
        from .paths import get_repo_config_path

        repo_config_path = get_repo_config_path(start_path)
        if repo_config_path:
            return cls(config_path=repo_config_path, enable_hierarchy=True)
        return cls(config_path=GLOBAL_CONFIG_PATH, enable_hierarchy=False)


@dataclass(frozen=True)
class Settings:
    """Immutable run settings, resolved from command-line options over Config."""

    repository: Optional[str] = None
    prefix: str = DEFAULT_PREFIX
    api_url: Optional[str] = None
    token: Optional[str] = field(default=None, repr=False)
    pre: bool = False
    pre_name: str = ""
    build: bool = False
    build_name: str = ""
    include_pre_release: bool = False

    @property
    def wants_pre_release(self) -> bool:
        return self.pre

    @property
    def wants_build(self) -> bool:
        return self.build

    @classmethod
    def resolve(cls, config: Optional[Config] = None, **options: Any) -> Settings:
        """Merge options over config values; None means "not given".

        A name given as an option switches its annotation on; a name from
        config is only the default used once it is switched on.
        """
        given = {k: v for k, v in options.items() if v is not None}
        if given.get("pre_name"):
            given["pre"] = True
        if given.get("build_name"):
            given["build"] = True
        if config is not None:
            defaults = {
                "repository": config.repository,
                "prefix": config.prefix,
                "api_url": config.api_url,
                "token": config.github_token,
                "pre_name": config.pre_name,
                "build_name": config.build_name,
            }
            for key, value in defaults.items():
                given.setdefault(key, value)
        return cls(**{k: v for k, v in given.items() if v is not None})

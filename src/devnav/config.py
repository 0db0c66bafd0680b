"""Configuration management for DevNav.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType

from devnav.core.patterns import is_valid_shortcut, sanitize_token_key, sanitize_token_value
from devnav.core.suggestions import DEFAULT_SEARCH_URL, Disposition
from devnav.core.types import ShortcutMap

CONFIG_FILENAME = "devnav.toml"
DEFAULT_VERSION = "1.0.0"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class SettingsConfig:
    """Navigation settings."""

    trigger: str = ">"
    default_disposition: Disposition = Disposition.CURRENT_TAB
    show_descriptions: bool = True
    search_url: str = DEFAULT_SEARCH_URL


@dataclass
class LiveReloadConfig:
    """Config file watching."""

    enabled: bool = True


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    settings: SettingsConfig
    live_reload: LiveReloadConfig
    tokens: dict[str, str] = field(default_factory=dict)
    version: str = DEFAULT_VERSION
    config_path: Path | None = None

    @property
    def shortcuts(self) -> ShortcutMap:
        """Read-only snapshot of the configured shortcuts."""
        return MappingProxyType(dict(self.tokens))

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for devnav.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        """Create config with all defaults."""
        return cls(
            server=ServerConfig(),
            settings=SettingsConfig(),
            live_reload=LiveReloadConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        version = data.get("version", DEFAULT_VERSION)
        if not isinstance(version, str):
            raise ValueError("version must be a string")

        return cls(
            server=cls._parse_server(data.get("server")),
            settings=cls._parse_settings(data.get("settings")),
            live_reload=cls._parse_live_reload(data.get("live_reload")),
            tokens=cls._parse_tokens(data.get("tokens")),
            version=version,
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section."""
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_settings(cls, data: object) -> SettingsConfig:
        """Parse settings configuration section.

        Args:
            data: Raw settings section data

        Returns:
            SettingsConfig instance
        """
        if data is None:
            return SettingsConfig()

        if not isinstance(data, dict):
            raise ValueError("settings section must be a dictionary")

        trigger = data.get("trigger", ">")
        if not isinstance(trigger, str) or not trigger:
            raise ValueError("settings.trigger must be a non-empty string")

        disposition_raw = data.get("default_disposition", Disposition.CURRENT_TAB.value)
        try:
            disposition = Disposition(disposition_raw)
        except ValueError:
            choices = ", ".join(d.value for d in Disposition)
            raise ValueError(
                f"settings.default_disposition must be one of: {choices}",
            ) from None

        show_descriptions = data.get("show_descriptions", True)
        if not isinstance(show_descriptions, bool):
            raise ValueError("settings.show_descriptions must be a boolean")

        search_url = data.get("search_url", DEFAULT_SEARCH_URL)
        if not isinstance(search_url, str) or not search_url.startswith(("http://", "https://")):
            raise ValueError("settings.search_url must be an http(s) URL")

        return SettingsConfig(
            trigger=trigger,
            default_disposition=disposition,
            show_descriptions=show_descriptions,
            search_url=search_url,
        )

    @classmethod
    def _parse_live_reload(cls, data: object) -> LiveReloadConfig:
        """Parse live_reload configuration section."""
        if data is None:
            return LiveReloadConfig()

        if not isinstance(data, dict):
            raise ValueError("live_reload section must be a dictionary")

        enabled = data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ValueError("live_reload.enabled must be a boolean")

        return LiveReloadConfig(enabled=enabled)

    @classmethod
    def _parse_tokens(cls, data: object) -> dict[str, str]:
        """Parse tokens configuration section.

        Args:
            data: Raw tokens section data

        Returns:
            Mapping of shortcut key to trimmed value, in file order
        """
        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ValueError("tokens section must be a dictionary")

        tokens: dict[str, str] = {}
        for key, value in data.items():
            if not is_valid_shortcut(key):
                suggestion = sanitize_token_key(key)
                hint = f", try {suggestion!r}" if suggestion else ""
                raise ValueError(
                    f"tokens.{key} has an invalid key (use letters, digits and dashes{hint})",
                )
            if not isinstance(value, str):
                raise ValueError(f"tokens.{key} must be a string")
            cleaned = sanitize_token_value(value)
            if not cleaned:
                raise ValueError(f"tokens.{key} must not be empty")
            tokens[key] = cleaned

        return tokens

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        live_reload_enabled: bool | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            live_reload_enabled: Override live_reload.enabled

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        live_reload = self.live_reload
        if live_reload_enabled is not None:
            live_reload = replace(self.live_reload, enabled=live_reload_enabled)

        return replace(self, server=server, live_reload=live_reload)

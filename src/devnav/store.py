"""Holder for the current configuration snapshot.

Request handlers read the snapshot once per request; reloads swap in a new
Config object instead of mutating the old one.
"""

import logging

from devnav.config import Config

logger = logging.getLogger(__name__)


class ConfigStore:
    """Current configuration, replaceable on reload."""

    def __init__(self, config: Config) -> None:
        self._config = config

    @property
    def config(self) -> Config:
        """Current configuration snapshot."""
        return self._config

    def reload(self) -> bool:
        """Reload configuration from its source file.

        The previous snapshot is kept when the file is missing or invalid.

        Returns:
            True if a new snapshot was installed
        """
        path = self._config.config_path
        if path is None:
            return False

        try:
            fresh = Config.load(path)
        except (FileNotFoundError, ValueError) as e:
            logger.warning(f"Keeping previous configuration, reload failed: {e}")
            return False

        # CLI overrides survive reloads
        self._config = fresh.with_overrides(
            host=self._config.server.host,
            port=self._config.server.port,
            live_reload_enabled=self._config.live_reload.enabled,
        )
        logger.info(f"Reloaded {len(fresh.tokens)} shortcuts from {path}")
        return True

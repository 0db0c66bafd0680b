"""Config file watcher.

Monitors the configuration file for changes and swaps a fresh shortcut
snapshot into the store, so a running server picks up edited shortcuts
without a restart.
"""

import asyncio
import logging
from pathlib import Path

from watchfiles import Change, awatch

from devnav.store import ConfigStore

logger = logging.getLogger(__name__)


class ConfigWatcher:
    """Watches the config file and reloads the store on change."""

    def __init__(self, store: ConfigStore, config_path: Path) -> None:
        """Initialize the watcher.

        Args:
            store: Store to reload when the file changes
            config_path: Configuration file to watch
        """
        self._store = store
        self._config_path = config_path.resolve()
        self._watch_task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        """Whether the watch task is active."""
        return self._watch_task is not None

    async def start(self) -> None:
        """Start the file watcher."""
        if self._watch_task is not None:
            return
        self._watch_task = asyncio.create_task(self._watch_config())
        logger.info(f"Watching {self._config_path} for changes")

    async def stop(self) -> None:
        """Stop the file watcher."""
        if self._watch_task is not None:
            self._watch_task.cancel()
            try:
                await self._watch_task
            except asyncio.CancelledError:
                pass
            self._watch_task = None

    async def _watch_config(self) -> None:
        """Watch the config directory and reload on relevant changes."""
        # Editors replace files atomically; watch the directory instead
        async for changes in awatch(self._config_path.parent):
            self.handle_changes(changes)

    def handle_changes(self, changes: set[tuple[Change, str]]) -> bool:
        """Reload the store if any change touches the config file.

        Args:
            changes: Change set as reported by watchfiles

        Returns:
            True if the store was reloaded
        """
        for change_type, path_str in changes:
            if change_type == Change.deleted:
                continue
            if Path(path_str).resolve() == self._config_path:
                return self._store.reload()
        return False

"""Configuration file watching."""

from devnav.live.reload import ConfigWatcher

__all__ = ["ConfigWatcher"]

"""Application keys for type-safe app configuration access."""

from aiohttp import web

from devnav.live.reload import ConfigWatcher
from devnav.store import ConfigStore

store_key = web.AppKey("store", ConfigStore)
watcher_key = web.AppKey("watcher", ConfigWatcher)

"""aiohttp server for DevNav.

Application factory and route registration for standalone server mode.
"""

import logging

from aiohttp import web

from devnav.api.resolve import create_resolve_routes
from devnav.api.shortcuts import create_shortcuts_routes
from devnav.app_keys import store_key, watcher_key
from devnav.config import Config
from devnav.live.reload import ConfigWatcher
from devnav.store import ConfigStore

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    store = ConfigStore(config)
    app[store_key] = store

    app.router.add_routes(create_resolve_routes())
    app.router.add_routes(create_shortcuts_routes())

    if config.live_reload.enabled and config.config_path is not None:
        app[watcher_key] = ConfigWatcher(store, config.config_path)
        app.on_startup.append(_start_watcher)
        app.on_cleanup.append(_stop_watcher)

    return app


async def _start_watcher(app: web.Application) -> None:
    """Start config watching on application startup."""
    await app[watcher_key].start()


async def _stop_watcher(app: web.Application) -> None:
    """Stop config watching on application cleanup."""
    await app[watcher_key].stop()


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving {len(config.tokens)} shortcuts")
    web.run_app(app, host=config.server.host, port=config.server.port)

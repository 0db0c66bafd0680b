"""Shortcuts API endpoint."""

from aiohttp import web

from devnav.app_keys import store_key


def create_shortcuts_routes() -> list[web.RouteDef]:
    return [web.get("/api/shortcuts", get_shortcuts)]


async def get_shortcuts(request: web.Request) -> web.Response:
    config = request.app[store_key].config
    return web.json_response(
        {"version": config.version, "shortcuts": dict(config.shortcuts)},
    )

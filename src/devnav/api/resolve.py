"""Resolution API endpoints.

Exposes parsing, URL construction, suggestions and redirects over HTTP.
Each request reads one configuration snapshot from the store.
"""

import json

from aiohttp import web

from devnav.app_keys import store_key
from devnav.config import Config
from devnav.core.constructor import construct
from devnav.core.parser import parse
from devnav.core.patterns import strip_trigger
from devnav.core.suggestions import NavigationTarget, resolve_target, suggest


def create_resolve_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/parse", get_parse),
        web.get("/api/construct", get_construct),
        web.get("/api/suggest", get_suggest),
        web.get("/api/target", get_target),
        web.get("/go", go),
    ]


async def get_parse(request: web.Request) -> web.Response:
    config = request.app[store_key].config
    text = _require_query(request, config)
    return web.json_response(parse(text, config.shortcuts).to_dict())


async def get_construct(request: web.Request) -> web.Response:
    config = request.app[store_key].config
    text = _require_query(request, config)
    constructed = construct(parse(text, config.shortcuts), config.shortcuts)
    return web.json_response(constructed.to_dict())


async def get_suggest(request: web.Request) -> web.Response:
    config = request.app[store_key].config
    text = _require_query(request, config)
    suggestions = suggest(text, config.shortcuts)
    items = [s.to_dict() for s in suggestions]
    if not config.settings.show_descriptions:
        for item in items:
            item["description"] = item["content"]
    return web.json_response({"suggestions": items})


async def get_target(request: web.Request) -> web.Response:
    """Return where entered text navigates, including the tab disposition."""
    config = request.app[store_key].config
    target = _resolve(_require_query(request, config), config)
    return web.json_response(target.to_dict())


async def go(request: web.Request) -> web.Response:
    config = request.app[store_key].config
    target = _resolve(_require_query(request, config), config)
    raise web.HTTPFound(target.url)


def _resolve(text: str, config: Config) -> NavigationTarget:
    return resolve_target(
        text,
        config.shortcuts,
        disposition=config.settings.default_disposition,
        search_url=config.settings.search_url,
    )


def _require_query(request: web.Request, config: Config) -> str:
    """Read the q parameter with the configured trigger removed."""
    text = request.query.get("q")
    if text is None:
        raise web.HTTPBadRequest(
            text=json.dumps({"error": "Missing query parameter", "param": "q"}),
            content_type="application/json",
        )
    return strip_trigger(text, config.settings.trigger)

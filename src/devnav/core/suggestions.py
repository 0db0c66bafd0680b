"""Suggestions and navigation targets built on top of parse/construct.

Suggestions feed an address-bar style completion list; navigation targets
decide where entered text should go, falling back to a web search when no
URL can be constructed.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import quote_plus

from devnav.core.constructor import construct
from devnav.core.parser import is_valid_format, parse
from devnav.core.patterns import has_http_protocol
from devnav.core.types import ShortcutMap

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_URL = "https://www.google.com/search?q="
DEFAULT_SUGGESTION_LIMIT = 3


class Disposition(StrEnum):
    """Where a navigation target should open."""

    CURRENT_TAB = "currentTab"
    NEW_FOREGROUND_TAB = "newForegroundTab"
    NEW_BACKGROUND_TAB = "newBackgroundTab"


@dataclass(frozen=True)
class Suggestion:
    """A single completion entry."""

    content: str
    description: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"content": self.content, "description": self.description}


@dataclass(frozen=True)
class NavigationTarget:
    """Resolved destination for entered text."""

    url: str
    disposition: Disposition
    is_fallback: bool = False

    def to_dict(self) -> dict[str, str | bool]:
        """Convert to dictionary for JSON serialization."""
        return {
            "url": self.url,
            "disposition": self.disposition.value,
            "isFallback": self.is_fallback,
        }


def suggest(
    text: str,
    shortcuts: ShortcutMap,
    *,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[Suggestion]:
    """Build completion suggestions for partially typed input.

    The first suggestion is the URL for the input as typed. When the input
    already contains a base token, up to ``limit`` completions follow that
    append one configured path shortcut each.

    Args:
        text: Raw user input
        shortcuts: Snapshot of configured shortcuts
        limit: Maximum number of completions after the main suggestion

    Returns:
        Suggestions in display order; empty for unusable input
    """
    if not is_valid_format(text):
        return []

    parsed = parse(text, shortcuts)
    constructed = construct(parsed, shortcuts)
    if not constructed.is_valid:
        return []

    suggestions = [Suggestion(content=constructed.content, description=constructed.url)]

    has_base = any(has_http_protocol(token.value) for token in parsed.tokens)
    if has_base:
        path_keys = [key for key, value in shortcuts.items() if not has_http_protocol(value)]
        for key in path_keys[:limit]:
            candidate_text = f"{text.strip()} {key}"
            candidate = construct(parse(candidate_text, shortcuts), shortcuts)
            if candidate.is_valid:
                suggestions.append(
                    Suggestion(content=candidate.content, description=candidate.url),
                )

    return _deduplicate(suggestions)


def resolve_target(
    text: str,
    shortcuts: ShortcutMap,
    *,
    disposition: Disposition = Disposition.CURRENT_TAB,
    search_url: str = DEFAULT_SEARCH_URL,
) -> NavigationTarget:
    """Decide where entered text should navigate.

    Text that already looks like a URL is used verbatim. Otherwise the text
    is parsed and constructed; if that fails, a web search for the text is
    returned instead of an error.

    Args:
        text: Raw user input
        shortcuts: Snapshot of configured shortcuts
        disposition: Where the target should open
        search_url: Search URL prefix the encoded text is appended to

    Returns:
        NavigationTarget for the input
    """
    entered = text.strip()
    if entered.startswith("http"):
        return NavigationTarget(url=entered, disposition=disposition)

    constructed = construct(parse(text, shortcuts), shortcuts)
    if constructed.is_valid:
        return NavigationTarget(url=constructed.url, disposition=disposition)

    logger.info(f"Falling back to search for {entered!r}: {constructed.description}")
    return NavigationTarget(
        url=f"{search_url}{quote_plus(entered)}",
        disposition=disposition,
        is_fallback=True,
    )


def _deduplicate(suggestions: list[Suggestion]) -> list[Suggestion]:
    seen: set[str] = set()
    result: list[Suggestion] = []
    for suggestion in suggestions:
        content = suggestion.content.strip()
        if not content or content in seen:
            continue
        seen.add(content)
        result.append(suggestion)
    return result

"""Shared validation and formatting helpers.

Patterns are shared between the parser, the constructor and the
configuration loader, so they live here as named constants.
"""

import re
from urllib.parse import urlsplit

LEGACY_PREFIX = "@"

HTTP_PROTOCOL = re.compile(r"^https?://")
VALID_URL = re.compile(r"^https?://[^\s$.?#].[^\s]*$", re.IGNORECASE)
# Shortcut keys: alphanumeric plus dashes, no spaces
TOKEN_KEY_PATTERN = re.compile(r"^[a-zA-Z0-9-]+$")

_WHITESPACE_RUN = re.compile(r"\s+")
_INVALID_KEY_CHARS = re.compile(r"[^a-zA-Z0-9-]")


def normalize_input(text: str) -> str:
    """Normalize raw user input.

    Trims outer whitespace, collapses internal whitespace runs to a single
    space and removes one leading legacy "@" marker.

    Args:
        text: Raw user input

    Returns:
        Normalized input, possibly empty
    """
    normalized = _WHITESPACE_RUN.sub(" ", text.strip())
    normalized = normalized.removeprefix(LEGACY_PREFIX)
    return normalized.strip()


def split_segments(normalized: str) -> list[str]:
    """Split normalized input on spaces, dropping empty segments."""
    return [segment for segment in normalized.split(" ") if segment]


def has_http_protocol(value: str) -> bool:
    """Check whether a value starts with an http:// or https:// scheme."""
    return HTTP_PROTOCOL.match(value) is not None


def is_valid_url(url: str) -> bool:
    """Check that a string is a well-formed absolute http(s) URL.

    The URL must survive generic URL parsing (including port) and match
    VALID_URL, which rejects embedded whitespace and an empty host.
    """
    try:
        parts = urlsplit(url)
        parts.port  # noqa: B018 - raises ValueError for an out-of-range port
    except ValueError:
        return False
    if not parts.scheme or not parts.netloc:
        return False
    return VALID_URL.match(url) is not None


def is_valid_shortcut(key: str) -> bool:
    """Check that a shortcut key uses only letters, digits and dashes."""
    return TOKEN_KEY_PATTERN.match(key) is not None


def sanitize_token_key(text: str) -> str:
    """Turn free-form text into a shortcut key.

    Strips surrounding whitespace, removes characters outside the key
    charset and lower-cases the result.
    """
    return _INVALID_KEY_CHARS.sub("", text.strip()).lower()


def sanitize_token_value(text: str) -> str:
    """Trim a shortcut value, preserving its content."""
    return text.strip()


def join_url_parts(*parts: str) -> str:
    """Join URL parts with single slashes.

    Leading and trailing slashes are stripped from every part, and parts
    that end up empty are dropped, so the result never contains "//".
    """
    stripped = (part.strip("/") for part in parts if part)
    return "/".join(part for part in stripped if part)


def strip_trigger(text: str, trigger: str) -> str:
    """Remove a leading trigger keyword (e.g. "> dev api").

    A trigger that ends in a key character only counts as a whole word, so
    with trigger "go" the input "goapp api" is left alone. Punctuation
    triggers such as ">" may be glued to the first key (">dev").

    Args:
        text: Raw user input
        trigger: Configured trigger keyword

    Returns:
        Input after the trigger with leading whitespace removed, or the
        input unchanged when it does not start with the trigger
    """
    stripped = text.strip()
    if not trigger or not stripped.startswith(trigger):
        return text

    rest = stripped[len(trigger) :]
    if rest and not rest[0].isspace() and is_valid_shortcut(trigger[-1]):
        return text
    return rest.lstrip()

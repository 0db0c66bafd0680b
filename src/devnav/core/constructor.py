"""URL construction from parsed tokens.

Anchors the URL on the first token whose value is an absolute http(s) URL
and appends every other token value as a path segment.
"""

import logging

from devnav.core.models import ConstructedUrl, ParsedInput
from devnav.core.patterns import has_http_protocol, is_valid_url, join_url_parts
from devnav.core.types import ShortcutMap

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Invalid input"
MISSING_BASE_DESCRIPTION = "Base token not found"
INVALID_URL_DESCRIPTION = "Invalid URL constructed"
DESCRIPTION_PREFIX = "Navigate to: "
DESCRIPTION_SEPARATOR = " → "


def construct(parsed: ParsedInput, shortcuts: ShortcutMap) -> ConstructedUrl:
    """Construct the final URL from parsed input.

    Args:
        parsed: Result of parse()
        shortcuts: Snapshot of configured shortcuts (tokens already carry
            their resolved values, so it is not consulted again)

    Returns:
        ConstructedUrl; invalid results carry a human-readable description
    """
    if not parsed.is_valid or not parsed.tokens:
        description = "; ".join(error.message for error in parsed.errors)
        return ConstructedUrl(
            url="",
            description=description or FALLBACK_ERROR_MESSAGE,
            is_valid=False,
            content=parsed.original_input,
        )

    base_index = _find_base_index(parsed)
    if base_index is None:
        logger.debug(f"No base token in {parsed.original_input!r}")
        return ConstructedUrl(
            url="",
            description=MISSING_BASE_DESCRIPTION,
            is_valid=False,
            content=parsed.original_input,
        )

    parts = [parsed.tokens[base_index].value]
    parts.extend(
        token.value for index, token in enumerate(parsed.tokens) if index != base_index
    )
    final_url = build_final_url(parts)

    if not is_valid_url(final_url):
        logger.debug(f"Constructed invalid URL {final_url!r}")
        return ConstructedUrl(
            url=final_url,
            description=INVALID_URL_DESCRIPTION,
            is_valid=False,
            content=parsed.original_input,
        )

    keys = DESCRIPTION_SEPARATOR.join(token.key for token in parsed.tokens)
    return ConstructedUrl(
        url=final_url,
        description=f"{DESCRIPTION_PREFIX}{keys}",
        is_valid=True,
        content=final_url,
    )


def build_final_url(parts: list[str]) -> str:
    """Join URL parts into one URL.

    The first part keeps its scheme and host and only loses trailing
    slashes; the rest are joined as path segments.

    Args:
        parts: Base URL followed by path segments

    Returns:
        Joined URL, or an empty string for no parts
    """
    if not parts:
        return ""

    base, *rest = parts
    clean_base = base.rstrip("/")
    path = join_url_parts(*rest)
    return f"{clean_base}/{path}" if path else clean_base


def _find_base_index(parsed: ParsedInput) -> int | None:
    """Return the index of the first token whose value is an http(s) URL."""
    for index, token in enumerate(parsed.tokens):
        if has_http_protocol(token.value):
            return index
    return None

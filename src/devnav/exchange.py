"""Import/export of shortcut configuration.

The export envelope is a JSON object::

    {"devNavigator": {"version": "1.0.0",
                      "exported": "2026-01-01T00:00:00+00:00",
                      "tokens": {"dev": {"value": "https://app.dev.com"}}}}

Only the flat tokens mapping is consumed; the envelope carries metadata.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from devnav.config import Config
from devnav.core.patterns import is_valid_shortcut, sanitize_token_value
from devnav.core.types import ShortcutMap

logger = logging.getLogger(__name__)

ENVELOPE_KEY = "devNavigator"
INVALID_FORMAT_MESSAGE = "Invalid configuration format"


def export_config(config: Config, *, exported: datetime | None = None) -> dict[str, Any]:
    """Build the export envelope for a configuration.

    Args:
        config: Configuration to export
        exported: Export timestamp (default: now, UTC)

    Returns:
        JSON-serializable export envelope
    """
    timestamp = (exported or datetime.now(UTC)).isoformat()
    return {
        ENVELOPE_KEY: {
            "version": config.version,
            "exported": timestamp,
            "tokens": {key: {"value": value} for key, value in config.tokens.items()},
        },
    }


def is_valid_export(obj: object) -> bool:
    """Check the envelope shape without validating individual tokens."""
    if not isinstance(obj, dict):
        return False
    body = obj.get(ENVELOPE_KEY)
    if not isinstance(body, dict):
        return False
    return isinstance(body.get("version"), str) and isinstance(body.get("tokens"), dict)


def import_shortcuts(obj: object) -> dict[str, str]:
    """Extract shortcuts from an export envelope.

    Args:
        obj: Decoded export JSON

    Returns:
        Mapping of shortcut key to value, in envelope order

    Raises:
        ValueError: If the envelope or any token is malformed
    """
    if not is_valid_export(obj):
        raise ValueError(INVALID_FORMAT_MESSAGE)

    tokens = obj[ENVELOPE_KEY]["tokens"]  # type: ignore[index]
    shortcuts: dict[str, str] = {}
    for key, token in tokens.items():
        if not is_valid_shortcut(key):
            raise ValueError(f"{INVALID_FORMAT_MESSAGE}: invalid shortcut key {key!r}")
        value = token.get("value") if isinstance(token, dict) else None
        if not isinstance(value, str) or not sanitize_token_value(value):
            raise ValueError(f"{INVALID_FORMAT_MESSAGE}: shortcut {key!r} has no value")
        shortcuts[key] = sanitize_token_value(value)

    logger.info(f"Imported {len(shortcuts)} shortcuts")
    return shortcuts


def load_export(path: Path) -> dict[str, str]:
    """Read an export file from disk and extract its shortcuts.

    Raises:
        ValueError: If the file is not valid JSON or not a valid export
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{INVALID_FORMAT_MESSAGE}: {e}") from e
    return import_shortcuts(data)


def render_tokens_toml(shortcuts: ShortcutMap) -> str:
    """Render shortcuts as a [tokens] table for devnav.toml."""
    lines = ["[tokens]"]
    for key, value in shortcuts.items():
        lines.append(f"{key} = {json.dumps(value)}")
    return "\n".join(lines) + "\n"

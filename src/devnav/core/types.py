"""Core type definitions."""

from collections.abc import Mapping

# Read-only snapshot of configured shortcuts: key -> literal value.
# Supplied fresh on every call; the core never mutates it.
ShortcutMap = Mapping[str, str]

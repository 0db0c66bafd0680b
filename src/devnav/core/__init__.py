"""Shortcut parsing and URL construction core."""

from devnav.core.constructor import build_final_url, construct
from devnav.core.models import (
    ConstructedUrl,
    ErrorCode,
    ParsedInput,
    ResolvedToken,
    ValidationError,
)
from devnav.core.parser import is_valid_format, parse

__all__ = [
    "ConstructedUrl",
    "ErrorCode",
    "ParsedInput",
    "ResolvedToken",
    "ValidationError",
    "build_final_url",
    "construct",
    "is_valid_format",
    "parse",
]

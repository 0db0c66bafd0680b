"""DevNav - shortcut-driven URL construction."""

from devnav.core import (
    ConstructedUrl,
    ErrorCode,
    ParsedInput,
    ResolvedToken,
    ValidationError,
    construct,
    is_valid_format,
    parse,
)

__all__ = [
    "ConstructedUrl",
    "ErrorCode",
    "ParsedInput",
    "ResolvedToken",
    "ValidationError",
    "construct",
    "is_valid_format",
    "parse",
]

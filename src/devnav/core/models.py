"""Result models for input parsing and URL construction.

All models are immutable value objects created fresh on every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypedDict


class ErrorCode(StrEnum):
    """Validation error codes reported by the parser."""

    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_FORMAT = "INVALID_FORMAT"
    MISSING_BASE = "MISSING_BASE"


class ResolvedTokenDict(TypedDict):
    """Dictionary representation of a resolved token."""

    key: str
    value: str
    isResolved: bool


class ValidationErrorDict(TypedDict):
    """Dictionary representation of a validation error."""

    field: str
    message: str
    code: str


class ParsedInputDict(TypedDict):
    """Dictionary representation of parsed input."""

    tokens: list[ResolvedTokenDict]
    isValid: bool
    errors: list[ValidationErrorDict]
    originalInput: str


class ConstructedUrlDict(TypedDict):
    """Dictionary representation of a constructed URL."""

    url: str
    description: str
    isValid: bool
    content: str


@dataclass(frozen=True)
class ResolvedToken:
    """One input segment and the value it resolved to.

    Unresolved (dynamic) segments carry their own key as value.
    """

    key: str
    value: str
    is_resolved: bool

    def to_dict(self) -> ResolvedTokenDict:
        """Convert to dictionary for JSON serialization."""
        return {"key": self.key, "value": self.value, "isResolved": self.is_resolved}


@dataclass(frozen=True)
class ValidationError:
    """A non-fatal problem found while parsing input."""

    field: str
    message: str
    code: ErrorCode

    def to_dict(self) -> ValidationErrorDict:
        """Convert to dictionary for JSON serialization."""
        return {"field": self.field, "message": self.message, "code": str(self.code)}


@dataclass(frozen=True)
class ParsedInput:
    """Ordered tokens for one input plus any validation errors."""

    tokens: tuple[ResolvedToken, ...]
    is_valid: bool
    errors: tuple[ValidationError, ...] = field(default_factory=tuple)
    original_input: str = ""

    def to_dict(self) -> ParsedInputDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "tokens": [token.to_dict() for token in self.tokens],
            "isValid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
            "originalInput": self.original_input,
        }


@dataclass(frozen=True)
class ConstructedUrl:
    """Final URL built from parsed input."""

    url: str
    description: str
    is_valid: bool
    content: str

    def to_dict(self) -> ConstructedUrlDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "url": self.url,
            "description": self.description,
            "isValid": self.is_valid,
            "content": self.content,
        }

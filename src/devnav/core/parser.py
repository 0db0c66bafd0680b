"""Input tokenizer and shortcut resolver.

Turns input like "dev api" or "staging-server session123 admin" into an
ordered list of tokens, substituting configured shortcut values and passing
unknown segments through as dynamic path pieces.
"""

import logging
from collections.abc import Mapping

from devnav.core.models import ErrorCode, ParsedInput, ResolvedToken, ValidationError
from devnav.core.patterns import (
    has_http_protocol,
    is_valid_shortcut,
    normalize_input,
    split_segments,
)
from devnav.core.types import ShortcutMap

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Input cannot be empty"
INVALID_FORMAT_MESSAGE = "Invalid input format"
MISSING_BASE_MESSAGE = "Base token not found: no shortcut resolves to an http(s) URL"


def parse(text: str, shortcuts: ShortcutMap) -> ParsedInput:
    """Parse user input into resolved tokens.

    Each segment is looked up in the shortcut map. Matches take the
    configured value; anything else becomes a dynamic segment whose value is
    the segment itself, so free-form identifiers can sit between shortcuts.
    Input is only valid when at least one token resolves to an http(s) URL.

    Args:
        text: Raw user input
        shortcuts: Snapshot of configured shortcuts

    Returns:
        ParsedInput with tokens in input order and any validation errors

    Raises:
        TypeError: If text is not a string or shortcuts is not a mapping
    """
    _check_arguments(text, shortcuts)
    original_input = text.strip()

    normalized = normalize_input(text)
    if not normalized:
        return _failure(original_input, "input", EMPTY_INPUT_MESSAGE, ErrorCode.EMPTY_INPUT)

    segments = split_segments(normalized)
    if not segments:
        return _failure(original_input, "input", INVALID_FORMAT_MESSAGE, ErrorCode.INVALID_FORMAT)

    tokens = tuple(_resolve_segment(segment, shortcuts) for segment in segments)

    errors: list[ValidationError] = []
    if not any(token.is_resolved and has_http_protocol(token.value) for token in tokens):
        errors.append(
            ValidationError(
                field="tokens",
                message=MISSING_BASE_MESSAGE,
                code=ErrorCode.MISSING_BASE,
            ),
        )

    logger.debug(
        f"Parsed {original_input!r} into {len(tokens)} tokens "
        f"({sum(token.is_resolved for token in tokens)} resolved, {len(errors)} errors)",
    )
    return ParsedInput(
        tokens=tokens,
        is_valid=not errors,
        errors=tuple(errors),
        original_input=original_input,
    )


def is_valid_format(text: str) -> bool:
    """Cheap syntactic check for input, suitable for every keystroke.

    No shortcut lookup happens here. Input passes when it has at least one
    segment and every segment is a well-formed shortcut key.

    Args:
        text: Raw user input

    Returns:
        True if the input could be a shortcut sequence
    """
    if not isinstance(text, str):
        raise TypeError(f"input must be a string, got {type(text).__name__}")
    segments = split_segments(normalize_input(text))
    if not segments:
        return False
    return all(is_valid_shortcut(segment) for segment in segments)


def _resolve_segment(segment: str, shortcuts: ShortcutMap) -> ResolvedToken:
    """Resolve one segment against the shortcut map."""
    value = shortcuts.get(segment)
    if value is None:
        return ResolvedToken(key=segment, value=segment, is_resolved=False)
    return ResolvedToken(key=segment, value=value, is_resolved=True)


def _failure(original_input: str, field: str, message: str, code: ErrorCode) -> ParsedInput:
    return ParsedInput(
        tokens=(),
        is_valid=False,
        errors=(ValidationError(field=field, message=message, code=code),),
        original_input=original_input,
    )


def _check_arguments(text: object, shortcuts: object) -> None:
    if not isinstance(text, str):
        raise TypeError(f"input must be a string, got {type(text).__name__}")
    if not isinstance(shortcuts, Mapping):
        raise TypeError(f"shortcuts must be a mapping, got {type(shortcuts).__name__}")

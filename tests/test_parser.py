"""Tests for input parsing and shortcut resolution."""

import pytest
from devnav.core.models import ErrorCode, ResolvedToken
from devnav.core.parser import is_valid_format, parse
from devnav.core.patterns import normalize_input
from devnav.core.types import ShortcutMap


class TestParse:
    """Tests for parse()."""

    def test__base_and_path__resolves_both(self, shortcuts: ShortcutMap) -> None:
        """Resolve a base shortcut followed by a path shortcut."""
        result = parse("dev api", shortcuts)

        assert result.is_valid
        assert result.errors == ()
        assert result.tokens == (
            ResolvedToken(key="dev", value="https://app.dev.com", is_resolved=True),
            ResolvedToken(key="api", value="api/v1", is_resolved=True),
        )

    def test__dynamic_segment__passes_through(self, shortcuts: ShortcutMap) -> None:
        """Unknown segments keep their key as value."""
        result = parse("dev session123 api", shortcuts)

        assert result.is_valid
        assert result.tokens[1] == ResolvedToken(
            key="session123",
            value="session123",
            is_resolved=False,
        )

    def test__multiple_dynamic_segments__keep_order(self, shortcuts: ShortcutMap) -> None:
        """Token order mirrors segment order."""
        result = parse("dev segment1 segment2 admin", shortcuts)

        assert [token.key for token in result.tokens] == [
            "dev",
            "segment1",
            "segment2",
            "admin",
        ]
        assert [token.is_resolved for token in result.tokens] == [True, False, False, True]

    def test__base_only__is_valid(self, shortcuts: ShortcutMap) -> None:
        """A single base shortcut is valid input."""
        result = parse("staging", shortcuts)

        assert result.is_valid
        assert result.tokens == (
            ResolvedToken(key="staging", value="https://staging.example.com", is_resolved=True),
        )

    def test__base_not_first__is_valid(self, shortcuts: ShortcutMap) -> None:
        """The base shortcut may appear anywhere in the input."""
        result = parse("api dev", shortcuts)

        assert result.is_valid
        assert [token.key for token in result.tokens] == ["api", "dev"]

    def test__dashed_key__resolves(self, shortcuts: ShortcutMap) -> None:
        """Keys containing dashes resolve as a whole."""
        result = parse("staging-server api", shortcuts)

        assert result.tokens[0].value == "https://staging-server.com"
        assert result.tokens[0].is_resolved

    @pytest.mark.parametrize("text", ["unknown", "unknown api", "unknown123"])
    def test__no_base__reports_missing_base(self, shortcuts: ShortcutMap, text: str) -> None:
        """Input without an http(s) shortcut is invalid at parse time."""
        result = parse(text, shortcuts)

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.MISSING_BASE
        assert result.errors[0].field == "tokens"
        assert "Base token not found" in result.errors[0].message
        assert len(result.tokens) == len(text.split())

    def test__unresolved_url_like_segment__is_not_a_base(self) -> None:
        """Only resolved tokens count as a base during parsing."""
        result = parse("https://example.com", {})

        assert not result.is_valid
        assert result.errors[0].code == ErrorCode.MISSING_BASE

    @pytest.mark.parametrize("text", ["", "   ", "\t\n", "@", "  @  "])
    def test__blank_input__reports_empty_input(self, shortcuts: ShortcutMap, text: str) -> None:
        """Blank input fails with a single EMPTY_INPUT error."""
        result = parse(text, shortcuts)

        assert not result.is_valid
        assert result.tokens == ()
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.EMPTY_INPUT
        assert result.errors[0].field == "input"

    def test__legacy_prefix__is_stripped(self, shortcuts: ShortcutMap) -> None:
        """A leading @ produces the same tokens as plain input."""
        assert parse("@dev api", shortcuts).tokens == parse("dev api", shortcuts).tokens

    def test__extra_whitespace__is_collapsed(self, shortcuts: ShortcutMap) -> None:
        """Surrounding and repeated whitespace is ignored."""
        result = parse("  dev \t  api  ", shortcuts)

        assert result.is_valid
        assert [token.key for token in result.tokens] == ["dev", "api"]

    def test__original_input__is_trimmed(self, shortcuts: ShortcutMap) -> None:
        """original_input keeps the text minus surrounding whitespace."""
        result = parse("  @dev   api ", shortcuts)

        assert result.original_input == "@dev   api"

    def test__keys_are_case_sensitive(self, shortcuts: ShortcutMap) -> None:
        """Lookup does not fold case."""
        result = parse("DEV", shortcuts)

        assert not result.tokens[0].is_resolved
        assert not result.is_valid

    def test__normalized_input__parses_identically(self, shortcuts: ShortcutMap) -> None:
        """Parsing already-normalized input yields the same result."""
        text = "dev session123 api"

        assert parse(normalize_input(text), shortcuts) == parse(text, shortcuts)

    def test__mapping_changed_after_parse__tokens_unchanged(self) -> None:
        """Produced tokens are a snapshot of the mapping at parse time."""
        mapping = {"dev": "https://app.dev.com"}
        result = parse("dev", mapping)

        mapping["dev"] = "https://other.example.com"

        assert result.tokens[0].value == "https://app.dev.com"

    def test__mapping__is_not_mutated(self, shortcuts: ShortcutMap) -> None:
        """Parsing never writes to the mapping."""
        before = dict(shortcuts)

        parse("dev unknown api", shortcuts)

        assert shortcuts == before

    def test__non_string_input__raises_type_error(self, shortcuts: ShortcutMap) -> None:
        """Passing None is a programmer error."""
        with pytest.raises(TypeError, match="input must be a string"):
            parse(None, shortcuts)  # type: ignore[arg-type]

    def test__non_mapping_shortcuts__raises_type_error(self) -> None:
        """Passing a list instead of a mapping is a programmer error."""
        with pytest.raises(TypeError, match="shortcuts must be a mapping"):
            parse("dev", ["dev"])  # type: ignore[arg-type]

    def test__to_dict__uses_camel_case(self, shortcuts: ShortcutMap) -> None:
        """Serialized form matches the JSON API shape."""
        data = parse("unknown", shortcuts).to_dict()

        assert data["isValid"] is False
        assert data["originalInput"] == "unknown"
        assert data["tokens"] == [{"key": "unknown", "value": "unknown", "isResolved": False}]
        assert data["errors"][0]["code"] == "MISSING_BASE"


class TestIsValidFormat:
    """Tests for is_valid_format()."""

    @pytest.mark.parametrize(
        "text",
        [
            "dev api",
            "dev session api",
            "staging",
            "@dev api",
            "@staging",
            "staging-server api",
            "  dev   api  ",
        ],
    )
    def test__well_formed_input__accepted(self, text: str) -> None:
        """Letters, digits and dashes separated by whitespace pass."""
        assert is_valid_format(text)

    @pytest.mark.parametrize("text", ["@", "", "  ", "dev api!", "dev api@", "dev a/b", "dév"])
    def test__malformed_input__rejected(self, text: str) -> None:
        """Empty input and punctuation fail."""
        assert not is_valid_format(text)

    def test__unknown_keys__still_accepted(self) -> None:
        """No lookup happens during the format check."""
        assert is_valid_format("nothing-configured here")

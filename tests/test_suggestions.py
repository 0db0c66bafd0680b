"""Tests for suggestions and navigation targets."""

from devnav.core.suggestions import (
    Disposition,
    NavigationTarget,
    Suggestion,
    resolve_target,
    suggest,
)
from devnav.core.types import ShortcutMap


class TestSuggest:
    """Tests for suggest()."""

    def test__base_only__adds_path_completions(self, shortcuts: ShortcutMap) -> None:
        """The typed URL comes first, followed by path shortcut completions."""
        result = suggest("dev", shortcuts)

        assert result == [
            Suggestion(content="https://app.dev.com", description="https://app.dev.com"),
            Suggestion(
                content="https://app.dev.com/api/v1",
                description="https://app.dev.com/api/v1",
            ),
            Suggestion(
                content="https://app.dev.com/admin/dashboard",
                description="https://app.dev.com/admin/dashboard",
            ),
        ]

    def test__limit__caps_completions(self, shortcuts: ShortcutMap) -> None:
        """Only the first path shortcuts up to the limit are tried."""
        result = suggest("dev", shortcuts, limit=1)

        assert [s.content for s in result] == [
            "https://app.dev.com",
            "https://app.dev.com/api/v1",
        ]

    def test__zero_limit__main_suggestion_only(self, shortcuts: ShortcutMap) -> None:
        """A zero limit disables completions."""
        result = suggest("dev session123", shortcuts, limit=0)

        assert [s.content for s in result] == ["https://app.dev.com/session123"]

    def test__malformed_input__no_suggestions(self, shortcuts: ShortcutMap) -> None:
        """Input failing the format check yields nothing."""
        assert suggest("dev api!", shortcuts) == []

    def test__no_base__no_suggestions(self, shortcuts: ShortcutMap) -> None:
        """Input that cannot be constructed yields nothing."""
        assert suggest("unknown api", shortcuts) == []

    def test__duplicate_urls__dropped(self) -> None:
        """Completions that produce an already-listed URL are skipped."""
        shortcuts = {"dev": "https://app.dev.com", "root": "/", "docs": "docs"}

        result = suggest("dev", shortcuts)

        assert [s.content for s in result] == [
            "https://app.dev.com",
            "https://app.dev.com/docs",
        ]

    def test__to_dict__has_content_and_description(self) -> None:
        """Serialized suggestion has both fields."""
        suggestion = Suggestion(content="https://a.com", description="A")

        assert suggestion.to_dict() == {"content": "https://a.com", "description": "A"}


class TestResolveTarget:
    """Tests for resolve_target()."""

    def test__url_input__used_verbatim(self, shortcuts: ShortcutMap) -> None:
        """Text that already looks like a URL is not parsed."""
        result = resolve_target("https://example.com/x", shortcuts)

        assert result == NavigationTarget(
            url="https://example.com/x",
            disposition=Disposition.CURRENT_TAB,
        )

    def test__shortcuts__constructed(self, shortcuts: ShortcutMap) -> None:
        """Shortcut input navigates to the constructed URL."""
        result = resolve_target(
            "dev api",
            shortcuts,
            disposition=Disposition.NEW_BACKGROUND_TAB,
        )

        assert result.url == "https://app.dev.com/api/v1"
        assert result.disposition == Disposition.NEW_BACKGROUND_TAB
        assert not result.is_fallback

    def test__unresolvable__falls_back_to_search(self, shortcuts: ShortcutMap) -> None:
        """Failed construction becomes a web search."""
        result = resolve_target(" unknown thing ", shortcuts)

        assert result.url == "https://www.google.com/search?q=unknown+thing"
        assert result.is_fallback

    def test__custom_search_url__used(self, shortcuts: ShortcutMap) -> None:
        """The search prefix is configurable."""
        result = resolve_target(
            "what is 1+1",
            shortcuts,
            search_url="https://duckduckgo.com/?q=",
        )

        assert result.url == "https://duckduckgo.com/?q=what+is+1%2B1"
        assert result.is_fallback

    def test__url_with_surrounding_whitespace__used_verbatim(self, shortcuts: ShortcutMap) -> None:
        """A URL is recognized after trimming and returned without the padding."""
        result = resolve_target("  https://example.com/x ", shortcuts)

        assert result.url == "https://example.com/x"
        assert not result.is_fallback

    def test__to_dict__uses_camel_case(self, shortcuts: ShortcutMap) -> None:
        """Serialized form carries the disposition and fallback flag."""
        result = resolve_target(
            "unknown",
            shortcuts,
            disposition=Disposition.NEW_FOREGROUND_TAB,
        )

        assert result.to_dict() == {
            "url": "https://www.google.com/search?q=unknown",
            "disposition": "newForegroundTab",
            "isFallback": True,
        }

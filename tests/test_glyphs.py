"""Tests for the glyph registry (core/glyphs.py).

Coverage:
* The predefined table: handles, codepoints, fallbacks, colors.
* ``lookup`` / ``available`` / duplicate registration.
* Late-bound display: same glyph, different capability snapshots.
"""

from __future__ import annotations

import pytest

from cli_frames.core.colors import BLUE, GREEN, RED, WHITE, YELLOW, ColorTable
from cli_frames.core.glyphs import (
    GlyphRegistry,
    build_default_registry,
    render,
    render_char,
    render_markup,
)
from cli_frames.core.models import TerminalCapabilities
from cli_frames.exceptions import DuplicateHandle, UnknownColor, UnknownGlyphHandle

EMOJI = TerminalCapabilities(supports_emoji=True)
PLAIN = TerminalCapabilities(supports_emoji=False)

EXPECTED = [
    ("*", "⭑", "*", YELLOW),
    ("i", "\U0001d4be", "i", BLUE),
    ("?", "?", "?", BLUE),
    ("v", "✓", "√", GREEN),
    ("x", "✗", "X", RED),
    ("b", "\U0001f41b", "!", WHITE),
    (">", "»", "»", YELLOW),
    ("H", "\u231b\ufe0e", "H", BLUE),
    ("!", "\u26a0\ufe0f", "!", YELLOW),
]


@pytest.fixture
def registry() -> GlyphRegistry:
    return build_default_registry()


# ---------------------------------------------------------------------------
# Predefined table
# ---------------------------------------------------------------------------

class TestDefaultRegistry:
    def test_available_handles(self, registry: GlyphRegistry) -> None:
        assert registry.available() == {"*", "i", "?", "v", "x", "b", ">", "H", "!"}

    def test_registration_order(self, registry: GlyphRegistry) -> None:
        assert registry.handles == ("*", "i", "?", "v", "x", "b", ">", "H", "!")

    @pytest.mark.parametrize(("handle", "unicode", "plain", "color"), EXPECTED)
    def test_glyph_definition(
        self,
        registry: GlyphRegistry,
        handle: str,
        unicode: str,
        plain: str,
        color: object,
    ) -> None:
        glyph = registry.lookup(handle)
        assert glyph.handle == handle
        assert glyph.unicode == unicode
        assert glyph.plain == plain
        assert glyph.color == color

    def test_variation_selector_kept(self, registry: GlyphRegistry) -> None:
        assert registry.lookup("!").codepoints == (0x26A0, 0xFE0F)
        assert registry.lookup("H").codepoints == (0x231B, 0xFE0E)

    def test_every_handle_looks_up_to_itself(self, registry: GlyphRegistry) -> None:
        for handle in registry.available():
            assert registry.lookup(handle).handle == handle

    def test_len_and_iter(self, registry: GlyphRegistry) -> None:
        assert len(registry) == 9
        assert [g.handle for g in registry] == list(registry.handles)


# ---------------------------------------------------------------------------
# Lookup errors
# ---------------------------------------------------------------------------

class TestLookup:
    def test_unknown_handle_lists_available(self, registry: GlyphRegistry) -> None:
        with pytest.raises(UnknownGlyphHandle) as exc_info:
            registry.lookup("z")
        message = str(exc_info.value)
        assert message == (
            "invalid glyph handle: z "
            "-- must be one of GlyphRegistry.available (*,i,?,v,x,b,>,H,!)"
        )
        assert exc_info.value.available == registry.handles

    def test_unknown_handle_is_key_error(self, registry: GlyphRegistry) -> None:
        with pytest.raises(KeyError):
            registry.lookup("nope")

    def test_lookup_stringifies(self) -> None:
        reg = GlyphRegistry()
        reg.register("1", 0x2460, "1", "blue")
        assert reg.lookup(1).handle == "1"

    def test_message_tracks_registrations(self) -> None:
        reg = GlyphRegistry()
        reg.register("a", 0x41, "A", "red")
        with pytest.raises(UnknownGlyphHandle, match=r"\(a\)"):
            reg.lookup("b")


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

class TestRegister:
    def test_duplicate_handle_rejected(self, registry: GlyphRegistry) -> None:
        with pytest.raises(DuplicateHandle, match="v"):
            registry.register("v", 0x2714, "v", "green")

    def test_duplicate_leaves_original(self, registry: GlyphRegistry) -> None:
        with pytest.raises(DuplicateHandle):
            registry.register("x", 0x2718, "x", "red")
        assert registry.lookup("x").codepoints == (0x2717,)

    def test_unknown_color_rejected(self) -> None:
        reg = GlyphRegistry()
        with pytest.raises(UnknownColor):
            reg.register("q", 0x3F, "?", "fuchsia")
        assert "q" not in reg

    def test_empty_codepoints_rejected(self) -> None:
        with pytest.raises(ValueError):
            GlyphRegistry().register("e", (), "e", "red")

    def test_accepts_color_object(self) -> None:
        glyph = GlyphRegistry().register("c", 0x2713, "v", GREEN)
        assert glyph.color is GREEN

    def test_custom_color_table(self) -> None:
        from cli_frames.core.models import Color

        teal = Color("teal", "38;5;30", "color(30)")
        reg = GlyphRegistry(ColorTable([teal]))
        assert reg.register("t", 0x25CF, "o", "teal").color == teal

    def test_registries_are_independent(self) -> None:
        a = build_default_registry()
        b = build_default_registry()
        a.register("n", 0x2022, "-", "gray")
        assert "n" in a
        assert "n" not in b


# ---------------------------------------------------------------------------
# Capability-aware rendering
# ---------------------------------------------------------------------------

class TestRendering:
    @pytest.mark.parametrize(("handle", "unicode", "plain", "color"), EXPECTED)
    def test_char_follows_emoji_flag(
        self,
        registry: GlyphRegistry,
        handle: str,
        unicode: str,
        plain: str,
        color: object,
    ) -> None:
        glyph = registry.lookup(handle)
        assert render_char(glyph, EMOJI) == unicode
        assert render_char(glyph, PLAIN) == plain

    def test_same_instance_renders_both_ways(self, registry: GlyphRegistry) -> None:
        glyph = registry.lookup("v")
        assert render_char(glyph, EMOJI) == "✓"
        assert render_char(glyph, PLAIN) == "√"
        assert render_char(glyph, EMOJI) == "✓"

    def test_rendered_form(self, registry: GlyphRegistry) -> None:
        glyph = registry.lookup("x")
        assert render(glyph, EMOJI) == "\x1b[31m✗\x1b[0m"
        assert render(glyph, PLAIN) == "\x1b[31mX\x1b[0m"

    def test_markup_form(self, registry: GlyphRegistry) -> None:
        glyph = registry.lookup("!")
        assert render_markup(glyph, EMOJI) == "{{yellow:\u26a0\ufe0f}}"
        assert render_markup(glyph, PLAIN) == "{{yellow:!}}"

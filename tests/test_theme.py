"""Tests for the markdown theme registry."""

import dataclasses

from mdterm.render.theme import (
    DEFAULT_THEME,
    THEMES,
    MarkdownTheme,
    get_theme,
    next_theme_name,
)


class TestThemes:
    def test_all_themes_present(self):
        for name in ("dark", "light", "midnight", "nord", "monokai"):
            assert name in THEMES

    def test_default_is_midnight(self):
        assert DEFAULT_THEME.name == "midnight"

    def test_every_role_is_a_hex_colour(self):
        for theme in THEMES.values():
            for f in dataclasses.fields(MarkdownTheme):
                if f.name in ("name", "display_name"):
                    continue
                value = getattr(theme, f.name)
                assert value.startswith("#") and len(value) == 7, (theme.name, f.name)

    def test_frozen(self):
        try:
            DEFAULT_THEME.md_h1 = "#ffffff"
            assert False, "should be frozen"
        except dataclasses.FrozenInstanceError:
            pass


class TestLookup:
    def test_case_insensitive(self):
        assert get_theme("NORD").name == "nord"

    def test_unknown_falls_back(self):
        assert get_theme("solarized") is DEFAULT_THEME

    def test_empty_falls_back(self):
        assert get_theme(None) is DEFAULT_THEME
        assert get_theme("") is DEFAULT_THEME

    def test_next_cycles(self):
        assert next_theme_name("dark") == "light"
        assert next_theme_name("midnight") == "nord"
        assert next_theme_name("monokai") == "dark"

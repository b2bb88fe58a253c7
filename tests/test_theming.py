"""Tests for theming system."""

import json

import pytest
from PyQt6.QtGui import QColor


def test_color_scheme_resolves_contexts():
    """Test every ColorContext has a color in the default scheme."""
    from pyqt_declarative.theming import ColorContext, ColorScheme

    scheme = ColorScheme()
    for context in ColorContext:
        assert isinstance(scheme.color_for(context), QColor)
    assert scheme.color_for(ColorContext.ACCENT) == QColor(0, 170, 255)
    assert scheme.to_hex(scheme.background) == "#2b2b2b"


def test_unknown_tokens_raise():
    from pyqt_declarative.exceptions import ThemeTokenError
    from pyqt_declarative.theming import ColorScheme, ThemeConstants

    with pytest.raises(ThemeTokenError):
        ColorScheme().color_for("not_a_context")
    with pytest.raises(KeyError):
        ThemeConstants().value_for("not_a_token")


def test_theme_constants():
    from pyqt_declarative.theming import COMPACT_CONSTANTS, ConstantToken, Theme

    assert Theme.constant(ConstantToken.PADDING) == 8.0
    assert Theme.constant(ConstantToken.SHADOW_OPACITY) == pytest.approx(0.15)

    Theme.set_constants(COMPACT_CONSTANTS)
    assert Theme.constant(ConstantToken.CORNER_RADIUS) == 6.0


def test_switch_theme_updates_palette(qapp):
    """Test theme switching pushes a palette to the application."""
    from PyQt6.QtGui import QPalette
    from pyqt_declarative.theming import ColorContext, Theme

    Theme.switch_to_light_theme()
    assert Theme.color(ColorContext.BACKGROUND) == QColor(245, 245, 245)
    assert qapp.palette().color(QPalette.ColorRole.Window) == QColor(245, 245, 245)

    Theme.switch_to_dark_theme()
    assert Theme.color(ColorContext.BACKGROUND) == QColor(43, 43, 43)


def test_callbacks_survive_failures(qapp):
    from pyqt_declarative.theming import ColorScheme, Theme

    seen = []

    def failing(theme):
        raise RuntimeError("boom")

    def recording(theme):
        seen.append(theme.color_scheme)

    Theme.register_theme_change_callback(failing)
    Theme.register_theme_change_callback(recording)
    try:
        scheme = ColorScheme.create_light_theme()
        Theme.apply_color_scheme(scheme)
        assert seen == [scheme]
    finally:
        Theme.unregister_theme_change_callback(failing)
        Theme.unregister_theme_change_callback(recording)


def test_theme_config_roundtrip(qapp, tmp_path):
    """Test saving and loading a theme JSON file."""
    from pyqt_declarative.theming import ColorContext, ColorScheme, Theme

    path = tmp_path / "theme.json"
    Theme.apply_color_scheme(ColorScheme(accent=(10, 20, 30)))
    assert Theme.save_current_theme(str(path))
    assert json.loads(path.read_text())["accent"] == [10, 20, 30]

    Theme.reset()
    assert Theme.load_theme_from_config(str(path))
    assert Theme.color(ColorContext.ACCENT) == QColor(10, 20, 30)


def test_load_missing_config(tmp_path):
    from pyqt_declarative.theming import ColorScheme, Theme

    assert Theme.load_theme_from_config(str(tmp_path / "missing.json")) is False
    assert ColorScheme.load_color_scheme_from_config(str(tmp_path / "missing.json")) == ColorScheme()


def test_malformed_config_falls_back_to_default(tmp_path):
    from pyqt_declarative.theming import ColorScheme

    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert ColorScheme.load_color_scheme_from_config(str(path)) == ColorScheme()


def test_palette_manager(qapp):
    """Test PaletteManager creation."""
    from PyQt6.QtGui import QPalette
    from pyqt_declarative.theming import ColorScheme, PaletteManager

    manager = PaletteManager(ColorScheme.create_light_theme())
    palette = manager.create_palette()
    assert palette.color(QPalette.ColorRole.Base) == QColor(255, 255, 255)

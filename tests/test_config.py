"""Tests for configuration system."""

import tempfile
from pathlib import Path

import pytest
import yaml

from mdterm.config import DEFAULT_CONFIG, ConfigManager


def test_config_creation():
    """Test config file creation."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "sub" / "config.yaml"
        manager = ConfigManager(str(config_path))

        assert config_path.exists()
        assert manager.data == DEFAULT_CONFIG


def test_defaults():
    with tempfile.TemporaryDirectory() as tmpdir:
        manager = ConfigManager(str(Path(tmpdir) / "config.yaml"))

        assert manager.get_theme_name() == "midnight"
        assert manager.get_width() == 0
        assert manager.get_indent() == 2
        assert manager.get_tab_width() == 4


def test_reads_existing_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "config.yaml"
        config_path.write_text(
            "display:\n  theme: Nord\n  width: 100\nhighlight:\n  tab_width: 2\n"
        )
        manager = ConfigManager(str(config_path))

        assert manager.get_theme_name() == "nord"
        assert manager.get_width() == 100
        # missing keys fall back to defaults
        assert manager.get_indent() == 2
        assert manager.get_tab_width() == 2


def test_unknown_theme_falls_back():
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "config.yaml"
        config_path.write_text("display:\n  theme: neon\n")
        manager = ConfigManager(str(config_path))

        assert manager.get_theme_name() == "midnight"


def test_bad_values_fall_back():
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "config.yaml"
        config_path.write_text("display:\n  width: wide\n  indent: -3\n")
        manager = ConfigManager(str(config_path))

        assert manager.get_width() == 0
        assert manager.get_indent() == 0


def test_invalid_yaml_uses_defaults():
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "config.yaml"
        config_path.write_text("display: [unclosed\n")
        manager = ConfigManager(str(config_path))

        assert manager.data == DEFAULT_CONFIG


def test_non_mapping_yaml_uses_defaults():
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "config.yaml"
        config_path.write_text("- just\n- a list\n")
        manager = ConfigManager(str(config_path))

        assert manager.get_theme_name() == "midnight"


def test_set_theme_and_save():
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "config.yaml"
        manager = ConfigManager(str(config_path))

        manager.set_theme("Monokai")
        manager.save()

        saved = yaml.safe_load(config_path.read_text())
        assert saved["display"]["theme"] == "monokai"
        assert ConfigManager(str(config_path)).get_theme_name() == "monokai"


def test_set_unknown_theme_raises():
    with tempfile.TemporaryDirectory() as tmpdir:
        manager = ConfigManager(str(Path(tmpdir) / "config.yaml"))

        with pytest.raises(ValueError):
            manager.set_theme("neon")

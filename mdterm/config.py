"""Configuration management for mdterm."""

import copy
import logging
from pathlib import Path
from typing import Optional, Dict, Any

import yaml

from .render.code_block import TAB_WIDTH
from .render.output import DEFAULT_INDENT
from .render.theme import DEFAULT_THEME, THEMES

_log = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "display": {
        "theme": DEFAULT_THEME.name,
        "width": 0,
        "indent": DEFAULT_INDENT,
    },
    "highlight": {
        "tab_width": TAB_WIDTH,
    },
}


class ConfigManager:
    """Manage mdterm configuration from YAML."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or "~/.config/mdterm/config.yaml").expanduser()
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration, creating the default file on first use."""
        if not self.config_path.exists():
            self._create_default_config()
        return self._read_yaml()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read and parse the YAML file; unreadable files yield defaults."""
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            _log.warning("error reading config %s: %s", self.config_path, e)
            return copy.deepcopy(DEFAULT_CONFIG)
        if not isinstance(content, dict):
            return copy.deepcopy(DEFAULT_CONFIG)
        return content

    def _create_default_config(self) -> None:
        """Write the default configuration file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False)
        except OSError as e:
            _log.warning("could not create config %s: %s", self.config_path, e)

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.data.get(name)
        defaults = DEFAULT_CONFIG[name]
        return {**defaults, **section} if isinstance(section, dict) else dict(defaults)

    def get_theme_name(self) -> str:
        """Configured theme name; unknown names fall back to the default."""
        name = str(self._section("display").get("theme") or "").lower()
        return name if name in THEMES else DEFAULT_THEME.name

    def get_width(self) -> int:
        """Configured total width in columns; 0 means use the terminal width."""
        return _non_negative_int(self._section("display").get("width"), 0)

    def get_indent(self) -> int:
        return _non_negative_int(self._section("display").get("indent"), DEFAULT_INDENT)

    def get_tab_width(self) -> int:
        return _non_negative_int(self._section("highlight").get("tab_width"), TAB_WIDTH)

    def set_theme(self, name: str) -> None:
        """Select a theme by name; raises ValueError for unknown themes."""
        key = name.strip().lower()
        if key not in THEMES:
            raise ValueError(f"unknown theme: {name}")
        self.data.setdefault("display", {})["theme"] = key

    def save(self) -> None:
        """Save configuration to file."""
        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.dump(self.data, f, default_flow_style=False)


def _non_negative_int(value: Any, default: int) -> int:
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return default

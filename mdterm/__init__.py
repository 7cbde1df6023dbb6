"""mdterm - Markdown rendered for the terminal."""

__version__ = "0.1.0"

from .render import render_markdown, highlight_code_line, get_theme, THEMES
from .config import ConfigManager

__all__ = [
    "render_markdown",
    "highlight_code_line",
    "get_theme",
    "THEMES",
    "ConfigManager",
]

"""mdterm CLI - render markdown in the terminal."""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.text import Text

from .config import ConfigManager
from .render import THEMES, get_theme, print_lines, render_code_block, render_markdown

_log = logging.getLogger(__name__)


def _read_source(source: str) -> str:
    """Read a file path, or stdin for ``-``."""
    if source == "-":
        return click.get_text_stream("stdin").read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"cannot read {source}: {e.strerror or e}")
    except UnicodeDecodeError:
        raise click.ClickException(f"{source} is not UTF-8 text")


def _content_width(console: Console, config: ConfigManager, width: Optional[int], indent: int) -> int:
    """Columns left for content after the outer indentation."""
    total = width or config.get_width() or console.width or 80
    return max(total - indent, 0)


@click.group()
@click.option("--config", "config_path", default=None, help="Path to config.yaml")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """MDTERM - Markdown rendered for the terminal.

    Headings, lists, quotes, tables and highlighted code blocks, wrapped
    to the terminal width.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = ConfigManager(config_path)


@cli.command()
@click.argument("source", default="-")
@click.option("--width", "-w", type=int, default=None, help="Total output width in columns")
@click.option("--theme", "-t", default=None, help="Colour theme")
@click.option("--indent", "-i", type=int, default=None, help="Left indentation in columns")
@click.pass_obj
def render(config, source, width, theme, indent):
    """Render a markdown file (or stdin) to the terminal."""
    console = Console(highlight=False)
    text = _read_source(source)
    indent = config.get_indent() if indent is None else max(indent, 0)
    md_theme = get_theme(theme or config.get_theme_name())
    content_width = _content_width(console, config, width, indent)
    _log.debug("rendering %s at width %d with theme %s", source, content_width, md_theme.name)
    lines = render_markdown(text, content_width, md_theme, config.get_tab_width())
    print_lines(lines, console, indent)


@cli.command()
@click.argument("source", default="-")
@click.option("--lang", "-l", default=None, help="Language tag (default: file extension)")
@click.option("--width", "-w", type=int, default=None, help="Total output width in columns")
@click.option("--theme", "-t", default=None, help="Colour theme")
@click.pass_obj
def highlight(config, source, lang, width, theme):
    """Show a source file as a highlighted code block."""
    console = Console(highlight=False)
    code = _read_source(source)
    if lang is None:
        lang = Path(source).suffix.lstrip(".") if source != "-" else ""
    indent = config.get_indent()
    md_theme = get_theme(theme or config.get_theme_name())
    lines = render_code_block(code, lang, md_theme, _content_width(console, config, width, indent))
    print_lines(lines, console, indent)


@cli.command()
@click.pass_obj
def themes(config):
    """List available colour themes."""
    console = Console(highlight=False)
    current = config.get_theme_name()
    for name, theme in THEMES.items():
        line = Text()
        marker = "*" if name == current else " "
        line.append(f"{marker} {name:<10}", style=f"bold {theme.md_h1}")
        line.append(theme.display_name, style=theme.text_normal)
        console.print(line)


@cli.command("set-theme")
@click.argument("name")
@click.pass_obj
def set_theme(config, name):
    """Save NAME as the default theme."""
    try:
        config.set_theme(name)
    except ValueError as e:
        raise click.ClickException(str(e))
    config.save()
    click.echo(f"theme set to {config.get_theme_name()}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

"""
Nested Token Commands

CLI command around the depth-scoped nested token replacer. Defaults for the
markers, target pattern and replacement format come from application settings.

Commands:
- replace <line>: Replace target tokens found at one nesting depth.
"""

from rich.console import Console
import click
from mailscan.commands.base import RichCommand, console_echo, error_report, rich_help
from mailscan.config.settings import appsettings
from mailscan.lib.exceptions import ScanError
from mailscan.lib.scanner import NestedTokenReplacer, StringFormatter

console: Console = Console()


@click.command(
    cls=RichCommand,
    short_help="replace tokens at a nesting depth",
    help=rich_help(
        description="Replace tokens found at one nesting depth of a line",
        usage="mailscan replace '{a} b {c {d}}' --depth 1 --format '<{}>'",
        args={"<line>": "text containing open/close markers and tokens"},
    ),
)
@click.argument("line")
@click.option(
    "--depth", type=int, default=0, show_default=True, help="Target nesting depth"
)
@click.option("--open", "open_marker", default=None, help="Open marker")
@click.option("--close", "close_marker", default=None, help="Close marker")
@click.option("--pattern", default=None, help="Regular expression of target tokens")
@click.option(
    "--format", "token_format", default=None, help="Replacement format with one {} field"
)
def replace(
    line: str,
    depth: int,
    open_marker: str | None,
    close_marker: str | None,
    pattern: str | None,
    token_format: str | None,
) -> None:
    """
    Print the rewritten line.
    """
    try:
        replacer = NestedTokenReplacer(
            appsettings.open_marker if open_marker is None else open_marker,
            appsettings.close_marker if close_marker is None else close_marker,
            appsettings.token_pattern if pattern is None else pattern,
            StringFormatter.formatterForPattern(
                appsettings.token_format if token_format is None else token_format
            ),
        )
        rewritten: str = replacer.replace(line, depth)
    except ScanError as e:
        error_report(console, e)
        return

    console_echo(console, rewritten)

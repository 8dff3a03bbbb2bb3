"""
Base classes for Rich-enhanced Click commands and groups.

This module defines:
- `rich_help`: builds the Rich markup help text for a command.
- `RichGroup`: a Click group listing its commands with colorized output.
- `RichCommand`: a Click command showing its help text in a panel.
- `console_echo`: prints scanner output verbatim, without markup parsing.
- `error_report`: reports a scanner error and exits with status 1.
"""

import sys
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
import click
from mailscan.lib.log import LOG

console: Console = Console()


def rich_help(description: str, usage: str, args: dict[str, str]) -> str:
    """
    Generate Rich-enhanced help text for commands.

    :param description: Description of the command.
    :param usage: Usage syntax for the command.
    :param args: Dictionary of arguments and their descriptions.
    :return: Formatted Rich help string.
    """
    help_text = f"[bold cyan]{description}[/bold cyan]\n\n"
    help_text += f"[bold yellow]Usage:[/bold yellow]\n    [green]{usage}[/green]\n\n"
    help_text += "[bold yellow]Arguments:[/bold yellow]\n"
    for arg, desc in args.items():
        help_text += f"    [green]{arg}[/green]: {desc}\n"
    return help_text


def console_echo(out: Console, text: str) -> None:
    """Print scanner text as is; markers such as `[` must not read as markup."""
    out.print(text, markup=False, highlight=False, soft_wrap=True)


class RichGroup(click.Group):
    """
    A Click Group that uses Rich for rendering help messages.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the group-level help message using Rich.

        :param ctx: The Click context for the command group.
        :param formatter: The Click help formatter.
        """
        try:
            info_name: str = ctx.info_name or "mailscan"
            console.print(
                f"[bold yellow]Usage:[/bold yellow] [cyan]{info_name}[/cyan] "
                f"[magenta][OPTIONS] COMMAND [ARGS]...[/magenta]\n"
            )

            if self.help:
                console.print(f"[bold cyan]{self.help.strip()}[/bold cyan]\n")

            if self.commands:
                console.print("[bold green]Available Commands:[/bold green]")
                for name in self.list_commands(ctx):
                    command = self.commands[name]
                    console.print(
                        f"- [cyan]{name}[/cyan]: "
                        f"[white]{command.short_help or 'No description available.'}[/white]"
                    )
                console.print()

            params = self.get_params(ctx)
            if params:
                console.print("[bold yellow]Options:[/bold yellow]")
                for param in params:
                    console.print(
                        f"- [cyan]{param.opts[0]}[/cyan]: "
                        f"{getattr(param, 'help', None) or 'No description'}"
                    )
        except Exception as e:
            LOG(f"Help rendering error: {e}")
            console.print(f"[bold red]Help rendering error:[/bold red] {e}")


class RichCommand(click.Command):
    """
    A Click Command that renders its help text inside a Rich panel.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the help message for the command using Rich.

        :param ctx: The Click context for the command.
        :param formatter: The Click help formatter.
        """
        try:
            help_text = self.help or "No help text available."
            panel_width = max(len(line) for line in help_text.splitlines()) + 10
            panel_width = min(panel_width, 80)
            console.print(
                Panel(help_text, expand=False, width=panel_width, border_style="cyan")
            )
            for param in self.get_params(ctx):
                if isinstance(param, click.Option):
                    console.print(
                        f"- [cyan]{param.opts[-1]}[/cyan]: "
                        f"{param.help or 'No description available.'}"
                    )
        except Exception as e:
            LOG(f"Help rendering error: {e}")
            console.print(f"[bold red]Help rendering error:[/bold red] {e}")


def error_report(out: Console, e: Exception) -> None:
    """Log and print a scanner error, then exit with status 1."""
    LOG(f"{type(e).__name__}: {e}")
    out.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
    sys.exit(1)

"""
Address List Commands

CLI commands around the address list tokenizer.

Commands:
- split <list>: Print each entry of a delimited address list.
- recipients <list>: Split a list and print every entry as `name <address>`.
- cid <value>: Print a content-id without its angle brackets.
"""

from rich.console import Console
import click
from mailscan.commands.base import RichCommand, console_echo, error_report, rich_help
from mailscan.config.settings import appsettings
from mailscan.lib.exceptions import ScanError
from mailscan.lib.scanner import addressList_split, cid_extract, recipient_interpret
from mailscan.models.dataModel import Recipient, RecipientType

console: Console = Console()


@click.command(
    cls=RichCommand,
    short_help="split an address list",
    help=rich_help(
        description="Split a delimited address list into its entries",
        usage='mailscan split \'a@b.com, "Doe, John" <c@d.com>\'',
        args={"<list>": "comma or semicolon delimited address list"},
    ),
)
@click.argument("address_list")
def split(address_list: str) -> None:
    """
    Print one entry per line.
    """
    try:
        entries: list[str] = addressList_split(address_list)
    except ScanError as e:
        error_report(console, e)
        return

    for index, entry in enumerate(entries, start=1):
        if appsettings.detailedOutput:
            console_echo(console, f"{index}: {entry}")
        else:
            console_echo(console, entry)


@click.command(
    cls=RichCommand,
    short_help="interpret an address list",
    help=rich_help(
        description="Split an address list and interpret each entry as a recipient",
        usage="mailscan recipients <list> [--name <name>] [--fixed-name] [--type to|cc|bcc]",
        args={"<list>": "comma or semicolon delimited address list"},
    ),
)
@click.argument("address_list")
@click.option("--name", default=None, help="Default (or fixed) display name")
@click.option(
    "--fixed-name",
    is_flag=True,
    default=False,
    help="Use --name even when an entry carries its own display name",
)
@click.option(
    "--type",
    "recipient_type",
    type=click.Choice([t.value for t in RecipientType], case_sensitive=False),
    default=None,
    help="Header the recipients belong to",
)
def recipients(
    address_list: str, name: str | None, fixed_name: bool, recipient_type: str | None
) -> None:
    """
    Print every interpreted entry as `name <address>`.
    """
    kind: RecipientType | None = (
        RecipientType(recipient_type.lower()) if recipient_type else None
    )
    try:
        interpreted: list[Recipient] = [
            recipient_interpret(name, fixed_name, entry, kind)
            for entry in addressList_split(address_list)
        ]
    except ScanError as e:
        error_report(console, e)
        return

    for recipient in interpreted:
        if appsettings.detailedOutput and recipient.type:
            console_echo(console, f"{recipient.type.value}: {recipient}")
        else:
            console_echo(console, str(recipient))


@click.command(
    cls=RichCommand,
    short_help="strip a content-id",
    help=rich_help(
        description="Print a content-id without its surrounding angle brackets",
        usage="mailscan cid '<part1@example.com>'",
        args={"<value>": "content-id, with or without angle brackets"},
    ),
)
@click.argument("value")
def cid(value: str) -> None:
    """
    Print the bare content-id.
    """
    console_echo(console, cid_extract(value) or "")

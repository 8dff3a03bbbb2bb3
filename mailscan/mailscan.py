"""
mailscan Main Module.

Entry point for the mailscan command line, a thin shell over the address list
tokenizer and the nested token replacer.

Features:
- Splits delimited address lists whose display names contain delimiters
- Interprets the resulting entries as name/address recipients
- Replaces tokens found at one nesting depth of a bracketed line

Examples:
    Split an address list:
        $ mailscan split 'a@b.com, "Doe, John" <c@d.com>'

    Replace tokens one level deep:
        $ mailscan replace '{a} b {c {d}}' --depth 1 --format '<{}>'

Environment:
    MSC_BEQUIET, MSC_DETAILEDOUTPUT, MSC_OPEN_MARKER, MSC_CLOSE_MARKER,
    MSC_TOKEN_PATTERN and MSC_TOKEN_FORMAT override the defaults.
"""

from typing import Final
import click
from mailscan.commands.address import cid, recipients, split
from mailscan.commands.base import RichGroup
from mailscan.commands.nested import replace

__version__: Final[str] = "0.1.0"


@click.group(
    cls=RichGroup,
    help="""
    Address list splitting and depth-scoped token replacement.
    """,
)
@click.version_option(__version__, "-V", "--version", prog_name="mailscan")
def cli() -> None:
    """
    Root group for all mailscan commands.
    """
    pass


cli.add_command(split)
cli.add_command(recipients)
cli.add_command(cid)
cli.add_command(replace)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()

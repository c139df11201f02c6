from typing import Optional

import rich_click as click
from click.core import Context
from rich.markup import escape
from rich.table import Table

from .console import console
from .utils import load_store


@click.command(name="show")
@click.argument("document", type=str)
@click.option(
    "--prefix",
    "-p",
    type=str,
    default=None,
    help="Show only keys under this `/`-separated prefix (with the prefix stripped).",
)
@click.pass_context
def run_show(ctx: Context, document: str, prefix: Optional[str]) -> None:
    """Print all resolved settings of a config document."""
    store = load_store(ctx, document)
    if prefix is not None:
        if not prefix.strip("/"):
            raise click.BadParameter("Prefix must not be empty.", param_hint="--prefix")
        store = store.subtree(*prefix.strip("/").split("/"))

    table = Table(title=escape(document) if prefix is None else escape(f"{document} ({prefix})"))
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in store.items():
        table.add_row(escape(key), escape(value))

    console.print(table)

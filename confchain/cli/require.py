import sys
from typing import Tuple

import rich_click as click
from click.core import Context
from rich.markup import escape

from .console import console
from .utils import load_store


@click.command(name="require")
@click.argument("document", type=str)
@click.argument("keys", nargs=-1, required=True)
@click.pass_context
def run_require(ctx: Context, document: str, keys: Tuple[str, ...]) -> None:
    """Check that all given `/`-separated keys are defined by a config document."""
    store = load_store(ctx, document)
    missing = [key for key in keys if key not in store]

    if missing:
        for key in missing:
            console.print(f"[red]Missing setting '{escape(key)}'[/red]")
        sys.exit(1)
    console.print(f"[green]All {len(keys)} settings are defined.[/green]")

import sys
from typing import Optional, Tuple

import rich_click as click
from click.core import Context

from .utils import load_store, report_error


@click.command(name="get")
@click.argument("document", type=str)
@click.argument("segments", nargs=-1, required=True)
@click.option(
    "--default",
    "default",
    type=str,
    default=None,
    help="Value printed when the setting is not present.",
)
@click.pass_context
def run_get(
    ctx: Context, document: str, segments: Tuple[str, ...], default: Optional[str]
) -> None:
    """Print a single setting addressed by its path segments."""
    from confchain.config import KeyNotFoundError

    store = load_store(ctx, document)
    if default is not None:
        click.echo(store.get_or_default(default, *segments))
        return

    try:
        click.echo(store.get(*segments))
    except KeyNotFoundError as e:
        report_error(e)
        sys.exit(1)

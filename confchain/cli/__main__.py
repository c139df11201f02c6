import sys
from typing import Optional

import rich_click as click
from click.core import Context

from .console import console
from .get import run_get
from .require import run_require
from .show import run_show


def excepthook(type, value, traceback):
    from rich.console import Console
    from rich.traceback import Traceback

    traceback_console = Console(stderr=True)
    traceback_console.print(
        Traceback.from_exception(
            type,
            value,
            traceback,
            suppress=[click],
        )
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    default=False,
    help="Set logging level to debug and print rich tracebacks on unexpected errors.",
)
@click.option(
    "--settings",
    required=False,
    type=click.Path(exists=False, dir_okay=False),
    envvar="CONFCHAIN_SETTINGS",
    help="Path to the settings file.",
)
@click.version_option(message="%(version)s", package_name="confchain")
@click.pass_context
def main(ctx: Context, debug: bool, settings: Optional[str]) -> None:
    from confchain.core import setup_logging

    setup_logging(console, debug)
    if debug:
        sys.excepthook = excepthook

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["settings_path"] = settings


main.add_command(run_get)
main.add_command(run_require)
main.add_command(run_show)


@main.command(name="settings")
@click.pass_context
def show_settings(ctx: Context) -> None:
    """Print the loaded tool settings in JSON format."""
    from confchain.config import load_settings

    console.print_json(load_settings(ctx.obj.get("settings_path", None)).model_dump_json())


if __name__ == "__main__":
    main()

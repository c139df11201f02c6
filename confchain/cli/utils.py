from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from click import Context
from rich.markup import escape

from .console import console

if TYPE_CHECKING:
    from confchain.config import ConfigError, KeyStore


def report_error(error: ConfigError) -> None:
    console.print(f"[red]{error.kind.value}: {escape(str(error))}[/red]")


def load_store(ctx: Context, document: str) -> KeyStore:
    """
    Load the document with a loader built from the settings selected on the command line.
    Config errors are reported and terminate the command with exit code 1.
    """
    from confchain.config import ConfigError, ConfigLoader

    loader = ConfigLoader.from_settings_file(ctx.obj.get("settings_path", None))
    try:
        return loader.load(document)
    except ConfigError as e:
        report_error(e)
        sys.exit(1)

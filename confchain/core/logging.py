import logging
from typing import TYPE_CHECKING, Optional, Set

if TYPE_CHECKING:
    from rich.console import Console

_debug: bool = False
_created_logger_names: Set[str] = set()


def _default_level() -> int:
    return logging.DEBUG if _debug else logging.WARNING


def get_logger(name: str, override_level: Optional[int] = None) -> logging.Logger:
    """
    Return the logger for a confchain module. Loggers created without `override_level` follow
    the global debug switch controlled by `set_debug`.
    """
    logger = logging.getLogger(name)

    if override_level is not None:
        logger.setLevel(override_level)
    else:
        _created_logger_names.add(name)
        logger.setLevel(_default_level())
    return logger


def set_debug(debug: bool) -> None:
    global _debug
    _debug = debug
    for name in _created_logger_names:
        logging.getLogger(name).setLevel(_default_level())


def setup_logging(console: "Console", debug: bool = False) -> None:
    """
    Route all log records through a rich handler printing to the given console.
    """
    from rich.logging import RichHandler

    logging.basicConfig(
        format="%(name)s: %(message)s",
        handlers=[RichHandler(show_time=False, console=console, markup=False)],
        force=True,
    )
    set_debug(debug)

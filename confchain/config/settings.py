import os
import platform
from pathlib import Path
from typing import Optional, Tuple, Union

import tomli
from pydantic import BaseModel, ConfigDict, field_validator

from confchain.core import get_logger

logger = get_logger(__name__)


class UnsupportedPlatformError(Exception):
    """
    The current platform is not supported. Supported platforms are: Linux, macOS, Windows.
    """


class ToolSettings(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    suffix: str = ".config"
    """Suffix appended to document references that do not end with it."""
    search_paths: Tuple[Path, ...] = (Path("res") / "Config",)
    """Directories searched for a document that does not exist relative to the current working directory."""
    encoding: str = "utf-8"
    """Text encoding of config documents."""

    @field_validator("suffix")
    @classmethod
    def _suffix_starts_with_dot(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"Suffix `{v}` must start with a dot.")
        return v


def default_settings_path() -> Path:
    """
    Returns:
        System path to the global settings file `config.toml` in the confchain config directory.
    """
    try:
        return Path(os.environ["XDG_CONFIG_HOME"]) / "confchain" / "config.toml"
    except KeyError:
        system = platform.system()
        if system in {"Linux", "Darwin"}:
            return Path.home() / ".config" / "confchain" / "config.toml"
        elif system == "Windows":
            return Path(os.environ["LOCALAPPDATA"]) / "confchain" / "config.toml"
        else:
            raise UnsupportedPlatformError(f"Platform `{system}` is not supported.")


def load_settings(path: Optional[Union[str, Path]] = None) -> ToolSettings:
    """
    Load tool settings from the given TOML file (or the default settings file). Options missing in the file keep
    their default values.

    Raises:
        pydantic.ValidationError: If the file contains unknown options or invalid values.
    """
    settings_path = default_settings_path() if path is None else Path(path)

    if not settings_path.is_file():
        logger.info(f"Settings file '{settings_path}' does not exist.")
        return ToolSettings()

    with settings_path.open("rb") as f:
        loaded = tomli.load(f)

    logger.debug(f"Loaded settings from '{settings_path}'")
    return ToolSettings.model_validate(loaded)

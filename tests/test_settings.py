from pathlib import Path

import pydantic
import pytest

from confchain.config import ConfigLoader, ToolSettings, load_settings
from confchain.config.settings import default_settings_path


def test_settings_defaults(tmp_path: Path):
    settings = load_settings(tmp_path / "missing.toml")
    assert settings == ToolSettings()
    assert settings.suffix == ".config"
    assert settings.search_paths == (Path("res") / "Config",)
    assert settings.encoding == "utf-8"


def test_settings_from_file(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text('suffix = ".xml"\nsearch_paths = ["a", "b/c"]\n')

    settings = load_settings(path)
    assert settings.suffix == ".xml"
    assert settings.search_paths == (Path("a"), Path("b") / "c")
    assert settings.encoding == "utf-8"

    loader = ConfigLoader.from_settings_file(path)
    assert loader.suffix == ".xml"
    assert loader.search_paths == (Path("a"), Path("b") / "c")


def test_settings_invalid(tmp_path: Path):
    path = tmp_path / "config.toml"

    path.write_text('unknown = "option"\n')
    with pytest.raises(pydantic.ValidationError):
        load_settings(path)

    path.write_text('suffix = "config"\n')
    with pytest.raises(pydantic.ValidationError):
        load_settings(path)


def test_settings_default_path(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_settings_path() == tmp_path / "confchain" / "config.toml"

    (tmp_path / "confchain").mkdir()
    (tmp_path / "confchain" / "config.toml").write_text('encoding = "latin-1"\n')
    assert load_settings().encoding == "latin-1"

"""Test configuration management."""

from pathlib import Path

import pytest

from id3cli.config.config import Config
from id3cli.config.paths import default_config_path


def test_defaults_when_file_is_missing(config_runtime_env: Path) -> None:
    """A missing config file yields defaults and is not created."""
    _ = config_runtime_env
    config = Config.load()
    assert config.log_file is None
    assert config.id3_version == 4
    assert config.lyrics_preview_lines == 3
    assert not default_config_path().exists()
    assert Config.source() is None


def test_save_load_toml(config_runtime_env: Path) -> None:
    """Saved values come back after resetting the singleton."""
    _ = config_runtime_env
    Config(
        log_file=Path("/test/logs/id3cli.log"),
        id3_version=3,
        lyrics_preview_lines=5,
    ).save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded = Config.load()

    assert loaded.log_file == Path("/test/logs/id3cli.log")
    assert loaded.id3_version == 3
    assert loaded.lyrics_preview_lines == 5
    assert Config.source() == default_config_path()


def test_save_omits_unset_log_file(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    Config().save()
    content = default_config_path().read_text(encoding="utf-8")
    assert "# id3cli Configuration File" in content
    assert "\nlog_file =" not in content
    assert "id3_version = 4" in content

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    assert Config.load().log_file is None


def test_singleton_behavior(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    assert Config.load() is Config.load()


def test_unknown_keys_are_ignored(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text('base_path = "/music"\nid3_version = 3\nlog_file = ""\n', encoding="utf-8")

    loaded = Config.load()

    assert loaded.id3_version == 3
    assert loaded.log_file is None
    assert not hasattr(loaded, "base_path")


def test_invalid_toml_raises(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text("id3_version = = 3\n", encoding="utf-8")

    import tomllib

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


def test_save_to_explicit_path_quotes_strings(config_runtime_env: Path) -> None:
    target = config_runtime_env / "custom" / "id3cli.toml"
    written = Config(log_file=Path('/logs/"odd".log')).save(target)

    assert written == target
    import tomllib

    with open(target, "rb") as handle:
        data = tomllib.load(handle)
    assert data["log_file"] == '/logs/"odd".log'
    assert data["lyrics_preview_lines"] == 3

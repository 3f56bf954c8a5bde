"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from id3cli.config.paths import (
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = portable_repo_root / "logs"
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "id3cli.log"


def test_default_config_path(portable_repo_root: Path) -> None:
    assert default_config_path() == portable_repo_root / "config" / "config.toml"


def test_env_var_overrides_config_path(
    portable_repo_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    override = portable_repo_root / "elsewhere" / "id3cli.toml"
    monkeypatch.setenv("ID3CLI_CONFIG", str(override))
    assert default_config_path() == override


def test_explicit_path_wins_over_env(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"
    resolved = resolve_overridable_path(
        explicit_path=explicit,
        env={"ID3CLI_CONFIG": str(tmp_path / "env.toml")},
        env_var="ID3CLI_CONFIG",
        default_factory=lambda: tmp_path / "default.toml",
    )
    assert resolved == explicit


def test_blank_env_value_falls_back_to_default(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"ID3CLI_CONFIG": "   "},
        env_var="ID3CLI_CONFIG",
        default_factory=lambda: tmp_path / "default.toml",
    )
    assert resolved == tmp_path / "default.toml"

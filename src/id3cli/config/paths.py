"""Where: src/id3cli/config/paths.py
What: Locate the config file and the log file relative to the checkout.
Why: Keep every run self-contained in the repository unless ``ID3CLI_CONFIG`` says otherwise.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "ID3CLI_CONFIG"

_REPO_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick the first of explicit path, non-blank env value, or default.

    The result is user-expanded and absolute.
    """

    if explicit_path is not None:
        chosen = Path(explicit_path)
    else:
        environ = os.environ if env is None else env
        from_env = (environ.get(env_var, "") if env_var else "").strip()
        chosen = Path(from_env) if from_env else default_factory()
    return chosen.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor holding a repository marker, else the cwd."""

    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _REPO_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """``<repo_root>/config/config.toml`` unless ``ID3CLI_CONFIG`` is set."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / "id3cli.log"


__all__ = [
    "CONFIG_ENV_VAR",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]

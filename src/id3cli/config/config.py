"""Where: src/id3cli/config/config.py
What: TOML-backed ``Config`` dataclass, loaded once per process.
Why: Give the CLI a log file location, the ID3v2 save version and the lyrics preview size.
"""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, ClassVar, Final, NamedTuple

from id3cli.config.file_ops import write_text_file
from id3cli.config.paths import default_config_path
from id3cli.platform.logging import logger

ID3_VERSION_DEFAULT: int = 4
LYRICS_PREVIEW_LINES_DEFAULT: int = 3


class _Option(NamedTuple):
    key: str
    comment: tuple[str, ...]


# Written in this order, each preceded by its comment block.
_OPTIONS: Final[tuple[_Option, ...]] = (
    _Option(
        "log_file",
        (
            "# Log file path (optional, leave unset to use logs/id3cli.log)",
            '# Example: log_file = "/var/log/id3cli.log"',
        ),
    ),
    _Option("id3_version", ("# ID3v2 version written when saving tags (3 or 4)",)),
    _Option("lyrics_preview_lines", ("# Lyrics lines shown by the show command",)),
)


def _toml_literal(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, Path)):
        escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


@dataclass
class Config:
    """Runtime options read from ``config/config.toml``."""

    log_file: Path | None = None
    id3_version: int = ID3_VERSION_DEFAULT
    lyrics_preview_lines: int = LYRICS_PREVIEW_LINES_DEFAULT

    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file) if self.log_file.strip() else None

    def to_toml(self) -> str:
        """Render the commented TOML document; unset options are left out."""

        values = asdict(self)
        blocks: list[str] = ["# id3cli Configuration File"]
        for option in _OPTIONS:
            lines = list(option.comment)
            value = values[option.key]
            if value is not None:
                lines.append(f"{option.key} = {_toml_literal(value)}")
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks) + "\n"

    def save(self, path: Path | None = None) -> Path:
        """Write the configuration and return the file it went to."""

        target = path or default_config_path()
        try:
            write_text_file(target, self.to_toml())
        except OSError as exc:
            logger.error("Failed to save configuration to %s: %s", target, exc)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    @classmethod
    def source(cls) -> Path | None:
        """File the current configuration was read from, ``None`` for defaults."""
        return cls._loaded_from

    @classmethod
    def _from_mapping(cls, raw: dict[str, Any], source: Path) -> Config:
        known = {f.name for f in fields(cls)}
        ignored = sorted(key for key in raw if key not in known)
        if ignored:
            logger.warning(
                "Ignoring unknown configuration keys in %s: %s", source, ", ".join(ignored)
            )
        return cls(**{key: value for key, value in raw.items() if key in known})

    @classmethod
    def load(cls) -> Config:
        """Return the process-wide configuration, reading it on first use.

        A missing file yields the defaults; nothing is written implicitly.

        Raises:
            OSError: The file exists but cannot be read.
            tomllib.TOMLDecodeError: The file is not valid TOML.
        """
        if cls._instance is not None:
            return cls._instance

        source = default_config_path()
        if source.exists():
            try:
                with open(source, "rb") as handle:
                    raw = tomllib.load(handle)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.error("Failed to load configuration from %s: %s", source, exc)
                raise
            instance = cls._from_mapping(raw, source)
            cls._loaded_from = source
            logger.debug("Configuration loaded from %s", source)
        else:
            instance = cls()
            cls._loaded_from = None
            logger.debug("No configuration at %s, using defaults", source)

        cls._instance = instance
        return instance


config = Config.load()

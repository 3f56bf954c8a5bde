"""src/id3cli/application/services/edit_service.py
What: Load one MP3 tag, apply removals and edits, and persist only real changes.
Why: Give the CLI a single entry point while keeping mutagen behind the store port.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from logging import Logger, getLogger
from pathlib import Path
from typing import final

from mutagen.id3 import ID3

from id3cli.features.tagging import (
    EditRequest,
    FieldKey,
    TagEvent,
    TagFileNotFoundError,
    TagStorePort,
    apply_metadata,
    remove_fields,
)
from id3cli.features.tagging.adapters import MutagenTagStore


@dataclass(slots=True)
class EditOutcome:
    """Summary of one edit run."""

    path: Path
    applied: list[FieldKey] = field(default_factory=list)
    removed: list[FieldKey] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)
    created: bool = False
    saved: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.applied or self.removed)


@final
class EditTagsService:
    """Application façade wiring the tag store into the tagging use cases."""

    _store: TagStorePort
    _logger: Logger

    def __init__(
        self,
        *,
        store: TagStorePort | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._store = store or MutagenTagStore()
        self._logger = logger or getLogger(__name__)

    def _ensure_exists(self, path: Path) -> None:
        if not self._store.exists(path):
            raise TagFileNotFoundError(path)

    def read(self, path: Path) -> ID3 | None:
        """Return the tag of ``path``, or ``None`` when it has no ID3 header.

        Raises:
            TagFileNotFoundError: If ``path`` does not exist.
            TagStoreError: If the tag cannot be decoded.
        """

        self._ensure_exists(path)
        return self._store.load(path)

    def edit(
        self,
        path: Path,
        request: EditRequest,
        remove: Iterable[str] = (),
    ) -> EditOutcome:
        """Apply ``remove`` then ``request`` to the tag of ``path``.

        The file is written only when at least one field was set or removed.
        Any error leaves the file as it was.

        Raises:
            TagFileNotFoundError: If ``path`` does not exist.
            TagEditError: The first validation or I/O failure.
            ValueError: If an empty artist list was requested.
        """

        self._ensure_exists(path)
        outcome = EditOutcome(path=path)
        file_extra = {"file_path": str(path)}

        tags = self._store.load(path)
        if tags is None:
            tags = ID3()
            outcome.created = True
            self._logger.info(
                "No ID3 tag found, creating a new one",
                extra={"tag_event": TagEvent.FILE_CREATED.value, **file_extra},
            )
        else:
            self._logger.debug(
                "Loaded %d frames",
                len(tags),
                extra={"tag_event": TagEvent.FILE_LOAD.value, **file_extra},
            )

        removal = remove_fields(tags, remove)
        outcome.removed = removal.removed
        outcome.unknown = removal.unknown

        outcome.applied = apply_metadata(tags, request)
        for key in outcome.applied:
            self._logger.info(
                "Set %s", key.value, extra={"tag_event": TagEvent.FIELD_SET.value}
            )

        if not outcome.changed:
            self._logger.warning(
                "No changes requested",
                extra={"tag_event": TagEvent.FILE_UNCHANGED.value, **file_extra},
            )
            return outcome

        self._store.save(tags, path)
        outcome.saved = True
        self._logger.info(
            "Tags saved",
            extra={"tag_event": TagEvent.FILE_SAVED.value, **file_extra},
        )
        return outcome


__all__ = ["EditOutcome", "EditTagsService"]

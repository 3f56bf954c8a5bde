"""
Summary: Remove frames from an ID3 container by canonical or aliased field name.
Why: Keep removal forgiving so a mistyped name never aborts the rest of an edit.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from mutagen.id3 import ID3

from id3cli.features.tagging.domain.errors import UnknownFieldError
from id3cli.features.tagging.domain.fields import FieldKey, frame_id_for, require_field, supported_names
from id3cli.platform.logging import logger

from .events import TagEvent


@dataclass(slots=True)
class RemovalResult:
    """Outcome of a removal pass."""

    removed: list[FieldKey] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """True when at least one name resolved to a field."""

        return bool(self.removed)


def remove_fields(tags: ID3, names: Iterable[str]) -> RemovalResult:
    """Delete the frames named by ``names`` from ``tags``.

    Frames that are already absent count as removed. Unknown names are logged
    and collected in ``RemovalResult.unknown``.
    """

    result = RemovalResult()
    for name in names:
        try:
            key = require_field(name)
        except UnknownFieldError:
            logger.warning(
                "Unknown field '%s' (supported: %s)",
                name,
                ", ".join(supported_names()),
                extra={"tag_event": TagEvent.FIELD_UNKNOWN.value},
            )
            result.unknown.append(name)
            continue

        tags.delall(frame_id_for(key))
        if key not in result.removed:
            result.removed.append(key)
        logger.info(
            "Removed %s", key.value, extra={"tag_event": TagEvent.FIELD_REMOVED.value}
        )
    return result


__all__ = ["RemovalResult", "remove_fields"]

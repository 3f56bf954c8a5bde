"""Summary: mutagen-backed tag store adapter.
Why: Keep every binary ID3 read and write behind the TagStorePort seam."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from mutagen._util import MutagenError
from mutagen.id3 import ID3, ID3NoHeaderError

from id3cli.config.settings import ID3_VERSION
from id3cli.features.tagging.domain.errors import TagStoreError

from ..usecases.ports import TagStorePort

# Frames update_to_v23 would rewrite from TDRC (TYER) or drop as v2.4-only
# (sort orders). Explicit values are put back after the conversion.
_KEPT_ON_V23: Final[tuple[str, ...]] = ("TYER", "TSOA", "TSOP", "TSOT")


class MutagenTagStore(TagStorePort):
    """Load and save ID3v2 containers with mutagen."""

    def __init__(self, v2_version: int = ID3_VERSION) -> None:
        self._v2_version: int = v2_version

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def load(self, path: Path) -> ID3 | None:
        # translate=False keeps TYER apart from TDRC; they hold year and date.
        try:
            return ID3(path, translate=False)
        except ID3NoHeaderError:
            return None
        except (MutagenError, OSError) as exc:
            raise TagStoreError(path, str(exc)) from exc

    def save(self, tags: ID3, path: Path) -> None:
        if self._v2_version == 3:
            _downgrade_to_v23(tags)
        try:
            tags.save(path, v2_version=self._v2_version)
        except (MutagenError, OSError) as exc:
            raise TagStoreError(path, str(exc)) from exc


def _downgrade_to_v23(tags: ID3) -> None:
    kept = {frame_id: tags.getall(frame_id) for frame_id in _KEPT_ON_V23}
    tags.update_to_v23()
    for frame_id, frames in kept.items():
        if frames:
            tags.setall(frame_id, frames)


__all__ = ["MutagenTagStore"]

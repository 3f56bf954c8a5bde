"""src/id3cli/ui/cli/display/tags.py
Where: CLI adapter layer for tag rendering.
What: Build a Rich table listing every populated frame of an ID3 container.
Why: Give ``show`` a readable summary without exposing mutagen frame objects.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final, final

from mutagen.id3 import ID3
from rich.console import Console
from rich.table import Table
from rich.text import Text

from id3cli.config.settings import ARTIST_SEPARATOR, LYRICS_PREVIEW_LINES
from id3cli.features.tagging.domain.fields import Cardinality, FieldKey, field_spec, frame_id_for

if TYPE_CHECKING:
    from mutagen import TagContainer

# (field, label) pairs for plain text frames, in display order.
_TEXT_ROWS: Final[tuple[tuple[FieldKey, str], ...]] = (
    (FieldKey.TITLE, "🎵 Título"),
    (FieldKey.ARTIST, "🎤 Artista"),
    (FieldKey.ALBUM, "💿 Álbum"),
    (FieldKey.YEAR, "📅 Año"),
    (FieldKey.DATE, "📆 Fecha"),
    (FieldKey.GENRE, "🎸 Género"),
    (FieldKey.TRACK, "#️⃣ Pista"),
    (FieldKey.SEASON, "📺 Temporada"),
    (FieldKey.COPYRIGHT, "©️ Copyright"),
    (FieldKey.COMPOSER, "🎼 Compositor"),
    (FieldKey.SUBTITLE, "📄 Subtítulo"),
    (FieldKey.ORIGINAL_ARTIST, "🎙️ Artista original"),
    (FieldKey.ALBUM_ARTIST, "👥 Artista del álbum"),
)

_SORT_ROWS: Final[tuple[tuple[FieldKey, str], ...]] = (
    (FieldKey.ALBUM_SORT, "🔤 Orden álbum"),
    (FieldKey.ARTIST_SORT, "🔤 Orden artista"),
    (FieldKey.TITLE_SORT, "🔤 Orden título"),
)


def _field_text(tags: TagContainer, key: FieldKey) -> str | None:
    spec = field_spec(key)
    frames = tags.getall(spec.frame_id)
    if not frames:
        return None
    values = [str(value) for value in frames[0].text]
    if spec.cardinality is Cardinality.JOINED:
        # One name per line, whether stored joined or as separate values.
        names = [name for value in values for name in value.split(ARTIST_SEPARATOR)]
        return "\n".join(names)
    return "; ".join(values)


def _picture_type_name(picture_type: object) -> str:
    # mutagen renders PictureType members as "PictureType.COVER_FRONT"
    return str(picture_type).rsplit(".", 1)[-1]


@final
class TagDisplay:
    """Render ID3 tags as a two-column Rich table."""

    console: Console

    def __init__(self, console: Console | None = None, preview_lines: int = LYRICS_PREVIEW_LINES) -> None:
        self.console = console or Console()
        self._preview_lines = preview_lines

    def build_rows(self, tags: ID3) -> list[tuple[str, str]]:
        """Return ``(label, value)`` rows for every populated field."""

        rows: list[tuple[str, str]] = []
        for key, label in _TEXT_ROWS:
            text = _field_text(tags, key)
            if text is not None:
                rows.append((label, text))

        for link in tags.getall(frame_id_for(FieldKey.URL)):
            rows.append(("🌐 URL", link.url))

        pictures = tags.getall(frame_id_for(FieldKey.COVER))
        if pictures:
            lines = [f"{len(pictures)} imagen(es)"]
            for index, picture in enumerate(pictures, start=1):
                lines.append(
                    f"[{index}] Tipo: {_picture_type_name(picture.type)}, "
                    + f"MIME: {picture.mime}, Tamaño: {len(picture.data)} bytes"
                )
            rows.append(("🖼️ Carátulas", "\n".join(lines)))

        lyrics_frames = tags.getall(frame_id_for(FieldKey.LYRICS))
        if lyrics_frames:
            lyrics = lyrics_frames[0]
            rows.append((f"📝 Letra ({lyrics.lang})", self._preview_lyrics(lyrics.text)))

        if _field_text(tags, FieldKey.COMPILATION) == "1":
            rows.append(("💽 Compilación", "Sí"))

        for key, label in _SORT_ROWS:
            text = _field_text(tags, key)
            if text is not None:
                rows.append((label, text))

        return rows

    def _preview_lyrics(self, text: str) -> str:
        lines = text.splitlines()
        shown = lines[: self._preview_lines]
        hidden = len(lines) - len(shown)
        if hidden > 0:
            shown.append(f"... ({hidden} líneas más)")
        return "\n".join(shown)

    def show_tags(self, tags: ID3, path: Path | None = None) -> None:
        """Print the table of populated fields followed by the frame count."""

        title = "📋 Tags ID3 encontrados"
        if path is not None:
            title = f"{title}: {path.name}"

        table = Table(title=title, show_header=False, title_justify="left")
        table.add_column("Campo", style="cyan", no_wrap=True)
        table.add_column("Valor", style="white")
        for label, value in self.build_rows(tags):
            table.add_row(Text(label), Text(value))

        self.console.print(table)
        self.console.print(f"\n📦 Total de frames: {len(tags)}")


__all__ = ["TagDisplay"]

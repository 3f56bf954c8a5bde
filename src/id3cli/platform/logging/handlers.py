"""Rich console handler for tag editing events.

Where: platform/logging/handlers.py
What: Render structured ``tag_event`` log records with icons, colours and compact paths.
Why: Keep CLI feedback readable while the same records go to the plain log file.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class TagEventRichHandler(RichHandler):
    """Rich handler that styles tag events and renders file paths compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "tag.file.load": ("📂", "cyan"),
        "tag.file.created": ("🆕", "cyan"),
        "tag.field.set": ("✓", "green"),
        "tag.field.removed": ("✓", "yellow"),
        "tag.field.unknown": ("⚠️", "yellow"),
        "tag.file.saved": ("✅", "green"),
        "tag.file.unchanged": ("⚠️", "yellow"),
        "tag.file.error": ("❌", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, raw_path: str) -> Text:
        """Render ``raw_path`` keeping only its last segments, separators in magenta."""

        path = self._to_pure_path(raw_path)
        separator = "\\" if isinstance(path, PureWindowsPath) else "/"
        parts = [part for part in path.parts if part and part != path.anchor]

        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…" + separator + separator.join(parts[-self._PATH_SEGMENT_LIMIT:])
        else:
            display = str(path)

        text = Text()
        for char in display:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_tag_event(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records carrying a ``tag_event`` extra; ``None`` for plain records."""

        event = getattr(record, "tag_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        file_path = getattr(record, "file_path", None)
        if file_path and event.startswith("tag.file"):
            _ = text.append(" @ ", style=Style(color=color))
            _ = text.append_text(self._format_path(str(file_path)))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event_text = self._render_tag_event(record, message)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["TagEventRichHandler"]

"""Show command implementation for the CLI."""

from __future__ import annotations

from typing import final, override

from id3cli.features.tagging import TagEvent
from id3cli.platform.logging import logger
from id3cli.ui.cli.args.options import ShowArgs
from id3cli.ui.cli.commands.executor import CommandExecutor


@final
class ShowCommand(CommandExecutor):
    """Render the tags of one file."""

    args: ShowArgs

    @override
    def execute(self) -> int:
        tags = self.service.read(self.args.file_path)
        if tags is None:
            logger.warning(
                "No ID3 tags found",
                extra={
                    "tag_event": TagEvent.FILE_UNCHANGED.value,
                    "file_path": str(self.args.file_path),
                },
            )
            return 0

        if not self.args.quiet:
            self.display.show_tags(tags, self.args.file_path)
        return 0

"""Edit command implementation for the CLI."""

from __future__ import annotations

from typing import final, override

from id3cli.ui.cli.args.options import EditArgs
from id3cli.ui.cli.commands.executor import CommandExecutor


@final
class EditCommand(CommandExecutor):
    """Apply the requested removals and edits to one file."""

    args: EditArgs

    @override
    def execute(self) -> int:
        _ = self.service.edit(
            self.args.file_path,
            self.args.request,
            remove=self.args.remove,
        )
        return 0

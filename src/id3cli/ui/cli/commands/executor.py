"""src/id3cli/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Build the edit service once so commands only differ in what they run.
"""

from abc import ABC, abstractmethod

from id3cli.application.services import EditTagsService
from id3cli.ui.cli.args.options import CLIArgs
from id3cli.ui.cli.display.tags import TagDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    service: EditTagsService
    display: TagDisplay

    def __init__(self, args: CLIArgs, service: EditTagsService | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            service: Edit service override (for testing).
        """
        self.args = args
        self.service = service or EditTagsService()
        self.display = TagDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass

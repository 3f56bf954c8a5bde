"""Where: src/id3cli/ui/cli/cli.py
What: Dispatch parsed arguments to a command and map failures to exit codes.
Why: Keep exit-code policy in one place for both subcommands.
"""

import sys
from typing import final

from id3cli.features.tagging import TagEditError, TagEvent
from id3cli.platform.logging import logger
from id3cli.ui.cli.args import ArgumentParser
from id3cli.ui.cli.args.options import CLIArgs, EditArgs
from id3cli.ui.cli.commands import CommandExecutor, EditCommand, ShowCommand

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Run one CLI invocation."""

    @staticmethod
    def _select(args: CLIArgs) -> CommandExecutor:
        if isinstance(args, EditArgs):
            return EditCommand(args)
        return ShowCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Parse ``args_list`` (``sys.argv`` when ``None``) and run the command.

        Exits with 1 on tag errors or unexpected failures and 130 on Ctrl+C.
        """
        try:
            exit_code = CommandProcessor._select(ArgumentParser.process_args(args_list)).execute()
        except TagEditError as e:
            logger.error("%s", e, extra={"tag_event": TagEvent.FILE_ERROR.value})
            sys.exit(EXIT_FAILURE)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(EXIT_INTERRUPTED)
        except Exception as e:
            logger.exception("Unexpected error: %s", e)
            sys.exit(EXIT_FAILURE)

        if exit_code != 0:
            sys.exit(exit_code)


def main() -> int:
    """Console script entry point; failures leave through ``sys.exit``."""
    CommandProcessor.process_command()
    return 0

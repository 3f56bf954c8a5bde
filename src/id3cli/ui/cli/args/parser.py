"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from id3cli.config.config import Config
from id3cli.features.tagging import EditRequest, TagEvent
from id3cli.features.tagging.domain.fields import supported_names
from id3cli.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from id3cli.ui.cli.args.options import CLIArgs, EditArgs, ShowArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="id3cli",
            description="id3cli - Edit and inspect ID3 tags of MP3 files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        edit_parser = subparsers.add_parser(
            "edit",
            help="Set or remove tag fields of an MP3 file",
        )
        ArgumentParser._configure_edit_parser(edit_parser)

        show_parser = subparsers.add_parser(
            "show",
            help="Display the tag fields of an MP3 file",
        )
        _ = show_parser.add_argument(
            "file",
            type=str,
            help="Path to the MP3 file",
            metavar="FILE",
        )
        ArgumentParser._add_verbosity_flags(show_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the target file does not exist or the command is unknown.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)
        logger.debug("Configuration source: %s", Config.source() or "built-in defaults")

        command: str = parsed_args.command

        file_path = Path(parsed_args.file)
        if not file_path.is_file():
            logger.error(
                "File '%s' does not exist",
                file_path,
                extra={"tag_event": TagEvent.FILE_ERROR.value, "file_path": str(file_path)},
            )
            sys.exit(1)

        if command == "edit":
            return ArgumentParser._process_edit(parsed_args, file_path)

        if command == "show":
            return ShowArgs(
                command="show",
                file_path=file_path,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _configure_edit_parser(parser: argparse.ArgumentParser) -> None:
        """Register the field flags of the ``edit`` subcommand."""

        _ = parser.add_argument(
            "file",
            type=str,
            help="Path to the MP3 file",
            metavar="FILE",
        )
        _ = parser.add_argument("-t", "--title", help="Track title")
        _ = parser.add_argument(
            "-a",
            "--artist",
            dest="artists",
            action="append",
            metavar="ARTIST",
            help="Artist name (repeat for several artists)",
        )
        _ = parser.add_argument("-A", "--album", help="Album name")
        _ = parser.add_argument("-y", "--year", type=int, help="Release year")
        _ = parser.add_argument("-g", "--genre", help="Genre")
        _ = parser.add_argument("-T", "--track", type=int, help="Track number")
        _ = parser.add_argument("-S", "--season", type=int, help="Season (part of set) number")
        _ = parser.add_argument("-d", "--date", help="Recording date (YYYY or YYYY-MM-DD)")
        _ = parser.add_argument("-C", "--copyright", help="Copyright notice")
        _ = parser.add_argument("--composer", help="Composer")
        _ = parser.add_argument("--subtitle", help="Subtitle or description")
        _ = parser.add_argument("--original-artist", help="Original artist")
        _ = parser.add_argument("--album-artist", help="Album artist")
        _ = parser.add_argument(
            "-c",
            "--cover",
            metavar="PATH",
            help="Front cover image (jpg, jpeg, png or webp)",
        )
        _ = parser.add_argument("-L", "--lyrics", help="Unsynchronised lyrics text")
        _ = parser.add_argument("-u", "--url", help="Official artist webpage")
        _ = parser.add_argument(
            "--compilation",
            action="store_true",
            help="Mark the track as part of a compilation",
        )
        _ = parser.add_argument("--album-sort", help="Album sort order")
        _ = parser.add_argument("--artist-sort", help="Artist sort order")
        _ = parser.add_argument("--title-sort", help="Title sort order")
        _ = parser.add_argument(
            "-r",
            "--remove",
            action="append",
            metavar="FIELD",
            help="Field to remove, in English or Spanish (repeatable). Known: "
            + ", ".join(supported_names()),
        )
        ArgumentParser._add_verbosity_flags(parser)

    @staticmethod
    def _process_edit(parsed_args: argparse.Namespace, file_path: Path) -> EditArgs:
        request = EditRequest(
            title=parsed_args.title,
            artists=parsed_args.artists,
            album=parsed_args.album,
            year=parsed_args.year,
            genre=parsed_args.genre,
            track=parsed_args.track,
            season=parsed_args.season,
            date=parsed_args.date,
            copyright=parsed_args.copyright,
            composer=parsed_args.composer,
            subtitle=parsed_args.subtitle,
            original_artist=parsed_args.original_artist,
            album_artist=parsed_args.album_artist,
            cover=Path(parsed_args.cover) if parsed_args.cover is not None else None,
            lyrics=parsed_args.lyrics,
            url=parsed_args.url,
            compilation=parsed_args.compilation,
            album_sort=parsed_args.album_sort,
            artist_sort=parsed_args.artist_sort,
            title_sort=parsed_args.title_sort,
        )

        return EditArgs(
            command="edit",
            file_path=file_path,
            request=request,
            remove=list(parsed_args.remove or []),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

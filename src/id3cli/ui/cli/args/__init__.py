"""Command line argument handling package."""

from id3cli.ui.cli.args.parser import ArgumentParser
from id3cli.ui.cli.args.options import CLIArgs, EditArgs, ShowArgs

__all__ = ["ArgumentParser", "CLIArgs", "EditArgs", "ShowArgs"]

"""Allow ``python -m id3cli`` to invoke the CLI."""

from id3cli.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

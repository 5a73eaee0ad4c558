"""Main CLI entry point for word_lookup."""

import argparse
import logging
import sys

from word_lookup import __version__
from word_lookup.cli.commands import interactive, lookup


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="word-lookup",
        description="Look up English words in the Free Dictionary API",
        epilog="Use 'word-lookup <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log lookup and playback details",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # word-lookup lookup <word>
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Look up a single word",
        description="Fetch and print definitions, examples and synonyms for a word",
    )
    lookup_parser.add_argument("word", help="Word to look up")
    lookup_parser.add_argument(
        "--play",
        action="store_true",
        help="Play the pronunciation if the entry has a recording",
    )

    # word-lookup interactive
    subparsers.add_parser(
        "interactive",
        help="Look up words one per line",
        description="Type a word and press Enter to look it up. "
        "':play' plays the last pronunciation, ':q' quits.",
    )

    # word-lookup gui
    subparsers.add_parser(
        "gui",
        help="Open the lookup window",
        description="Launch the graphical lookup window",
    )

    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    # Dispatch to appropriate command
    if args.command == "lookup":
        return lookup.lookup_command(args)
    elif args.command == "interactive":
        return interactive.interactive_command(args)
    elif args.command == "gui":
        from word_lookup.gui.app import main as gui_main

        return gui_main()
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

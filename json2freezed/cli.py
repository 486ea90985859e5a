from __future__ import annotations

import argparse
import sys
from typing import Sequence

from rich.console import Console

from . import __version__
from .codegen.cli_integration import (
    CLIError,
    add_codegen_args,
    build_config,
    handle_codegen_command,
    list_languages,
    message_console,
)
from .logging_config import get_logger, setup_logging
from .utils import JSONLoaderError, read_json_text, read_json_text_from_stream

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="json2freezed",
        description="Generate Dart Freezed data classes from a JSON document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  json2freezed user.json --root-name User
  json2freezed --url https://api.example.com/user.json --mode smart --save
  cat data.json | json2freezed --stdin --raw > model.dart
  json2freezed data.json --interactive
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument("file", nargs="?", help="JSON file to convert")
    input_group.add_argument("--url", help="URL to fetch JSON from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read JSON from standard input"
    )

    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="Open the interactive generation session",
    )
    parser.add_argument(
        "--timeout", type=int, default=30, help="URL request timeout in seconds"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write DEBUG logs to this file")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    add_codegen_args(parser)
    return parser


class CLIHandler:
    """Read the input named on the command line and dispatch to a mode."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.text: str | None = None
        self.source: str | None = None

    def load(self, args: argparse.Namespace) -> bool:
        """Read raw JSON text from the selected source.

        Returns:
            False when no source was given or reading failed.
        """
        messages = message_console(args) if args.raw else self.console
        try:
            if args.stdin:
                self.source, self.text = read_json_text_from_stream(sys.stdin)
            elif args.file or args.url:
                self.source, self.text = read_json_text(
                    file_path=args.file, url=args.url, timeout=args.timeout
                )
            else:
                messages.print(
                    "[red]✗[/red] Input source required (file, --url, or --stdin)"
                )
                return False
        except (FileNotFoundError, JSONLoaderError) as e:
            logger.error("Failed to load input: %s", e)
            messages.print(f"[red]✗ Failed to load input:[/red] {e}")
            return False

        logger.info("Loaded %s", self.source)
        return True

    def run(self, args: argparse.Namespace) -> int:
        """Run the selected mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        if not self.load(args):
            return 1

        if args.interactive:
            from .codegen.interactive import CodegenInteractiveHandler

            try:
                config = build_config(args)
            except CLIError as e:
                self.console.print(f"[red]✗ Error:[/red] {e}")
                return 1

            handler = CodegenInteractiveHandler(self.text, self.console, config=config)
            return 0 if handler.run_interactive() else 1

        if not args.raw:
            self.console.print(f"📄 Loaded: {self.source}")
        return handle_codegen_command(args, self.text)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    logger.debug("Parsed arguments: %s", args)

    if args.list_languages:
        return list_languages()

    return CLIHandler().run(args)


if __name__ == "__main__":
    sys.exit(main())

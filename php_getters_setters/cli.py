"""
Command line entry point.
Generates accessors into a PHP file, or starts the language server.
"""

import argparse
import logging

from .configuration import Configuration
from .exceptions import GettersSettersError
from .file_writer import FileWriter
from .logging import setup_logging
from .messages import Messenger
from .resolver import AccessorKind, run_command

logger = logging.getLogger(__name__)

KINDS = {
    "getter": AccessorKind.GETTER,
    "setter": AccessorKind.SETTER,
    "both": AccessorKind.BOTH,
}


def generate(args: argparse.Namespace) -> int:
    """Insert accessors for the properties on the given lines of a file."""
    writer = FileWriter(args.file, dry_run=args.dry_run)
    messenger = Messenger(writer)

    try:
        config = Configuration.from_file(args.config) if args.config else Configuration()
        # --line is one-based like an editor's gutter
        context = writer.context([line - 1 for line in args.line])
    except GettersSettersError as e:
        messenger.error(str(e))
        return 1

    ok = run_command(KINDS[args.kind], context, writer, config)
    if ok and writer.cursor_line is not None and not args.dry_run:
        logger.info("Continue editing at %s:%d", args.file, writer.cursor_line + 1)
    return 0 if ok and not writer.errors else 1


def lsp(args: argparse.Namespace) -> int:
    # Imported here so `generate` works without starting the protocol stack
    from .lsp_server import start_server

    start_server(f"tcp:{args.tcp}" if args.tcp else "stdio")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="php-getters-setters",
        description="Generate getters and setters for PHP class properties."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level (DEBUG, INFO, WARNING, ERROR)"
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log record format"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Insert accessors into a PHP file")
    gen.add_argument("file", help="PHP file to edit")
    gen.add_argument(
        "--line",
        type=int,
        action="append",
        required=True,
        help="One-based line of a property declaration (repeatable)"
    )
    gen.add_argument(
        "--kind",
        choices=sorted(KINDS),
        default="both",
        help="Which accessors to generate"
    )
    gen.add_argument("--config", help="JSON settings file")
    gen.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated code instead of writing the file"
    )
    gen.set_defaults(handler=generate)

    server = subparsers.add_parser("lsp", help="Start the language server")
    server.add_argument("--tcp", metavar="HOST:PORT", help="Listen on TCP instead of stdio")
    server.set_defaults(handler=lsp)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_format)
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())

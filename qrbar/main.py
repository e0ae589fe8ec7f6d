"""qrbar - Main Entry Point."""

import argparse
import contextlib
import sys
from typing import Optional, Sequence

from .config import load_settings
from .adapters import (
    QRCodeAdapter,
    JsonSettingsAdapter,
    MemorySettingsAdapter,
    ClipboardAdapter,
    StdoutAdapter
)
from .handlers import COMMAND_HANDLERS
from .services import HistoryStore


def build_parser() -> argparse.ArgumentParser:
    """Command line parser, one subcommand per handler."""
    parser = argparse.ArgumentParser(
        prog="qrbar",
        description="Turn text into QR codes and keep a searchable history."
    )
    parser.add_argument(
        "--ephemeral",
        action="store_true",
        help="keep history in memory only"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="generate a QR code from text")
    add.add_argument("text", nargs="*", help="text to encode")
    add.add_argument("--paste", action="store_true", help="use clipboard text")

    lst = sub.add_parser("list", help="list history, newest first")
    lst.add_argument("query", nargs="?", default="", help="case-insensitive filter")

    delete = sub.add_parser("delete", help="delete one QR code")
    delete.add_argument("id", help="item id or unique prefix")

    sub.add_parser("clear", help="delete the whole history")

    show = sub.add_parser("show", help="print a QR code to the terminal")
    show.add_argument("id", help="item id or unique prefix")

    copy = sub.add_parser("copy", help="copy text or image to clipboard")
    copy.add_argument("id", help="item id or unique prefix")
    copy.add_argument("--image", action="store_true", help="copy PNG image")

    export = sub.add_parser("export", help="save a QR code as PNG")
    export.add_argument("id", help="item id or unique prefix")
    export.add_argument("path", help="output file")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main initialization and command dispatch."""
    args = build_parser().parse_args(argv)

    # Validate config (early return)
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # Mount adapters
    logger = StdoutAdapter(debug=settings.debug, stream=sys.stderr)
    if args.ephemeral:
        storage = MemorySettingsAdapter()
    else:
        storage = JsonSettingsAdapter(settings.settings_dir, settings.namespace)
    qr_generator = QRCodeAdapter(
        scale=settings.scale,
        error_correction=settings.error_correction
    )
    clipboard = ClipboardAdapter()

    store = HistoryStore(storage, logger, key=settings.history_key)

    handler_class = COMMAND_HANDLERS[args.command]

    # Instantiate handler with dependencies
    if args.command == 'add':
        handler = handler_class(store, clipboard, logger)
    elif args.command in ('list', 'delete', 'clear'):
        handler = handler_class(store, logger)
    elif args.command in ('show', 'export'):
        handler = handler_class(store, qr_generator, logger)
    elif args.command == 'copy':
        handler = handler_class(store, qr_generator, clipboard, logger)
    else:
        print(f"ERROR: unknown command {args.command}", file=sys.stderr)
        return 1

    # Hold storage lock from load to last persist
    with contextlib.ExitStack() as stack:
        try:
            stack.enter_context(storage.lock())
        except (TimeoutError, OSError) as e:
            print(f"ERROR: history storage busy or unavailable: {e}", file=sys.stderr)
            return 1

        store.load()
        return handler.handle(args)


if __name__ == "__main__":
    sys.exit(main())

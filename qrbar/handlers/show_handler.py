"""Handlers that render a stored QR code."""

import sys
from pathlib import Path
from typing import Optional

from ..interfaces import (
    IHistoryStore,
    IQRGenerator,
    IClipboard,
    ILogSink,
    EncodedImage,
    EncodeFailure,
    QRItem
)
from .lookup import resolve_item

DARK_BLOCK = "██"
LIGHT_BLOCK = "  "


def render_text(encoded: EncodedImage) -> str:
    """Draw the QR matrix with block characters, one cell per module."""
    step = encoded.scale
    lines = []
    for y in range(encoded.matrix_size):
        cells = [
            DARK_BLOCK if encoded.image.getpixel((x * step, y * step)) == 0
            else LIGHT_BLOCK
            for x in range(encoded.matrix_size)
        ]
        lines.append("".join(cells))
    return "\n".join(lines)


class _RenderHandler:
    """Shared lookup + encode steps."""

    def __init__(self, store: IHistoryStore, qr: IQRGenerator, logger: ILogSink):
        self.store = store
        self.qr = qr
        self.logger = logger

    def _encode(self, ref: str) -> Optional[tuple[QRItem, EncodedImage]]:
        item = resolve_item(self.store, ref)
        if not item:
            print(f"ERROR: no QR code with id {ref}", file=sys.stderr)
            return None

        result = self.qr.encode(item.content)
        if isinstance(result, EncodeFailure):
            self.logger.log("warn", f"Encode failed for {item.id}: {result.reason}")
            print(f"ERROR: cannot render QR code: {result.reason}", file=sys.stderr)
            return None
        return item, result


class ShowHandler(_RenderHandler):
    """Handler for show command - prints QR code to terminal."""

    def handle(self, args) -> int:
        found = self._encode(args.id)
        if not found:
            return 1

        item, encoded = found
        print(render_text(encoded))
        print(item.content)
        print(
            f"{item.id}  {item.timestamp.astimezone():%Y-%m-%d %H:%M:%S}"
            f"  {encoded.width}x{encoded.height}px"
        )
        return 0


class ExportHandler(_RenderHandler):
    """Handler for export command - writes QR code PNG to a file."""

    def handle(self, args) -> int:
        found = self._encode(args.id)
        if not found:
            return 1

        item, encoded = found
        path = Path(args.path).expanduser()
        try:
            path.write_bytes(encoded.to_png())
        except OSError as e:
            self.logger.log("error", f"Export failed: {e}")
            print(f"ERROR: cannot write {path}: {e}", file=sys.stderr)
            return 1

        self.logger.log("info", f"Exported {item.id} to {path}")
        print(f"Saved {path}")
        return 0


class CopyHandler(_RenderHandler):
    """Handler for copy command - puts text or image on the clipboard."""

    def __init__(
        self,
        store: IHistoryStore,
        qr: IQRGenerator,
        clipboard: IClipboard,
        logger: ILogSink
    ):
        super().__init__(store, qr, logger)
        self.clipboard = clipboard

    def _copy_text(self, ref: str) -> int:
        item = resolve_item(self.store, ref)
        if not item:
            print(f"ERROR: no QR code with id {ref}", file=sys.stderr)
            return 1

        if not self.clipboard.write_text(item.content):
            print("ERROR: text copy failed", file=sys.stderr)
            return 1

        print("Copied text")
        return 0

    def handle(self, args) -> int:
        """Handle copy command."""
        if not getattr(args, "image", False):
            return self._copy_text(args.id)

        found = self._encode(args.id)
        if not found:
            return 1

        item, encoded = found
        if not self.clipboard.write_image(encoded.to_png()):
            print("ERROR: image copy failed", file=sys.stderr)
            return 1

        self.logger.log("info", f"Copied image of {item.id}")
        print("Copied image")
        return 0

"""System clipboard adapter."""

import os
import subprocess
import sys
import tempfile

import pyperclip

OSASCRIPT = "/usr/bin/osascript"


class ClipboardAdapter:
    """Adapter for clipboard access (pyperclip, osascript for images)."""

    def __init__(self, platform: str = sys.platform):
        self.platform = platform

    def read_text(self) -> str:
        """Read current clipboard text, empty if unavailable."""
        try:
            return pyperclip.paste() or ""
        except pyperclip.PyperclipException as e:
            print(f"ERROR: clipboard read failed: {e}", file=sys.stderr)
            return ""

    def write_text(self, text: str) -> bool:
        """Replace clipboard contents with text."""
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            print(f"ERROR: clipboard write failed: {e}", file=sys.stderr)
            return False
        return True

    def write_image(self, png: bytes) -> bool:
        """Replace clipboard contents with PNG image (macOS only)."""
        # Early return
        if self.platform != "darwin":
            print("ERROR: image clipboard needs macOS", file=sys.stderr)
            return False
        if not png:
            return False

        fd, path = tempfile.mkstemp(prefix="qrbar_", suffix=".png")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(png)

            script = (
                f'set the clipboard to (read (POSIX file "{path}") '
                'as «class PNGf»)'
            )
            result = subprocess.run(
                [OSASCRIPT, "-e", script],
                capture_output=True,
                text=True,
                timeout=5
            )
            if result.returncode != 0:
                print(
                    f"ERROR: osascript failed: {result.stderr.strip()}",
                    file=sys.stderr
                )
                return False
            return True

        except (OSError, subprocess.SubprocessError) as e:
            print(f"ERROR: image copy failed: {e}", file=sys.stderr)
            return False
        finally:
            if os.path.exists(path):
                os.remove(path)

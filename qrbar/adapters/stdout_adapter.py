"""Stream logging adapter."""

import sys
from datetime import datetime
from typing import Optional, TextIO


class StdoutAdapter:
    """Adapter for console logging (stdout unless another stream is given)."""

    def __init__(self, debug: bool = False, stream: Optional[TextIO] = None):
        self.debug = debug
        self.stream = stream

    def log(self, level: str, message: str) -> None:
        """Write log entry to the configured stream."""
        if level == "debug" and not self.debug:
            return

        timestamp = datetime.now().isoformat()
        print(
            f"[{timestamp}] {level.upper()}: {message}",
            file=self.stream or sys.stdout
        )

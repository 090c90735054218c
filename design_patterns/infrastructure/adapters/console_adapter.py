"""Console adapter writing demonstration lines to a text stream."""
import sys
from typing import IO, Optional

from design_patterns.domain.base.ports import ConsolePort


class ConsoleAdapter(ConsolePort):
    """ConsolePort that writes to stdout or a supplied stream."""

    def __init__(self, stream: Optional[IO[str]] = None):
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        # Resolved lazily so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, text: str = "") -> None:
        self.stream.write(f"{text}\n")
        self.stream.flush()

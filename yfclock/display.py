"""Single-line, in-place terminal output."""

from typing import TextIO


class LineDisplay:
    """Rewrites one terminal line on every ``show``.

    Each line starts with a carriage return and is padded with spaces to the
    widest line shown so far, so a shorter value never leaves stale trailing
    characters behind.
    """

    def __init__(self, stream: TextIO):
        self.stream: TextIO = stream
        self._width: int = 0

    @property
    def width(self) -> int:
        return self._width

    def show(self, text: str) -> None:
        self._width = max(self._width, len(text))
        self.stream.write("\r" + text.ljust(self._width))
        self.stream.flush()

    def finish(self) -> None:
        """End the line so the shell prompt starts on a fresh one."""
        if self._width:
            self.stream.write("\n")
            self.stream.flush()

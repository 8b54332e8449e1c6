import os
import sys
from typing import TextIO

DEFAULT_SIZE = (80, 24)


def get_terminal_size(stream: TextIO | None = None) -> tuple[int, int]:
    """Return (columns, rows) of the terminal behind stream, or (80, 24) if it isn't one."""
    stream = sys.stdout if stream is None else stream
    if not stream.isatty():
        return DEFAULT_SIZE
    size = os.get_terminal_size(stream.fileno())
    if size.columns == 0 or size.lines == 0:
        return DEFAULT_SIZE
    return (size.columns, size.lines)

import logging
import sys
from typing import Iterator, TextIO

logger = logging.getLogger(__name__)


class TextMatrix:
    """Fixed-size grid of characters where each row may end before its full width.

    Rows start empty. ``fill`` writes cells during population and ``optimize``
    moves row ends back over trailing spaces. Only content before a row's end
    is ever printed or counted.
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Invalid matrix size: {width}x{height}")
        self.width = width
        self.height = height
        self._cells = [[" "] * width for _ in range(height)]
        self._ends = [0] * height

    @classmethod
    def from_text(cls, width: int, height: int, text: str) -> "TextMatrix":
        """Build a matrix from a flat row-major buffer with no row separators."""
        if len(text) != width * height:
            raise ValueError(f"Expected {width * height} characters for {width}x{height}, got {len(text)}")
        matrix = cls(width, height)
        for y in range(height):
            for x in range(width):
                matrix.fill(y, x, text[y * width + x])
        return matrix

    def fill(self, row: int, col: int, char: str) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Cell ({row}, {col}) outside {self.width}x{self.height} matrix")
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        self._cells[row][col] = char
        self._ends[row] = max(self._ends[row], col + 1)

    def optimize(self) -> None:
        """Strip trailing spaces from every row."""
        before = self.char_count()
        for y, cells in enumerate(self._cells):
            end = 0
            for x in range(self._ends[y] - 1, -1, -1):
                if cells[x] != " ":
                    end = x + 1
                    break
            self._ends[y] = end
        logger.debug("Trimmed %d trailing spaces", before - self.char_count())

    def char_count(self) -> int:
        return sum(self._ends)

    def row(self, index: int) -> str:
        return "".join(self._cells[index][: self._ends[index]])

    def lines(self) -> Iterator[str]:
        for y in range(len(self._cells)):
            yield self.row(y)

    def print(self, file: TextIO | None = None) -> None:
        out = sys.stdout if file is None else file
        for line in self.lines():
            out.write(line + "\n")

    def destroy(self) -> None:
        self._cells = []
        self._ends = []

    def __enter__(self) -> "TextMatrix":
        return self

    def __exit__(self, *exc) -> None:
        self.destroy()

    def __str__(self) -> str:
        return "\n".join(self.lines())

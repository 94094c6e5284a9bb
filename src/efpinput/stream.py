"""
Line based access to input files. Every line is folded to lower case before any
interpretation, so keywords, values and quoted strings are all case-insensitive.
"""
from typing import Iterable, Iterator, Optional

__all__ = ["LineStream"]


class LineStream:
    """
    Cursor over the current line of a text source. Only the current line is held,
    there is no look-ahead.

    Args:
        source (iterable): File handle or any other iterable yielding text lines.
        fold_case (bool): Convert lines to lower case when they are read.
    """

    def __init__(self, source: Iterable[str], fold_case: bool = True):
        self._lines: Iterator[str] = iter(source)
        self.fold_case = fold_case
        self._line: Optional[str] = None
        self.pos = 0
        self.line_number = 0

    def advance(self) -> bool:
        """
        Read the next line, fold its case if requested and reset the cursor.

        Returns:
            bool: False if the source is exhausted.
        """
        try:
            line = next(self._lines)
        except StopIteration:
            self._line = None
            self.pos = 0
            return False

        line = line.rstrip("\r\n")
        self._line = line.lower() if self.fold_case else line
        self.pos = 0
        self.line_number += 1
        return True

    @property
    def exhausted(self) -> bool:
        return self._line is None

    @property
    def line(self) -> str:
        if self._line is None:
            raise RuntimeError("Cursor access on exhausted line stream")
        return self._line

    @property
    def rest(self) -> str:
        """Unconsumed part of the current line."""
        return self.line[self.pos :]

    def consume(self, n_chars: int):
        self.pos = min(self.pos + n_chars, len(self.line))

    def skip_space(self):
        line = self.line
        while self.pos < len(line) and line[self.pos].isspace():
            self.pos += 1

    def startswith(self, prefix: str) -> bool:
        return self.line.startswith(prefix, self.pos)

    def at_end(self) -> bool:
        """Check whether only whitespace is left on the current line."""
        return not self.rest.strip()

"""Append-only text sink wrapping the output stream"""

from typing import Optional, TextIO

from mdcolor.core.ansi import RESET


class OutputWriter:
    """Writes strictly in call order; line() only breaks a line that is not already broken."""

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._last = ""

    @property
    def last_char(self) -> str:
        return self._last

    def raw(self, text: str) -> None:
        if not text:
            return
        self._out.write(text)
        self._last = text[-1]

    def line(self) -> None:
        if self._last and self._last != "\n":
            self.raw("\n")

    def colorized(self, escape: Optional[str], text: str) -> None:
        if not text:
            return
        if escape is None:
            self.raw(text)
            return
        self.raw(escape)
        self.raw(text)
        self.raw(RESET)

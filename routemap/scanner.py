"""Line and token reader for text streams."""

import re
from typing import Optional, TextIO

from routemap.errors import MalformedInput, ResourceUnavailable, UnexpectedEndOfInput

INTEGER = re.compile(r"[+-]?[0-9]+")

# Range of a 32-bit signed integer.
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def parse_int(text: str, source: Optional[str] = None, line: Optional[int] = None) -> int:
    """Parse a 32-bit decimal integer, allowing surrounding whitespace."""
    stripped = text.strip()
    if not INTEGER.fullmatch(stripped):
        raise MalformedInput(f"expected an integer, got {text!r}", source, line)
    digits = stripped.lstrip("+-").lstrip("0")
    if len(digits) > len(str(INT_MAX)) or not INT_MIN <= int(stripped) <= INT_MAX:
        raise MalformedInput(f"integer out of range: {stripped}", source, line)
    return int(stripped)


class Scanner:

    """Reads lines and whitespace-delimited tokens from a text stream.

    Lines are read from the stream lazily, one at a time. Reading a token
    leaves the scanner positioned just after it, so a following read_line
    returns the rest of that line (possibly empty).
    """

    def __init__(self, stream: TextIO, source: Optional[str] = None):
        self.stream = stream
        self.source = source
        self.line_number = 0
        self.buffer = ""
        self.pos = 0

    def __repr__(self) -> str:
        return f"Scanner(source={self.source!r}, line={self.line_number})"

    def _fill(self) -> bool:
        """Load the next physical line. Returns False at end of input."""
        try:
            line = self.stream.readline()
        except OSError as ex:
            raise ResourceUnavailable(f"read failed: {ex}", self.source) from ex
        if not line:
            return False
        self.buffer = line
        self.pos = 0
        self.line_number += 1
        return True

    def _skip_whitespace(self) -> bool:
        while True:
            while self.pos < len(self.buffer) and self.buffer[self.pos].isspace():
                self.pos += 1
            if self.pos < len(self.buffer):
                return True
            if not self._fill():
                return False

    def read_line(self) -> str:
        """Return the rest of the current line without its terminator.

        Raises UnexpectedEndOfInput if there is no more input.
        """
        if self.pos >= len(self.buffer) and not self._fill():
            raise UnexpectedEndOfInput(
                "expected a line", self.source, self.line_number + 1
            )
        rest = self.buffer[self.pos :]
        self.pos = len(self.buffer)
        if rest.endswith("\n"):
            rest = rest[:-1]
        if rest.endswith("\r"):
            rest = rest[:-1]
        return rest

    def skip_line(self):
        """Discard the rest of the current line, if any."""
        self.pos = len(self.buffer)

    def has_next_token(self) -> bool:
        """Return True if another token is available.

        This skips any whitespace (including line breaks) before the token.
        """
        return self._skip_whitespace()

    def next_token(self) -> str:
        if not self._skip_whitespace():
            raise UnexpectedEndOfInput(
                "expected a token", self.source, self.line_number or None
            )
        start = self.pos
        while self.pos < len(self.buffer) and not self.buffer[self.pos].isspace():
            self.pos += 1
        return self.buffer[start : self.pos]

    def next_int(self) -> int:
        token = self.next_token()
        return parse_int(token, self.source, self.line_number)

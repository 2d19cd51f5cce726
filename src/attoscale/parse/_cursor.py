from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.errors import ExpectedDelimiter, InvalidNumber, UnexpectedRemainder


@dataclass
class Cursor:
    """Position in a string being parsed left to right."""
    text: str
    pos: int = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> Optional[str]:
        return None if self.at_end() else self.text[self.pos]

    def accept(self, char: str) -> bool:
        if self.peek() == char:
            self.pos += 1
            return True
        return False

    def expect(self, char: str) -> None:
        if not self.accept(char):
            raise ExpectedDelimiter(char, self.text, self.pos)

    def digits(self) -> str:
        start = self.pos
        while not self.at_end() and "0" <= self.text[self.pos] <= "9":
            self.pos += 1
        return self.text[start:self.pos]

    def integer(self, *, signed: bool = False, width: Optional[int] = None) -> int:
        start = self.pos
        negative = signed and self.accept("-")
        digits = self.digits()
        if not digits or (width is not None and len(digits) != width):
            raise InvalidNumber(self.text, start)
        value = int(digits)
        return -value if negative else value

    def decimal(self) -> Tuple[int, str]:
        """Integer part and (possibly empty) fraction digits of "123[.456]"."""
        start = self.pos
        whole = self.digits()
        if not whole:
            raise InvalidNumber(self.text, start)
        fraction = ""
        if self.accept("."):
            fraction = self.digits()
            if not fraction:
                raise InvalidNumber(self.text, self.pos)
        return int(whole), fraction

    def word(self) -> str:
        start = self.pos
        while not self.at_end() and self.text[self.pos].isalnum():
            self.pos += 1
        return self.text[start:self.pos]

    def finish(self) -> None:
        if not self.at_end():
            raise UnexpectedRemainder(self.text, self.pos)

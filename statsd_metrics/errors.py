"""Errors raised while parsing StatsD metric lines"""
from typing import Optional


class ParseError(ValueError):
    """Base class for metric parsing failures.

    ``line`` is the 1-based line number inside a batch (None for a single
    line parse) and ``position`` the 0-based character offset in that line.
    """

    def __init__(self, message: str, line: Optional[int] = None, position: Optional[int] = None):
        self.message = message
        self.line = line
        self.position = position
        super().__init__(self._describe())

    def _describe(self) -> str:
        location = []
        if self.line is not None:
            location.append(f"line {self.line}")
        if self.position is not None:
            location.append(f"position {self.position}")
        if not location:
            return self.message
        return f"{self.message} ({', '.join(location)})"


class MalformedInput(ParseError):
    """Input does not match the metric line grammar"""


class EmptyInput(ParseError):
    """Batch payload contains no metric lines"""

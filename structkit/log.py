"""Access-log records and their sort keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_MONTH_LETTERS = {
    name: letter
    for name, letter in zip(
        ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
         "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
        "ABCDEFGHIJKL",
    )
}


@dataclass(frozen=True)
class LogRecord:
    """One log line; records order by their date key."""

    year: str
    month: str
    day: str
    time: str
    ip: str
    message: str = ""

    @property
    def date_key(self) -> str:
        """Year, month as a letter A-L, day and time joined together."""
        try:
            letter = _MONTH_LETTERS[self.month]
        except KeyError:
            raise ValueError(f"unknown month: {self.month!r}") from None
        return f"{self.year}{letter}{self.day}{self.time}"

    @property
    def ip_key(self) -> str:
        """The IP address followed by the date key."""
        return self.ip + self.date_key

    def format_line(self) -> str:
        return f"{self.year} {self.month} {self.day} {self.time} {self.ip} {self.message}"

    def format_by_ip(self) -> str:
        return f"{self.ip} {self.year} {self.month} {self.day} {self.time} {self.message}"

    def __lt__(self, other: LogRecord) -> bool:
        return self.date_key < other.date_key

    def __gt__(self, other: LogRecord) -> bool:
        return self.date_key > other.date_key

    def __le__(self, other: LogRecord) -> bool:
        return self.date_key <= other.date_key

    def __ge__(self, other: LogRecord) -> bool:
        return self.date_key >= other.date_key


def parse_log_line(line: str) -> LogRecord:
    """Parse ``month day year time ip message...``."""
    fields = line.split()
    if len(fields) < 5:
        raise ValueError(f"malformed log line: {line!r}")
    month, day, year, time, ip, *words = fields
    return LogRecord(year, month, day, time, ip, " ".join(words))


def read_logs(lines: Iterable[str]) -> list[LogRecord]:
    """Parse every non-blank line."""
    return [parse_log_line(line) for line in lines if line.strip()]
"""Sort a log by date and extract the records inside a date range."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, TextIO

from structkit.log import LogRecord, read_logs
from structkit.sorting import quick_sort

_MONTH_PROMPT = "Month capitalized and in 3 letter format, (Jan, Feb, Mar): "


def date_bound(year: str, month: str, day: str, hour: str) -> LogRecord:
    """A record with no IP or message marking the start of ``hour``."""
    return LogRecord(year, month, day, f"{hour}:00:00", "", "")


def sort_by_date(records: Iterable[LogRecord]) -> list[LogRecord]:
    """A new list of the records in date-key order."""
    ordered = list(records)
    quick_sort(ordered, key=lambda record: record.date_key)
    return ordered


def logs_between(records: Iterable[LogRecord], start: LogRecord, end: LogRecord) -> list[LogRecord]:
    """Records strictly after ``start`` and strictly before ``end``."""
    return [record for record in records if start < record < end]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask_date(tokens: Iterator[str], out: TextIO) -> LogRecord | None:
    answers = []
    for prompt in ("Year: ", _MONTH_PROMPT, "Day: ", "Hour in 24h format: "):
        out.write(prompt)
        token = next(tokens, None)
        if token is None:
            return None
        answers.append(token)
    return date_bound(*answers)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sort a log by date and select a date range.")
    parser.add_argument("log_file", nargs="?", default="log603.txt")
    parser.add_argument("--sorted-out", default="output603.txt")
    parser.add_argument("--range-out", default="range603.txt")
    args = parser.parse_args(argv)

    try:
        with open(args.log_file, encoding="utf-8") as handle:
            records = read_logs(handle)
    except FileNotFoundError:
        records = []

    records = sort_by_date(records)
    with open(args.sorted_out, "w", encoding="utf-8") as sorted_file:
        sorted_file.writelines(record.format_line() + "\n" for record in records)

    out = sys.stdout
    out.write(f"La cantidad de registros es: {len(records)}\n")
    out.write("Using binary search to find dates between range: \n")
    tokens = _tokens(sys.stdin)
    out.write("Initial date: \n")
    start = _ask_date(tokens, out)
    if start is None:
        return 1
    out.write("Final date: \n")
    end = _ask_date(tokens, out)
    if end is None:
        return 1

    with open(args.range_out, "w", encoding="utf-8") as range_file:
        for record in logs_between(records, start, end):
            line = record.format_line() + "\n"
            out.write(line)
            range_file.write(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
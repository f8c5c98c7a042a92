"""Analysis of access logs: server errors, their requests and busiest windows."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from itertools import islice, takewhile
from typing import IO, Iterable, Iterator, TextIO

from logwindow.options import Options
from logwindow.requests import RequestCounter
from logwindow.timestamp import parse_timestamp

BUFFER_SIZE = 1024
MIN_LOG_LENGTH = 50
TIME_LENGTH = 26

_OPEN_ERROR = "[ERROR] error while opening file"
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


@dataclass(frozen=True)
class WindowResult:
    """The busiest stretch found: how many requests, and its first and last time."""

    count: int = 0
    start: int = 0
    end: int = 0


def _open(path: str | None, mode: str = "r") -> IO[str]:
    if not path:
        raise OSError(_OPEN_ERROR)
    try:
        return open(path, mode, encoding=_ENCODING, errors=_ERRORS, newline="\n")
    except OSError as exc:
        raise OSError(_OPEN_ERROR) from exc


def extract_time(line: str) -> str:
    """Return the 26 characters after the first ``[``, or ``""`` without one."""
    bracket = line.find("[")
    if bracket < 0:
        return ""
    return line[bracket + 1:bracket + 1 + TIME_LENGTH]


def extract_request(line: str) -> str:
    """Return the first quoted part of ``line``, quotes included.

    Without a closing quote the rest of the line is returned; without any
    quote the result is empty.
    """
    first = line.find('"')
    if first < 0:
        return ""
    second = line.find('"', first + 1)
    if second < 0:
        return line[first:]
    return line[first:second + 1]


def _status_code(line: str) -> str:
    last_space = line.rfind(" ")
    if last_space < 3:
        return ""
    return line[last_space - 3:last_space]


def filter_server_errors(lines: Iterable[str], start: int, end: int) -> Iterator[str]:
    """Yield the lines with a 5xx status strictly between ``start`` and ``end``.

    Lines of 50 characters or fewer, line break counted, are skipped. Reading
    stops at the first line whose time lies after ``end``.
    """
    for raw in lines:
        if len(raw) <= MIN_LOG_LENGTH:
            continue
        line = raw.removesuffix("\n")
        time = parse_timestamp(extract_time(line))
        if start < time < end:
            if _status_code(line).startswith("5"):
                yield line
        elif time > end:
            break


def write_server_errors(options: Options, out: TextIO | None = None) -> int:
    """Copy the server-error lines of ``options.file`` to ``options.output``.

    With ``options.print`` set the lines are echoed to ``out`` as well.
    Returns the number of lines written.
    """
    echo = out if out is not None else sys.stdout
    written = 0
    with _open(options.file) as source, _open(options.output, "w") as target:
        for line in filter_server_errors(source, options.start, options.end):
            target.write(line + "\n")
            written += 1
            if options.print:
                echo.write(line + "\n")
    return written


def count_requests(path: str, limit: int) -> RequestCounter:
    """Count the requests on the first ``limit`` lines of the file at ``path``."""
    counter = RequestCounter()
    with _open(path) as source:
        for raw in islice(source, max(limit, 0)):
            counter.add(extract_request(raw.removesuffix("\n")))
    return counter


def format_stats(counter: RequestCounter, limit: int) -> str:
    """Render the report of the most frequent failing requests."""
    if not len(counter):
        return ""
    rows = "".join(
        f"*  {request} - {count} request(s)\n"
        for request, count in counter.most_common(limit)
    )
    return f"\n[5XX stats]:\n\n{rows}\n"


def longest_window(lines: Iterable[str], window: int, start: int, end: int) -> WindowResult:
    """Find the most requests that fall within ``window`` seconds.

    Times between ``start`` and ``end`` inclusive are kept in a buffer of
    the latest 1024. Once the buffer is full, every further time shifts it
    and the run of buffered times within ``window`` of its oldest is
    measured; the longest run seen wins.
    """
    buffer: deque[int] = deque(maxlen=BUFFER_SIZE)
    best = WindowResult()
    for line in lines:
        timestamp = parse_timestamp(extract_time(line.removesuffix("\n")))
        if not start <= timestamp <= end:
            continue
        full = len(buffer) == BUFFER_SIZE
        buffer.append(timestamp)
        if not full:
            continue
        first = buffer[0]
        limit = first + window - 1
        inside = list(takewhile(lambda t: t <= limit, islice(buffer, 1, None)))
        length = 1 + len(inside)
        if length > best.count:
            best = WindowResult(length, first, inside[-1] if inside else first)
    return best


def format_window(result: WindowResult, window: int) -> str:
    """Render the report of the busiest window."""
    return (
        "\n[Maximum requests in window]:\n\n"
        f"for window: {window}\n"
        f"from {result.start} to {result.end} maximum will be: {result.count}\n\n"
    )
"""Command-line entry point of the log analyser."""

from __future__ import annotations

import sys
from typing import Sequence

from logwindow.analyzer import (
    count_requests,
    format_stats,
    format_window,
    longest_window,
    write_server_errors,
)
from logwindow.options import OptionError, parse_args

_OPEN_ERROR = "[ERROR] error while opening file"


def _run(argv: Sequence[str]) -> None:
    options = parse_args(argv)

    if options.output:
        found = write_server_errors(options, sys.stdout)
        if found > 0:
            counter = count_requests(options.output, found)
            sys.stdout.write(format_stats(counter, options.stats))

    if options.window > 0:
        if not options.file:
            raise OSError(_OPEN_ERROR)
        try:
            source = open(options.file, encoding="utf-8", errors="surrogateescape", newline="\n")
        except OSError as exc:
            raise OSError(_OPEN_ERROR) from exc
        with source:
            result = longest_window(source, options.window, options.start, options.end)
        sys.stdout.write(format_window(result, options.window))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the analyser; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        _run(argv)
    except OptionError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError:
        print(_OPEN_ERROR, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())